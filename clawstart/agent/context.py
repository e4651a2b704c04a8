"""Context builder for assembling agent prompts."""

import platform
from datetime import datetime
from pathlib import Path
from typing import Any

from clawstart.agent.skills import SkillsLoader
from clawstart.agent.welcome import prepend_system_events, welcome_system_events
from clawstart.config import Config

_MAX_HISTORY_MESSAGES_IN_PROMPT = 40


class ContextBuilder:
    """Builds system prompt + messages for the agent."""

    def __init__(self, config: Config, agent_name: str = "default", workspace: Path | None = None):
        self.config = config
        self.agent_config = config.get_agent_config(agent_name)
        self.workspace = workspace or config.workspace_path(agent_name)
        self.skills = SkillsLoader(self.workspace, config.skills)

    def _get_identity(self) -> str:
        now = datetime.now().strftime("%Y-%m-%d %H:%M (%A)")
        system = platform.system()
        runtime = f"{'macOS' if system == 'Darwin' else system} {platform.machine()}, Python {platform.python_version()}"
        return (
            f"# {self.agent_config.bot_name}\n\n"
            f"{self.agent_config.system_prompt}\n\n"
            f"## Current Time\n{now}\n\n"
            f"## Runtime\n{runtime}\n\n"
            f"## Workspace\n{self.workspace}"
        )

    def build_system_prompt(self) -> str:
        parts = [self._get_identity()]
        summary = self.skills.build_skills_summary()
        if summary:
            parts.append(
                "# Skills\n\n"
                "To use a skill, read its SKILL.md file.\n\n"
                + summary
            )
        return "\n\n---\n\n".join(parts)

    def build_messages(
        self,
        history: list[dict[str, Any]],
        current_message: str,
        system_events: list[str] | None = None,
    ) -> list[dict[str, Any]]:
        """Build the message list for one turn. Empty history means a new session."""
        events = welcome_system_events(self.config, is_new_session=not history)
        events.extend(system_events or [])

        messages: list[dict[str, Any]] = [{"role": "system", "content": self.build_system_prompt()}]
        messages.extend(history[-_MAX_HISTORY_MESSAGES_IN_PROMPT:])
        messages.append({"role": "user", "content": prepend_system_events(current_message, events)})
        return messages
