"""Configuration schema and loader."""

from pathlib import Path

import yaml
from loguru import logger
from pydantic import BaseModel, Field, PrivateAttr


class AuthConfig(BaseModel):
    choice: str = ""     # resolved AuthChoice, or "skip"
    provider: str = ""   # auth choice group id, e.g. "openai"


class SkillEntryConfig(BaseModel):
    enabled: bool | None = None  # None = follow starter set / skill defaults


class SkillsConfig(BaseModel):
    starter_set: bool = False
    entries: dict[str, SkillEntryConfig] = Field(default_factory=dict)


class AgentConfig(BaseModel):
    """Configuration for a single agent."""
    model: str = ""
    system_prompt: str = "You are a helpful personal assistant."
    workspace: str = "agent-workspace/clawstart"
    bot_name: str = "clawstart"


class Config(BaseModel):
    """Root configuration."""
    auth: AuthConfig = Field(default_factory=AuthConfig)
    agents: dict[str, AgentConfig] = Field(default_factory=lambda: {"default": AgentConfig()})
    skills: SkillsConfig = Field(default_factory=SkillsConfig)
    _config_dir: Path = PrivateAttr(default_factory=lambda: Path.cwd())

    def get_agent_config(self, name: str = "default") -> AgentConfig:
        return self.agents.get(name, self.agents.get("default", AgentConfig()))

    def workspace_path(self, agent_name: str = "default") -> Path:
        agent = self.get_agent_config(agent_name)
        workspace = Path(agent.workspace).expanduser()
        if not workspace.is_absolute():
            workspace = self._config_dir / workspace
        return workspace.resolve()

    def copy_with(self, **updates) -> "Config":
        """model_copy that keeps the config directory used for workspace resolution."""
        clone = self.model_copy(update=updates, deep=True)
        clone._config_dir = self._config_dir
        return clone


def load_config(path: str | Path = "config.yaml") -> Config:
    """Load config from YAML file."""
    p = Path(path).expanduser()
    resolved_path = p.resolve()
    if p.exists():
        with open(resolved_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = Config(**data)
    else:
        logger.debug(f"No config at {resolved_path}, using defaults")
        config = Config()
    config._config_dir = resolved_path.parent
    return config


def save_config(config: Config, path: str | Path) -> Path:
    """Write config as YAML, creating the parent directory if needed."""
    p = Path(path).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json", exclude_none=True)
    p.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")
    logger.info(f"Saved config to {p}")
    return p
