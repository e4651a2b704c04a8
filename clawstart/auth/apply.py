"""Record a resolved auth choice in the config."""

from __future__ import annotations

from loguru import logger

from clawstart.auth.choice_options import SKIP_CHOICE, find_auth_choice_group
from clawstart.config import AuthConfig, Config


def _model_prefix(model: str) -> str:
    return model.split("/", 1)[0].lower() if model else ""


def apply_auth_choice(config: Config, choice: str, agent_name: str = "default") -> Config:
    """Return a copy of ``config`` with the chosen auth method recorded.

    The agent picks up the provider's default model when it has none yet, or
    when its current model belongs to a different provider.
    """
    if choice == SKIP_CHOICE:
        return config.copy_with(auth=config.auth.model_copy(update={"choice": SKIP_CHOICE}))

    group = find_auth_choice_group(choice)
    if group is None:
        raise ValueError(f"Unknown auth choice: {choice}")

    updated = config.copy_with(auth=AuthConfig(choice=choice, provider=group.value))
    agent = updated.agents.get(agent_name)
    if agent is not None and group.default_model and _model_prefix(agent.model) != _model_prefix(group.default_model):
        if agent.model:
            logger.info(f"Agent '{agent_name}' model {agent.model} does not match {group.value}, replacing")
        agent.model = group.default_model
        logger.debug(f"Agent '{agent_name}' defaults to {group.default_model}")
    return updated
