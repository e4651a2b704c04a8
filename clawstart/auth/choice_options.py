"""Auth choice metadata - which providers can be picked and how to sign in to each."""

from __future__ import annotations

from dataclasses import dataclass

SKIP_CHOICE = "skip"


@dataclass(frozen=True)
class AuthChoiceOption:
    value: str
    label: str
    hint: str = ""


@dataclass(frozen=True)
class AuthChoiceGroup:
    value: str
    label: str
    hint: str = ""
    options: tuple[AuthChoiceOption, ...] = ()
    default_model: str = ""


# Order matters: the first option of each group is the simplest sign-in path
# and is what quickstart picks without asking.
AUTH_CHOICE_GROUPS: tuple[AuthChoiceGroup, ...] = (
    AuthChoiceGroup(
        value="openai",
        label="OpenAI",
        hint="ChatGPT account or API key",
        default_model="openai/gpt-4o",
        options=(
            AuthChoiceOption("openai-codex", "ChatGPT account (OAuth)", "Sign in through the browser"),
            AuthChoiceOption("openai-api-key", "OpenAI API key", "Paste a key from platform.openai.com"),
        ),
    ),
    AuthChoiceGroup(
        value="anthropic",
        label="Anthropic",
        hint="Claude account or API key",
        default_model="anthropic/claude-sonnet-4-20250514",
        options=(
            AuthChoiceOption("anthropic-setup-token", "Claude account (setup-token)", "Run `claude setup-token` and paste it"),
            AuthChoiceOption("anthropic-api-key", "Anthropic API key", "Paste a key from console.anthropic.com"),
        ),
    ),
    AuthChoiceGroup(
        value="google",
        label="Google",
        hint="Gemini via Google account or API key",
        default_model="gemini/gemini-2.0-flash",
        options=(
            AuthChoiceOption("google-gemini-cli", "Google account (Gemini CLI OAuth)", "Free tier, no key needed"),
            AuthChoiceOption("gemini-api-key", "Gemini API key", "Paste a key from aistudio.google.com"),
        ),
    ),
    AuthChoiceGroup(
        value="openrouter",
        label="OpenRouter",
        hint="100+ models behind one API key",
        default_model="openrouter/anthropic/claude-sonnet-4-5-20250929",
        options=(
            AuthChoiceOption("openrouter-api-key", "OpenRouter API key"),
        ),
    ),
    AuthChoiceGroup(
        value="deepseek",
        label="DeepSeek",
        hint="Cheap, good at coding",
        default_model="deepseek/deepseek-chat",
        options=(
            AuthChoiceOption("deepseek-api-key", "DeepSeek API key"),
        ),
    ),
    AuthChoiceGroup(
        value="ollama",
        label="Ollama",
        hint="Local models, no account",
        default_model="ollama/llama3.1",
        options=(
            AuthChoiceOption("ollama-local", "Local Ollama server", "Defaults to http://localhost:11434"),
        ),
    ),
    AuthChoiceGroup(
        value="bedrock",
        label="Amazon Bedrock",
        hint="Not available yet",
    ),
)

# Curated top providers offered on the quickstart screen.
QUICKSTART_AUTH_GROUP_IDS: frozenset[str] = frozenset({"openai", "anthropic", "google"})


def build_auth_choice_groups(include_skip: bool) -> tuple[list[AuthChoiceGroup], AuthChoiceOption | None]:
    """Return the provider groups plus the skip option when skipping is allowed."""
    skip_option = AuthChoiceOption(SKIP_CHOICE, "Skip for now", "Configure a provider later") if include_skip else None
    return list(AUTH_CHOICE_GROUPS), skip_option


def find_auth_choice_group(
    choice: str,
    groups: tuple[AuthChoiceGroup, ...] | list[AuthChoiceGroup] = AUTH_CHOICE_GROUPS,
) -> AuthChoiceGroup | None:
    """Return the group that offers ``choice`` as one of its methods."""
    for group in groups:
        if any(opt.value == choice for opt in group.options):
            return group
    return None
