from __future__ import annotations

import pytest

from clawstart.auth.choice_options import AuthChoiceGroup, AuthChoiceOption
from clawstart.auth.choice_prompt import BACK_VALUE, MORE_VALUE, prompt_auth_choice_grouped

OPENAI = AuthChoiceGroup(
    value="openai",
    label="OpenAI",
    hint="ChatGPT or key",
    options=(
        AuthChoiceOption("openai-codex", "ChatGPT account"),
        AuthChoiceOption("openai-api-key", "API key"),
    ),
)
ANTHROPIC = AuthChoiceGroup(
    value="anthropic",
    label="Anthropic",
    hint="Claude",
    options=(AuthChoiceOption("anthropic-api-key", "API key"),),
)
OLLAMA = AuthChoiceGroup(
    value="ollama",
    label="Ollama",
    options=(AuthChoiceOption("ollama-local", "Local server"),),
)
EMPTY = AuthChoiceGroup(value="bedrock", label="Amazon Bedrock")

GROUPS = [OPENAI, ANTHROPIC, OLLAMA, EMPTY]


def test_single_option_group_returns_without_method_menu(scripted) -> None:
    prompter = scripted(["anthropic"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=False, groups=GROUPS)

    assert choice == "anthropic-api-key"
    assert prompter.messages() == ["Model/auth provider"]


def test_provider_menu_lists_only_groups_with_methods(scripted) -> None:
    prompter = scripted(["ollama"])
    prompt_auth_choice_grouped(prompter, include_skip=False, groups=GROUPS)

    assert prompter.values(0) == ["openai", "anthropic", "ollama"]


def test_multi_option_group_shows_method_menu_with_back(scripted) -> None:
    prompter = scripted(["openai", "openai-api-key"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=False, groups=GROUPS)

    assert choice == "openai-api-key"
    assert prompter.messages() == ["Model/auth provider", "OpenAI auth method"]
    assert prompter.values(1) == ["openai-codex", "openai-api-key", BACK_VALUE]
    assert prompter.selects[1][1][-1].label == "Back"


def test_back_represents_the_same_provider_menu(scripted) -> None:
    prompter = scripted(["openai", BACK_VALUE, "ollama"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=True, groups=GROUPS)

    assert choice == "ollama-local"
    assert prompter.messages() == ["Model/auth provider", "OpenAI auth method", "Model/auth provider"]
    assert prompter.selects[0][1] == prompter.selects[2][1]


def test_skip_at_provider_menu(scripted) -> None:
    prompter = scripted(["skip"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=True, groups=GROUPS)

    assert choice == "skip"
    assert prompter.values(0)[-1] == "skip"
    assert prompter.notes == []


def test_skip_entry_absent_when_not_allowed(scripted) -> None:
    prompter = scripted(["anthropic"])
    prompt_auth_choice_grouped(prompter, include_skip=False, groups=GROUPS)

    assert "skip" not in prompter.values(0)


def test_unknown_provider_notes_once_and_reprompts(scripted) -> None:
    prompter = scripted(["bedrock", "anthropic"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=False, groups=GROUPS)

    assert choice == "anthropic-api-key"
    assert prompter.notes == [("No auth methods available for that provider.", "Model/auth choice")]
    assert len(prompter.selects) == 2
    assert prompter.selects[0] == prompter.selects[1]


def test_quickstart_picks_first_method_of_group(scripted) -> None:
    prompter = scripted(["openai"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=True, quickstart=True, groups=GROUPS)

    assert choice == "openai-codex"
    assert prompter.messages() == ["How do you want to sign in?"]


def test_quickstart_menu_uses_friendly_labels_and_more_entry(scripted) -> None:
    prompter = scripted(["anthropic"])
    prompt_auth_choice_grouped(prompter, include_skip=True, quickstart=True, groups=GROUPS)

    options = prompter.selects[0][1]
    assert [o.value for o in options] == ["openai", "anthropic", MORE_VALUE, "skip"]
    assert options[0].hint.startswith("Recommended")
    assert options[2].label == "More options..."


def test_quickstart_skip(scripted) -> None:
    prompter = scripted(["skip"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=True, quickstart=True, groups=GROUPS)

    assert choice == "skip"
    assert len(prompter.selects) == 1


def test_quickstart_more_options_falls_through_to_all_providers(scripted) -> None:
    prompter = scripted([MORE_VALUE, "ollama"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=False, quickstart=True, groups=GROUPS)

    assert choice == "ollama-local"
    assert prompter.messages() == ["How do you want to sign in?", "All providers"]
    assert prompter.values(1) == ["openai", "anthropic", "ollama"]


def test_quickstart_unmatched_selection_falls_through(scripted) -> None:
    prompter = scripted(["google", "skip"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=True, quickstart=True, groups=GROUPS)

    assert choice == "skip"
    assert prompter.messages()[1] == "All providers"


def test_all_providers_message_persists_after_back(scripted) -> None:
    prompter = scripted([MORE_VALUE, "openai", BACK_VALUE, "openai", "openai-codex"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=False, quickstart=True, groups=GROUPS)

    assert choice == "openai-codex"
    assert prompter.messages() == [
        "How do you want to sign in?",
        "All providers",
        "OpenAI auth method",
        "All providers",
        "OpenAI auth method",
    ]


def test_walkthrough_single_option_then_back_and_pick(scripted) -> None:
    groups = [OPENAI, ANTHROPIC]

    direct = scripted(["anthropic"])
    assert prompt_auth_choice_grouped(direct, include_skip=True, groups=groups) == "anthropic-api-key"

    prompter = scripted(["openai", BACK_VALUE, "openai", "openai-codex"])
    assert prompt_auth_choice_grouped(prompter, include_skip=True, groups=groups) == "openai-codex"
    assert prompter.values(0) == ["openai", "anthropic", "skip"]
    assert prompter.values(1) == ["openai-codex", "openai-api-key", BACK_VALUE]
    assert prompter.selects[2] == prompter.selects[0]


def test_prompter_failure_propagates(scripted) -> None:
    prompter = scripted(["openai"])
    with pytest.raises(EOFError):
        prompt_auth_choice_grouped(prompter, include_skip=False, groups=GROUPS)


def test_default_groups_are_used_when_none_given(scripted) -> None:
    prompter = scripted(["deepseek"])
    choice = prompt_auth_choice_grouped(prompter, include_skip=False)

    assert choice == "deepseek-api-key"
    assert "bedrock" not in prompter.values(0)
