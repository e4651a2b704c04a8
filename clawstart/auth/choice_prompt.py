"""Grouped auth choice prompt: provider menu, then auth method sub-menu."""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from clawstart.auth.choice_options import (
    QUICKSTART_AUTH_GROUP_IDS,
    SKIP_CHOICE,
    AuthChoiceGroup,
    AuthChoiceOption,
    build_auth_choice_groups,
)
from clawstart.wizard.prompts import SelectOption, WizardPrompter

BACK_VALUE = "__back"
MORE_VALUE = "__more__"

# Consumer-friendly labels shown in quickstart mode.
QUICKSTART_OVERRIDES: dict[str, tuple[str, str]] = {
    "openai": ("OpenAI", "Recommended - sign in with your ChatGPT account"),
    "anthropic": ("Anthropic", "Sign in with your Claude account"),
    "google": ("Google Gemini", "Use your Google account"),
}


def _as_select(option: AuthChoiceOption) -> SelectOption:
    return SelectOption(option.value, option.label, option.hint)


def _prompt_quickstart(
    prompter: WizardPrompter,
    groups: list[AuthChoiceGroup],
    skip_option: AuthChoiceOption | None,
) -> str | None:
    """Short first pass over the top providers. None means show the full list."""
    quickstart_groups = [g for g in groups if g.value in QUICKSTART_AUTH_GROUP_IDS]
    options: list[SelectOption] = []
    for g in quickstart_groups:
        label, hint = QUICKSTART_OVERRIDES.get(g.value, (g.label, g.hint))
        options.append(SelectOption(g.value, label, hint))
    options.append(SelectOption(MORE_VALUE, "More options..."))
    if skip_option:
        options.append(_as_select(skip_option))

    selection = prompter.select("How do you want to sign in?", options)
    if selection == SKIP_CHOICE:
        return SKIP_CHOICE
    if selection != MORE_VALUE:
        group = next((g for g in quickstart_groups if g.value == selection), None)
        if group and group.options:
            return group.options[0].value
    return None


def prompt_auth_choice_grouped(
    prompter: WizardPrompter,
    include_skip: bool,
    quickstart: bool = False,
    groups: Sequence[AuthChoiceGroup] | None = None,
) -> str:
    """Ask which provider and auth method to use.

    Returns a concrete auth method value, or ``"skip"`` when the user skips.
    Picking a provider with a single method returns it straight away; with
    several methods a sub-menu is shown where "Back" returns to the provider
    list. The loop only ends on a real choice.
    """
    all_groups, skip_option = build_auth_choice_groups(include_skip)
    if groups is not None:
        all_groups = list(groups)
    available_groups = [g for g in all_groups if g.options]

    show_full_list = False
    if quickstart:
        choice = _prompt_quickstart(prompter, available_groups, skip_option)
        if choice is not None:
            logger.debug(f"Quickstart auth choice: {choice}")
            return choice
        show_full_list = True

    provider_options = [SelectOption(g.value, g.label, g.hint) for g in available_groups]
    if skip_option:
        provider_options.append(_as_select(skip_option))
    message = "All providers" if show_full_list else "Model/auth provider"

    while True:
        provider_selection = prompter.select(message, provider_options)
        if provider_selection == SKIP_CHOICE:
            return SKIP_CHOICE

        group = next((g for g in available_groups if g.value == provider_selection), None)
        if not group or not group.options:
            prompter.note("No auth methods available for that provider.", "Model/auth choice")
            continue

        if len(group.options) == 1:
            return group.options[0].value

        method_options = [_as_select(opt) for opt in group.options]
        method_options.append(SelectOption(BACK_VALUE, "Back"))
        method_selection = prompter.select(f"{group.label} auth method", method_options)
        if method_selection == BACK_VALUE:
            continue
        return method_selection
