"""Interactive onboarding wizard for clawstart."""

from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from clawstart.agent.skills import STARTER_SKILL_KEYS, SkillsLoader, apply_default_starter_skills
from clawstart.auth.apply import apply_auth_choice
from clawstart.auth.choice_options import SKIP_CHOICE
from clawstart.auth.choice_prompt import prompt_auth_choice_grouped
from clawstart.config import Config, load_config, save_config
from clawstart.wizard.prompts import RichPrompter, SelectOption, WizardPrompter

console = Console()

TOTAL_STEPS = 3
MODE_QUICKSTART = "quickstart"
MODE_ADVANCED = "advanced"


def _step_header(num: int, title: str, subtitle: str = "") -> None:
    """Print a step header with progress indicator."""
    bar = f"[green]{'*' * num}[/green][dim]{'.' * (TOTAL_STEPS - num)}[/dim]"
    text = f"{bar}  [bold cyan]Step {num}[/bold cyan] [dim]({num}/{TOTAL_STEPS})[/dim]  [bold]{title}[/bold]"
    if subtitle:
        text += f"\n{'  ' * 4}[dim]{subtitle}[/dim]"
    console.print(f"\n{text}\n")


def _can_write_config_path(path: Path) -> bool:
    """Return whether the wizard can write the target config file path."""
    try:
        path = path.expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.exists():
            with path.open("a", encoding="utf-8"):
                pass
        else:
            marker = path.parent / ".config-write-test"
            marker.write_text("ok", encoding="utf-8")
            marker.unlink(missing_ok=True)
        return True
    except OSError:
        return False


def _resolve_config_output(config_path: str | Path) -> tuple[Path, str | None]:
    """Resolve a writable config path, falling back to ~/.clawstart."""
    primary = Path(config_path).expanduser().resolve()
    if _can_write_config_path(primary):
        return primary, None

    fallback = (Path.home() / ".clawstart" / primary.name).expanduser().resolve()
    if _can_write_config_path(fallback):
        return fallback, f"Config path '{primary}' is not writable; saving to fallback '{fallback}'."

    raise PermissionError(
        f"Could not write config to '{primary}' or fallback '{fallback}'. "
        "Check filesystem permissions and try again."
    )


def _select_mode(prompter: WizardPrompter) -> str:
    return prompter.select("Onboarding mode", [
        SelectOption(MODE_QUICKSTART, "QuickStart", "Top providers, sensible defaults"),
        SelectOption(MODE_ADVANCED, "Advanced", "Every provider and auth method"),
    ])


def _summary_table(config: Config, config_file: Path) -> Table:
    table = Table(show_header=False, width=70, padding=(0, 1))
    table.add_column("Setting", style="bold", width=18)
    table.add_column("Value", width=48)
    auth = config.auth
    table.add_row("Auth", "skipped" if auth.choice == SKIP_CHOICE else f"{auth.provider} / {auth.choice}")
    table.add_row("Model", config.get_agent_config().model or "(not set)")
    table.add_row("Starter skills", "on" if config.skills.starter_set else "off")
    table.add_row("Config", str(config_file))
    return table


def run_onboard(
    config_path: str | Path = "config.local.yaml",
    quickstart: bool | None = None,
    include_skip: bool = True,
    prompter: WizardPrompter | None = None,
) -> Config:
    """Run the onboarding wizard and save the resulting config.

    ``quickstart=None`` asks the user which mode to use.
    """
    prompter = prompter or RichPrompter(console)
    config_file, fallback_note = _resolve_config_output(config_path)
    config = load_config(config_file)

    console.print()
    console.print(Panel(
        "[bold]Welcome to clawstart[/bold]\n\n"
        "Pick how your assistant signs in to a model provider and\n"
        "turn on a starter set of skills. It takes about a minute.",
        title="clawstart",
        border_style="blue",
        width=70,
    ))
    if fallback_note:
        console.print(f"[yellow]{fallback_note}[/yellow]")

    if quickstart is None:
        quickstart = _select_mode(prompter) == MODE_QUICKSTART

    _step_header(1, "Sign in to a model provider",
                 "This is the 'brain' behind your assistant.")
    choice = prompt_auth_choice_grouped(prompter, include_skip=include_skip, quickstart=quickstart)
    config = apply_auth_choice(config, choice)
    logger.info(f"Auth choice: {choice}")

    _step_header(2, "Starter skills",
                 "Everyday skills that work without extra setup are turned on automatically.")
    enable_starter = True
    if not quickstart:
        enable_starter = prompter.select("Enable starter skills?", [
            SelectOption("yes", "Yes", "Recommended"),
            SelectOption("no", "No", "Pick skills yourself later"),
        ]) == "yes"
    if enable_starter:
        config = apply_default_starter_skills(config)
        prompter.note(", ".join(STARTER_SKILL_KEYS), "Starter skills")

    _step_header(3, "Save")
    saved_to = save_config(config, config_file)
    console.print(Panel(_summary_table(config, saved_to), title="All set", border_style="green", width=70))
    return config


def run_skills_report(config_path: str | Path = "config.local.yaml") -> None:
    """Print which starter skills this config would give the agent."""
    config = load_config(config_path)
    loader = SkillsLoader(config.workspace_path(), config.skills)
    discovered = {s["name"] for s in loader.discover()}
    included = {s["name"] for s in loader.list_skills()}

    table = Table(show_header=True, width=70)
    table.add_column("Skill", width=24)
    table.add_column("Installed", width=10)
    table.add_column("Included", width=10)
    for name in STARTER_SKILL_KEYS:
        table.add_row(
            name,
            "yes" if name in discovered else "[dim]no[/dim]",
            "[green]yes[/green]" if name in included else "[dim]no[/dim]",
        )
    console.print(table)
    if not config.skills.starter_set:
        console.print("[dim]Starter set is off. Run 'clawstart onboard' to turn it on.[/dim]")
