"""Prompter capability used by the onboarding flows.

Flows only ever talk to a ``WizardPrompter``: ``select`` shows a single-choice
menu and returns the picked value, ``note`` shows an informational panel.
``RichPrompter`` is the terminal implementation. Tests drive flows with a
scripted prompter instead.

Both calls block until the user answers. Errors from the input stream
(``EOFError``, ``KeyboardInterrupt``) are left to propagate.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str
    hint: str = ""


class WizardPrompter(Protocol):
    def select(self, message: str, options: Sequence[SelectOption]) -> str: ...

    def note(self, message: str, title: str = "") -> None: ...


class RichPrompter:
    """Numbered-menu prompter rendered with rich."""

    def __init__(self, console: Console | None = None, width: int = 70):
        self.console = console or Console()
        self.width = width

    def select(self, message: str, options: Sequence[SelectOption]) -> str:
        if not options:
            raise ValueError(f"No options to select from for '{message}'")

        table = Table(show_header=True, show_lines=False, width=self.width, title=f"[bold]{message}[/bold]")
        table.add_column("#", style="bold", width=3)
        table.add_column("Option", width=24)
        table.add_column("", style="dim")
        for i, opt in enumerate(options, 1):
            table.add_row(str(i), opt.label, opt.hint)
        self.console.print(table)

        choice = Prompt.ask(
            "Enter a number",
            choices=[str(i) for i in range(1, len(options) + 1)],
            default="1",
            console=self.console,
        )
        picked = options[int(choice) - 1]
        self.console.print(f"[green]v[/green] {picked.label}")
        return picked.value

    def note(self, message: str, title: str = "") -> None:
        self.console.print(Panel(message, title=title or None, border_style="yellow", width=self.width))
