from __future__ import annotations

from collections.abc import Sequence

import pytest

from clawstart.wizard.prompts import SelectOption


class ScriptedPrompter:
    """Prompter that answers select() calls from a fixed script and records every call."""

    def __init__(self, answers: Sequence[str]):
        self.answers = list(answers)
        self.selects: list[tuple[str, list[SelectOption]]] = []
        self.notes: list[tuple[str, str]] = []

    def select(self, message: str, options: Sequence[SelectOption]) -> str:
        self.selects.append((message, list(options)))
        if not self.answers:
            raise EOFError("input stream closed")
        return self.answers.pop(0)

    def note(self, message: str, title: str = "") -> None:
        self.notes.append((message, title))

    def values(self, index: int) -> list[str]:
        return [opt.value for opt in self.selects[index][1]]

    def messages(self) -> list[str]:
        return [message for message, _ in self.selects]


@pytest.fixture
def scripted():
    return ScriptedPrompter
