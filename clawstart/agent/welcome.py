"""Welcome for first-time users.

There is no chat id to message during onboarding, so instead of sending a
greeting the first turn of a new session gets a system instruction and the
model weaves the welcome into its reply. Only active once the starter skill
set is on.
"""

from __future__ import annotations

from clawstart.config import Config

WELCOME_SYSTEM_INSTRUCTION = " ".join([
    "[First-time user - welcome them]",
    "This is the user's very first message to you.",
    "Start your response with a short, warm welcome (2-3 sentences).",
    "Briefly mention a few things you can help with:",
    "answering questions, summarizing links, writing and editing text,",
    "weather, reminders, notes, web search, and code tasks.",
    "Then answer their actual message below.",
    "Keep the welcome concise - don't overwhelm them.",
])


def welcome_system_events(config: Config, is_new_session: bool) -> list[str]:
    if is_new_session and config.skills.starter_set:
        return [WELCOME_SYSTEM_INSTRUCTION]
    return []


def prepend_system_events(message: str, events: list[str]) -> str:
    """Put `System: ...` lines above the user's message."""
    lines = [f"System: {event}" for event in events if event.strip()]
    if not lines:
        return message
    return "\n".join(lines) + "\n\n" + message
