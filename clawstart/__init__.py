"""clawstart - onboarding wizard for a chat-agent CLI."""

__version__ = "0.1.0"
