"""Agent-side onboarding: starter skills, welcome context."""
