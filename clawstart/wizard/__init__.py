"""Prompter capability for interactive wizards."""
