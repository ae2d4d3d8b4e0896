"""Command-line entry points (edu-todo, edu-user)."""
