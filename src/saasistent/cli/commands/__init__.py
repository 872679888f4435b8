"""CLI command modules."""

from saasistent.cli.commands import auth, expand, generate, new, projects

__all__ = [
    "auth",
    "expand",
    "generate",
    "new",
    "projects",
]
