"""Shared argument validation for CLI commands."""

import typer

EMPTY_PATH_MESSAGE = "Path cannot be empty."


def require_path(value: str) -> str:
    """Reject an empty path argument before any work starts."""
    if not value:
        raise typer.BadParameter(EMPTY_PATH_MESSAGE)
    return value


def require_paths(values: list[str]) -> list[str]:
    """Reject a path list that contains an empty entry."""
    for value in values:
        require_path(value)
    return values
