"""
CLI output helpers.

Styled one-line messages shared by the commands.
"""

import click
from typing import Any, Iterable


COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "blue",
}


def echo_success(message: str) -> None:
    """Print success message with green checkmark."""
    click.echo(click.style("✓ ", fg=COLORS["success"]) + message)


def echo_error(message: str) -> None:
    """Print error message with red X."""
    click.echo(click.style("✗ ", fg=COLORS["error"]) + message, err=True)


def echo_warning(message: str) -> None:
    """Print warning message with yellow exclamation."""
    click.echo(click.style("! ", fg=COLORS["warning"]) + message)


def echo_info(message: str) -> None:
    """Print info message with blue arrow."""
    click.echo(click.style("→ ", fg=COLORS["info"]) + message)


def format_values(values: Iterable[Any]) -> str:
    """Render values as a bracketed, comma-separated list."""
    return "[" + ", ".join(repr(v) for v in values) + "]"
