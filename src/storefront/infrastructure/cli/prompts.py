"""Interactive input helpers.

Each helper keeps asking until it gets a usable answer, so callers never
see malformed input.
"""

from __future__ import annotations

import click


def request_integer(prompt: str) -> int:
    """Ask for a positive whole number."""
    return click.prompt(prompt, type=click.IntRange(min=1))


def request_string(prompt: str) -> str:
    """Ask for a non-blank string, returned with surrounding whitespace removed."""
    while True:
        value = click.prompt(prompt, type=str).strip()
        if value:
            return value
        click.echo("Input cannot be empty. Please try again.")


def request_yes_no(prompt: str) -> bool:
    return click.confirm(prompt, default=None)
