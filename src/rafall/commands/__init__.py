"""Subcommand modules for rafall.

Provides register_commands() which uses deferred imports to keep
``rafall --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rafall.commands.collect import collect, show

    cli.add_command(collect)
    cli.add_command(show)
