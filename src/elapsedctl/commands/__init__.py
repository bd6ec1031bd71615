"""Subcommand modules for elapsedctl.

Provides register_commands() which uses deferred imports to keep
``elapsedctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from elapsedctl.commands.show import show
    from elapsedctl.commands.watch import watch

    cli.add_command(show)
    cli.add_command(watch)
