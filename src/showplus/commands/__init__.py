"""Subcommand modules for showplus.

Provides register_commands() which uses deferred imports to keep
``showplus --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the preview commands on the root CLI group."""
    from showplus.commands.cont import cont
    from showplus.commands.number import number
    from showplus.commands.pad import pad

    cli.add_command(number)
    cli.add_command(pad)
    cli.add_command(cont)
