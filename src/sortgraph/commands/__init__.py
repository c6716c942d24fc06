"""Subcommand modules for sortgraph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from sortgraph.commands.build import build
    from sortgraph.commands.demo import demo

    cli.add_command(build)
    cli.add_command(demo)
