"""Command: run the four-stage walk-through."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sortgraph.commands._base import SortGraphCommand
from sortgraph.services.demo import DemoService

if TYPE_CHECKING:
    from sortgraph.commands._context import AppContext


@click.command(
    cls=SortGraphCommand,
    examples="""\
  sortgraph demo
  sortgraph -v demo
  sortgraph --json demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Build, extend, and prune a small example graph."""
    app.emit(DemoService(app.new_graph()).run())
