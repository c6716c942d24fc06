"""Command: build a graph from vertex and edge options."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sortgraph.commands._base import SortGraphCommand
from sortgraph.services.graph import GraphService

if TYPE_CHECKING:
    from sortgraph.commands._context import AppContext


def _parse_edges(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    """Split ``A:B`` edge specs into label pairs."""
    pairs: list[tuple[str, str]] = []
    for raw in values:
        first, sep, second = raw.partition(":")
        if not sep or not first or not second:
            raise click.BadParameter(f"expected A:B, got {raw!r}")
        pairs.append((first, second))
    return pairs


@click.command(
    cls=SortGraphCommand,
    examples="""\
  sortgraph build -V a -V b -V c -E a:b -E b:c
  sortgraph build -V a -V b -E a:b --max-edges 0
  sortgraph --json build -V x -V y -E y:x""",
)
@click.option("-V", "--vertex", "vertices", multiple=True, help="Vertex label (repeatable).")
@click.option(
    "-E",
    "--edge",
    "edges",
    multiple=True,
    callback=_parse_edges,
    help="Edge as A:B (repeatable).",
)
@click.option("--max-vertices", type=click.IntRange(min=0), default=None, help="Vertex capacity.")
@click.option("--max-edges", type=click.IntRange(min=0), default=None, help="Edge capacity.")
@click.pass_obj
def build(
    app: AppContext,
    vertices: tuple[str, ...],
    edges: list[tuple[str, str]],
    max_vertices: int | None,
    max_edges: int | None,
) -> None:
    """Insert vertices, then edges, and show the resulting graph."""
    graph = app.new_graph(max_vertices=max_vertices, max_edges=max_edges)
    app.emit(GraphService(graph).build(vertices, edges))
