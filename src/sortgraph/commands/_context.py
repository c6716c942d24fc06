"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Builds graphs from the configured capacities and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from sortgraph.config.logging import configure_logging
from sortgraph.graph.array_graph import ArrayGraph
from sortgraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from sortgraph.config.settings import SortGraphSettings
    from sortgraph.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SortGraphSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def new_graph(
        self,
        *,
        max_vertices: int | None = None,
        max_edges: int | None = None,
    ) -> ArrayGraph[Any]:
        """Create an empty graph; explicit capacities override the config."""
        cfg = self.settings.graph
        return ArrayGraph(
            max_vertices=max_vertices if max_vertices is not None else cfg.max_vertices,
            max_edges=max_edges if max_edges is not None else cfg.max_edges,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
