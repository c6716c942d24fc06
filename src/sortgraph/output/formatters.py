"""Output mode selection for ServiceResult.

The CLI renders ServiceResult for humans (Rich tables and status lines) or
machines (--json). This layer picks the mode from :class:`OutputSettings`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sortgraph.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from sortgraph.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Resolved output flags for a single command invocation."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    ``--json`` wins over ``--quiet``, which wins over the default Rich view.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
