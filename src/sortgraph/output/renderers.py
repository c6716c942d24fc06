"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from sortgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from sortgraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def format_vertices(vertices: list[str]) -> str:
    return ", ".join(vertices)


def format_edges(edges: list[list[str]]) -> str:
    return ", ".join(f"({first} -> {second})" for first, second in edges)


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="sg.ok")
    op = Text(f"  {result.op}", style="sg.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="sg.key")
    if key == "vertex":
        v = Text(str(value), style="sg.vertex")
    elif key == "edge":
        v = Text(str(value), style="sg.edge")
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {'unbounded' if v is None else v}")


def _rejection_lines(console: Console, rejected: list[dict[str, str]]) -> None:
    for item in rejected:
        console.print(
            Text("  rejected ", style="sg.warning"),
            Text(f"{item['op']} {item['target']} "),
            Text(item["code"], style="sg.code"),
            sep="",
            end="",
        )
        console.print()


def _contents_table(data: dict[str, Any]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Vertices", style="sg.vertex")
    table.add_column("Edges", style="sg.edge")
    table.add_row(format_vertices(data.get("vertices", [])), format_edges(data.get("edges", [])))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="sg.error")
    op = Text(f"  {result.op}", style="sg.op")
    code = Text(f" [{err.code}]" if err else "", style="sg.code")
    console.print(label, op, code, Text(f" — {msg}"), sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
    if verbose:
        _render_meta(console, result)


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("vertex", "edge", "vertex_count", "edge_count"):
        if key in result.data:
            _field(console, key, result.data[key])
    removed = result.data.get("removed_edges")
    if removed:
        _field(console, "removed_edges", ", ".join(removed))
    if verbose:
        _render_meta(console, result)


# ── Graph renderers ───────────────────────────────────────────────────


def _render_contents(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render snapshot/build results as a vertex/edge table."""
    _status_line(console, result)
    data = result.data
    _field(console, "vertices", data.get("vertex_count", 0))
    _field(console, "edges", data.get("edge_count", 0))
    console.print(_contents_table(data))
    _rejection_lines(console, data.get("rejected", []))
    if verbose:
        _render_meta(console, result)


def _render_demo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render each demo stage as a titled vertex/edge listing."""
    _status_line(console, result)
    for stage in result.data.get("stages", []):
        console.print()
        console.print(Text(f"Graph ({stage['stage']}):", style="sg.stage"))
        console.print(
            Text("  The vertices are: ", style="sg.key"),
            Text(format_vertices(stage["vertices"]), style="sg.vertex"),
            sep="",
        )
        console.print(
            Text("  The edges are: ", style="sg.key"),
            Text(format_edges(stage["edges"]), style="sg.edge"),
            sep="",
        )
        if verbose:
            _rejection_lines(console, stage.get("rejected", []))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "add_vertex": _render_mutation,
    "delete_vertex": _render_mutation,
    "add_edge": _render_mutation,
    "delete_edge": _render_mutation,
    "snapshot": _render_contents,
    "build": _render_contents,
    "demo": _render_demo,
}
