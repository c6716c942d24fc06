"""Shared pytest fixtures for sortgraph tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from sortgraph.domain.vertex import Vertex
from sortgraph.graph.array_graph import ArrayGraph


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any SORTGRAPH_* variables from the developer's environment."""
    for key in list(os.environ):
        if key.startswith("SORTGRAPH_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI reconfigures logging on every invocation.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("sortgraph")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no sortgraph.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def graph() -> ArrayGraph[str]:
    """An empty, unbounded graph."""
    return ArrayGraph()


@pytest.fixture
def letters() -> dict[str, Vertex[str]]:
    """Vertices a..g keyed by label."""
    return {label: Vertex(label) for label in "abcdefg"}
