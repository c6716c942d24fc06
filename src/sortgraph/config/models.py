"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, sortgraph.toml only contains
overrides. An empty file (or no file) yields an unbounded graph.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- sortgraph.toml sections ---


class GraphConfig(BaseModel):
    """[graph] section.

    ``None`` leaves a collection unbounded; an integer caps it.
    """

    model_config = {"frozen": True}

    max_vertices: int | None = Field(default=None, ge=0)
    max_edges: int | None = Field(default=None, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)


class SortGraphConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    graph: GraphConfig = Field(default_factory=GraphConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
