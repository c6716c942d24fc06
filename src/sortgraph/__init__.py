"""sortgraph — an undirected graph ADT over sorted, bounded storage."""

from __future__ import annotations

from sortgraph.domain.edge import Edge
from sortgraph.domain.errors import GraphTypeError, SelfLoopError, SortGraphError
from sortgraph.domain.rejections import Rejection
from sortgraph.domain.vertex import Vertex
from sortgraph.graph import ArrayGraph, Graph

__version__ = "0.1.0"

__all__ = [
    "ArrayGraph",
    "Edge",
    "Graph",
    "GraphTypeError",
    "Rejection",
    "SelfLoopError",
    "SortGraphError",
    "Vertex",
    "__version__",
]
