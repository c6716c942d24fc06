"""Graph interface and its sorted-array implementation."""

from sortgraph.graph.array_graph import LEGACY_MAX_EDGES, LEGACY_MAX_VERTICES, ArrayGraph
from sortgraph.graph.base import Graph

__all__ = ["LEGACY_MAX_EDGES", "LEGACY_MAX_VERTICES", "ArrayGraph", "Graph"]
