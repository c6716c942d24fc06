"""Edge — an unordered pair of vertices in canonical orientation.

The constructor reorders its arguments so ``first`` always carries the
smaller label. Equality and ordering then work on the canonical pair,
which makes ``Edge(b, a) == Edge(a, b)``.
"""

from __future__ import annotations

from dataclasses import dataclass

from sortgraph.domain.errors import GraphTypeError, SelfLoopError
from sortgraph.domain.vertex import Vertex


@dataclass(frozen=True, order=True, init=False)
class Edge[F]:
    """An undirected edge between two distinct vertices.

    Ordering compares ``first`` then ``second``, a strict total order even
    among edges that share a first endpoint.

    The display form ``(a -> b)`` shows the canonical orientation only; the
    edge itself has no direction.
    """

    first: Vertex[F]
    second: Vertex[F]

    def __init__(self, a: Vertex[F], b: Vertex[F]) -> None:
        if not isinstance(a, Vertex) or not isinstance(b, Vertex):
            kinds = f"{type(a).__name__} and {type(b).__name__}"
            raise GraphTypeError(f"Edge endpoints must be Vertex instances, got {kinds}")
        if a == b:
            raise SelfLoopError(f"Edge endpoints must differ, got {a} twice")
        if b < a:
            a, b = b, a
        object.__setattr__(self, "first", a)
        object.__setattr__(self, "second", b)

    @property
    def endpoints(self) -> tuple[Vertex[F], Vertex[F]]:
        """The canonical ``(first, second)`` pair."""
        return self.first, self.second

    def touches(self, vertex: Vertex[F]) -> bool:
        """Return True when *vertex* equals either endpoint."""
        return vertex == self.first or vertex == self.second

    def __str__(self) -> str:
        return f"({self.first} -> {self.second})"
