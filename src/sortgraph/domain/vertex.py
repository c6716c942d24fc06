"""Vertex — a labeled node identified solely by its label.

INVARIANT: The label never changes after construction. Graphs holding the
vertex rely on it for their sort order and uniqueness.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Vertex[F]:
    """A graph vertex wrapping one orderable label.

    Equality, hashing, and ordering are all derived from ``label``, so two
    vertices built from equal labels are interchangeable.

    Examples:
        >>> Vertex("a") == Vertex("a")
        True
        >>> sorted([Vertex("c"), Vertex("a")])
        [Vertex(label='a'), Vertex(label='c')]
    """

    label: F

    def __str__(self) -> str:
        return str(self.label)
