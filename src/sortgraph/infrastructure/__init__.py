"""Infrastructure layer — storage primitives backing the graph."""
