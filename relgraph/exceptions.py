"""Exception types raised by relgraph."""


class GraphError(Exception):
    """Base exception for graph operations."""
    pass


class RelationOrderError(GraphError, TypeError):
    """Raised when edge labels have no total order (sorting, Kruskal)."""

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(
            f"Edge labels are not comparable: {left!r} ({type(left).__name__}) "
            f"and {right!r} ({type(right).__name__})"
        )


class UndirectedOnlyError(GraphError, ValueError):
    """Raised when an undirected-only metric is requested on a directed graph."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Can't calculate {operation} in directed graph")
