"""
Binary relation between two nodes.

A Relation stores two node identities and the edge label connecting them.
Nodes can be any hashable objects; the edge label can be anything (a weight,
a flag, a name), but has to be orderable when relations are sorted.
"""

from dataclasses import dataclass
from typing import Any, Hashable, Tuple

from .exceptions import RelationOrderError


@dataclass(frozen=True, eq=False)
class Relation:
    """
    One edge: two nodes and the label of the edge between them.

    Equality and hashing ignore the orientation of the node pair, so
    Relation('a', 'b', 1) == Relation('b', 'a', 1) and both hash the same,
    while Relation('a', 'b', 1) != Relation('a', 'b', 2). Ordering compares
    edge labels only.

    Attributes:
        node_a: First node (the "from" end of a directed edge).
        node_b: Second node (the "to" end of a directed edge).
        edge: Edge label.

    Example:
        >>> r1 = Relation('a', 'b', 1)
        >>> r2 = Relation('b', 'a', 1)
        >>> r1 == r2
        True
        >>> len({r1, r2, Relation('b', 'c', 1)})
        2
    """

    node_a: Hashable
    node_b: Hashable
    edge: Any

    @property
    def source(self) -> Hashable:
        return self.node_a

    @property
    def target(self) -> Hashable:
        return self.node_b

    def endpoints(self) -> Tuple[Hashable, Hashable]:
        """Return (node_a, node_b)."""
        return (self.node_a, self.node_b)

    def edge_label(self) -> Any:
        """Return the edge label."""
        return self.edge

    def __getitem__(self, n: int) -> Any:
        # relation[0], relation[1], relation[2] -> node_a, node_b, edge
        if isinstance(n, bool) or not isinstance(n, int) or not 0 <= n <= 2:
            raise IndexError(f"Relation index out of range: {n!r}")
        return (self.node_a, self.node_b, self.edge)[n]

    def equivalent(self, other: "Relation") -> bool:
        """
        Return True if both relations carry equal labels between the same
        pair of nodes, in either orientation.

        Args:
            other: Relation to compare with.
        """
        if self.edge != other.edge:
            return False
        if self.node_a == other.node_a and self.node_b == other.node_b:
            return True
        return self.node_a == other.node_b and self.node_b == other.node_a

    def identity_hash(self) -> int:
        """Hash of the unordered node pair plus the edge label."""
        return hash((frozenset((self.node_a, self.node_b)), self.edge))

    def compare(self, other: "Relation") -> int:
        """
        Compare edge labels with another relation.

        Args:
            other: Relation to compare with.

        Returns:
            -1, 0 or 1 as this label is smaller, equal or greater.

        Raises:
            RelationOrderError: If the two labels have no order.
        """
        try:
            if self.edge > other.edge:
                return 1
            if self.edge < other.edge:
                return -1
            if self.edge == other.edge:
                return 0
        except TypeError as exc:
            raise RelationOrderError(self.edge, other.edge) from exc
        # NaN and similar labels compare neither smaller, greater nor equal
        raise RelationOrderError(self.edge, other.edge)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.equivalent(other)

    def __hash__(self) -> int:
        return self.identity_hash()

    def __lt__(self, other: "Relation") -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Relation") -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Relation") -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Relation") -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.compare(other) >= 0

    def __repr__(self) -> str:
        return f"Relation({self.node_a!r}, {self.node_b!r}, {self.edge!r})"
