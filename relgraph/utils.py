"""
Utility functions for graph algorithms.

Provides helpers for deterministic node ordering, path reconstruction and
relation de-duplication.
"""

from typing import TYPE_CHECKING, Dict, Hashable, Iterable, List, Optional

if TYPE_CHECKING:
    from .relation import Relation


def sorted_nodes(nodes: Iterable[Hashable]) -> List[Hashable]:
    """
    Return the distinct nodes sorted by string representation.

    Sorting on ``str`` keeps the order deterministic even when node
    identities of different types are mixed.

    Example:
        >>> sorted_nodes(['c', 'a', 'b', 'a'])
        ['a', 'b', 'c']
    """
    return sorted(set(nodes), key=lambda x: (str(x), type(x).__name__))


def reconstruct_path(
    predecessor: Dict[Hashable, Optional[Hashable]], source: Hashable, target: Hashable
) -> List[Hashable]:
    """
    Walk predecessor links back from target to source.

    The walk stops at source, or at the first node without a predecessor.
    When target was not reached the result is just ``[target]``, so check
    reachability with the distance map before trusting the path.

    Args:
        predecessor: Mapping node -> previous node (None for the root).
        source: Node the search started from.
        target: Node to reconstruct the path to.

    Returns:
        List of nodes from source to target (inclusive).

    Example:
        >>> reconstruct_path({'A': None, 'B': 'A', 'C': 'B'}, 'A', 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path({'A': None}, 'A', 'D')
        ['D']
    """
    path = [target]
    node = target
    seen = {target}
    while node != source and predecessor.get(node) is not None:
        node = predecessor[node]
        if node in seen:
            # predecessor maps from a negative-cycle relaxation can loop
            break
        seen.add(node)
        path.append(node)
    path.reverse()
    return path


def unique_relations(relations: Iterable["Relation"]) -> List["Relation"]:
    """
    Drop relations equivalent to an earlier one, keeping the first.

    Hashes the relations when their labels allow it; otherwise falls back to
    a pairwise ``equivalent`` scan, so unhashable labels such as lists work.

    Example:
        >>> unique_relations([Relation('a', 'b', 1), Relation('b', 'a', 1)])
        [Relation('a', 'b', 1)]
    """
    relations = list(relations)
    try:
        return list(dict.fromkeys(relations))
    except TypeError:
        # unhashable label
        unique: List["Relation"] = []
        for rel in relations:
            if not any(kept.equivalent(rel) for kept in unique):
                unique.append(rel)
        return unique
