"""
Minimum spanning tree algorithms: Kruskal.

Components are tracked with integer tags on each node instead of a
union-find structure: merging two components retags every node of both.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties) and 23.2 (Kruskal).
"""

from typing import TYPE_CHECKING, Dict, Hashable, List, Optional

from .logging import get_logger
from .relation import Relation
from .utils import unique_relations

if TYPE_CHECKING:
    from .core import Pathway

logger = get_logger(__name__)


def kruskal(graph: "Pathway") -> "Pathway":
    """
    Kruskal's algorithm for minimum spanning tree.

    Edges are taken from the adjacency list, sorted by ascending label and
    stripped of duplicates (orientation is ignored). Each edge joining two
    different components, or two nodes not yet in any component, is
    accepted. Self relations are never accepted.

    Args:
        graph: Graph whose edge labels are orderable.

    Returns:
        New Pathway, in the same mode as ``graph``, holding the accepted
        relations. For a disconnected graph this is a spanning forest.

    Raises:
        RelationOrderError: If edge labels cannot be compared.

    Complexity: O(E log E + E * V) with the tag relabelling.

    Example:
        >>> g = Pathway([Relation('A', 'B', 1), Relation('B', 'C', 2), Relation('A', 'C', 3)])
        >>> kruskal(g).edges()
        [Relation('A', 'B', 1), Relation('B', 'C', 2)]
    """
    relations = sorted(graph.adjacency_relations())
    relations = unique_relations(relations)

    tree: List[Relation] = []
    seen: Dict[Hashable, Optional[int]] = {node: None for node in graph.graph}

    for tag, rel in enumerate(relations, start=1):
        a, b = rel.node_a, rel.node_b
        if a == b:
            continue
        tag_a = seen.get(a) or 0
        tag_b = seen.get(b) or 0
        seen[a] = tag_a
        seen[b] = tag_b

        if tag_a == tag_b == 0:
            tree.append(rel)
            seen[a] = tag
            seen[b] = tag
        elif tag_a != tag_b:
            tree.append(rel)
            for node, value in seen.items():
                if value == tag_a or value == tag_b:
                    seen[node] = tag

    logger.debug("Kruskal accepted %d of %d relations", len(tree), len(relations))
    return type(graph)(tree, undirected=graph.is_undirected())
