"""
Shortest path algorithms: Dijkstra and Bellman-Ford.

Dijkstra's algorithm for non-negative edge weights.
Bellman-Ford algorithm for graphs with negative weights (detects negative cycles).

Both return a distance map and a predecessor map holding only the nodes
reachable from the root; the root maps to distance 0 and predecessor None.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.3 (Dijkstra) and 24.1 (Bellman-Ford).
"""

from typing import TYPE_CHECKING, Any, Dict, Hashable, Optional, Tuple

from .logging import get_logger

if TYPE_CHECKING:
    from .core import Pathway

logger = get_logger(__name__)

INF = float("inf")

Distances = Dict[Hashable, Any]
Predecessors = Dict[Hashable, Optional[Hashable]]


def _initialize_single_source(graph: "Pathway", root: Hashable) -> Tuple[Distances, Predecessors]:
    """Every node at infinity with no predecessor, except root at 0."""
    distance: Distances = {}
    predecessor: Predecessors = {}
    for node in graph.nodes():
        distance[node] = INF
        predecessor[node] = None
    distance[root] = 0
    predecessor[root] = None
    return distance, predecessor


def _reachable(distance: Distances, predecessor: Predecessors) -> Tuple[Distances, Predecessors]:
    """Drop the nodes still at infinity."""
    reached = {node: d for node, d in distance.items() if d != INF}
    return reached, {node: predecessor[node] for node in reached}


def _relax(graph: "Pathway", u: Hashable, distance: Distances, predecessor: Predecessors) -> bool:
    """Relax every edge leaving u. Returns True if any distance improved."""
    if distance[u] == INF:
        return False
    changed = False
    for v, weight in graph.graph.get(u, {}).items():
        if distance[u] + weight < distance[v]:
            distance[v] = distance[u] + weight
            predecessor[v] = u
            changed = True
    return changed


def dijkstra(graph: "Pathway", root: Hashable) -> Tuple[Distances, Predecessors]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Extracts the unvisited node of minimum tentative distance with a linear
    scan, so the whole run is O(V^2 + E). Weights are not checked; negative
    weights give wrong results.

    Args:
        graph: Graph whose edge labels are non-negative numbers.
        root: Source node.

    Returns:
        Tuple of:
        - distance: node -> shortest distance from root
        - predecessor: node -> previous node on the shortest path (None for root)

    Example:
        >>> g = Pathway([Relation('a', 'b', 1), Relation('a', 'c', 5), Relation('b', 'c', 3)])
        >>> distance, predecessor = dijkstra(g, 'a')
        >>> distance
        {'a': 0, 'b': 1, 'c': 4}
        >>> predecessor['c']
        'b'
    """
    distance, predecessor = _initialize_single_source(graph, root)
    _relax(graph, root, distance, predecessor)

    queue = [node for node in distance if node != root]
    while queue:
        u = min(queue, key=distance.__getitem__)
        if distance[u] == INF:
            # everything left is unreachable
            break
        queue.remove(u)
        _relax(graph, u, distance, predecessor)

    return _reachable(distance, predecessor)


def bellman_ford(graph: "Pathway", root: Hashable) -> Optional[Tuple[Distances, Predecessors]]:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Relaxes every edge |V| - 1 times, then makes one more pass: if any edge
    can still be relaxed a negative cycle is reachable from root.

    Args:
        graph: Graph whose edge labels are numbers (may be negative).
        root: Source node.

    Returns:
        Tuple (distance, predecessor) as for ``dijkstra``, or None if a
        negative cycle was detected.

    Complexity: O(VE).

    Example:
        >>> g = Pathway([Relation('a', 'd', 2), Relation('d', 'c', -5), Relation('a', 'c', 5)])
        >>> distance, predecessor = bellman_ford(g, 'a')
        >>> distance['c']
        -3
    """
    distance, predecessor = _initialize_single_source(graph, root)

    for _ in range(len(distance) - 1):
        changed = False
        for u in list(graph.graph.keys()):
            changed = _relax(graph, u, distance, predecessor) or changed
        if not changed:
            break

    for u, neighbors in graph.graph.items():
        if distance[u] == INF:
            continue
        for v, weight in neighbors.items():
            if distance[u] + weight < distance[v]:
                logger.warning("Negative cycle detected through edge %s -> %s", u, v)
                return None

    return _reachable(distance, predecessor)
