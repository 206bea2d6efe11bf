"""
Graph traversal algorithms: BFS, DFS and topological sort.

Edge weights are ignored. Neighbors are visited in adjacency-list order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS), 22.3 (DFS) and 22.4 (topological sort).
"""

from collections import deque
from typing import TYPE_CHECKING, Dict, Hashable, Iterator, List, NamedTuple, Optional, Tuple

from .diagnostics import is_debug_enabled
from .logging import get_logger
from .utils import reconstruct_path

if TYPE_CHECKING:
    from .core import Pathway

logger = get_logger(__name__)


class DFSResult(NamedTuple):
    """
    Result of ``depth_first_search``.

    Attributes:
        timestamp: node -> (discovery time, finish time).
        tree_edges: child -> parent, for edges that discovered a new node.
        back_edges: from -> to, where ``to`` was still being explored.
        cross_edges: from -> to, where ``to`` finished and was discovered
            before ``from``.
        forward_edges: from -> to, where ``to`` finished and was discovered
            after ``from``.

    The four edge maps keep one target per key, the last one classified.
    """

    timestamp: Dict[Hashable, Tuple[int, int]]
    tree_edges: Dict[Hashable, Hashable]
    back_edges: Dict[Hashable, Hashable]
    cross_edges: Dict[Hashable, Hashable]
    forward_edges: Dict[Hashable, Hashable]


def breadth_first_search(
    graph: "Pathway", root: Hashable
) -> Tuple[Dict[Hashable, int], Dict[Hashable, Optional[Hashable]]]:
    """
    Breadth-first search from a root node.

    Args:
        graph: Graph to traverse.
        root: Node to start from.

    Returns:
        Tuple of:
        - distance: node -> number of steps from root
        - predecessor: node -> previous node on the BFS tree (None for root)
        Nodes not reachable from root appear in neither map.

    Complexity: O(V + E).

    Example:
        >>> g = Pathway([Relation('A', 'B', 1), Relation('B', 'C', 1)])
        >>> distance, predecessor = breadth_first_search(g, 'A')
        >>> distance
        {'A': 0, 'B': 1, 'C': 2}
    """
    distance: Dict[Hashable, int] = {root: 0}
    predecessor: Dict[Hashable, Optional[Hashable]] = {root: None}
    queue = deque([root])

    while queue:
        u = queue.popleft()
        for v in graph.graph.get(u, {}):
            if v not in distance:
                distance[v] = distance[u] + 1
                predecessor[v] = u
                queue.append(v)

    return distance, predecessor


def bfs_shortest_path(
    graph: "Pathway", node1: Hashable, node2: Hashable
) -> Tuple[Optional[int], List[Hashable]]:
    """
    Unweighted shortest path between two nodes.

    Args:
        graph: Graph to search.
        node1: Start node.
        node2: End node.

    Returns:
        Tuple of (steps, path). ``steps`` is None when node2 is unreachable,
        in which case ``path`` is just ``[node2]``.
    """
    distance, predecessor = breadth_first_search(graph, node1)
    step = distance.get(node2)
    path = reconstruct_path(predecessor, node1, node2)
    return step, path


def depth_first_search(graph: "Pathway") -> DFSResult:
    """
    Depth-first search over every node, classifying the edges met.

    Restarts from each undiscovered node in adjacency-list order, so all
    components are covered. Uses an explicit stack of neighbor iterators
    rather than recursion, with the same discovery/finish timestamps.

    When debug mode is enabled each classified edge is logged at DEBUG level.

    Args:
        graph: Graph to traverse.

    Returns:
        DFSResult (timestamp, tree_edges, back_edges, cross_edges,
        forward_edges).

    Complexity: O(V + E).
    """
    discovered: Dict[Hashable, int] = {}
    finished: Dict[Hashable, int] = {}
    tree_edges: Dict[Hashable, Hashable] = {}
    back_edges: Dict[Hashable, Hashable] = {}
    cross_edges: Dict[Hashable, Hashable] = {}
    forward_edges: Dict[Hashable, Hashable] = {}
    trace = is_debug_enabled()
    count = 0

    def classify(u: Hashable, v: Hashable) -> None:
        if v in finished:
            if discovered[u] < discovered[v]:
                forward_edges[u] = v
                kind = "forward"
            else:
                cross_edges[u] = v
                kind = "cross"
        else:
            back_edges[u] = v
            kind = "back"
        if trace:
            logger.debug("%s -> %s : %s edge", u, v, kind)

    for root in list(graph.graph.keys()):
        if root in discovered:
            continue

        count += 1
        discovered[root] = count
        stack: List[Tuple[Hashable, Iterator[Hashable]]] = [(root, iter(graph.graph[root]))]

        while stack:
            u, neighbors = stack[-1]
            for v in neighbors:
                if v in discovered:
                    classify(u, v)
                    continue
                if trace:
                    logger.debug("%s -> %s : tree edge", u, v)
                tree_edges[v] = u
                count += 1
                discovered[v] = count
                stack.append((v, iter(graph.graph.get(v, {}))))
                break
            else:
                stack.pop()
                count += 1
                finished[u] = count

    timestamp = {node: (discovered[node], finished[node]) for node in discovered}
    return DFSResult(timestamp, tree_edges, back_edges, cross_edges, forward_edges)


def dfs_topological_sort(graph: "Pathway") -> List[Hashable]:
    """
    Topological sort of a directed acyclic graph.

    Nodes are returned by descending DFS finish time. On a graph with cycles
    the order is still produced but is not a topological order.

    Example:
        >>> dag = Pathway([Relation('pants', 'belt', True), Relation('belt', 'jacket', True)])
        >>> dfs_topological_sort(dag)
        ['pants', 'belt', 'jacket']
    """
    timestamp = depth_first_search(graph).timestamp
    return sorted(timestamp, key=lambda node: timestamp[node][1], reverse=True)
