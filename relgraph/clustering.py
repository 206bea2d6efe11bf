"""
Local structure metrics: cliquishness and the degree histogram.
"""

from collections import Counter
from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterable

import numpy as np

from .exceptions import UndirectedOnlyError

if TYPE_CHECKING:
    from .core import Pathway

_NO_EDGE = object()


def subgraph_adjacency_matrix(
    graph: "Pathway", nodes: Iterable[Hashable], default_value: Any = 0
) -> np.ndarray:
    """
    Adjacency matrix restricted to the given nodes.

    Rows and columns follow the order of ``nodes``.
    """
    matrix = graph.to_matrix(default_value)
    idx = [graph.index[node] for node in nodes]
    return matrix[np.ix_(idx, idx)]


def cliquishness(graph: "Pathway", node: Hashable) -> float:
    """
    Local clustering coefficient of a node.

    The fraction of pairs of neighbors of ``node`` that are connected to
    each other. Only defined for undirected graphs.

    Args:
        graph: Undirected graph.
        node: Node to measure.

    Returns:
        nan for an isolated node, 1.0 for a node with one neighbor, else a
        ratio in [0, 1].

    Raises:
        UndirectedOnlyError: If graph is directed.
        KeyError: If node is not in graph.
    """
    if graph.is_directed():
        raise UndirectedOnlyError("cliquishness")

    neighbors = list(graph.graph[node].keys())
    k = len(neighbors)
    if k == 0:
        return float("nan")
    if k == 1:
        return 1.0

    sub = subgraph_adjacency_matrix(graph, neighbors, default_value=_NO_EDGE)
    present = np.frompyfunc(lambda cell: cell is not _NO_EDGE, 1, 1)(sub).astype(bool)
    np.fill_diagonal(present, False)

    # undirected storage counts every edge twice
    num_neighbor_edges = present.sum() / 2
    num_complete_edges = k * (k - 1) / 2
    return float(num_neighbor_edges / num_complete_edges)


def small_world(graph: "Pathway") -> Dict[int, int]:
    """
    Degree histogram: out-degree -> number of nodes with that out-degree.

    Example:
        >>> small_world(Pathway([Relation('a', 'b', 1), Relation('a', 'c', 1)]))
        {2: 1, 0: 2}
    """
    return dict(Counter(len(neighbors) for neighbors in graph.graph.values()))
