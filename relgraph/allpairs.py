"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes shortest distances between all pairs of nodes from the adjacency
matrix of the graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import TYPE_CHECKING

import numpy as np

from .logging import get_logger

if TYPE_CHECKING:
    from .core import Pathway

logger = get_logger(__name__)


def floyd_warshall(graph: "Pathway") -> np.ndarray:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Starts from ``graph.to_matrix(inf, 0)`` and, for every intermediate node
    k, replaces d[i, j] with d[i, k] + d[k, j] where that is smaller. The
    i/j loops run as one numpy broadcast per k. Negative edges are allowed;
    with a negative cycle the distances are meaningless.

    Args:
        graph: Graph whose edge labels are numbers.

    Returns:
        (n, n) float array of shortest distances, rows and columns in
        ``graph.index`` order; ``inf`` where no path exists.

    Complexity: O(n^3) where n is number of nodes.

    Example:
        >>> g = Pathway([Relation('A', 'B', 1), Relation('B', 'C', 2)])
        >>> d = floyd_warshall(g)
        >>> d[g.index['A'], g.index['C']]
        3.0
    """
    d = np.array(graph.to_matrix(np.inf, 0), dtype=float)
    n = d.shape[0]

    for k in range(n):
        d = np.minimum(d, d[:, k:k + 1] + d[k:k + 1, :])

    logger.debug("Floyd-Warshall finished on %d nodes", n)
    return d
