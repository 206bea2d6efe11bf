"""
relgraph - binary relations and graph algorithms.

This package provides a general graph object built from a list of
relations, and classic textbook algorithms over it:
- Relation value objects and the Pathway graph (adjacency list / matrix)
- Traversal (BFS, DFS with edge classification, topological sort)
- Shortest paths (Dijkstra, Bellman-Ford, Floyd-Warshall)
- Minimum spanning tree (Kruskal)
- Subgraph extraction, cliquishness and the degree histogram
"""

__version__ = "0.1.0"

from .allpairs import floyd_warshall
from .clustering import cliquishness, small_world, subgraph_adjacency_matrix
from .core import Pathway
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled
from .exceptions import GraphError, RelationOrderError, UndirectedOnlyError
from .logging import configure_logging, get_logger, set_log_level
from .mst import kruskal
from .relation import Relation
from .shortest import bellman_ford, dijkstra
from .traversal import (
    DFSResult,
    bfs_shortest_path,
    breadth_first_search,
    depth_first_search,
    dfs_topological_sort,
)
from .utils import reconstruct_path, sorted_nodes, unique_relations

__all__ = [
    "Relation",
    "Pathway",
    "breadth_first_search",
    "bfs_shortest_path",
    "depth_first_search",
    "dfs_topological_sort",
    "DFSResult",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "kruskal",
    "cliquishness",
    "small_world",
    "subgraph_adjacency_matrix",
    "reconstruct_path",
    "sorted_nodes",
    "unique_relations",
    "GraphError",
    "RelationOrderError",
    "UndirectedOnlyError",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

# Example usage:
# from relgraph import Pathway, Relation
#
# g = Pathway([Relation('a', 'b', 1), Relation('a', 'c', 5), Relation('b', 'c', 3)])
# distance, predecessor = g.dijkstra('a')   # {'a': 0, 'b': 1, 'c': 4}
