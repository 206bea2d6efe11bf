"""
Core graph data structure.

Pathway stores a graph as an adjacency list built from a list of Relation
objects, and converts it to an adjacency matrix on demand. The relation list
is kept alongside the adjacency list so that the graph can be rebuilt after
switching between directed and undirected mode.
"""

from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Union

import numpy as np

from . import allpairs, clustering, mst, shortest, traversal
from .logging import get_logger
from .relation import Relation
from .utils import sorted_nodes, unique_relations

logger = get_logger(__name__)


class Pathway:
    """
    General graph built from a list of Relation objects.

    The adjacency list ``graph`` maps node -> {neighbor: edge label}. An
    undirected graph stores every edge in both directions. The adjacency
    matrix is not stored; ``to_matrix`` derives it from the current state and
    refreshes ``index`` (node -> row/column) as a side effect.

    Attributes:
        directed: True for a directed graph, False for an undirected one.
        relations: List of Relation objects the adjacency list is built from.
            Empty for graphs produced by ``subgraph``.
        graph: Adjacency list.
        index: Row/column of each node in the last matrix built.
        label: Annotations used by ``subgraph`` to select nodes.

    Example:
        >>> g = Pathway([Relation('a', 'b', 1), Relation('a', 'c', 5)])
        >>> g.graph
        {'a': {'b': 1, 'c': 5}, 'b': {}, 'c': {}}
        >>> g.nodes()
        ['a', 'b', 'c']
    """

    def __init__(self, relations: Optional[Iterable[Relation]] = None, undirected: bool = False):
        """
        Build the adjacency list from relations.

        Args:
            relations: Edges of the graph (copied into a new list).
            undirected: If True, every relation is stored in both directions.
        """
        self.directed = not undirected
        self.relations: List[Relation] = list(relations) if relations is not None else []
        self.graph: Dict[Hashable, Dict[Hashable, Any]] = {}
        self.index: Dict[Hashable, int] = {}
        self.label: Dict[Hashable, Any] = {}
        self.to_list()

    # ------------------------------------------------------------------
    # Mode
    # ------------------------------------------------------------------

    def is_directed(self) -> bool:
        return self.directed

    def is_undirected(self) -> bool:
        return not self.directed

    def set_directed(self) -> None:
        """
        Switch to directed mode and rebuild the adjacency list.

        Mirrored entries disappear; every relation keeps its forward entry.
        Does nothing if the graph is already directed.
        """
        if not self.directed:
            self._ensure_relations()
            self.directed = True
            self.to_list()

    def set_undirected(self) -> None:
        """
        Switch to undirected mode and rebuild the adjacency list, mirroring
        every relation. Does nothing if the graph is already undirected.
        """
        if self.directed:
            self._ensure_relations()
            self.directed = False
            self.to_list()

    def _ensure_relations(self) -> None:
        # A graph without relations (after subgraph or clear_relations) keeps
        # its edges in the adjacency list only; materialise them before the
        # relation list is changed or replayed.
        if not self.relations and self.graph:
            self.to_relations()

    # ------------------------------------------------------------------
    # Construction and mutation
    # ------------------------------------------------------------------

    def to_list(self) -> None:
        """Clear the adjacency list and rebuild it by replaying ``relations``."""
        self.graph.clear()
        for rel in self.relations:
            self._add_to_graph(rel)
        logger.debug(
            "Rebuilt adjacency list from %d relations (%s)",
            len(self.relations),
            "directed" if self.directed else "undirected",
        )

    rebuild_adjacency = to_list

    def _add_to_graph(self, rel: Relation) -> None:
        self.graph.setdefault(rel.node_a, {})
        self.graph.setdefault(rel.node_b, {})
        self.graph[rel.node_a][rel.node_b] = rel.edge
        if not self.directed:
            self.graph[rel.node_b][rel.node_a] = rel.edge

    def append(self, rel: Relation) -> None:
        """
        Add a relation to both ``relations`` and the adjacency list.

        Args:
            rel: Relation to insert. An existing edge between the same
                ordered pair is overwritten in the adjacency list.
        """
        self._ensure_relations()
        self.relations.append(rel)
        self._add_to_graph(rel)

    insert = append

    def delete(self, rel: Relation) -> None:
        """
        Remove the first stored relation equivalent to ``rel`` and its
        adjacency entries. Nothing happens if no relation matches.

        Args:
            rel: Relation to remove (matched regardless of orientation).
        """
        self._ensure_relations()
        for pos, stored in enumerate(self.relations):
            if stored.equivalent(rel):
                break
        else:
            logger.debug("No relation matching %r to delete", rel)
            return

        del self.relations[pos]
        # the stored orientation decides which entry is the forward one
        self.graph.get(stored.node_a, {}).pop(stored.node_b, None)
        if not self.directed:
            self.graph.get(stored.node_b, {}).pop(stored.node_a, None)

    remove = delete

    def nodes(self) -> List[Hashable]:
        """
        Return all nodes in the graph, sorted by string representation.

        The node set is the union of the adjacency keys and every neighbor.
        """
        found = set(self.graph.keys())
        for neighbors in self.graph.values():
            found.update(neighbors.keys())
        return sorted_nodes(found)

    def edges(self) -> List[Relation]:
        """Return the stored list of relations."""
        return self.relations

    edge_list = edges

    def number_of_nodes(self) -> int:
        return len(self.nodes())

    def number_of_edges(self) -> int:
        return len(self.relations)

    def clear_relations(self) -> None:
        """Drop the relation list, keeping only the adjacency list."""
        self.relations = []

    def adjacency_relations(self) -> List[Relation]:
        """
        Build Relation objects from the adjacency list without storing them.

        In an undirected graph each mirrored pair yields a single relation.
        """
        rels = [
            Relation(node_a, node_b, edge)
            for node_a, neighbors in self.graph.items()
            for node_b, edge in neighbors.items()
        ]
        if not self.directed:
            rels = unique_relations(rels)
        return rels

    def to_relations(self) -> List[Relation]:
        """
        Regenerate ``relations`` from the adjacency list.

        Returns:
            The new relation list (also stored on the graph).
        """
        self.relations = self.adjacency_relations()
        return self.relations

    def __len__(self) -> int:
        return self.number_of_nodes()

    def __contains__(self, node: Hashable) -> bool:
        if node in self.graph:
            return True
        return any(node in neighbors for neighbors in self.graph.values())

    def __repr__(self) -> str:
        mode = "directed" if self.directed else "undirected"
        return f"Pathway({mode}, nodes={self.number_of_nodes()}, relations={len(self.relations)})"

    # ------------------------------------------------------------------
    # Matrix views
    # ------------------------------------------------------------------

    def _build_index(self) -> Dict[Hashable, int]:
        self.index = {}
        for i, node in enumerate(self.graph.keys()):
            self.index[node] = i
        for neighbors in self.graph.values():
            for node in neighbors:
                if node not in self.index:
                    self.index[node] = len(self.index)
        return self.index

    def to_matrix(self, default_value: Any = None, diagonal_value: Any = None) -> np.ndarray:
        """
        Convert the graph to an adjacency matrix.

        Rows and columns follow ``index``, which is rebuilt on every call in
        adjacency-list order. Edges are read from ``relations`` when present,
        otherwise from the adjacency list.

        Args:
            default_value: Value of the cells without an edge.
            diagonal_value: Value of the diagonal cells, if given. Self
                relations still overwrite it.

        Returns:
            (n, n) numpy array of dtype object holding the edge labels.

        Example:
            >>> g = Pathway([Relation('a', 'b', 1)])
            >>> g.to_matrix(0)
            array([[0, 1],
                   [0, 0]], dtype=object)
        """
        index = self._build_index()
        n = len(index)

        matrix = np.full((n, n), default_value, dtype=object)
        if diagonal_value is not None:
            np.fill_diagonal(matrix, diagonal_value)

        if self.relations:
            for rel in self.relations:
                x = index[rel.node_a]
                y = index[rel.node_b]
                matrix[x, y] = rel.edge
                if not self.directed:
                    matrix[y, x] = rel.edge
        else:
            for node_a, neighbors in self.graph.items():
                for node_b, edge in neighbors.items():
                    matrix[index[node_a], index[node_b]] = edge

        return matrix

    def dump_matrix(self, default_value: Any = None, diagonal_value: Any = None) -> str:
        """
        Render the adjacency matrix as text, headed by the node order.

        Accepts the same arguments as ``to_matrix``.
        """
        matrix = self.to_matrix(default_value, diagonal_value)
        header = ", ".join(str(node) for node, _ in sorted(self.index.items(), key=lambda x: x[1]))
        rows = ",\n".join(" " + repr(list(row)) for row in matrix)
        return f"[# {header}\n{rows}\n]"

    def dump_list(self) -> str:
        """Render the adjacency list as text, one line per node."""
        lines = []
        for node_a, neighbors in self.graph.items():
            targets = ", ".join(f"{node_b} ({edge})" for node_b, edge in neighbors.items())
            lines.append(f"{node_a} => {targets}\n")
        return "".join(lines)

    # ------------------------------------------------------------------
    # Subgraphs
    # ------------------------------------------------------------------

    def label_nodes(self, nodes: Union[Mapping[Hashable, Any], Iterable[Hashable]]) -> None:
        """
        Label nodes for ``subgraph``.

        Args:
            nodes: Mapping node -> annotation, which replaces the current
                labels, or an iterable of nodes, each labeled True after the
                current labels are cleared.
        """
        if isinstance(nodes, Mapping):
            self.label = dict(nodes)
        else:
            self.label.clear()
            for node in nodes:
                self.label[node] = True

    def _is_labeled(self, node: Hashable) -> bool:
        value = self.label.get(node)
        return value is not None and value is not False

    def subgraph(
        self, nodes: Optional[Union[Mapping[Hashable, Any], Iterable[Hashable]]] = None
    ) -> "Pathway":
        """
        Return a new graph made of the labeled nodes only.

        Args:
            nodes: Optional labels, applied with ``label_nodes`` first.

        Returns:
            New Pathway in the same mode holding the adjacency entries whose
            both ends are labeled. Its relation list is empty.

        Example:
            >>> g.subgraph(['q', 't', 'x'])
        """
        if nodes is not None:
            self.label_nodes(nodes)

        sub_graph = Pathway([], undirected=not self.directed)
        for node_a, neighbors in self.graph.items():
            if not self._is_labeled(node_a):
                continue
            sub_graph.graph[node_a] = {
                node_b: edge for node_b, edge in neighbors.items() if self._is_labeled(node_b)
            }
        logger.debug("Extracted subgraph with %d nodes", len(sub_graph.graph))
        return sub_graph

    extract_subgraph = subgraph

    def common_subgraph(self, graph: "Pathway") -> "Pathway":
        raise NotImplementedError("common_subgraph is not implemented")

    def clique(self) -> List[Hashable]:
        raise NotImplementedError("clique is not implemented")

    # ------------------------------------------------------------------
    # Algorithms
    # ------------------------------------------------------------------

    def cliquishness(self, node: Hashable) -> float:
        return clustering.cliquishness(self, node)

    def small_world(self) -> Dict[int, int]:
        return clustering.small_world(self)

    small_world_distribution = small_world

    def breadth_first_search(self, root: Hashable):
        return traversal.breadth_first_search(self, root)

    bfs = breadth_first_search

    def bfs_shortest_path(self, node1: Hashable, node2: Hashable):
        return traversal.bfs_shortest_path(self, node1, node2)

    def depth_first_search(self) -> traversal.DFSResult:
        return traversal.depth_first_search(self)

    dfs = depth_first_search

    def dfs_topological_sort(self) -> List[Hashable]:
        return traversal.dfs_topological_sort(self)

    def dijkstra(self, root: Hashable):
        return shortest.dijkstra(self, root)

    def bellman_ford(self, root: Hashable):
        return shortest.bellman_ford(self, root)

    def floyd_warshall(self) -> np.ndarray:
        return allpairs.floyd_warshall(self)

    floyd = floyd_warshall

    def kruskal(self) -> "Pathway":
        return mst.kruskal(self)
