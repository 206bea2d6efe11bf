"""
Example: relations and graph algorithms in relgraph

Builds a few small graphs and prints the output of every algorithm: matrix
and list dumps, subgraphs, cliquishness, BFS/DFS, topological sort of the
classic clothing DAG, and the shortest path algorithms on a weighted graph.
"""

from relgraph import Pathway, Relation


def section(title):
    print("--- " + title)


def example_relations():
    section("Relation equality ignores orientation")
    r1 = Relation("a", "b", 1)
    r2 = Relation("b", "a", 1)
    r3 = Relation("b", "a", 2)
    r4 = Relation("a", "b", 1)
    print(r1 == r2, r1 == r3, r1 == r4)
    print(list(dict.fromkeys([r1, r2, r3, r4])))


def sample_graph(undirected=False):
    #                  +----------------+
    #                  |                |
    #                  v                |
    #       +---------(q)-->(t)------->(y)<----(r)
    #       |          |     |          ^       |
    #       v          |     v          |       |
    #   +--(s)<--+     |    (x)<---+   (u)<-----+
    #   |        |     |     |     |
    #   v        |     |     v     |
    #  (v)----->(w)<---+    (z)----+
    data = [
        ("q", "s", 1),
        ("q", "t", 1),
        ("q", "w", 1),
        ("r", "u", 1),
        ("r", "y", 1),
        ("s", "v", 1),
        ("t", "x", 1),
        ("t", "y", 1),
        ("u", "y", 1),
        ("v", "w", 1),
        ("w", "s", 1),
        ("x", "z", 1),
        ("y", "q", 1),
        ("z", "x", 1),
    ]
    return Pathway([Relation(*row) for row in data], undirected=undirected)


def example_structure(graph):
    section("dump_matrix")
    print(graph.dump_matrix(0))

    section("dump_list")
    print(graph.dump_list())

    section("Subgraph by label")
    graph.label_nodes({"q": "L1", "s": "L2", "v": "L3", "w": "L4"})
    print(graph.subgraph().dump_list())

    section("Subgraph by list")
    print(graph.subgraph(["q", "t", "x", "y", "z"]).dump_list())

    section("Cliquishness of q (undirected)")
    print(sample_graph(undirected=True).cliquishness("q"))

    section("Degree histogram")
    print(graph.small_world())


def example_traversal(graph):
    section("breadth_first_search from q")
    distance, predecessor = graph.breadth_first_search("q")
    print(distance)
    print(predecessor)

    section("bfs_shortest_path y -> w")
    step, path = graph.bfs_shortest_path("y", "w")
    print(step, path)

    section("depth_first_search")
    result = graph.depth_first_search()
    print(result.timestamp)
    print("tree edges :", result.tree_edges)
    print("back edges :", result.back_edges)
    print("cross edges :", result.cross_edges)
    print("forward edges :", result.forward_edges)

    section("dfs_topological_sort")
    dag = Pathway([
        Relation("undershorts", "pants", True),
        Relation("undershorts", "shoes", True),
        Relation("socks", "shoes", True),
        Relation("watch", "watch", True),
        Relation("pants", "belt", True),
        Relation("pants", "shoes", True),
        Relation("shirt", "belt", True),
        Relation("shirt", "tie", True),
        Relation("tie", "jacket", True),
        Relation("belt", "jacket", True),
    ])
    print(dag.dfs_topological_sort())


def example_shortest_paths(graph):
    section("dijkstra from q")
    print(graph.dijkstra("q"))

    section("dijkstra on a weighted graph")
    #
    # 'a' --> 'b'
    #  |   1   | 3
    #  |5      v
    #  `----> 'c'
    #
    w_graph = Pathway([Relation("a", "b", 1), Relation("a", "c", 5), Relation("b", "c", 3)])
    print(w_graph.dijkstra("a"))

    section("bellman_ford with a negative edge")
    w_graph.append(Relation("a", "d", 2))
    w_graph.append(Relation("d", "c", -5))
    print(w_graph.bellman_ford("a"))
    print(graph.bellman_ford("q"))

    section("floyd_warshall")
    print(w_graph.floyd_warshall())

    section("kruskal")
    print(sample_graph(undirected=True).kruskal().edges())


if __name__ == "__main__":
    example_relations()
    graph = sample_graph()
    example_structure(graph)
    example_traversal(graph)
    example_shortest_paths(graph)
    print("Done.")
