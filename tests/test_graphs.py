import pytest

from algolab.graphs import INF, Edge, Graph, floyd_warshall, kruskal_mst


def _sample_graph():
    graph = Graph(4)
    for source, target in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        graph.add_edge(source, target)
    return graph


def test_bfs_worked_example():
    assert _sample_graph().bfs(2) == [2, 0, 3, 1]


def test_bfs_visits_each_reachable_vertex_once():
    order = _sample_graph().bfs(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]


def test_bfs_skips_unreachable_vertices():
    graph = Graph(3)
    graph.add_edge(0, 1)
    assert graph.bfs(1) == [1]
    assert 2 not in graph.bfs(0)


def test_dfs_follows_a_path():
    size = 6
    graph = Graph(size, directed=False)
    for vertex in range(size - 1):
        graph.add_edge(vertex + 1, vertex)
    assert graph.dfs(0) == list(range(size))
    assert graph.dfs(size - 1) == list(reversed(range(size)))


def test_dfs_each_vertex_is_adjacent_to_an_earlier_one():
    graph = Graph(7, directed=False)
    for source, target in [(1, 2), (1, 3), (2, 4), (3, 5), (4, 6), (5, 6)]:
        graph.add_edge(source, target)
    order = graph.dfs(1)
    assert sorted(order) == [1, 2, 3, 4, 5, 6]
    for position, vertex in enumerate(order[1:], start=1):
        assert any(vertex in graph.neighbours(earlier) for earlier in order[:position])


def test_undirected_edges_go_both_ways():
    graph = Graph(2, directed=False)
    graph.add_edge(0, 1)
    assert graph.neighbours(1) == [0]
    assert graph.bfs(1) == [1, 0]


def test_vertex_out_of_range():
    graph = Graph(3)
    with pytest.raises(ValueError):
        graph.add_edge(0, 3)
    with pytest.raises(ValueError):
        graph.bfs(-1)
    with pytest.raises(ValueError):
        graph.dfs(5)


def _source_matrix():
    return [
        [0, 5, INF, 10],
        [INF, 0, 3, INF],
        [INF, INF, 0, 1],
        [INF, INF, INF, 0],
    ]


def test_floyd_warshall_invariants():
    graph = _source_matrix()
    dist = floyd_warshall(graph)
    size = len(graph)
    for i in range(size):
        assert dist[i][i] == 0
        for j in range(size):
            assert dist[i][j] <= graph[i][j]
            for k in range(size):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_finds_path_through_intermediate():
    graph = _source_matrix()
    dist = floyd_warshall(graph)
    assert dist[1][3] == graph[1][2] + graph[2][3]
    assert dist[0][3] == graph[0][1] + graph[1][2] + graph[2][3]
    assert dist[3][0] == INF


def test_floyd_warshall_leaves_input_untouched():
    graph = _source_matrix()
    floyd_warshall(graph)
    assert graph == _source_matrix()


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])


def test_kruskal_triangle_drops_heaviest_edge():
    edges = [Edge(0, 1, 1), Edge(1, 2, 2), Edge(0, 2, 3)]
    assert kruskal_mst(3, edges) == [edges[0], edges[1]]


def test_kruskal_source_graph_is_spanning_tree():
    edges = [
        Edge(0, 1, 4),
        Edge(0, 2, 4),
        Edge(1, 2, 2),
        Edge(1, 3, 5),
        Edge(2, 3, 1),
        Edge(2, 4, 3),
        Edge(3, 4, 7),
    ]
    tree = kruskal_mst(6, edges)
    weights = [edge.weight for edge in tree]
    assert weights == sorted(weights)
    assert all(edge in edges for edge in tree)
    check = Graph(6, directed=False)
    for edge in tree:
        check.add_edge(edge.source, edge.target)
    reached = check.bfs(0)
    assert sorted(reached) == [0, 1, 2, 3, 4]
    assert len(tree) == len(reached) - 1


def test_kruskal_rejects_unknown_vertex():
    with pytest.raises(ValueError):
        kruskal_mst(2, [Edge(0, 2, 1)])