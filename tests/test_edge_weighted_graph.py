import io

import networkx as nx
import pytest

from edge_weighted_graph import Edge, EdgeWeightedGraph, read_graph, write_graph


class TestEdge:
    def test_endpoints(self):
        e = Edge(3, 7, 2)
        assert e.either() == 3
        assert e.other(3) == 7
        assert e.other(7) == 3

    def test_other_rejects_non_endpoint(self):
        with pytest.raises(ValueError):
            Edge(0, 1, 1).other(2)

    def test_identity_equality(self):
        a = Edge(0, 1, 5)
        b = Edge(0, 1, 5)
        assert a != b
        assert a == a
        assert len({a, b}) == 2

    def test_str(self):
        assert str(Edge(0, 1, 5)) == "0-1 5"
        assert str(Edge(2, 10, -3)) == "2-10 -3"
        assert str(Edge(0, 1, 0.5)) == "0-1 0.50000"


class TestEdgeWeightedGraph:
    def test_counts_and_adjacency(self, square_graph):
        assert square_graph.V == 4
        assert square_graph.E == 4
        assert sorted(e.other(0) for e in square_graph.adjacent(0)) == [1, 3]
        assert square_graph.degree(2) == 2

    def test_str_lists_adjacency(self, square_graph):
        assert str(square_graph).splitlines() == [
            "4 vertices, 4 edges",
            "0: 0-1 1  0-3 3",
            "1: 0-1 1  1-2 2",
            "2: 1-2 2  2-3 1",
            "3: 2-3 1  0-3 3",
        ]

    def test_isolated_vertices_kept(self):
        graph = EdgeWeightedGraph(5)
        graph.add_edge(0, 1, 1)
        assert graph.V == 5
        assert graph.adjacent(4) == []

    def test_vertex_validation(self):
        graph = EdgeWeightedGraph(3)
        with pytest.raises(IndexError):
            graph.add_edge(0, 3, 1)
        with pytest.raises(IndexError):
            graph.adjacent(-1)

    def test_negative_vertex_count(self):
        with pytest.raises(ValueError):
            EdgeWeightedGraph(-2)

    def test_parallel_edges_and_self_loops(self):
        graph = EdgeWeightedGraph(2)
        a = graph.add_edge(0, 1, 1)
        b = graph.add_edge(0, 1, 1)
        loop = graph.add_edge(1, 1, 0)
        assert graph.E == 3
        assert graph.edges() == [a, b, loop]
        assert a.index != b.index
        assert loop in graph.adjacent(1)

    def test_without_excludes_by_identity(self):
        graph = EdgeWeightedGraph(2)
        a = graph.add_edge(0, 1, 1)
        b = graph.add_edge(0, 1, 1)
        reduced = graph.without(a)
        assert reduced.V == 2
        assert reduced.edges() == [b]
        assert reduced.edges()[0] is b
        # original untouched
        assert graph.edges() == [a, b]

    def test_without_keeps_handles(self, square_graph):
        first = square_graph.edges()[0]
        reduced = square_graph.without(first)
        assert [e.index for e in reduced.edges()] == [1, 2, 3]
        extra = reduced.add_edge(0, 2, 9)
        assert extra.index == 4

    def test_networkx_round_trip(self, square_graph):
        G = square_graph.to_networkx()
        assert isinstance(G, nx.MultiGraph)
        assert G.size(weight="weight") == 7

        simple = nx.Graph()
        simple.add_nodes_from(range(3))
        simple.add_edge(0, 2, weight=4)
        graph = EdgeWeightedGraph.from_networkx(simple)
        assert graph.V == 3
        assert [(e.v, e.w, e.weight) for e in graph.edges()] == [(0, 2, 4)]


class TestGraphText:
    def test_read(self):
        graph = read_graph(io.StringIO("4\n3\n0 1 5\n1 2 -2\n2 3 0\n"))
        assert graph.V == 4
        assert [(e.v, e.w, e.weight) for e in graph.edges()] == [
            (0, 1, 5),
            (1, 2, -2),
            (2, 3, 0),
        ]

    def test_read_float_weights(self):
        graph = read_graph(io.StringIO("2 1 0 1 0.35"), weight_type=float)
        assert graph.edges()[0].weight == pytest.approx(0.35)

    def test_write_then_read(self, square_graph):
        buf = io.StringIO()
        write_graph(square_graph, buf)
        buf.seek(0)
        graph = read_graph(buf)
        assert [(e.v, e.w, e.weight) for e in graph.edges()] == [
            (e.v, e.w, e.weight) for e in square_graph.edges()
        ]

    @pytest.mark.parametrize(
        "text", ["", "3", "3\n2\n0 1 5\n", "3\n-1\n", "x\n1\n0 1 1", "3\n1\n0 1 abc"]
    )
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            read_graph(io.StringIO(text))

    def test_vertex_out_of_range(self):
        with pytest.raises(IndexError):
            read_graph(io.StringIO("2\n1\n0 2 1\n"))
