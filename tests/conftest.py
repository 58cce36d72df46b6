import matplotlib

matplotlib.use("Agg")

import pytest

from edge_weighted_graph import EdgeWeightedGraph


def build_graph(num_vertices, edges):
    graph = EdgeWeightedGraph(num_vertices)
    for v, w, weight in edges:
        graph.add_edge(v, w, weight)
    return graph


@pytest.fixture
def square_graph():
    return build_graph(4, [(0, 1, 1), (1, 2, 2), (2, 3, 1), (0, 3, 3)])


@pytest.fixture
def barbell_graph():
    return build_graph(
        6,
        [(0, 1, 1), (1, 2, 2), (0, 2, 3), (2, 3, 4), (3, 4, 1), (4, 5, 2), (3, 5, 3)],
    )
