import json
import os

import networkx as nx

from check_mst import compare_with_networkx
from create_graph_files import create_graph_files, create_random_graph
from create_simple_test import SCENARIOS, create_simple_test
from mst_plot import visualize_forest, visualize_graph
from mst_sensitivity import load_graph
from prim_mst import minimum_spanning_forest


class TestRandomGraphs:
    def test_connected_by_default(self):
        for seed in range(5):
            graph = create_random_graph(num_nodes=10, edge_probability=0.1, seed=seed)
            assert nx.is_connected(graph.to_networkx())

    def test_deterministic(self):
        a = create_random_graph(num_nodes=8, seed=3, parallel_edges=2)
        b = create_random_graph(num_nodes=8, seed=3, parallel_edges=2)
        assert [(e.v, e.w, e.weight) for e in a.edges()] == [
            (e.v, e.w, e.weight) for e in b.edges()
        ]

    def test_parallel_edges(self):
        graph = create_random_graph(num_nodes=6, seed=1, parallel_edges=5)
        G = graph.to_networkx()
        assert graph.E == nx.Graph(G).number_of_edges() + 5

    def test_files(self, tmp_path):
        graph = create_random_graph(num_nodes=7, seed=11, connected=False)
        graph_file = create_graph_files(graph, str(tmp_path), plot=False)

        loaded = load_graph(graph_file)
        assert loaded.V == graph.V
        assert loaded.E == graph.E

        with open(os.path.join(tmp_path, "graph_metadata.json")) as f:
            metadata = json.load(f)
        assert metadata["num_edges"] == graph.E
        assert metadata["num_components"] == minimum_spanning_forest(graph).components()


class TestScenarioFiles:
    def test_expected_weights(self, tmp_path):
        paths = create_simple_test(str(tmp_path))
        assert set(paths) == set(SCENARIOS)
        for name, path in paths.items():
            graph = load_graph(path)
            assert minimum_spanning_forest(graph, check=True).weight() == SCENARIOS[name][2]


class TestReferenceCheck:
    def test_agrees_with_networkx(self, barbell_graph):
        result = compare_with_networkx(barbell_graph)
        assert result["is_correct"]
        assert result["prim_weight"] == result["networkx_weight"] == 10

    def test_random(self):
        for seed in range(5):
            graph = create_random_graph(
                num_nodes=12, edge_probability=0.2, seed=seed, connected=False
            )
            assert compare_with_networkx(graph)["is_correct"]


class TestPlots:
    def test_visualize_forest(self, barbell_graph, tmp_path):
        forest = minimum_spanning_forest(barbell_graph)
        path = tmp_path / "forest.png"
        drawn = visualize_forest(barbell_graph, forest, str(path))
        assert path.exists()
        assert drawn.number_of_edges() == 5

    def test_visualize_graph(self, square_graph, tmp_path):
        path = tmp_path / "graph.png"
        visualize_graph(square_graph, str(path))
        assert path.exists()
