"""
Create random edge-weighted graph files for the sensitivity analysis
Writes graph.txt (V, E, then `v w weight` lines), graph_metadata.json and
a drawing of the graph.
"""

import json
import os
import random

import networkx as nx

from edge_weighted_graph import EdgeWeightedGraph, write_graph


def create_random_graph(
    num_nodes=6, edge_probability=0.5, seed=42, connected=True, parallel_edges=0
):
    """
    Random Erdos-Renyi graph with integer weights in 1..10.
    With connected=True, components are chained together by extra edges.
    parallel_edges duplicates that many random edges with a fresh weight.
    """
    rng = random.Random(seed)

    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    if connected and num_nodes > 0 and not nx.is_connected(G):
        components = [sorted(c) for c in nx.connected_components(G)]
        for i in range(len(components) - 1):
            G.add_edge(components[i][0], components[i + 1][0])

    graph = EdgeWeightedGraph(num_nodes)
    for u, v in G.edges():
        graph.add_edge(u, v, rng.randint(1, 10))

    existing = graph.edges()
    for _ in range(parallel_edges if existing else 0):
        e = rng.choice(existing)
        graph.add_edge(e.v, e.w, rng.randint(1, 10))

    return graph


def create_graph_files(graph, output_dir="graph_data", plot=True):
    """Write the graph file, its metadata and (optionally) a drawing"""
    os.makedirs(output_dir, exist_ok=True)

    graph_file = os.path.join(output_dir, "graph.txt")
    with open(graph_file, "w") as f:
        write_graph(graph, f)
    print(f"  Created {graph_file}: {graph.V} vertices, {graph.E} edges")

    G = graph.to_networkx()
    metadata = {
        "num_nodes": graph.V,
        "num_edges": graph.E,
        "num_components": nx.number_connected_components(G),
        "edges": [(e.v, e.w, e.weight) for e in graph.edges()],
    }
    metadata_file = os.path.join(output_dir, "graph_metadata.json")
    with open(metadata_file, "w") as f:
        json.dump(metadata, f, indent=2)
    print(f"  Created {metadata_file}: Graph metadata")

    if plot:
        from mst_plot import visualize_graph

        visualize_graph(
            graph, os.path.join(output_dir, "input_graph.png"), "Input Graph"
        )

    return graph_file


def print_graph_summary(graph):
    G = graph.to_networkx()
    print("\n" + "=" * 70)
    print("Graph Summary")
    print("=" * 70)
    print(f"Number of nodes: {graph.V}")
    print(f"Number of edges: {graph.E}")
    print(f"Connected components: {nx.number_connected_components(G)}")

    print("\nEdge list (with weights):")
    for e in sorted(graph.edges(), key=lambda e: (e.v, e.w, e.weight)):
        print(f"  ({e.v}, {e.w}): weight = {e.weight}")

    mst = nx.minimum_spanning_tree(G, weight="weight")
    print(f"\nExpected MST weight (NetworkX): {mst.size(weight='weight')}")
    print("=" * 70)


def main():
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate a random graph file for the MST sensitivity analysis"
    )
    parser.add_argument(
        "--nodes", type=int, default=6, help="Number of nodes (default: 6)"
    )
    parser.add_argument(
        "--edge-prob", type=float, default=0.5, help="Edge probability (default: 0.5)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--parallel", type=int, default=0, help="Extra parallel edges (default: 0)"
    )
    parser.add_argument(
        "--allow-disconnected",
        action="store_true",
        help="Keep the random graph even if it is disconnected",
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip drawing the graph"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="graph_data",
        help="Output directory (default: graph_data)",
    )
    args = parser.parse_args()

    print("=" * 70)
    print("Graph File Generator for MST Sensitivity Analysis")
    print("=" * 70)
    print(f"  Nodes: {args.nodes}")
    print(f"  Edge probability: {args.edge_prob}")
    print(f"  Random seed: {args.seed}")

    graph = create_random_graph(
        args.nodes,
        args.edge_prob,
        args.seed,
        connected=not args.allow_disconnected,
        parallel_edges=args.parallel,
    )
    print_graph_summary(graph)
    graph_file = create_graph_files(graph, args.output_dir, plot=not args.no_plot)

    print(f"\nTo run the analysis:")
    print(f"  python mst_sensitivity.py {graph_file}")


if __name__ == "__main__":
    main()
