"""
Cross-check the Prim forest of a graph file against networkx
"""

import argparse

import networkx as nx

from edge_weighted_graph import format_weight
from mst_config import WEIGHT_TYPES
from mst_sensitivity import load_graph
from prim_mst import PrimMST


def reference_forest(graph):
    """networkx minimum spanning forest of an EdgeWeightedGraph"""
    return nx.minimum_spanning_tree(graph.to_networkx(), weight="weight")


def compare_with_networkx(graph, check=True):
    """Return a dict describing how PrimMST and networkx agree on graph"""
    mst = PrimMST(graph, check=check)
    ref = reference_forest(graph)
    ref_weight = ref.size(weight="weight")

    return {
        "prim_weight": mst.weight(),
        "networkx_weight": ref_weight,
        "prim_edges": len(mst.edges()),
        "networkx_edges": ref.number_of_edges(),
        "prim_components": mst.components(),
        "networkx_components": nx.number_connected_components(ref),
        "is_correct": abs(mst.weight() - ref_weight) <= 1e-9
        and mst.components() == nx.number_connected_components(graph.to_networkx()),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Compare the Prim forest of a graph with networkx"
    )
    parser.add_argument("graph_file", help="graph file, or - for stdin")
    parser.add_argument("--weights", choices=sorted(WEIGHT_TYPES), default="int")
    args = parser.parse_args()

    graph = load_graph(args.graph_file, WEIGHT_TYPES[args.weights])
    mst = PrimMST(graph)

    print("Prim forest edges:")
    for e in mst.edges():
        print(f"  ({e.v},{e.w}): {format_weight(e.weight)}")

    result = compare_with_networkx(graph)
    print(f"\nPrim weight: {format_weight(result['prim_weight'])}")
    print(f"NetworkX weight: {format_weight(result['networkx_weight'])}")
    print(f"Number of edges: {result['prim_edges']}/{result['networkx_edges']}")
    print(f"Components: {result['prim_components']}")
    print(f"Status: {'✓ CORRECT' if result['is_correct'] else '✗ INCORRECT'}")


if __name__ == "__main__":
    main()
