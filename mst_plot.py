"""
Drawing helpers for graphs and their minimum spanning forests
"""

import sys

import matplotlib.pyplot as plt
import networkx as nx

from edge_weighted_graph import format_weight


def _drawable(num_vertices, edges):
    """
    Collapse parallel edges into one simple nx.Graph edge labelled with the
    lightest weight. Self-loops are not drawn.
    """
    G = nx.Graph()
    G.add_nodes_from(range(num_vertices))
    for edge in edges:
        v, w = edge.either(), edge.other(edge.either())
        if v == w:
            continue
        if G.has_edge(v, w) and G[v][w]["weight"] <= edge.weight:
            continue
        G.add_edge(v, w, weight=edge.weight, label=format_weight(edge.weight))
    return G


def _draw(G, pos, ax, title, node_color, **kwargs):
    ax.set_title(title, fontsize=14, fontweight="bold")
    nx.draw(
        G,
        pos,
        ax=ax,
        with_labels=True,
        node_color=node_color,
        node_size=700,
        font_size=12,
        font_weight="bold",
        **kwargs,
    )
    edge_labels = nx.get_edge_attributes(G, "label")
    if edge_labels:
        nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax)


def visualize_graph(graph, save_path, title="Input Graph"):
    """Draw a graph alone and save it"""
    G = _drawable(graph.V, graph.edges())
    fig, ax = plt.subplots(figsize=(10, 8))
    pos = nx.spring_layout(G, seed=42)
    _draw(G, pos, ax, title, "lightblue", edge_color="gray", width=2)

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Visualization saved to {save_path}")


def visualize_forest(graph, forest, save_path):
    """Draw the graph and its spanning forest side by side and save the figure"""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    G = _drawable(graph.V, graph.edges())
    pos = nx.spring_layout(G, seed=42)
    _draw(G, pos, ax1, "Original Graph", "lightblue")

    F = _drawable(graph.V, forest.edges())
    _draw(
        F,
        pos,
        ax2,
        f"Minimum Spanning Forest (weight {format_weight(forest.weight())})",
        "lightgreen",
        edge_color="red",
        width=3,
    )

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Visualization saved to {save_path}", file=sys.stderr)
    return F
