"""
Edge-weighted undirected graph on vertices 0..V-1
Edges are kept on a networkx MultiGraph keyed by a stable edge handle, so
parallel edges and self-loops are preserved and an edge is removed by
identity rather than by value.
"""

from dataclasses import dataclass

import networkx as nx


def format_weight(weight):
    """Render a weight the way the graph text format writes it"""
    if isinstance(weight, float):
        return f"{weight:.5f}"
    return str(weight)


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Weighted undirected edge v-w.
    eq=False keeps identity equality: two parallel edges with the same
    endpoints and weight are different edges.
    """

    v: int
    w: int
    weight: object
    index: int = -1

    def either(self):
        return self.v

    def other(self, vertex):
        if vertex == self.v:
            return self.w
        if vertex == self.w:
            return self.v
        raise ValueError(f"vertex {vertex} is not an endpoint of edge {self}")

    def __str__(self):
        return f"{self.v}-{self.w} {format_weight(self.weight)}"


class EdgeWeightedGraph:
    def __init__(self, num_vertices):
        if num_vertices < 0:
            raise ValueError(
                f"number of vertices must be non-negative, got {num_vertices}"
            )
        self._graph = nx.MultiGraph()
        self._graph.add_nodes_from(range(num_vertices))
        self._edges = {}  # handle -> Edge, insertion ordered
        self._next_index = 0

    @property
    def V(self):
        return self._graph.number_of_nodes()

    @property
    def E(self):
        return len(self._edges)

    def validate_vertex(self, v):
        if v < 0 or v >= self.V:
            raise IndexError(f"vertex {v} is not between 0 and {self.V - 1}")

    def add_edge(self, v, w, weight):
        """Create a new edge v-w and return it"""
        edge = Edge(v, w, weight, self._next_index)
        self._next_index += 1
        return self._attach(edge)

    def _attach(self, edge):
        self.validate_vertex(edge.v)
        self.validate_vertex(edge.w)
        self._edges[edge.index] = edge
        self._next_index = max(self._next_index, edge.index + 1)
        self._graph.add_edge(
            edge.v, edge.w, key=edge.index, weight=edge.weight, edge=edge
        )
        return edge

    def edges(self):
        """All edges in insertion order"""
        return list(self._edges.values())

    def adjacent(self, v):
        """Edges incident to v"""
        self.validate_vertex(v)
        return [edge for _, _, edge in self._graph.edges(v, data="edge")]

    def degree(self, v):
        self.validate_vertex(v)
        return self._graph.degree(v)

    def without(self, excluded):
        """
        Copy of this graph with the same vertex count and every edge except
        `excluded`. Edges are shared, not copied, so identities survive.
        """
        reduced = EdgeWeightedGraph(self.V)
        for edge in self._edges.values():
            if edge is not excluded:
                reduced._attach(edge)
        return reduced

    def to_networkx(self):
        """MultiGraph copy with `weight` and `edge` attributes on every edge"""
        return self._graph.copy()

    @classmethod
    def from_networkx(cls, graph, weight="weight"):
        """Build from a networkx graph whose nodes are 0..n-1"""
        ewg = cls(graph.number_of_nodes())
        for u, v, w in graph.edges(data=weight):
            ewg.add_edge(u, v, w)
        return ewg

    def __str__(self):
        lines = [f"{self.V} vertices, {self.E} edges"]
        for v in range(self.V):
            lines.append(f"{v}: " + "  ".join(str(e) for e in self.adjacent(v)))
        return "\n".join(lines)


def read_graph(stream, weight_type=int):
    """
    Parse a graph from text: V, then E, then E lines of `v w weight`.
    Raises ValueError on malformed input.
    """
    tokens = stream.read().split()
    if len(tokens) < 2:
        raise ValueError("graph input must start with vertex and edge counts")

    num_vertices = int(tokens[0])
    num_edges = int(tokens[1])
    if num_edges < 0:
        raise ValueError(f"number of edges must be non-negative, got {num_edges}")

    body = tokens[2:]
    if len(body) != 3 * num_edges:
        raise ValueError(
            f"expected {num_edges} edges ({3 * num_edges} tokens), got {len(body)} tokens"
        )

    graph = EdgeWeightedGraph(num_vertices)
    for i in range(0, len(body), 3):
        graph.add_edge(int(body[i]), int(body[i + 1]), weight_type(body[i + 2]))
    return graph


def write_graph(graph, stream):
    """Write a graph in the format read_graph accepts"""
    stream.write(f"{graph.V}\n{graph.E}\n")
    for edge in graph.edges():
        stream.write(f"{edge.v} {edge.w} {edge.weight}\n")
