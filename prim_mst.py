"""
Minimum spanning forest with Prim's algorithm (eager version)
Runs one Prim pass from every vertex not yet on a tree, so disconnected
graphs get a spanning forest with one tree per connected component.
"""

import math

from networkx.utils.heaps import BinaryHeap

from mst_check import assert_optimal, DEFAULT_EPSILON


class Frontier:
    """
    Indexed min-priority queue of unsettled vertices.
    Priorities are (key, vertex) pairs, so equal keys come out lowest vertex first.
    """

    def __init__(self):
        self._heap = BinaryHeap()

    def __contains__(self, vertex):
        return vertex in self._heap

    def __len__(self):
        return len(self._heap)

    def is_empty(self):
        return not self._heap

    def key_of(self, vertex):
        current = self._heap.get(vertex)
        if current is None:
            raise ValueError(f"vertex {vertex} is not in the frontier")
        return current[0]

    def insert(self, vertex, key):
        if vertex in self._heap:
            raise ValueError(f"vertex {vertex} is already in the frontier")
        self._heap.insert(vertex, (key, vertex))

    def decrease_key(self, vertex, key):
        current = self._heap.get(vertex)
        if current is None:
            raise ValueError(f"vertex {vertex} is not in the frontier")
        if not key < current[0]:
            raise ValueError(
                f"new key {key} for vertex {vertex} is not below current key {current[0]}"
            )
        self._heap.insert(vertex, (key, vertex))

    def del_min(self):
        """Remove and return the vertex with the smallest key"""
        vertex, _ = self._heap.pop()
        return vertex


class Forest:
    """Result of one forest computation: the edge attaching each non-root vertex"""

    def __init__(self, edge_to):
        self.edge_to = tuple(edge_to)
        total = 0
        for edge in self.edges():
            total += edge.weight
        self._weight = total

    def __len__(self):
        return len(self.edge_to)

    def edges(self):
        """Forest edges, ordered by the vertex they attach"""
        return [e for e in self.edge_to if e is not None]

    def weight(self):
        return self._weight

    def roots(self):
        return [v for v, e in enumerate(self.edge_to) if e is None]

    def components(self):
        return len(self.edge_to) - len(self.edges())


class PrimMST:
    def __init__(self, graph, check=False, epsilon=DEFAULT_EPSILON):
        n = graph.V
        # Buffers are owned by this run only
        self._marked = [False] * n
        self._dist_to = [math.inf] * n
        self._edge_to = [None] * n
        self._frontier = Frontier()

        for v in range(n):
            if not self._marked[v]:
                self._prim(graph, v)

        self.forest = Forest(self._edge_to)

        if check:
            assert_optimal(graph, self.forest, epsilon)

    def _prim(self, graph, s):
        """Grow the tree containing s"""
        self._dist_to[s] = 0
        self._frontier.insert(s, self._dist_to[s])
        while not self._frontier.is_empty():
            v = self._frontier.del_min()
            self._scan(graph, v)

    def _scan(self, graph, v):
        self._marked[v] = True
        for edge in graph.adjacent(v):
            w = edge.other(v)
            if self._marked[w]:
                continue  # v-w is obsolete
            if edge.weight < self._dist_to[w]:
                self._dist_to[w] = edge.weight
                self._edge_to[w] = edge
                if w in self._frontier:
                    self._frontier.decrease_key(w, edge.weight)
                else:
                    self._frontier.insert(w, edge.weight)

    def edges(self):
        return self.forest.edges()

    def edge_to(self, v):
        return self.forest.edge_to[v]

    def weight(self):
        return self.forest.weight()

    def components(self):
        return self.forest.components()


def minimum_spanning_forest(graph, check=False, epsilon=DEFAULT_EPSILON):
    """Compute and return the Forest of `graph`"""
    return PrimMST(graph, check=check, epsilon=epsilon).forest
