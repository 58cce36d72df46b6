"""
Optimality conditions for a minimum spanning forest
Takes time proportional to E * V * lg*(V); meant as a diagnostic pass only.
"""

import sys

from union_find import DisjointSet

DEFAULT_EPSILON = 1e-12


class MSTCheckError(AssertionError):
    """A computed forest failed one of the optimality conditions"""

    def __init__(self, reason, edge=None):
        message = reason if edge is None else f"{reason}: {edge}"
        super().__init__(message)
        self.reason = reason
        self.edge = edge


def find_violation(graph, forest, epsilon=DEFAULT_EPSILON):
    """
    Return (reason, offending edge) for the first failed condition,
    or None when the forest is a minimum spanning forest of graph.
    """
    edges = forest.edges()

    # Weight
    total = 0
    for e in edges:
        total += e.weight
    if abs(total - forest.weight()) > epsilon:
        return (
            f"weight of edges does not equal weight(): {total} vs. {forest.weight()}",
            None,
        )

    # Acyclic
    uf = DisjointSet(graph.V)
    for e in edges:
        v = e.either()
        if not uf.union(v, e.other(v)):
            return "not a forest", e

    # Spanning
    for e in graph.edges():
        v = e.either()
        if not uf.connected(v, e.other(v)):
            return "not a spanning forest", e

    # Cut optimality: e must be a min weight edge across the cut it induces
    for e in edges:
        uf = DisjointSet(graph.V)
        for f in edges:
            if f is not e:
                x = f.either()
                uf.union(x, f.other(x))

        for f in graph.edges():
            x = f.either()
            if not uf.connected(x, f.other(x)) and f.weight < e.weight:
                return f"edge {f} violates cut optimality conditions", e

    return None


def _report(reason, edge):
    if edge is None:
        print(f"✗ MST check failed: {reason}", file=sys.stderr)
    else:
        print(f"✗ MST check failed: {reason} (forest edge {edge})", file=sys.stderr)


def check_optimality(graph, forest, epsilon=DEFAULT_EPSILON):
    """True if forest passes every condition, otherwise report to stderr and return False"""
    violation = find_violation(graph, forest, epsilon)
    if violation is None:
        return True
    _report(*violation)
    return False


def assert_optimal(graph, forest, epsilon=DEFAULT_EPSILON):
    violation = find_violation(graph, forest, epsilon)
    if violation is not None:
        reason, edge = violation
        _report(reason, edge)
        raise MSTCheckError(reason, edge)
