"""
Edge-removal sensitivity of a minimum spanning forest
For every forest edge, drop that edge from the graph, recompute the forest
from scratch and report the new total weight.

Usage:
  python mst_sensitivity.py graph.txt
  python mst_sensitivity.py - --weights float < graph.txt
"""

import argparse
import json
import math
import re
import sys
import time
from dataclasses import dataclass
from functools import cmp_to_key

from edge_weighted_graph import format_weight, read_graph
from mst_check import DEFAULT_EPSILON
from mst_config import MSTConfig, WEIGHT_TYPES
from prim_mst import minimum_spanning_forest

_CHUNK = re.compile(r"[0-9]+|[^0-9]+")


def _sign(x):
    return (x > 0) - (x < 0)


def alphanum_compare(a, b):
    """
    Compare two strings chunk by chunk; runs of digits compare as numbers,
    everything else as plain strings. Returns -1, 0 or 1.
    """
    chunks_a = _CHUNK.findall(a)
    chunks_b = _CHUNK.findall(b)
    for x, y in zip(chunks_a, chunks_b):
        if x[0].isdigit() and y[0].isdigit():
            result = _sign(int(x) - int(y)) or _sign(len(x) - len(y))
        else:
            result = (x > y) - (x < y)
        if result:
            return result
    return _sign(len(chunks_a) - len(chunks_b))


alphanum_key = cmp_to_key(alphanum_compare)


@dataclass(frozen=True)
class SensitivityRecord:
    """Forest weight of the graph after removing one forest edge"""

    edge: object
    weight: object
    components: int
    base_components: int

    @property
    def disconnected(self):
        """True when no replacement edge exists for the removed edge"""
        return self.components > self.base_components

    @property
    def replacement_weight(self):
        return math.inf if self.disconnected else self.weight

    def value(self, disconnected_as_inf=True):
        return self.replacement_weight if disconnected_as_inf else self.weight

    def line(self, disconnected_as_inf=True):
        return f"{self.edge} {format_weight(self.value(disconnected_as_inf))}"

    def to_dict(self, disconnected_as_inf=True):
        value = self.value(disconnected_as_inf)
        return {
            "edge": [self.edge.v, self.edge.w, self.edge.weight],
            "weight": None if value == math.inf else value,
            "components": self.components,
            "disconnected": self.disconnected,
        }


class SensitivityCancelled(RuntimeError):
    """Raised when the analysis is stopped between two recomputations"""

    def __init__(self, records):
        super().__init__(f"sensitivity analysis cancelled after {len(records)} edges")
        self.records = records


def sort_records(records, disconnected_as_inf=True):
    return sorted(records, key=lambda r: alphanum_key(r.line(disconnected_as_inf)))


def edge_sensitivity(graph, forest=None, config=None, should_stop=None):
    """
    Recompute the forest weight of `graph` once per forest edge removed.
    `should_stop` is polled between recomputations.
    Returns records sorted by their alphanumeric report line.
    """
    config = config or MSTConfig()
    if forest is None:
        forest = minimum_spanning_forest(
            graph, check=config.check_optimality, epsilon=config.epsilon
        )
    base_components = forest.components()

    records = []
    for edge in forest.edges():
        if should_stop is not None and should_stop():
            raise SensitivityCancelled(
                sort_records(records, config.disconnected_as_inf)
            )
        reduced = graph.without(edge)
        reduced_forest = minimum_spanning_forest(
            reduced, check=config.check_optimality, epsilon=config.epsilon
        )
        records.append(
            SensitivityRecord(
                edge,
                reduced_forest.weight(),
                reduced_forest.components(),
                base_components,
            )
        )
    return sort_records(records, config.disconnected_as_inf)


def report_lines(forest, records, disconnected_as_inf=True):
    """Forest weight first, then one `<edge> <weight>` line per record"""
    lines = [format_weight(forest.weight())]
    lines.extend(r.line(disconnected_as_inf) for r in records)
    return lines


def save_results(path, graph, forest, records, disconnected_as_inf=True):
    results = {
        "num_nodes": graph.V,
        "num_edges": graph.E,
        "mst_weight": forest.weight(),
        "mst_components": forest.components(),
        "mst_edges": [[e.v, e.w, e.weight] for e in forest.edges()],
        "sensitivity": [r.to_dict(disconnected_as_inf) for r in records],
    }
    with open(path, "w") as f:
        json.dump(results, f, indent=2)
    print(f"Results saved to: {path}", file=sys.stderr)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Minimum spanning forest weight and edge-removal sensitivity"
    )
    parser.add_argument("graph_file", help="graph file, or - for stdin")
    parser.add_argument(
        "--weights",
        choices=sorted(WEIGHT_TYPES),
        default="int",
        help="edge weight type (default: int)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="verify optimality conditions of every computed forest",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=DEFAULT_EPSILON,
        help=f"tolerance for float weight sums (default: {DEFAULT_EPSILON})",
    )
    parser.add_argument(
        "--no-sensitivity",
        action="store_true",
        help="skip the edge-removal recomputation and print only the forest weight",
    )
    parser.add_argument(
        "--raw-weights",
        action="store_true",
        help="report the reduced forest weight even when removing an edge disconnects the graph",
    )
    parser.add_argument("--timing", action="store_true", help="print elapsed time")
    parser.add_argument("--json", type=str, default=None, help="save results as JSON")
    parser.add_argument(
        "--plot", type=str, default=None, help="save a graph/forest figure"
    )
    return parser


def load_graph(path, weight_type=int):
    if path == "-":
        return read_graph(sys.stdin, weight_type)
    with open(path, "r") as f:
        return read_graph(f, weight_type)


def run(config, graph_file, out=None):
    out = out or sys.stdout
    start_time = time.time()

    graph = load_graph(graph_file, config.weight_type)
    forest = minimum_spanning_forest(
        graph, check=config.check_optimality, epsilon=config.epsilon
    )
    records = []
    if config.sensitivity:
        records = edge_sensitivity(graph, forest, config)

    for line in report_lines(forest, records, config.disconnected_as_inf):
        print(line, file=out)

    if config.show_timing:
        elapsed = time.time() - start_time
        print(f"Analysis completed in {elapsed:.2f} seconds", file=sys.stderr)

    if config.json_output:
        save_results(
            config.json_output, graph, forest, records, config.disconnected_as_inf
        )

    if config.plot_path:
        from mst_plot import visualize_forest

        visualize_forest(graph, forest, config.plot_path)

    return forest, records


def main(argv=None):
    args = build_parser().parse_args(argv)
    run(MSTConfig.from_args(args), args.graph_file)


if __name__ == "__main__":
    main()
