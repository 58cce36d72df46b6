"""
Run configuration for the sensitivity analysis
"""

from dataclasses import dataclass
from typing import Optional

from mst_check import DEFAULT_EPSILON

WEIGHT_TYPES = {"int": int, "float": float}


@dataclass
class MSTConfig:
    weight_type: type = int
    # Optimality self-check after every forest; super-linear, off by default
    check_optimality: bool = False
    epsilon: float = DEFAULT_EPSILON
    # Per-edge removal recomputation; one full forest run per forest edge
    sensitivity: bool = True
    # Report math.inf for tree edges whose removal disconnects a component
    disconnected_as_inf: bool = True
    show_timing: bool = False
    json_output: Optional[str] = None
    plot_path: Optional[str] = None

    def __post_init__(self):
        if self.weight_type not in WEIGHT_TYPES.values():
            raise ValueError(f"unsupported weight type {self.weight_type!r}")
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {self.epsilon}")
        # Integer weights sum exactly
        if self.weight_type is int:
            self.epsilon = 0

    @classmethod
    def from_args(cls, args):
        """Build from an argparse namespace produced by mst_sensitivity.build_parser"""
        return cls(
            weight_type=WEIGHT_TYPES[args.weights],
            check_optimality=args.check,
            epsilon=args.epsilon,
            sensitivity=not args.no_sensitivity,
            disconnected_as_inf=not args.raw_weights,
            show_timing=args.timing,
            json_output=args.json,
            plot_path=args.plot,
        )
