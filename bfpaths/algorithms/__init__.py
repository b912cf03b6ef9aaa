"""Path engine: relaxation, cycle certification, path enumeration, tracing."""

from bfpaths.algorithms.bellman_ford import bellman_ford, check_endpoints, solve
from bfpaths.algorithms.cycles import detect_improving_cycle
from bfpaths.algorithms.paths import enumerate_optimal_paths, resolve_to_paths
from bfpaths.algorithms.relaxation import RelaxationState, indexed_edges, relax
from bfpaths.algorithms.trace import StepTrace, TraceFrame, replay

__all__ = [
    "bellman_ford",
    "check_endpoints",
    "solve",
    "detect_improving_cycle",
    "enumerate_optimal_paths",
    "resolve_to_paths",
    "RelaxationState",
    "indexed_edges",
    "relax",
    "StepTrace",
    "TraceFrame",
    "replay",
]
