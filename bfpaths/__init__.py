"""bfpaths: all optimal paths with a generalized Bellman-Ford engine.

Computes minimum- or maximum-weight distances on a directed weighted graph,
keeps every tied optimal predecessor, enumerates every optimal path between a
source and a target, and certifies the absence of improving cycles (negative
when minimizing, positive when maximizing). Each run also records a step
trace for animated playback.

Primary API:
    bellman_ford() - Run the engine on a GraphModel
    solve() - Run the engine on a plain-dictionary request
    GraphModel, Node, Edge - Immutable graph snapshot
    BellmanFordResult, AlgorithmStep - Run outputs
    replay() - Display frames for an animation player

Example:
    from bfpaths import GraphModel, OptimizationMode, bellman_ford

    graph = GraphModel(["A", "B", "C"], [("A", "B", 2), ("A", "C", 5), ("B", "C", 1)])
    result = bellman_ford(graph, "A", "C", OptimizationMode.MINIMIZE)
    result.optimal_paths  # (("A", "B", "C"),)
"""

from __future__ import annotations

from bfpaths import cli, logging
from bfpaths._version import __version__
from bfpaths.algorithms import StepTrace, TraceFrame, bellman_ford, replay, solve
from bfpaths.config import ENGINE_CONFIG, EngineConfig
from bfpaths.exceptions import InvalidGraph, MissingEndpoints
from bfpaths.graph import Edge, GraphModel, Node, NodeMap
from bfpaths.graph.convert import from_networkx, to_networkx
from bfpaths.scenario import Scenario
from bfpaths.types import (
    UNREACHED,
    AlgorithmStep,
    BellmanFordResult,
    Distance,
    Objective,
    OptimizationMode,
    StepKind,
)

__all__ = [
    # Version
    "__version__",
    # Engine
    "bellman_ford",
    "solve",
    "StepTrace",
    "TraceFrame",
    "replay",
    # Model
    "GraphModel",
    "Node",
    "Edge",
    "NodeMap",
    "Scenario",
    # Types
    "OptimizationMode",
    "StepKind",
    "Distance",
    "Objective",
    "UNREACHED",
    "AlgorithmStep",
    "BellmanFordResult",
    # Configuration and errors
    "EngineConfig",
    "ENGINE_CONFIG",
    "InvalidGraph",
    "MissingEndpoints",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
