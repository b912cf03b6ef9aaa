"""Shared types: aliases, enums, distances and result containers."""

from bfpaths.types.base import Cost, NodeID, OptimizationMode, StepKind
from bfpaths.types.distance import UNREACHED, Distance, Objective
from bfpaths.types.dto import AlgorithmStep, BellmanFordResult, Path

__all__ = [
    "Cost",
    "NodeID",
    "OptimizationMode",
    "StepKind",
    "Distance",
    "Objective",
    "UNREACHED",
    "AlgorithmStep",
    "BellmanFordResult",
    "Path",
]
