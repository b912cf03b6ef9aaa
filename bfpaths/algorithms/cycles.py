"""Improving-cycle certification.

After relaxation, one extra pass over all edges decides whether the fixpoint
is genuine. An edge whose tail is reached and which still strictly improves
its head proves a cycle reachable from the source that makes the optimum
unbounded: negative weight when minimizing, positive weight when maximizing.
"""

from __future__ import annotations

from typing import Optional, Sequence

from bfpaths.algorithms.relaxation import (
    IndexedEdge,
    RelaxationState,
    indexed_edges,
)
from bfpaths.algorithms.trace import StepTrace
from bfpaths.graph.model import GraphModel
from bfpaths.logging import get_logger
from bfpaths.types.distance import Objective

logger = get_logger(__name__)


def detect_improving_cycle(
    graph: GraphModel,
    state: RelaxationState,
    objective: Objective,
    trace: StepTrace,
    edges: Optional[Sequence[IndexedEdge]] = None,
) -> bool:
    """Check the relaxed state for an improving cycle.

    Every witnessing edge is logged as a cycle-witness step at iteration
    ``|V|``, in edge order. The state is not modified.

    Args:
        graph: Snapshot the state was computed on.
        state: Tables produced by `relax`.
        objective: Same comparison strategy used for relaxation.
        trace: Recorder receiving cycle-witness steps.
        edges: Pre-indexed edges; computed from ``graph`` when omitted.

    Returns:
        True if an improving cycle is reachable from the source.
    """
    if edges is None:
        edges = indexed_edges(graph)
    dist = state.distances
    to_name = state.node_map.to_name
    iteration = max(len(state.node_map), 1)

    detected = False
    for u, v, weight in edges:
        tail = dist[u]
        if not tail.is_finite:
            continue
        candidate = tail.plus(weight)
        if objective.improves(candidate, dist[v]):
            detected = True
            trace.cycle_witness(iteration, to_name[v], candidate, to_name[u])

    if detected:
        logger.info(
            f"Improving cycle reachable from '{to_name[state.source_index]}' "
            f"({objective.mode.name.lower()}); optimal paths are undefined"
        )
    return detected
