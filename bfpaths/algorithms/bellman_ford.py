"""All-optimal-paths Bellman-Ford entry points.

`bellman_ford` is a pure function of (graph, source, target, mode): it
relaxes, certifies the fixpoint, and enumerates every optimal path when the
target is reachable and no improving cycle exists. `solve` is the same call
over the plain-dictionary boundary used by editors and front ends.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from bfpaths.algorithms.cycles import detect_improving_cycle
from bfpaths.algorithms.paths import enumerate_optimal_paths
from bfpaths.algorithms.relaxation import indexed_edges, relax
from bfpaths.algorithms.trace import StepTrace
from bfpaths.config import ENGINE_CONFIG, EngineConfig
from bfpaths.exceptions import MissingEndpoints
from bfpaths.graph.model import GraphModel
from bfpaths.logging import get_logger
from bfpaths.types.base import NodeID, OptimizationMode
from bfpaths.types.distance import Objective
from bfpaths.types.dto import BellmanFordResult

logger = get_logger(__name__)


def _coerce_mode(mode: Union[OptimizationMode, str]) -> OptimizationMode:
    if isinstance(mode, OptimizationMode):
        return mode
    if isinstance(mode, str):
        return OptimizationMode.from_string(mode)
    return OptimizationMode(mode)


def check_endpoints(
    graph: GraphModel, source: Optional[NodeID], target: Optional[NodeID]
) -> None:
    """Ensure both endpoints are designated and present in ``graph``.

    Raises:
        MissingEndpoints: If an endpoint is None or not a node of ``graph``.
    """
    for role, node in (("Source", source), ("Target", target)):
        if node is None:
            raise MissingEndpoints(f"{role} node is not designated")
        if node not in graph:
            raise MissingEndpoints(f"{role} node '{node}' is not in the graph")


def bellman_ford(
    graph: GraphModel,
    source: Optional[NodeID],
    target: Optional[NodeID],
    mode: Union[OptimizationMode, str] = OptimizationMode.MINIMIZE,
    config: Optional[EngineConfig] = None,
) -> BellmanFordResult:
    """Compute optimal distances and every optimal source-target path.

    Distances and predecessor sets are computed for all nodes; the target
    only selects which paths are enumerated.

    Args:
        graph: Immutable snapshot. Its edge order fixes the step trace order
            and the order of tied predecessors.
        source: Source node.
        target: Target node.
        mode: `OptimizationMode` or its name (``"minimize"``, ``"max"``, ...).
        config: Engine options; defaults to ``ENGINE_CONFIG``.

    Returns:
        A `BellmanFordResult`. An unreachable target or an improving cycle is
        reported on the result, not raised.

    Raises:
        MissingEndpoints: If source or target is not designated or unknown.
        InvalidGraph: If validation is enabled and the snapshot is invalid.
        ValueError: If ``mode`` is not a valid mode.
    """
    cfg = config or ENGINE_CONFIG
    opt_mode = _coerce_mode(mode)

    if cfg.validate_graph:
        graph.validate()
    check_endpoints(graph, source, target)

    logger.debug(
        f"Running Bellman-Ford {opt_mode.name.lower()} from '{source}' to "
        f"'{target}' over {len(graph)} node(s), {len(graph.edges)} edge(s)"
    )

    objective = Objective(opt_mode)
    trace = StepTrace()
    edges = indexed_edges(graph)

    state = relax(
        graph, source, objective, trace, early_exit=cfg.early_exit, edges=edges
    )
    cycle_detected = detect_improving_cycle(graph, state, objective, trace, edges=edges)

    distances = state.distance_map()
    predecessors = state.predecessor_map()
    target_distance = distances[target]

    if cycle_detected or not target_distance.is_finite:
        if not cycle_detected:
            logger.debug(f"Target '{target}' is unreachable from '{source}'")
        optimal_distance = None
        optimal_paths: tuple = ()
    else:
        optimal_distance = target_distance
        optimal_paths = enumerate_optimal_paths(
            source, target, predecessors, max_paths=cfg.max_paths
        )
        logger.debug(
            f"Found {len(optimal_paths)} optimal path(s) of weight "
            f"{optimal_distance} after {state.rounds} round(s)"
        )

    return BellmanFordResult(
        source=source,
        target=target,
        mode=opt_mode,
        distances=distances,
        predecessors=predecessors,
        steps=trace.freeze(),
        cycle_detected=cycle_detected,
        optimal_distance=optimal_distance,
        optimal_paths=optimal_paths,
        rounds=state.rounds,
    )


def solve(
    payload: Mapping[str, Any], config: Optional[EngineConfig] = None
) -> BellmanFordResult:
    """Run the engine on a plain-dictionary request.

    Expected shape::

        {
            "nodes": ["A", "B", ...],
            "edges": [{"from": "A", "to": "B", "weight": 2}, ...],
            "source": "A",
            "target": "B",
            "mode": "minimize",
        }

    Edges may use ``source``/``target`` instead of ``from``/``to``. ``mode``
    defaults to ``"minimize"``.

    Raises:
        InvalidGraph: If nodes or edges are malformed or inconsistent.
        MissingEndpoints: If source or target is missing or unknown.
    """
    graph = GraphModel.from_dict(payload)
    return bellman_ford(
        graph,
        payload.get("source"),
        payload.get("target"),
        mode=payload.get("mode", OptimizationMode.MINIMIZE),
        config=config,
    )
