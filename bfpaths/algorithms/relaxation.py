"""Bellman-Ford relaxation with tied-predecessor bookkeeping.

Runs up to ``|V| - 1`` rounds over the snapshot's edges in their canonical
order. Each round relaxes every edge whose tail has a finite distance:

- a strictly better candidate is an improvement: the head's distance is
  replaced and its predecessor set is reset to the tail;
- an exactly equal candidate from a tail not yet recorded is a tie: the tail
  is appended to the head's predecessor set.

A round without improvements is a fixpoint. Any tie is found no later than
that round because distances no longer change, so the loop may stop there.

Working tables are dense lists indexed by ``GraphModel.node_map``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from bfpaths.algorithms.trace import StepTrace
from bfpaths.exceptions import InvalidGraph
from bfpaths.graph.model import GraphModel, NodeMap
from bfpaths.logging import get_logger
from bfpaths.types.base import Cost, NodeID
from bfpaths.types.distance import UNREACHED, Distance, Objective

logger = get_logger(__name__)

#: Edge as (tail index, head index, weight).
IndexedEdge = Tuple[int, int, Cost]


@dataclass
class RelaxationState:
    """Working tables after the relaxation rounds.

    Attributes:
        node_map: Index mapping the tables are keyed by.
        source_index: Index of the source node.
        distances: Distance per node index.
        predecessors: Insertion-ordered predecessor indices per node index.
        rounds: Number of rounds executed.
        improvements: Total number of improvements over all rounds.
    """

    node_map: NodeMap
    source_index: int
    distances: List[Distance]
    predecessors: List[List[int]]
    rounds: int = 0
    improvements: int = 0

    def distance_map(self) -> Dict[NodeID, Distance]:
        """Return distances keyed by node id, in node order."""
        to_name = self.node_map.to_name
        return {to_name[i]: d for i, d in enumerate(self.distances)}

    def predecessor_map(self) -> Dict[NodeID, Tuple[NodeID, ...]]:
        """Return predecessor tuples keyed by node id, in node order."""
        to_name = self.node_map.to_name
        return {
            to_name[i]: tuple(to_name[p] for p in preds)
            for i, preds in enumerate(self.predecessors)
        }


def indexed_edges(graph: GraphModel) -> List[IndexedEdge]:
    """Translate the snapshot's edges to index triples, keeping their order.

    Raises:
        InvalidGraph: If an edge endpoint is not a node of ``graph``. Only
            reachable for snapshots built with ``validate=False``.
    """
    to_index = graph.node_map.to_index
    try:
        return [
            (to_index[e.source], to_index[e.target], e.weight) for e in graph.edges
        ]
    except KeyError as exc:
        raise InvalidGraph(f"Edge references unknown node {exc.args[0]!r}") from exc


def relax_round(
    state: RelaxationState,
    edges: Sequence[IndexedEdge],
    objective: Objective,
    trace: StepTrace,
    iteration: int,
) -> int:
    """Relax every edge once and return the number of improvements."""
    dist = state.distances
    preds = state.predecessors
    to_name = state.node_map.to_name
    src = state.source_index
    improved = 0

    for u, v, weight in edges:
        tail = dist[u]
        if not tail.is_finite:
            continue
        candidate = tail.plus(weight)
        if objective.improves(candidate, dist[v]):
            dist[v] = candidate
            preds[v] = [u]
            improved += 1
            trace.improvement(iteration, to_name[v], candidate, to_name[u])
        elif v != src and objective.ties(candidate, dist[v]) and u not in preds[v]:
            # The source keeps an empty predecessor set.
            preds[v].append(u)
            trace.tie(iteration, to_name[v], candidate, to_name[u])

    return improved


def relax(
    graph: GraphModel,
    source: NodeID,
    objective: Objective,
    trace: StepTrace,
    early_exit: bool = True,
    edges: Optional[Sequence[IndexedEdge]] = None,
) -> RelaxationState:
    """Run the relaxation rounds from ``source``.

    Args:
        graph: Snapshot to relax over. Its edge order is used for every round.
        source: Source node; must be in ``graph``.
        objective: Comparison strategy for the optimization mode.
        trace: Recorder receiving improvement and tie steps.
        early_exit: Stop after the first round without improvements.
        edges: Pre-indexed edges, to share one translation with later passes.

    Returns:
        The final `RelaxationState`.
    """
    node_map = graph.node_map
    num_nodes = len(node_map)
    src = node_map.to_index[source]
    if edges is None:
        edges = indexed_edges(graph)

    distances: List[Distance] = [UNREACHED] * num_nodes
    distances[src] = Distance.finite(0)
    state = RelaxationState(
        node_map=node_map,
        source_index=src,
        distances=distances,
        predecessors=[[] for _ in range(num_nodes)],
    )

    for iteration in range(1, num_nodes):
        improved = relax_round(state, edges, objective, trace, iteration)
        state.rounds = iteration
        state.improvements += improved
        logger.debug(f"Round {iteration}: {improved} improvement(s)")
        if improved == 0 and early_exit:
            break

    logger.debug(
        f"Relaxation finished after {state.rounds} round(s) "
        f"with {state.improvements} improvement(s)"
    )

    return state
