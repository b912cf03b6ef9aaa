"""Immutable containers for engine outputs.

``AlgorithmStep`` is one entry of the step trace; ``BellmanFordResult`` is the
complete outcome of a run. Both export JSON-ready dictionaries via
``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from bfpaths.types.base import NodeID, OptimizationMode, StepKind
from bfpaths.types.distance import Distance

Path = Tuple[NodeID, ...]


@dataclass(frozen=True)
class AlgorithmStep:
    """One relaxation, tie, or cycle-witness event.

    Attributes:
        iteration: 1-based relaxation round. Cycle witnesses use ``|V|``.
        node: Node whose distance or predecessor set changed.
        distance: The node's distance carried by this event.
        chosen_predecessor: The relaxing node, i.e. the tail of the edge.
        kind: Event kind.
        description: Human-readable summary.
    """

    iteration: int
    node: NodeID
    distance: Distance
    chosen_predecessor: Optional[NodeID]
    kind: StepKind
    description: str

    @property
    def edge(self) -> Optional[Tuple[NodeID, NodeID]]:
        """The ``(chosen_predecessor, node)`` edge, if there is a predecessor."""
        if self.chosen_predecessor is None:
            return None
        return (self.chosen_predecessor, self.node)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "iteration": self.iteration,
            "node": self.node,
            "distance": self.distance.to_json(),
            "chosen_predecessor": self.chosen_predecessor,
            "kind": self.kind.name.lower(),
            "description": self.description,
        }


@dataclass(frozen=True)
class BellmanFordResult:
    """Outcome of one engine run.

    When ``cycle_detected`` is True the distances and predecessors of nodes
    reachable through the cycle are not meaningful, and ``optimal_distance``
    and ``optimal_paths`` are always empty.

    Attributes:
        source: Source node of the run.
        target: Target node of the run.
        mode: Optimization mode of the run.
        distances: Final distance per node, in graph node order.
        predecessors: Insertion-ordered predecessor tuple per node.
        steps: Step trace in generation order.
        cycle_detected: Whether an improving cycle is reachable from the source.
        optimal_distance: Distance to the target, or None when unreachable or
            when a cycle was detected.
        optimal_paths: Every optimal source-to-target path in discovery order.
        rounds: Number of relaxation rounds executed.
    """

    source: NodeID
    target: NodeID
    mode: OptimizationMode
    distances: Dict[NodeID, Distance]
    predecessors: Dict[NodeID, Tuple[NodeID, ...]]
    steps: Tuple[AlgorithmStep, ...]
    cycle_detected: bool
    optimal_distance: Optional[Distance]
    optimal_paths: Tuple[Path, ...]
    rounds: int

    @property
    def has_paths(self) -> bool:
        return bool(self.optimal_paths)

    def path_edges(self) -> List[Tuple[NodeID, NodeID]]:
        """Return every edge used by any optimal path, first-seen order.

        Renderers highlight this set rather than only the first path.
        """
        seen: Dict[Tuple[NodeID, NodeID], None] = {}
        for path in self.optimal_paths:
            for u, v in zip(path, path[1:]):
                seen.setdefault((u, v), None)
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dictionary of the result."""
        return {
            "source": self.source,
            "target": self.target,
            "mode": self.mode.name.lower(),
            "rounds": self.rounds,
            "cycle_detected": self.cycle_detected,
            "optimal_distance": (
                None
                if self.optimal_distance is None
                else self.optimal_distance.to_json()
            ),
            "optimal_paths": [list(path) for path in self.optimal_paths],
            "distances": {
                node: dist.to_json() for node, dist in self.distances.items()
            },
            "predecessors": {
                node: list(preds) for node, preds in self.predecessors.items()
            },
            "steps": [step.to_dict() for step in self.steps],
        }
