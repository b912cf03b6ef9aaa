"""Step trace recording and replay.

The engine appends one `AlgorithmStep` per improvement, tie, or cycle witness
to a `StepTrace`. The frozen sequence is published on the result and replayed
strictly in order by an animation player, which applies each step's distance
and chosen predecessor to its display state and highlights the edge
``chosen_predecessor -> node`` only for improvements. `replay` produces those
display states without any timing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from bfpaths.types.base import NodeID, StepKind
from bfpaths.types.distance import UNREACHED, Distance
from bfpaths.types.dto import AlgorithmStep


class StepTrace:
    """Append-only recorder of algorithm steps."""

    def __init__(self) -> None:
        self._steps: List[AlgorithmStep] = []

    def improvement(
        self,
        iteration: int,
        node: NodeID,
        distance: Distance,
        predecessor: NodeID,
    ) -> AlgorithmStep:
        return self._append(
            AlgorithmStep(
                iteration=iteration,
                node=node,
                distance=distance,
                chosen_predecessor=predecessor,
                kind=StepKind.IMPROVEMENT,
                description=f"Relaxation: {predecessor} -> {node} (distance: {distance})",
            )
        )

    def tie(
        self,
        iteration: int,
        node: NodeID,
        distance: Distance,
        predecessor: NodeID,
    ) -> AlgorithmStep:
        return self._append(
            AlgorithmStep(
                iteration=iteration,
                node=node,
                distance=distance,
                chosen_predecessor=predecessor,
                kind=StepKind.TIE,
                description=(
                    f"Tie: {predecessor} -> {node} also reaches distance {distance}"
                ),
            )
        )

    def cycle_witness(
        self,
        iteration: int,
        node: NodeID,
        distance: Distance,
        predecessor: NodeID,
    ) -> AlgorithmStep:
        return self._append(
            AlgorithmStep(
                iteration=iteration,
                node=node,
                distance=distance,
                chosen_predecessor=predecessor,
                kind=StepKind.CYCLE_WITNESS,
                description=(
                    f"Improving cycle detected: {predecessor} -> {node} "
                    f"still improves to {distance}"
                ),
            )
        )

    def count(self, kind: StepKind) -> int:
        """Return the number of recorded steps of ``kind``."""
        return sum(1 for step in self._steps if step.kind == kind)

    def freeze(self) -> Tuple[AlgorithmStep, ...]:
        """Return the recorded steps as an immutable tuple."""
        return tuple(self._steps)

    def _append(self, step: AlgorithmStep) -> AlgorithmStep:
        self._steps.append(step)
        return step

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[AlgorithmStep]:
        return iter(self._steps)


@dataclass(frozen=True)
class TraceFrame:
    """Display state after applying one step.

    Attributes:
        index: 0-based position of ``step`` in the trace.
        step: The step just applied.
        distances: Displayed distance per node.
        previous: Displayed predecessor per node.
        active_edge: Edge to highlight, set only for improvement steps.
    """

    index: int
    step: AlgorithmStep
    distances: Dict[NodeID, Distance]
    previous: Dict[NodeID, Optional[NodeID]]
    active_edge: Optional[Tuple[NodeID, NodeID]]


def replay(
    steps: Iterable[AlgorithmStep],
    node_ids: Iterable[NodeID],
    source: NodeID,
) -> Iterator[TraceFrame]:
    """Yield the display state after each step, in trace order.

    The initial state shows the source at distance 0 and every other node
    unreached, with no predecessors.

    Args:
        steps: Step trace, typically ``result.steps``.
        node_ids: Nodes to display.
        source: Source node of the run.

    Yields:
        One `TraceFrame` per step.
    """
    distances: Dict[NodeID, Distance] = {node: UNREACHED for node in node_ids}
    distances[source] = Distance.finite(0)
    previous: Dict[NodeID, Optional[NodeID]] = {node: None for node in distances}

    for index, step in enumerate(steps):
        distances[step.node] = step.distance
        previous[step.node] = step.chosen_predecessor
        active_edge = step.edge if step.kind == StepKind.IMPROVEMENT else None
        yield TraceFrame(
            index=index,
            step=step,
            distances=dict(distances),
            previous=dict(previous),
            active_edge=active_edge,
        )
