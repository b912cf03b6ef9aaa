"""Enumeration of every optimal path from the predecessor sets.

The predecessor sets of a certified run form a DAG oriented toward the source,
except for zero-weight cycles, whose mutual ties would let a naive walk loop.
Nodes already on the current path are therefore never re-entered, so every
emitted path is simple and enumeration always terminates.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

from bfpaths.logging import get_logger
from bfpaths.types.base import NodeID
from bfpaths.types.dto import Path

logger = get_logger(__name__)


def resolve_to_paths(
    src_node: NodeID,
    dst_node: NodeID,
    pred: Mapping[NodeID, Sequence[NodeID]],
) -> Iterator[Path]:
    """Walk predecessor sets backward from ``dst_node`` to ``src_node``.

    Depth-first, visiting predecessors in their stored order, with an explicit
    stack instead of recursion. The output order equals that of the recursive
    formulation: push ``dst_node``; whenever the top is ``src_node`` emit the
    reversed stack and backtrack; otherwise push each predecessor in turn.

    Args:
        src_node: Source node of the run.
        dst_node: Target node to reconstruct paths to.
        pred: Predecessors encoded as ``{node: (pred_1, pred_2, ...)}``.

    Yields:
        Paths as tuples of node ids from ``src_node`` to ``dst_node``.
    """
    # Each stack entry is [node, index of the next predecessor to try].
    stack: List[List] = [[dst_node, 0]]
    on_path = {dst_node}
    top_pointer = 0
    while top_pointer >= 0:
        node, nbr_idx = stack[top_pointer]
        if node == src_node:
            yield tuple(entry[0] for entry in reversed(stack[: top_pointer + 1]))
            on_path.discard(node)
            top_pointer -= 1
            continue

        node_preds = pred.get(node, ())
        if len(node_preds) > nbr_idx:
            stack[top_pointer][1] = nbr_idx + 1
            next_node = node_preds[nbr_idx]
            if next_node in on_path:
                continue
            on_path.add(next_node)
            top_pointer += 1
            if top_pointer == len(stack):
                stack.append([next_node, 0])
            else:
                stack[top_pointer][:] = [next_node, 0]
        else:
            on_path.discard(node)
            top_pointer -= 1


def enumerate_optimal_paths(
    src_node: NodeID,
    dst_node: NodeID,
    pred: Mapping[NodeID, Sequence[NodeID]],
    max_paths: Optional[int] = None,
) -> Tuple[Path, ...]:
    """Return every optimal path, optionally capped at ``max_paths``.

    Args:
        src_node: Source node of the run.
        dst_node: Target node, assumed reachable.
        pred: Predecessor sets of a run without improving cycles.
        max_paths: Maximum number of paths to return; None for all.

    Returns:
        Paths in depth-first discovery order.
    """
    paths = resolve_to_paths(src_node, dst_node, pred)
    if max_paths is None:
        return tuple(paths)

    found = tuple(islice(paths, max_paths + 1))
    if len(found) > max_paths:
        logger.warning(
            f"More than {max_paths} optimal path(s) from '{src_node}' to "
            f"'{dst_node}'; returning the first {max_paths}"
        )
        found = found[:max_paths]
    return found
