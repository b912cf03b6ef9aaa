"""Base aliases and enums shared by the path engine."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable, Union

#: Numeric edge weight or path weight.
Cost = Union[int, float]

#: Caller-assigned node identifier (string or small integer in practice).
NodeID = Hashable


class OptimizationMode(IntEnum):
    """Whether optimal means minimum or maximum total path weight."""

    #: Shortest paths; improving cycles have negative weight.
    MINIMIZE = 1
    #: Longest (critical) paths; improving cycles have positive weight.
    MAXIMIZE = 2

    @classmethod
    def from_string(cls, value: str) -> "OptimizationMode":
        """Parse a mode name.

        Accepts ``minimize``/``min`` and ``maximize``/``max`` in any case.

        Raises:
            ValueError: If the string names no mode.
        """
        key = value.strip().upper()
        aliases = {"MIN": "MINIMIZE", "MAX": "MAXIMIZE"}
        try:
            return cls[aliases.get(key, key)]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid optimization mode '{value}'. Valid values are: {valid}"
            ) from None


class StepKind(IntEnum):
    """Kind of event recorded in the step trace."""

    #: The node's distance strictly improved; predecessors were reset.
    IMPROVEMENT = 1
    #: Another predecessor realises the node's current distance.
    TIE = 2
    #: An edge still improves after the relaxation rounds.
    CYCLE_WITNESS = 3
