"""Tagged path distances and the mode-dependent comparison strategy.

A :class:`Distance` is either finite or unreached. It never holds a float
infinity: what "unreached" means (worse than any finite value) is decided by
the :class:`Objective` for the current :class:`OptimizationMode`, so the
engine never does arithmetic on sentinels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bfpaths.types.base import Cost, OptimizationMode


@dataclass(frozen=True)
class Distance:
    """Best known path weight to a node.

    Attributes:
        value: Finite path weight, or ``None`` when the node is unreached.
    """

    value: Optional[Cost] = None

    @classmethod
    def finite(cls, value: Cost) -> Distance:
        """Return a finite distance."""
        if value is None:
            raise ValueError("A finite distance needs a numeric value")
        return cls(value)

    @property
    def is_finite(self) -> bool:
        return self.value is not None

    def plus(self, weight: Cost) -> Distance:
        """Return this distance extended by one edge of ``weight``.

        Raises:
            ValueError: If the distance is unreached.
        """
        if self.value is None:
            raise ValueError("Cannot extend an unreached distance")
        return Distance(self.value + weight)

    def to_json(self) -> Optional[Cost]:
        """Return the finite value, or ``None`` for unreached."""
        return self.value

    def __str__(self) -> str:
        return "unreached" if self.value is None else str(self.value)


#: The distance of every node other than the source before relaxation.
UNREACHED = Distance()


@dataclass(frozen=True)
class Objective:
    """Comparison strategy selected from an :class:`OptimizationMode`.

    Unreached is worse than every finite distance under both modes.
    """

    mode: OptimizationMode

    def prefers(self, a: Cost, b: Cost) -> bool:
        """Return True if weight ``a`` is strictly better than ``b``."""
        if self.mode == OptimizationMode.MINIMIZE:
            return a < b
        return a > b

    def improves(self, candidate: Distance, incumbent: Distance) -> bool:
        """Return True if ``candidate`` strictly improves on ``incumbent``."""
        if candidate.value is None:
            return False
        if incumbent.value is None:
            return True
        return self.prefers(candidate.value, incumbent.value)

    def ties(self, candidate: Distance, incumbent: Distance) -> bool:
        """Return True if both distances are finite and exactly equal."""
        return (
            candidate.value is not None
            and incumbent.value is not None
            and candidate.value == incumbent.value
        )
