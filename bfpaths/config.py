"""Configuration for the path engine."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class EngineConfig:
    """Tunables for a single engine run.

    Attributes:
        early_exit: Stop relaxing after the first round without an improvement.
            Disabling it forces all ``|V| - 1`` rounds; results are identical.
        validate_graph: Re-check the graph snapshot before running and raise
            ``InvalidGraph`` on violations.
        max_paths: Upper bound on enumerated optimal paths. ``None`` enumerates
            every optimal path.
    """

    early_exit: bool = True
    validate_graph: bool = True
    max_paths: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max_paths is not None and self.max_paths < 1:
            raise ValueError(f"max_paths must be >= 1, got {self.max_paths}")

    def with_overrides(self, **changes) -> "EngineConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


# Global default configuration
ENGINE_CONFIG = EngineConfig()
