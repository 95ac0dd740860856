"""Runner configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RunnerConfig:
    """Immutable pacing and limits for a SearchRunner.

    Attributes:
        tps: Ticks per second for paced runs.
        max_ticks: Optional cap on ticks for run_until_done and run_paced.
    """

    tps: int = 20
    max_ticks: int | None = None

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ValueError(f"tps must be positive, got {self.tps}")
        if self.max_ticks is not None and self.max_ticks <= 0:
            raise ValueError(f"max_ticks must be positive, got {self.max_ticks}")

    @property
    def dt(self) -> float:
        return 1.0 / self.tps
