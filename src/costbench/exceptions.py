"""costbench exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from costbench.core.types import CostSummary


class CostBenchError(Exception):
    """Base exception for all costbench errors."""


class ConfigError(CostBenchError):
    """Raised on invalid configuration."""


class HashInvocationError(CostBenchError):
    """Raised when the hashing primitive fails mid-sweep.

    The sweep is over at that point. ``completed`` holds the summaries of
    the cost levels that finished before the failure; nothing is kept for
    the level that was in progress.
    """

    def __init__(
        self,
        cost: int,
        iteration: int,
        reason: BaseException,
        completed: list[CostSummary] | None = None,
    ):
        self.cost = cost
        self.iteration = iteration
        self.reason = reason
        self.completed = list(completed or [])
        super().__init__(f"Error generating hash (cost={cost}, iteration={iteration}): {reason}")
