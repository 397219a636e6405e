"""Core Pydantic models for costbench."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from costbench.core.recommend import Recommendation, recommend

# Absolute cost domain accepted by the adaptive hashers.
MIN_COST = 4
MAX_COST = 31


@dataclass(frozen=True)
class SweepConfig:
    """What a single sweep runs. Trusted as-is by the sweep controller."""

    start_cost: int
    end_cost: int
    iterations: int
    payload: bytes

    @property
    def levels(self) -> range:
        return range(self.start_cost, self.end_cost + 1)


class CostSummary(BaseModel):
    """Statistical reduction of the samples taken at one cost level.

    All durations are integer nanoseconds.
    """

    model_config = ConfigDict(frozen=True)

    cost: int
    sample_count: int = Field(ge=1)
    mean: int = Field(ge=0)
    std_dev: int = Field(ge=0)
    p25: int
    p75: int
    p95: int
    p99: int
    samples: tuple[int, ...] = ()

    @property
    def recommendation(self) -> Recommendation:
        return recommend(self.mean)
