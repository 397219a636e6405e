"""costbench configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from costbench.core.types import SweepConfig

DEFAULT_PASSWORD = "correct-horse-battery-staple"


class BenchConfig(BaseModel):
    """Validated settings for one benchmark run."""

    model_config = ConfigDict(validate_default=True)

    start_cost: int = 10
    end_cost: int = 16
    password: str = DEFAULT_PASSWORD
    generate_length: int = Field(default=0, ge=0)
    iterations: int = 3
    hasher: str = Field(
        default_factory=lambda: os.environ.get("COSTBENCH_HASHER", "bcrypt"),
    )

    @field_validator("iterations")
    @classmethod
    def _check_iterations(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Iterations must be at least 1")
        return v

    @field_validator("hasher")
    @classmethod
    def _check_hasher(cls, v: str) -> str:
        from costbench.hashers import HASHERS

        if v not in HASHERS:
            raise ValueError(f"Unknown hasher {v!r} (choose from: {', '.join(sorted(HASHERS))})")
        return v

    @model_validator(mode="after")
    def _check_range(self) -> BenchConfig:
        from costbench.hashers import HASHERS

        domain = HASHERS[self.hasher]
        if self.start_cost < domain.min_cost:
            raise ValueError(f"Start cost must be at least {domain.min_cost}")
        if self.end_cost > domain.max_cost:
            raise ValueError(f"End cost must be at most {domain.max_cost}")
        if self.start_cost > self.end_cost:
            raise ValueError("Start cost must be less than or equal to end cost")
        return self

    @property
    def generated(self) -> bool:
        return self.generate_length > 0

    def to_sweep(self, payload: bytes) -> SweepConfig:
        return SweepConfig(
            start_cost=self.start_cost,
            end_cost=self.end_cost,
            iterations=self.iterations,
            payload=payload,
        )
