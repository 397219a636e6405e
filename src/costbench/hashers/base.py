"""Hashing primitive protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HashPrimitive(Protocol):
    """Interface for adaptive password hashers with a cost knob.

    Execution time must grow super-linearly with ``cost`` and must not be
    served from any cache of earlier results.
    """

    name: str
    min_cost: int
    max_cost: int

    def hash(self, payload: bytes, cost: int) -> bytes:
        """Hash *payload* at work factor *cost*. Raises on failure."""
        ...
