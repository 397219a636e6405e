"""Sweep controller: timed hashing runs across a range of cost levels.

Each cost level is hashed ``iterations`` times, strictly one call after
another, and the elapsed times are reduced into one :class:`CostSummary`.
Work grows with ``2 ** cost``, so the last levels of a sweep dominate its
runtime.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from costbench.core.stats import summarize
from costbench.core.types import CostSummary, SweepConfig
from costbench.exceptions import HashInvocationError
from costbench.hashers.base import HashPrimitive

log = logging.getLogger(__name__)

Clock = Callable[[], int]


@dataclass(frozen=True)
class ProgressTick:
    """Emitted once per invocation, before the timed call starts."""

    cost: int
    iteration: int
    iterations: int
    tick: int


def run_sweep(
    config: SweepConfig,
    hasher: HashPrimitive,
    *,
    clock: Clock = time.perf_counter_ns,
    on_progress: Callable[[ProgressTick], None] | None = None,
) -> list[CostSummary]:
    """Benchmark *hasher* at every cost in ``[start_cost, end_cost]``.

    *clock* returns a monotonic timestamp in nanoseconds. Any exception from
    the hasher ends the sweep with :class:`HashInvocationError`; summaries
    of the levels finished so far travel on the error as ``completed``.
    """
    results: list[CostSummary] = []
    tick = 0

    log.info(
        "Sweeping %s cost %d..%d, %d iteration(s) per level",
        hasher.name,
        config.start_cost,
        config.end_cost,
        config.iterations,
    )

    for cost in config.levels:
        durations: list[int] = []

        for iteration in range(1, config.iterations + 1):
            tick += 1
            if on_progress is not None:
                on_progress(ProgressTick(cost, iteration, config.iterations, tick))

            start = clock()
            try:
                hasher.hash(config.payload, cost)
            except Exception as exc:
                log.debug("Hash failed at cost=%d iteration=%d", cost, iteration)
                raise HashInvocationError(cost, iteration, exc, completed=results) from exc
            durations.append(clock() - start)

        summary = summarize(cost, durations)
        log.debug("cost=%d mean=%dns std_dev=%dns", cost, summary.mean, summary.std_dev)
        results.append(summary)

    return results
