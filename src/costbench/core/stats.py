"""Timing statistics: mean, sample standard deviation, percentiles."""

from __future__ import annotations

import math
from collections.abc import Sequence

from costbench.core.types import CostSummary

PERCENTILES = (25, 75, 95, 99)


def mean(samples: Sequence[int]) -> int:
    """Arithmetic mean in whole nanoseconds.

    Sums in integers and divides last so long runs don't lose precision.
    """
    if not samples:
        raise ValueError("mean of an empty sample set")
    return sum(samples) // len(samples)


def std_dev(samples: Sequence[int], mean: int) -> int:
    """Bessel-corrected sample standard deviation, 0 for fewer than 2 samples."""
    if len(samples) < 2:
        return 0

    sum_squares = 0.0
    for x in samples:
        diff = float(x - mean)
        sum_squares += diff * diff

    variance = sum_squares / (len(samples) - 1)
    return int(math.sqrt(variance))


def percentile(sorted_samples: Sequence[int], p: float) -> int:
    """Linear interpolation between the order statistics around rank ``p``.

    *sorted_samples* must be ascending. ``p`` is in ``[0, 100]``.
    """
    n = len(sorted_samples)
    if n == 0:
        raise ValueError("percentile of an empty sample set")
    if n == 1:
        return sorted_samples[0]

    rank = (p / 100) * (n - 1)
    lower = int(math.floor(rank))
    upper = lower + 1

    if upper >= n:
        return sorted_samples[-1]

    weight = rank - lower
    return int(sorted_samples[lower] * (1 - weight) + sorted_samples[upper] * weight)


def summarize(cost: int, samples: Sequence[int]) -> CostSummary:
    """Reduce the samples taken at *cost* into a :class:`CostSummary`.

    *samples* is left untouched; percentiles are taken from a sorted copy.
    """
    ordered = sorted(samples)
    avg = mean(ordered)
    p25, p75, p95, p99 = (percentile(ordered, p) for p in PERCENTILES)
    return CostSummary(
        cost=cost,
        sample_count=len(samples),
        mean=avg,
        std_dev=std_dev(ordered, avg),
        p25=p25,
        p75=p75,
        p95=p95,
        p99=p99,
        samples=tuple(samples),
    )
