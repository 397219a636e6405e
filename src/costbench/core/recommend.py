"""Advisory cost-level recommendation from a mean hashing duration."""

from __future__ import annotations

from enum import Enum

_MS = 1_000_000  # nanoseconds
_S = 1_000 * _MS


class Recommendation(str, Enum):
    """Qualitative latency bands, in ascending order."""

    fast = "fast"
    balanced = "balanced"
    acceptable = "acceptable"
    slow = "slow"
    too_slow = "too slow"

    @property
    def advice(self) -> str:
        return _ADVICE[self]


_ADVICE = {
    Recommendation.fast: "Fast - consider higher cost for sensitive data",
    Recommendation.balanced: "Good - balanced security and performance",
    Recommendation.acceptable: "Acceptable - may impact UX under load",
    Recommendation.slow: "Slow - may cause timeouts under load",
    Recommendation.too_slow: "Too slow - not recommended for production",
}

# (exclusive upper bound in ns, band), checked in order
_BANDS: tuple[tuple[int, Recommendation], ...] = (
    (100 * _MS, Recommendation.fast),
    (250 * _MS, Recommendation.balanced),
    (500 * _MS, Recommendation.acceptable),
    (1 * _S, Recommendation.slow),
)


def recommend(mean: int) -> Recommendation:
    """Classify a mean duration (ns). First band whose bound exceeds *mean* wins."""
    for bound, band in _BANDS:
        if mean < bound:
            return band
    return Recommendation.too_slow
