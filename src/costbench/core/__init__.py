"""Measurement core: data model, statistics, recommendation policy."""

from costbench.core.recommend import Recommendation, recommend
from costbench.core.stats import mean, percentile, std_dev, summarize
from costbench.core.types import MAX_COST, MIN_COST, CostSummary, SweepConfig

__all__ = [
    "MAX_COST",
    "MIN_COST",
    "CostSummary",
    "Recommendation",
    "SweepConfig",
    "mean",
    "percentile",
    "recommend",
    "std_dev",
    "summarize",
]
