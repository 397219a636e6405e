"""costbench: pick a password-hashing cost level from measured latency."""

from costbench.config import BenchConfig
from costbench.core.recommend import Recommendation, recommend
from costbench.core.types import CostSummary, SweepConfig
from costbench.sweep import ProgressTick, run_sweep

__version__ = "0.1.0"
__all__ = [
    "BenchConfig",
    "CostSummary",
    "ProgressTick",
    "Recommendation",
    "SweepConfig",
    "recommend",
    "run_sweep",
]
