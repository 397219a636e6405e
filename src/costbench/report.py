"""Text and JSON rendering of sweep results."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from costbench.config import BenchConfig
from costbench.core.types import CostSummary
from costbench.sweep import ProgressTick

SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

_US = 1_000
_MS = 1_000_000
_S = 1_000_000_000

_COLUMNS = ("Cost", "Iterations", "Mean", "StdDev", "P25", "P75", "P95", "P99")


def format_duration(ns: int) -> str:
    """Human-readable duration: µs below 1ms, ms below 1s, seconds above."""
    if ns < _MS:
        return f"{float(ns // _US):.2f}µs"
    if ns < _S:
        return f"{(ns // _US) / 1000:.2f}ms"
    return f"{ns / _S:.2f}s"


def _table(rows: list[tuple[str, ...]], padding: int) -> list[str]:
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    gap = " " * padding
    return [gap.join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]


def render_report(config: BenchConfig, password: bytes, results: list[CostSummary]) -> str:
    """Configuration block, results table and per-cost analysis."""
    lines = ["Benchmark Configuration", "-----------------------"]
    source = "Generated (random)" if config.generated else "Provided"
    lines += _table(
        [
            ("Cost Range:", f"{config.start_cost} - {config.end_cost}"),
            ("Iterations:", f"{config.iterations} per cost level"),
            ("Password Length:", f"{len(password)} characters"),
            ("Password Source:", source),
            ("Hasher:", config.hasher),
        ],
        padding=2,
    )

    lines += ["", "Results", "-------", ""]
    rows = [_COLUMNS, tuple("-" * len(c) for c in _COLUMNS)]
    for r in results:
        rows.append(
            (
                str(r.cost),
                str(r.sample_count),
                format_duration(r.mean),
                format_duration(r.std_dev),
                format_duration(r.p25),
                format_duration(r.p75),
                format_duration(r.p95),
                format_duration(r.p99),
            )
        )
    lines += _table(rows, padding=3)

    lines += ["", "Analysis", "--------"]
    for r in results:
        lines.append(f"  Cost {r.cost}: {r.recommendation.advice}")

    return "\n".join(lines) + "\n"


def render_json(config: BenchConfig, results: list[CostSummary]) -> str:
    payload: dict[str, Any] = {
        "config": config.model_dump(exclude={"password"}),
        "results": [
            {**r.model_dump(), "recommendation": r.recommendation.value} for r in results
        ],
    }
    return json.dumps(payload, indent=2)


class Spinner:
    """Single-line progress indicator for interactive terminals."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream or sys.stderr

    def __call__(self, progress: ProgressTick) -> None:
        frame = SPINNER_FRAMES[progress.tick % len(SPINNER_FRAMES)]
        self._stream.write(
            f"\r{frame} Running: cost={progress.cost}, "
            f"iteration={progress.iteration}/{progress.iterations}    "
        )
        self._stream.flush()

    def clear(self) -> None:
        self._stream.write("\r\033[K")
        self._stream.flush()
