"""Tests for report rendering and the progress spinner."""

import io
import json

import pytest

from costbench.config import BenchConfig
from costbench.core.stats import summarize
from costbench.report import SPINNER_FRAMES, Spinner, format_duration, render_json, render_report
from costbench.sweep import ProgressTick

MS = 1_000_000


@pytest.fixture()
def cfg() -> BenchConfig:
    return BenchConfig(start_cost=10, end_cost=11, iterations=2, hasher="bcrypt")


@pytest.fixture()
def results():
    return [
        summarize(10, [60 * MS, 80 * MS]),
        summarize(11, [1200 * MS, 1400 * MS]),
    ]


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("ns", "expected"),
        [
            (0, "0.00µs"),
            (999_999, "999.00µs"),
            (1 * MS, "1.00ms"),
            (17_500_000, "17.50ms"),
            (999_999_999, "1000.00ms"),
            (1000 * MS, "1.00s"),
            (2_346 * MS, "2.35s"),
        ],
    )
    def test_units(self, ns, expected):
        assert format_duration(ns) == expected


class TestRenderReport:
    def test_sections(self, cfg, results):
        text = render_report(cfg, b"correct-horse-battery-staple", results)
        assert "Benchmark Configuration" in text
        assert "Cost Range:" in text and "10 - 11" in text
        assert "28 characters" in text
        assert "Provided" in text
        assert "Results" in text
        assert "Analysis" in text

    def test_table_rows(self, cfg, results):
        lines = render_report(cfg, b"pw", results).splitlines()
        header = next(line for line in lines if line.split()[:2] == ["Cost", "Iterations"])
        assert header.split() == ["Cost", "Iterations", "Mean", "StdDev", "P25", "P75", "P95", "P99"]
        row = next(line for line in lines if line.startswith("10 "))
        assert row.split()[:3] == ["10", "2", "70.00ms"]

    def test_analysis_lines(self, cfg, results):
        text = render_report(cfg, b"pw", results)
        assert "  Cost 10: Fast - consider higher cost for sensitive data" in text
        assert "  Cost 11: Too slow - not recommended for production" in text

    def test_generated_source(self, results):
        cfg = BenchConfig(start_cost=10, end_cost=11, generate_length=12, hasher="bcrypt")
        assert "Generated (random)" in render_report(cfg, b"x" * 12, results)


class TestRenderJson:
    def test_roundtrips_through_json(self, cfg, results):
        data = json.loads(render_json(cfg, results))
        assert "password" not in data["config"]
        assert [r["cost"] for r in data["results"]] == [10, 11]
        assert data["results"][0]["mean"] == 70 * MS
        assert data["results"][1]["recommendation"] == "too slow"


class TestSpinner:
    def test_frame_follows_tick(self):
        out = io.StringIO()
        spinner = Spinner(out)
        spinner(ProgressTick(cost=12, iteration=2, iterations=5, tick=3))
        assert out.getvalue().startswith(f"\r{SPINNER_FRAMES[3]} Running: cost=12, iteration=2/5")

    def test_clear(self):
        out = io.StringIO()
        Spinner(out).clear()
        assert out.getvalue() == "\r\033[K"
