"""Tests for the cost-level recommendation policy."""

import pytest

from costbench.core.recommend import Recommendation, recommend
from costbench.core.stats import summarize

MS = 1_000_000


class TestRecommend:
    @pytest.mark.parametrize(
        ("mean", "expected"),
        [
            (0, Recommendation.fast),
            (99_999_000, Recommendation.fast),
            (100 * MS, Recommendation.balanced),
            (249_999_000, Recommendation.balanced),
            (250 * MS, Recommendation.acceptable),
            (499_999_999, Recommendation.acceptable),
            (500 * MS, Recommendation.slow),
            (999_999_999, Recommendation.slow),
            (1000 * MS, Recommendation.too_slow),
            (60_000 * MS, Recommendation.too_slow),
        ],
    )
    def test_bands(self, mean, expected):
        assert recommend(mean) is expected

    def test_labels(self):
        assert [r.value for r in Recommendation] == [
            "fast",
            "balanced",
            "acceptable",
            "slow",
            "too slow",
        ]

    def test_every_band_has_advice(self):
        for r in Recommendation:
            assert r.advice

    def test_summary_recommendation_follows_mean(self):
        s = summarize(12, [200 * MS, 300 * MS])
        assert s.mean == 250 * MS
        assert s.recommendation is Recommendation.acceptable
        assert s.recommendation.advice == "Acceptable - may impact UX under load"
