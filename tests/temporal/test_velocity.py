"""Tests for the weekly velocity series."""

import pytest

from lineage_insight.models import Analytics, WeeklyVelocity
from lineage_insight.temporal.velocity import recent_velocity, velocity_bars, velocity_scale


def make_analytics(commit_counts: list[int]) -> Analytics:
    return Analytics(
        velocity_by_week=tuple(
            WeeklyVelocity(week=f"2024-W{i + 1:02d}", commits=c, features=1)
            for i, c in enumerate(commit_counts)
        )
    )


class TestRecentVelocity:
    def test_keeps_last_twelve(self):
        analytics = make_analytics(list(range(20)))
        recent = recent_velocity(analytics)
        assert len(recent) == 12
        assert recent[0].week == "2024-W09"
        assert recent[-1].week == "2024-W20"

    def test_shorter_series_unchanged(self):
        analytics = make_analytics([1, 2, 3])
        assert recent_velocity(analytics) == list(analytics.velocity_by_week)

    def test_empty(self):
        assert recent_velocity(Analytics()) == []


class TestVelocityScale:
    def test_floor_one_when_empty_or_zero(self):
        assert velocity_scale([]) == 1
        assert velocity_scale(list(make_analytics([0, 0]).velocity_by_week)) == 1

    def test_max_commits(self):
        assert velocity_scale(list(make_analytics([3, 9, 4]).velocity_by_week)) == 9

    def test_bars_normalized(self):
        bars = velocity_bars(list(make_analytics([2, 4, 0]).velocity_by_week))
        assert bars == [pytest.approx(0.5), pytest.approx(1.0), 0.0]
