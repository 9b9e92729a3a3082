"""Commit activity by hour of day and day of week."""

from __future__ import annotations

from datetime import tzinfo
from typing import Optional, Sequence

from ..models import Commit
from .timestamps import parse_timestamp

HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def hour_distribution(commits: Sequence[Commit], tz: Optional[tzinfo] = None) -> list[int]:
    """Count commits per local hour of day (index 0-23).

    Commits whose timestamp cannot be parsed are left out entirely, so the
    counts sum to the number of parseable commits.
    """
    counts = [0] * HOURS_PER_DAY
    for commit in commits:
        moment = parse_timestamp(commit.timestamp, tz)
        if moment is None:
            continue
        counts[moment.hour] += 1
    return counts


def day_distribution(commits: Sequence[Commit], tz: Optional[tzinfo] = None) -> list[int]:
    """Count commits per local weekday, Monday at index 0."""
    counts = [0] * DAYS_PER_WEEK
    for commit in commits:
        moment = parse_timestamp(commit.timestamp, tz)
        if moment is None:
            continue
        counts[moment.weekday()] += 1
    return counts


def peak_hours(hour_counts: Sequence[int], n: int) -> list[int]:
    """Return up to ``n`` busiest hours in ascending hour order.

    Ranking is by count, earlier hour first on ties (sorted() is stable).
    Hours with no activity are never reported.
    """
    ranked = sorted(range(len(hour_counts)), key=lambda hour: -hour_counts[hour])
    top = [hour for hour in ranked[: max(n, 0)] if hour_counts[hour] > 0]
    return sorted(top)


def average_granularity(commits: Sequence[Commit]) -> float:
    """Mean files changed per commit, rounded to one decimal place."""
    if not commits:
        return 0.0
    total_files = sum(len(c.files_changed) for c in commits)
    return round(total_files / len(commits), 1)


def activity_scale(counts: Sequence[int]) -> int:
    """Normalisation denominator for heatmaps and bars (never below 1)."""
    return max(max(counts, default=0), 1)
