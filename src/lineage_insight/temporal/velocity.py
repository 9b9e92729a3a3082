"""Weekly velocity series for charting."""

from typing import Sequence

from ..models import Analytics, WeeklyVelocity

DEFAULT_VELOCITY_WEEKS = 12


def recent_velocity(analytics: Analytics, weeks: int = DEFAULT_VELOCITY_WEEKS) -> list[WeeklyVelocity]:
    """The trailing ``weeks`` entries of the upstream weekly series, unchanged."""
    series = list(analytics.velocity_by_week)
    return series[-weeks:] if weeks > 0 else []


def velocity_scale(entries: Sequence[WeeklyVelocity]) -> int:
    """Largest weekly commit count, floored at 1 so it can divide."""
    return max(max((e.commits for e in entries), default=0), 1)


def velocity_bars(entries: Sequence[WeeklyVelocity]) -> list[float]:
    """Bar height of each week relative to the busiest week (0.0-1.0)."""
    scale = velocity_scale(entries)
    return [e.commits / scale for e in entries]
