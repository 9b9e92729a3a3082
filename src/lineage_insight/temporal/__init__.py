"""Temporal analysis: activity distributions, co-change and velocity."""

from .activity import (
    DAY_LABELS,
    activity_scale,
    average_granularity,
    day_distribution,
    hour_distribution,
    peak_hours,
)
from .coupling import FileCoupling, file_couplings
from .timestamps import parse_timestamp
from .velocity import recent_velocity, velocity_bars, velocity_scale

__all__ = [
    "DAY_LABELS",
    "FileCoupling",
    "activity_scale",
    "average_granularity",
    "day_distribution",
    "file_couplings",
    "hour_distribution",
    "parse_timestamp",
    "peak_hours",
    "recent_velocity",
    "velocity_bars",
    "velocity_scale",
]
