"""Behavioural patterns: when the author works and which files move together."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..models import ProjectData
from ..temporal.activity import activity_scale, day_distribution, hour_distribution
from ..temporal.coupling import FileCoupling, file_couplings
from .profile import DeveloperProfile, build_profile


@dataclass(frozen=True)
class PatternReport:
    profile: DeveloperProfile
    hour_counts: tuple[int, ...]
    day_counts: tuple[int, ...]
    couplings: tuple[FileCoupling, ...]

    @property
    def hour_scale(self) -> int:
        return activity_scale(self.hour_counts)

    @property
    def day_scale(self) -> int:
        return activity_scale(self.day_counts)


def build_patterns(
    project: ProjectData,
    tz: Optional[tzinfo] = None,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> PatternReport:
    commits = project.commits
    return PatternReport(
        profile=build_profile(project, tz, thresholds),
        hour_counts=tuple(hour_distribution(commits, tz)),
        day_counts=tuple(day_distribution(commits, tz)),
        couplings=tuple(file_couplings(commits, thresholds.coupling_min_count)),
    )
