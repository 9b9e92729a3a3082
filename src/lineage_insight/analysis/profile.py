"""Developer profile shown at the top of the patterns view."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..models import ProjectData
from ..temporal.activity import average_granularity, hour_distribution, peak_hours

MAX_PROFILE_LANGUAGES = 6


@dataclass(frozen=True)
class DeveloperProfile:
    languages: tuple[str, ...]
    peak_hours: tuple[int, ...]
    avg_granularity: float  # files per commit
    total_commits: int
    total_sessions: int
    assistant_percentage: float  # fraction, 0..1

    @property
    def peak_hours_label(self) -> str:
        if not self.peak_hours:
            return "-"
        return ", ".join(f"{h}:00" for h in self.peak_hours)


def build_profile(
    project: ProjectData,
    tz: Optional[tzinfo] = None,
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
) -> DeveloperProfile:
    commits = project.commits
    hours = hour_distribution(commits, tz)
    return DeveloperProfile(
        languages=project.repository.languages_detected[:MAX_PROFILE_LANGUAGES],
        peak_hours=tuple(peak_hours(hours, thresholds.peak_hour_count)),
        avg_granularity=average_granularity(commits),
        total_commits=len(commits),
        total_sessions=len(project.prompt_sessions),
        assistant_percentage=project.analytics.assistant_commit_percentage,
    )
