"""Change-type summaries for features and whole projects."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Mapping, Optional

from ..models import ChangeType, Feature, ProjectData

CHANGE_TYPE_LABELS: dict[str, str] = {
    ChangeType.NEW_FEATURE.value: "Feature",
    ChangeType.BUG_FIX.value: "Bug Fix",
    ChangeType.REFACTOR.value: "Refactor",
    ChangeType.PERFORMANCE.value: "Performance",
    ChangeType.STYLE.value: "Style",
    ChangeType.TEST.value: "Test",
    ChangeType.DOCUMENTATION.value: "Docs",
}

CHANGE_TYPE_COLORS: dict[str, str] = {
    ChangeType.NEW_FEATURE.value: "#34d399",
    ChangeType.BUG_FIX.value: "#f87171",
    ChangeType.REFACTOR.value: "#60a5fa",
    ChangeType.PERFORMANCE.value: "#fbbf24",
    ChangeType.STYLE.value: "#71717a",
    ChangeType.TEST.value: "#a78bfa",
    ChangeType.DOCUMENTATION.value: "#2dd4bf",
}

FALLBACK_LABEL = "Other"
FALLBACK_COLOR = "#71717a"
UNCLASSIFIED_LABEL = "Unclassified"


@dataclass(frozen=True)
class ChangeTypeShare:
    change_type: str
    count: int
    share: float  # fraction of all counted commits, 0.0 when there are none

    @property
    def label(self) -> str:
        return change_type_label(self.change_type)

    @property
    def color(self) -> str:
        return change_type_color(self.change_type)


def change_type_label(change_type: Optional[str]) -> str:
    if change_type is None:
        return UNCLASSIFIED_LABEL
    return CHANGE_TYPE_LABELS.get(change_type, FALLBACK_LABEL)


def change_type_color(change_type: Optional[str]) -> str:
    if change_type is None:
        return FALLBACK_COLOR
    return CHANGE_TYPE_COLORS.get(change_type, FALLBACK_COLOR)


def dominant_change_type(feature: Feature) -> Optional[str]:
    """The most frequent change type of a feature, None when it has no distribution.

    Equal counts keep the key that appears first in the distribution.
    """
    best: Optional[str] = None
    best_count = 0
    for change_type, count in feature.change_type_distribution.items():
        if best is None or count > best_count:
            best, best_count = change_type, count
    return best


def change_type_breakdown(totals: Mapping[str, int]) -> list[ChangeTypeShare]:
    """Totals sorted by count descending, each with its share of the whole.

    Unknown keys are kept and contribute to the total.
    """
    total = sum(totals.values())
    ordered = sorted(totals.items(), key=lambda item: -item[1])
    return [
        ChangeTypeShare(change_type=key, count=count, share=count / total if total > 0 else 0.0)
        for key, count in ordered
    ]


def project_change_type_totals(project: ProjectData) -> dict[str, int]:
    """Upstream change-type totals, or counts over the commits when none were supplied."""
    if project.analytics.change_type_totals:
        return dict(project.analytics.change_type_totals)
    return dict(Counter(c.change_type for c in project.commits))
