"""Feature ordering and lookups."""

from __future__ import annotations

from typing import Sequence

from ..models import Feature, ProjectData
from ..temporal.timestamps import parse_timestamp


def _start_key(feature: Feature) -> float:
    moment = parse_timestamp(feature.time_start)
    if moment is None:
        return float("-inf")
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.timestamp()


def features_by_recency(features: Sequence[Feature]) -> list[Feature]:
    """Features with the latest start first; unparsable starts sink to the end."""
    return sorted(features, key=_start_key, reverse=True)


def feature_titles(project: ProjectData) -> dict[int, str]:
    """cluster id -> display title, for resolving links from prompt sessions."""
    return {f.cluster_id: f.display_title for f in project.features}
