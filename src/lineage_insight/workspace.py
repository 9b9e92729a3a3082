"""The active project and its derived views.

A ``Workspace`` owns exactly one immutable snapshot at a time. Refresh
operations ask the upstream ``ProjectSource`` for new data and install it
only when the call succeeds in full; on failure the previous snapshot stays
active and the error is returned to the caller instead of raised.

Example:
    >>> workspace = Workspace(JsonSnapshotSource())
    >>> outcome = workspace.scan("exports/lineage.json")
    >>> if outcome.ok:
    ...     groups = workspace.prompts("week")
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .analysis.change_types import ChangeTypeShare, change_type_breakdown, project_change_type_totals
from .analysis.features import features_by_recency
from .analysis.functions import function_tree
from .analysis.grouping import GroupBy, SessionGroup, coerce_group_by, group_sessions
from .analysis.intent import IntentSummary, summarize_intent
from .analysis.patterns import PatternReport, build_patterns
from .analysis.timeline import TimelineFilter
from .cache import DerivationMemo
from .config import InsightConfig
from .exceptions import SnapshotError
from .logging_config import get_logger
from .models import Commit, Feature, ProjectData, WeeklyVelocity
from .sources import PathLike, ProjectSource
from .temporal.velocity import recent_velocity

logger = get_logger(__name__)


@dataclass(frozen=True)
class RefreshOutcome:
    """Result of an upstream call. ``error`` is set only when ``ok`` is False."""

    ok: bool
    error: Optional[str] = None
    deleted: int = 0

    @classmethod
    def failed(cls, error: Exception) -> RefreshOutcome:
        return cls(ok=False, error=str(error))


class Workspace:
    """Holds the active snapshot and serves memoized derived views."""

    def __init__(
        self,
        source: ProjectSource,
        config: Optional[InsightConfig] = None,
        memo: Optional[DerivationMemo] = None,
    ):
        self.source = source
        self.config = config or InsightConfig()
        self.memo = memo or DerivationMemo()
        self._snapshot: Optional[ProjectData] = None
        self._path: Optional[Path] = None

    @property
    def snapshot(self) -> Optional[ProjectData]:
        return self._snapshot

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def install(self, snapshot: ProjectData, path: Optional[PathLike] = None) -> None:
        """Make ``snapshot`` the active project in a single reference swap."""
        self._snapshot = snapshot
        if path is not None:
            self._path = Path(path)
        logger.debug(
            f"Installed snapshot for {snapshot.repository.name or snapshot.repository.path}"
        )

    # ── Upstream calls ────────────────────────────────────────────────

    def scan(self, path: PathLike) -> RefreshOutcome:
        try:
            snapshot = self.source.scan(path)
        except Exception as e:
            logger.warning(f"Scan failed for {path}: {e}")
            return RefreshOutcome.failed(e)
        self.install(snapshot, path)
        return RefreshOutcome(ok=True)

    def refresh_sessions(self) -> RefreshOutcome:
        """Re-fetch prompt sessions for the active project's path."""
        current = self._snapshot
        if current is None or self._path is None:
            return RefreshOutcome(ok=False, error="No project open")
        try:
            sessions = tuple(self.source.fetch_sessions(self._path))
        except Exception as e:
            logger.warning(f"Session refresh failed for {self._path}: {e}")
            return RefreshOutcome.failed(e)
        self.install(dataclasses.replace(current, prompt_sessions=sessions))
        return RefreshOutcome(ok=True)

    def delete_sessions(self) -> RefreshOutcome:
        """Delete persisted session records upstream, then clear them from view."""
        current = self._snapshot
        if current is None or self._path is None:
            return RefreshOutcome(ok=False, error="No project open")
        try:
            deleted = self.source.delete_sessions(self._path)
        except Exception as e:
            logger.warning(f"Session delete failed for {self._path}: {e}")
            return RefreshOutcome.failed(e)
        self.install(dataclasses.replace(current, prompt_sessions=()))
        return RefreshOutcome(ok=True, deleted=deleted)

    # ── Derived views ─────────────────────────────────────────────────

    def _require(self) -> ProjectData:
        if self._snapshot is None:
            raise SnapshotError("No project open")
        return self._snapshot

    def patterns(self) -> PatternReport:
        snapshot = self._require()
        return self.memo.get_or_compute(
            snapshot,
            "patterns",
            (self.config.timezone, self.config.thresholds),
            lambda: build_patterns(snapshot, self.config.tzinfo, self.config.thresholds),
        )

    def intent(self) -> IntentSummary:
        snapshot = self._require()
        return self.memo.get_or_compute(
            snapshot,
            "intent",
            self.config.thresholds,
            lambda: summarize_intent(snapshot, self.config.thresholds),
        )

    def timeline(self, commit_filter: Optional[TimelineFilter] = None) -> tuple[Commit, ...]:
        snapshot = self._require()
        commit_filter = commit_filter or TimelineFilter()
        return self.memo.get_or_compute(
            snapshot,
            "timeline",
            commit_filter,
            lambda: tuple(commit_filter.apply(snapshot.commits)),
        )

    def prompts(self, group_by: Union[GroupBy, str, None] = None) -> tuple[SessionGroup, ...]:
        snapshot = self._require()
        level = coerce_group_by(group_by or self.config.default_group_by)
        return self.memo.get_or_compute(
            snapshot,
            "prompts",
            (level, self.config.timezone),
            lambda: tuple(group_sessions(snapshot.prompt_sessions, level, self.config.tzinfo)),
        )

    def features(self) -> tuple[Feature, ...]:
        snapshot = self._require()
        return self.memo.get_or_compute(
            snapshot, "features", None, lambda: tuple(features_by_recency(snapshot.features))
        )

    def functions(self) -> dict[str, tuple[str, ...]]:
        """Fresh mapping per call; the memoized names are tuples."""
        snapshot = self._require()
        tree = self.memo.get_or_compute(
            snapshot,
            "functions",
            None,
            lambda: {path: tuple(names) for path, names in function_tree(snapshot.commits).items()},
        )
        return dict(tree)

    def change_types(self) -> tuple[ChangeTypeShare, ...]:
        snapshot = self._require()
        return self.memo.get_or_compute(
            snapshot,
            "change_types",
            None,
            lambda: tuple(change_type_breakdown(project_change_type_totals(snapshot))),
        )

    def velocity(self) -> tuple[WeeklyVelocity, ...]:
        snapshot = self._require()
        weeks = self.config.thresholds.velocity_weeks
        return self.memo.get_or_compute(
            snapshot, "velocity", weeks, lambda: tuple(recent_velocity(snapshot.analytics, weeks))
        )
