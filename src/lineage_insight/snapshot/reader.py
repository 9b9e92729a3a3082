"""Decode project snapshots exported by the upstream extractor.

The exporter writes camelCase JSON (``authorName``, ``filesChanged``...);
older exports use snake_case. Both spellings are accepted for every field.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from ..exceptions import SnapshotLoadError
from ..logging_config import get_logger
from ..models import (
    Analytics,
    Commit,
    DateRange,
    Feature,
    FileChange,
    FunctionChange,
    ProjectData,
    PromptSession,
    Repository,
    SubFeature,
    TokenUsage,
    WeeklyVelocity,
)

logger = get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _get(data: Mapping[str, Any], *names: str, default: Any = None) -> Any:
    """Return the first present key among camelCase names and their snake_case forms."""
    for name in names:
        if name in data:
            return data[name]
        snake = _snake(name)
        if snake in data:
            return data[snake]
    return default


def _strings(value: Optional[Sequence[Any]]) -> tuple[str, ...]:
    return tuple(str(v) for v in value or ())


def _ints(value: Optional[Sequence[Any]]) -> tuple[int, ...]:
    return tuple(int(v) for v in value or ())


def function_change_from_dict(data: Mapping[str, Any]) -> FunctionChange:
    return FunctionChange(
        name=str(_get(data, "name", default="")),
        lines_added=int(_get(data, "linesAdded", default=0)),
        lines_removed=int(_get(data, "linesRemoved", default=0)),
        diff_text=str(_get(data, "diffText", default="")),
    )


def file_change_from_dict(data: Mapping[str, Any]) -> FileChange:
    return FileChange(
        path=str(_get(data, "path", default="")),
        lines_added=int(_get(data, "linesAdded", default=0)),
        lines_removed=int(_get(data, "linesRemoved", default=0)),
        functions=tuple(function_change_from_dict(f) for f in _get(data, "functions", default=())),
    )


def commit_from_dict(data: Mapping[str, Any]) -> Commit:
    return Commit(
        hash=str(data["hash"]),
        timestamp=str(_get(data, "timestamp", default="")),
        author_name=str(_get(data, "authorName", default="")),
        author_email=str(_get(data, "authorEmail", default="")),
        subject=str(_get(data, "subject", default="")),
        body=str(_get(data, "body", default="")),
        is_assistant=bool(_get(data, "isAssistant", "isClaudeCode", default=False)),
        session_id=_get(data, "sessionId"),
        change_type=str(_get(data, "changeType", default="new_feature")),
        change_type_confidence=float(_get(data, "changeTypeConfidence", default=0.0)),
        cluster_id=int(_get(data, "clusterId", default=-1)),
        files_changed=tuple(
            file_change_from_dict(f) for f in _get(data, "filesChanged", default=())
        ),
    )


def sub_feature_from_dict(data: Mapping[str, Any]) -> SubFeature:
    return SubFeature(
        prompt_text=str(_get(data, "promptText", default="")),
        session_id=str(_get(data, "sessionId", default="")),
        prompt_index=int(_get(data, "promptIndex", default=0)),
        timestamp=str(_get(data, "timestamp", default="")),
        time_end=_get(data, "timeEnd"),
        commit_hashes=_strings(_get(data, "commitHashes")),
        files_written=_strings(_get(data, "filesWritten")),
        lines_added=int(_get(data, "linesAdded", default=0)),
        lines_removed=int(_get(data, "linesRemoved", default=0)),
        change_type=str(_get(data, "changeType", default="new_feature")),
        model=_get(data, "model"),
    )


def feature_from_dict(data: Mapping[str, Any]) -> Feature:
    distribution = _get(data, "changeTypeDistribution", default={}) or {}
    return Feature(
        cluster_id=int(_get(data, "clusterId")),
        auto_label=str(_get(data, "autoLabel", default="")),
        title=_get(data, "title"),
        narrative=_get(data, "narrative"),
        intent=_get(data, "intent"),
        key_decisions=_strings(_get(data, "keyDecisions")),
        commit_hashes=_strings(_get(data, "commitHashes")),
        time_start=str(_get(data, "timeStart", default="")),
        time_end=str(_get(data, "timeEnd", default="")),
        functions_touched=_strings(_get(data, "functionsTouched")),
        total_lines_added=int(_get(data, "totalLinesAdded", default=0)),
        total_lines_removed=int(_get(data, "totalLinesRemoved", default=0)),
        primary_files=_strings(_get(data, "primaryFiles")),
        change_type_distribution={str(k): int(v) for k, v in distribution.items()},
        dependencies=_ints(_get(data, "dependencies")),
        sub_features=tuple(sub_feature_from_dict(s) for s in _get(data, "subFeatures", default=())),
    )


def prompt_session_from_dict(data: Mapping[str, Any]) -> PromptSession:
    usage = _get(data, "tokenUsage", default={}) or {}
    return PromptSession(
        session_id=str(_get(data, "sessionId", default="")),
        prompt_text=str(_get(data, "promptText", default="")),
        timestamp=str(_get(data, "timestamp", default="")),
        time_end=_get(data, "timeEnd"),
        associated_commit_hashes=_strings(_get(data, "associatedCommitHashes")),
        associated_feature_ids=_ints(_get(data, "associatedFeatureIds")),
        similarity_score=float(_get(data, "similarityScore", default=0.0)),
        scope_match=float(_get(data, "scopeMatch", default=0.0)),
        intent=_get(data, "intent"),
        files_touched=_strings(_get(data, "filesTouched")),
        files_written=_strings(_get(data, "filesWritten")),
        tool_call_count=int(_get(data, "toolCallCount", default=0)),
        model=_get(data, "model"),
        token_usage=TokenUsage(
            input_tokens=int(_get(usage, "inputTokens", default=0)),
            output_tokens=int(_get(usage, "outputTokens", default=0)),
            cache_read_tokens=int(_get(usage, "cacheReadTokens", default=0)),
        ),
    )


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def analytics_from_dict(data: Mapping[str, Any]) -> Analytics:
    totals = _get(data, "changeTypeTotals", default={}) or {}
    pattern_count = _get(data, "patternCount")
    return Analytics(
        total_features=int(_get(data, "totalFeatures", default=0)),
        total_functions_modified=int(_get(data, "totalFunctionsModified", default=0)),
        total_prompts_detected=int(_get(data, "totalPromptsDetected", default=0)),
        assistant_commit_percentage=float(
            _get(data, "assistantCommitPercentage", "claudeCodeCommitPercentage", default=0.0)
        ),
        avg_prompt_similarity=float(_get(data, "avgPromptSimilarity", default=0.0)),
        most_modified_files=_strings(_get(data, "mostModifiedFiles")),
        most_modified_functions=_strings(_get(data, "mostModifiedFunctions")),
        change_type_totals={str(k): int(v) for k, v in totals.items()},
        velocity_by_week=tuple(
            WeeklyVelocity(
                week=str(_get(w, "week", default="")),
                commits=int(_get(w, "commits", default=0)),
                features=int(_get(w, "features", default=0)),
            )
            for w in _get(data, "velocityByWeek", default=())
        ),
        intent_completion=_optional_float(_get(data, "intentCompletion", "intentCompletionRate")),
        reprompt_rate=_optional_float(_get(data, "repromptRate")),
        pattern_count=None if pattern_count is None else int(pattern_count),
        embedding_coverage=_optional_float(_get(data, "embeddingCoverage")),
    )


def repository_from_dict(data: Mapping[str, Any]) -> Repository:
    date_range = _get(data, "dateRange", default={}) or {}
    return Repository(
        path=str(_get(data, "path", default="")),
        name=str(_get(data, "name", default="")),
        total_commits=int(_get(data, "totalCommits", default=0)),
        date_range=DateRange(
            start=str(_get(date_range, "start", default="")),
            end=str(_get(date_range, "end", default="")),
        ),
        languages_detected=_strings(_get(data, "languagesDetected")),
    )


def project_from_dict(data: Mapping[str, Any]) -> ProjectData:
    """Build a ProjectData snapshot from decoded JSON.

    Raises:
        KeyError, TypeError, ValueError: If a required field is missing or
            has the wrong shape. ``load_project`` wraps these.
    """
    return ProjectData(
        repository=repository_from_dict(_get(data, "repository", default={}) or {}),
        commits=tuple(commit_from_dict(c) for c in _get(data, "commits", default=())),
        features=tuple(feature_from_dict(f) for f in _get(data, "features", default=())),
        prompt_sessions=tuple(
            prompt_session_from_dict(s) for s in _get(data, "promptSessions", default=())
        ),
        analytics=analytics_from_dict(_get(data, "analytics", default={}) or {}),
    )


def load_project(path: Union[str, Path]) -> ProjectData:
    """Read and decode a snapshot file.

    Raises:
        SnapshotLoadError: If the file is missing, is not JSON, or does not
            have the ProjectData shape.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotLoadError(path, str(e))

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(path, f"invalid JSON: {e}")

    if not isinstance(data, dict):
        raise SnapshotLoadError(path, "top-level value must be an object")

    try:
        project = project_from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SnapshotLoadError(path, f"malformed snapshot: {e!r}")

    logger.debug(
        f"Loaded snapshot {path}: {len(project.commits)} commits, "
        f"{len(project.features)} features, {len(project.prompt_sessions)} prompts"
    )
    return project


def load_prompt_sessions(path: Union[str, Path]) -> tuple[PromptSession, ...]:
    """Read only the prompt sessions from a snapshot file."""
    return load_project(path).prompt_sessions
