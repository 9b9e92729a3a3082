"""Prompt intent summary: completion, re-prompts and tool usage."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from ..config import DEFAULT_THRESHOLDS, ThresholdConfig
from ..models import Outcome, ProjectData
from .outcomes import classify_outcomes
from .reprompts import count_reprompts


@dataclass(frozen=True)
class IntentSummary:
    total_prompts: int
    completion_rate: float  # fraction, 0..1
    completion_rate_source: str  # "analytics" or "sessions"
    reprompt_count: int
    reprompt_rate: float  # from the session heuristic, never the upstream value
    avg_tool_calls: float
    outcomes: tuple[Outcome, ...] = ()
    outcome_counts: Mapping[Outcome, int] = field(default_factory=dict)
    upstream_reprompt_rate: Optional[float] = None
    pattern_count: int = 0
    embedding_coverage: float = 0.0


def summarize_intent(
    project: ProjectData, thresholds: ThresholdConfig = DEFAULT_THRESHOLDS
) -> IntentSummary:
    """Summarize what the project's prompts led to.

    Completion rate comes from ``Analytics.intent_completion`` when the
    upstream pipeline supplied it, otherwise from the outcome heuristic.
    Re-prompts always come from the session heuristic.
    """
    sessions = project.prompt_sessions
    analytics = project.analytics
    total = len(sessions)

    outcomes = classify_outcomes(sessions)
    counts: dict[Outcome, int] = {}
    for outcome in outcomes:
        counts[outcome] = counts.get(outcome, 0) + 1

    if analytics.intent_completion is not None:
        rate = analytics.intent_completion
        source = "analytics"
    else:
        rate = counts.get(Outcome.COMPLETED, 0) / total if total else 0.0
        source = "sessions"

    reprompts = count_reprompts(sessions, thresholds)
    avg_tools = sum(s.tool_call_count for s in sessions) / total if total else 0.0

    return IntentSummary(
        total_prompts=total,
        completion_rate=rate,
        completion_rate_source=source,
        reprompt_count=reprompts,
        reprompt_rate=reprompts / total if total else 0.0,
        avg_tool_calls=round(avg_tools, 1),
        outcomes=tuple(outcomes),
        outcome_counts=MappingProxyType(counts),
        upstream_reprompt_rate=analytics.reprompt_rate,
        pattern_count=analytics.pattern_count_or_default,
        embedding_coverage=analytics.embedding_coverage_or_default,
    )
