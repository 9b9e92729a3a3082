"""Heuristic outcome labels for prompt sessions."""

from collections import Counter
from typing import Sequence

from ..models import Outcome, PromptSession

OUTCOME_LABELS: dict[str, str] = {
    Outcome.COMPLETED.value: "Completed",
    Outcome.PARTIAL.value: "Partial",
    Outcome.ABANDONED.value: "Abandoned",
    Outcome.REWORKED.value: "Reworked",
}

OUTCOME_COLORS: dict[str, str] = {
    Outcome.COMPLETED.value: "#34d399",
    Outcome.PARTIAL.value: "#fbbf24",
    Outcome.ABANDONED.value: "#f87171",
    Outcome.REWORKED.value: "#60a5fa",
}


def classify_outcome(session: PromptSession) -> Outcome:
    """Label what a prompt led to; the first matching rule wins.

    - COMPLETED: at least one file was written
    - PARTIAL: nothing written, but tools were called
    - ABANDONED: nothing written and no tool calls
    """
    if session.files_written:
        return Outcome.COMPLETED
    if session.tool_call_count > 0:
        return Outcome.PARTIAL
    return Outcome.ABANDONED


def classify_outcomes(sessions: Sequence[PromptSession]) -> list[Outcome]:
    return [classify_outcome(s) for s in sessions]


def outcome_counts(sessions: Sequence[PromptSession]) -> dict[Outcome, int]:
    """Occurrences of each outcome, in order of first appearance."""
    return dict(Counter(classify_outcomes(sessions)))


def completion_rate(sessions: Sequence[PromptSession]) -> float:
    """Fraction of sessions classified COMPLETED (0.0 for no sessions)."""
    if not sessions:
        return 0.0
    completed = sum(1 for s in sessions if classify_outcome(s) is Outcome.COMPLETED)
    return completed / len(sessions)
