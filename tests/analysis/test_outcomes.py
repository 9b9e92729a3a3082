"""Tests for prompt outcome classification."""

import pytest

from lineage_insight.analysis.outcomes import (
    classify_outcome,
    classify_outcomes,
    completion_rate,
    outcome_counts,
)
from lineage_insight.models import Outcome, PromptSession


def make_session(files_written=(), tool_calls=0) -> PromptSession:
    return PromptSession(
        session_id="s",
        prompt_text="do the thing",
        timestamp="2024-01-01T00:00:00Z",
        files_written=tuple(files_written),
        tool_call_count=tool_calls,
    )


class TestClassifyOutcome:
    def test_written_is_completed(self):
        assert classify_outcome(make_session(["a.py"], 3)) is Outcome.COMPLETED

    def test_written_without_tools_is_completed(self):
        """Writes win over the tool-call rule."""
        assert classify_outcome(make_session(["a.py"], 0)) is Outcome.COMPLETED

    def test_tools_only_is_partial(self):
        assert classify_outcome(make_session([], 4)) is Outcome.PARTIAL

    def test_nothing_is_abandoned(self):
        assert classify_outcome(make_session()) is Outcome.ABANDONED

    def test_reworked_never_produced(self):
        sessions = [make_session(), make_session(["a"]), make_session([], 1)]
        assert Outcome.REWORKED not in classify_outcomes(sessions)


class TestCompletionRate:
    def test_empty(self):
        assert completion_rate([]) == 0.0

    def test_fraction_completed(self):
        sessions = [make_session(["a"]), make_session([], 1), make_session(), make_session(["b"])]
        assert completion_rate(sessions) == pytest.approx(0.5)

    def test_outcome_counts(self):
        sessions = [make_session(["a"]), make_session([], 1), make_session(["b"])]
        assert outcome_counts(sessions) == {Outcome.COMPLETED: 2, Outcome.PARTIAL: 1}
