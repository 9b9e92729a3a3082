"""Tests for change-type summaries."""

import dataclasses

import pytest

from lineage_insight.analysis.change_types import (
    FALLBACK_COLOR,
    FALLBACK_LABEL,
    UNCLASSIFIED_LABEL,
    change_type_breakdown,
    change_type_color,
    change_type_label,
    dominant_change_type,
    project_change_type_totals,
)
from lineage_insight.models import Analytics, Feature


class TestDominantChangeType:
    def test_highest_count(self):
        feature = Feature(cluster_id=1, change_type_distribution={"bug_fix": 1, "refactor": 4})
        assert dominant_change_type(feature) == "refactor"

    def test_empty_is_none(self):
        assert dominant_change_type(Feature(cluster_id=1)) is None

    def test_tie_keeps_first(self):
        feature = Feature(cluster_id=1, change_type_distribution={"test": 2, "style": 2})
        assert dominant_change_type(feature) == "test"

    def test_unknown_type_can_dominate(self):
        feature = Feature(cluster_id=1, change_type_distribution={"chore": 5, "test": 1})
        assert dominant_change_type(feature) == "chore"


class TestLabels:
    def test_known(self):
        assert change_type_label("bug_fix") == "Bug Fix"
        assert change_type_color("new_feature") == "#34d399"

    def test_unknown_falls_back(self):
        assert change_type_label("chore") == FALLBACK_LABEL
        assert change_type_color("chore") == FALLBACK_COLOR

    def test_unclassified(self):
        assert change_type_label(None) == UNCLASSIFIED_LABEL


class TestBreakdown:
    def test_sorted_with_shares(self):
        shares = change_type_breakdown({"test": 1, "bug_fix": 3})
        assert [s.change_type for s in shares] == ["bug_fix", "test"]
        assert shares[0].share == pytest.approx(0.75)
        assert shares[1].share == pytest.approx(0.25)

    def test_zero_total(self):
        shares = change_type_breakdown({"test": 0, "style": 0})
        assert all(s.share == 0.0 for s in shares)

    def test_empty(self):
        assert change_type_breakdown({}) == []

    def test_unknown_keys_counted(self):
        shares = change_type_breakdown({"chore": 1, "test": 1})
        assert sum(s.count for s in shares) == 2
        assert {s.label for s in shares} == {"Other", "Test"}


class TestProjectTotals:
    def test_upstream_totals_preferred(self, sample_project):
        assert project_change_type_totals(sample_project) == {
            "new_feature": 1,
            "bug_fix": 1,
            "refactor": 1,
        }

    def test_counts_commits_when_missing(self, sample_project):
        project = dataclasses.replace(sample_project, analytics=Analytics())
        totals = project_change_type_totals(project)
        assert totals == {"new_feature": 1, "bug_fix": 1, "refactor": 1}
