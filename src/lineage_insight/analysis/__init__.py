"""Derived insights over a project snapshot."""

from .change_types import (
    ChangeTypeShare,
    change_type_breakdown,
    change_type_color,
    change_type_label,
    dominant_change_type,
    project_change_type_totals,
)
from .features import feature_titles, features_by_recency
from .functions import function_tree
from .grouping import GroupBy, SessionGroup, group_key, group_sessions
from .intent import IntentSummary, summarize_intent
from .outcomes import classify_outcome, completion_rate, outcome_counts
from .patterns import PatternReport, build_patterns
from .profile import DeveloperProfile, build_profile
from .reprompts import count_reprompts, is_reprompt, reprompt_rate
from .timeline import TimelineFilter

__all__ = [
    "ChangeTypeShare",
    "DeveloperProfile",
    "GroupBy",
    "IntentSummary",
    "PatternReport",
    "SessionGroup",
    "TimelineFilter",
    "build_patterns",
    "build_profile",
    "change_type_breakdown",
    "change_type_color",
    "change_type_label",
    "classify_outcome",
    "completion_rate",
    "count_reprompts",
    "dominant_change_type",
    "feature_titles",
    "features_by_recency",
    "function_tree",
    "group_key",
    "group_sessions",
    "is_reprompt",
    "outcome_counts",
    "project_change_type_totals",
    "reprompt_rate",
    "summarize_intent",
]
