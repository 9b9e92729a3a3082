"""Data models for a project snapshot.

A snapshot is produced upstream (git extraction, clustering, session
parsing) and is never modified here. Every record is a frozen dataclass and
every sequence a tuple, so a snapshot can be shared freely between
derivations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ChangeType(str, Enum):
    NEW_FEATURE = "new_feature"
    BUG_FIX = "bug_fix"
    REFACTOR = "refactor"
    PERFORMANCE = "performance"
    STYLE = "style"
    TEST = "test"
    DOCUMENTATION = "documentation"


class Outcome(str, Enum):
    COMPLETED = "completed"
    PARTIAL = "partial"
    ABANDONED = "abandoned"
    REWORKED = "reworked"  # reserved for upstream enrichment, never derived here


@dataclass(frozen=True)
class FunctionChange:
    name: str
    lines_added: int = 0
    lines_removed: int = 0
    diff_text: str = ""


@dataclass(frozen=True)
class FileChange:
    path: str
    lines_added: int = 0
    lines_removed: int = 0
    functions: tuple[FunctionChange, ...] = ()


@dataclass(frozen=True)
class Commit:
    hash: str
    timestamp: str  # ISO-8601
    author_name: str = ""
    author_email: str = ""
    subject: str = ""
    body: str = ""
    is_assistant: bool = False
    session_id: Optional[str] = None
    change_type: str = ChangeType.NEW_FEATURE.value  # unknown values are kept verbatim
    change_type_confidence: float = 0.0
    cluster_id: int = -1
    files_changed: tuple[FileChange, ...] = ()

    @property
    def short_hash(self) -> str:
        return self.hash[:7]


@dataclass(frozen=True)
class SubFeature:
    """One prompt's contribution to a feature."""

    prompt_text: str
    session_id: str
    prompt_index: int
    timestamp: str
    time_end: Optional[str] = None
    commit_hashes: tuple[str, ...] = ()
    files_written: tuple[str, ...] = ()
    lines_added: int = 0
    lines_removed: int = 0
    change_type: str = ChangeType.NEW_FEATURE.value
    model: Optional[str] = None


@dataclass(frozen=True)
class Feature:
    """A cluster of commits forming one logical unit of work."""

    cluster_id: int
    auto_label: str = ""
    title: Optional[str] = None
    narrative: Optional[str] = None
    intent: Optional[str] = None
    key_decisions: tuple[str, ...] = ()
    commit_hashes: tuple[str, ...] = ()
    time_start: str = ""
    time_end: str = ""
    functions_touched: tuple[str, ...] = ()
    total_lines_added: int = 0
    total_lines_removed: int = 0
    primary_files: tuple[str, ...] = ()
    change_type_distribution: dict[str, int] = field(default_factory=dict)
    dependencies: tuple[int, ...] = ()
    sub_features: tuple[SubFeature, ...] = ()

    @property
    def display_title(self) -> str:
        return self.title or self.auto_label

    def is_consistent(self) -> bool:
        """True when the feature has commits and its distribution covers all of them."""
        return bool(self.commit_hashes) and sum(
            self.change_type_distribution.values()
        ) == len(self.commit_hashes)


@dataclass(frozen=True)
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    cache_read_tokens: int = 0


@dataclass(frozen=True)
class PromptSession:
    """One user prompt to the assistant and what it produced.

    Consecutive records sharing a session_id are chronologically adjacent.
    files_written is expected to be a subset of files_touched but this is
    not enforced.
    """

    session_id: str
    prompt_text: str
    timestamp: str
    time_end: Optional[str] = None
    associated_commit_hashes: tuple[str, ...] = ()
    associated_feature_ids: tuple[int, ...] = ()
    similarity_score: float = 0.0
    scope_match: float = 0.0
    intent: Optional[str] = None
    files_touched: tuple[str, ...] = ()
    files_written: tuple[str, ...] = ()
    tool_call_count: int = 0
    model: Optional[str] = None
    token_usage: TokenUsage = field(default_factory=TokenUsage)

    @property
    def files_read(self) -> tuple[str, ...]:
        written = set(self.files_written)
        return tuple(f for f in self.files_touched if f not in written)

    @property
    def total_tokens(self) -> int:
        return self.token_usage.input_tokens + self.token_usage.output_tokens


@dataclass(frozen=True)
class WeeklyVelocity:
    week: str
    commits: int = 0
    features: int = 0


@dataclass(frozen=True)
class Analytics:
    """Project-wide summary computed upstream.

    The last four fields are optional upstream enrichments; read them through
    the accessor properties, which default to 0.
    """

    total_features: int = 0
    total_functions_modified: int = 0
    total_prompts_detected: int = 0
    assistant_commit_percentage: float = 0.0  # fraction, 0..1
    avg_prompt_similarity: float = 0.0
    most_modified_files: tuple[str, ...] = ()
    most_modified_functions: tuple[str, ...] = ()
    change_type_totals: dict[str, int] = field(default_factory=dict)
    velocity_by_week: tuple[WeeklyVelocity, ...] = ()

    intent_completion: Optional[float] = None
    reprompt_rate: Optional[float] = None
    pattern_count: Optional[int] = None
    embedding_coverage: Optional[float] = None

    @property
    def intent_completion_or_default(self) -> float:
        return self.intent_completion if self.intent_completion is not None else 0.0

    @property
    def reprompt_rate_or_default(self) -> float:
        return self.reprompt_rate if self.reprompt_rate is not None else 0.0

    @property
    def pattern_count_or_default(self) -> int:
        return self.pattern_count if self.pattern_count is not None else 0

    @property
    def embedding_coverage_or_default(self) -> float:
        return self.embedding_coverage if self.embedding_coverage is not None else 0.0


@dataclass(frozen=True)
class DateRange:
    start: str = ""
    end: str = ""


@dataclass(frozen=True)
class Repository:
    path: str
    name: str = ""
    total_commits: int = 0
    date_range: DateRange = field(default_factory=DateRange)
    languages_detected: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectData:
    """The immutable snapshot of one active project."""

    repository: Repository
    commits: tuple[Commit, ...] = ()
    features: tuple[Feature, ...] = ()
    prompt_sessions: tuple[PromptSession, ...] = ()
    analytics: Analytics = field(default_factory=Analytics)

    @property
    def session_count(self) -> int:
        """Distinct assistant sessions (prompts share a session id)."""
        return len({s.session_id for s in self.prompt_sessions})
