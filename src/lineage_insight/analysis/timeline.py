"""Composable commit filter for the timeline view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Union

from ..models import ChangeType, Commit


def _type_value(change_type: Union[ChangeType, str]) -> str:
    if isinstance(change_type, Enum):
        return change_type.value
    return str(change_type)


@dataclass(frozen=True)
class TimelineFilter:
    """All set constraints must hold for a commit to pass.

    Date bounds are inclusive and compared as ISO-8601 strings, which is
    only meaningful when every timestamp uses the same format and offset.

    Attributes:
        author: Exact author name, or None for any author
        change_types: Allowed change types; empty allows all
        assistant_only: Keep only assistant-authored commits
        start: Earliest timestamp, or None
        end: Latest timestamp, or None
    """

    author: Optional[str] = None
    change_types: frozenset[str] = frozenset()
    assistant_only: bool = False
    start: Optional[str] = None
    end: Optional[str] = None

    @classmethod
    def create(
        cls,
        author: Optional[str] = None,
        change_types: Iterable[Union[ChangeType, str]] = (),
        assistant_only: bool = False,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> TimelineFilter:
        return cls(
            author=author or None,
            change_types=frozenset(_type_value(t) for t in change_types),
            assistant_only=assistant_only,
            start=start or None,
            end=end or None,
        )

    @property
    def is_active(self) -> bool:
        return bool(
            self.author
            or self.change_types
            or self.assistant_only
            or self.start
            or self.end
        )

    def reset(self) -> TimelineFilter:
        return TimelineFilter()

    def matches(self, commit: Commit) -> bool:
        if self.author and commit.author_name != self.author:
            return False
        if self.change_types and commit.change_type not in self.change_types:
            return False
        if self.assistant_only and not commit.is_assistant:
            return False
        if self.start and commit.timestamp < self.start:
            return False
        if self.end and commit.timestamp > self.end:
            return False
        return True

    def apply(self, commits: Sequence[Commit]) -> list[Commit]:
        """Commits passing the filter, in their original order."""
        return [c for c in commits if self.matches(c)]
