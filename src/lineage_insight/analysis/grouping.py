"""Group prompt sessions into labelled time buckets for display.

Groups are keyed only by their label: two sessions whose timestamps
produce the same label share a group. Groups appear in the order their
label is first met, so the output is chronological only when the input is.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from enum import Enum
from typing import Optional, Sequence, Union

from ..exceptions import InvalidGroupingError
from ..models import PromptSession
from ..temporal.timestamps import parse_timestamp

# Fixed English names so labels do not depend on the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

UNKNOWN_DATE_LABEL = "Unknown date"


class GroupBy(str, Enum):
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class SessionGroup:
    label: str
    sessions: tuple[PromptSession, ...]

    def __len__(self) -> int:
        return len(self.sessions)


def _short_date(d: date) -> str:
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}"


def _hour_label(moment: datetime) -> str:
    suffix = "PM" if moment.hour >= 12 else "AM"
    hour12 = moment.hour % 12 or 12
    return f"{_short_date(moment)}, {hour12} {suffix}"


def _day_label(moment: datetime) -> str:
    return (
        f"{WEEKDAY_NAMES[moment.weekday()]}, "
        f"{MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}"
    )


def _week_label(moment: datetime) -> str:
    # weekday() is Monday=0; weeks here start on Sunday
    start = moment.date() - timedelta(days=(moment.weekday() + 1) % 7)
    end = start + timedelta(days=6)
    return f"Week of {_short_date(start)} - {_short_date(end)}"


def _month_label(moment: datetime) -> str:
    return f"{MONTH_NAMES[moment.month - 1]} {moment.year}"


_LABELLERS = {
    GroupBy.HOUR: _hour_label,
    GroupBy.DAY: _day_label,
    GroupBy.WEEK: _week_label,
    GroupBy.MONTH: _month_label,
}


def coerce_group_by(group_by: Union[GroupBy, str]) -> GroupBy:
    """Accept a GroupBy or its string value.

    Raises:
        InvalidGroupingError: For any other value.
    """
    try:
        return GroupBy(group_by)
    except ValueError:
        raise InvalidGroupingError(str(group_by), supported=[g.value for g in GroupBy])


def group_key(
    timestamp: str, group_by: Union[GroupBy, str], tz: Optional[tzinfo] = None
) -> str:
    """Label of the bucket a timestamp falls into."""
    labeller = _LABELLERS[coerce_group_by(group_by)]
    moment = parse_timestamp(timestamp, tz)
    if moment is None:
        return UNKNOWN_DATE_LABEL
    return labeller(moment)


def group_sessions(
    sessions: Sequence[PromptSession],
    group_by: Union[GroupBy, str],
    tz: Optional[tzinfo] = None,
) -> list[SessionGroup]:
    """Bucket sessions by label, keeping first-encounter order of labels and sessions."""
    level = coerce_group_by(group_by)
    buckets: dict[str, list[PromptSession]] = {}
    for session in sessions:
        buckets.setdefault(group_key(session.timestamp, level, tz), []).append(session)
    return [SessionGroup(label=label, sessions=tuple(members)) for label, members in buckets.items()]
