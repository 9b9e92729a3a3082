"""ISO-8601 timestamp parsing shared by the temporal and grouping code."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional


def parse_timestamp(value: str, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Parse an ISO-8601 string into a datetime in the display zone.

    Aware timestamps are converted to ``tz`` (the host's local zone when
    ``tz`` is None). Naive timestamps are taken to already be local wall
    time. Returns None for anything unparsable.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except (TypeError, ValueError):
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz) if tz is not None else parsed
    return parsed.astimezone(tz)
