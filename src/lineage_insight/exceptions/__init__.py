"""Exception hierarchy for Lineage Insight."""

from .base import LineageInsightError
from .config import ConfigurationError, InvalidConfigError
from .snapshot import (
    CollaboratorError,
    InvalidGroupingError,
    SnapshotError,
    SnapshotLoadError,
)

__all__ = [
    "LineageInsightError",
    "ConfigurationError",
    "InvalidConfigError",
    "SnapshotError",
    "SnapshotLoadError",
    "CollaboratorError",
    "InvalidGroupingError",
]
