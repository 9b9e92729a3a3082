"""Snapshot and collaborator exceptions: loading, refreshing, grouping."""

from pathlib import Path
from typing import Iterable, Optional, Union

from .base import LineageInsightError


class SnapshotError(LineageInsightError):
    """Base class for project snapshot errors."""

    pass


class SnapshotLoadError(SnapshotError):
    """Raised when a project snapshot cannot be read or decoded."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot load project snapshot: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class CollaboratorError(SnapshotError):
    """Raised when an upstream scan/refresh/delete call fails."""

    def __init__(self, operation: str, path: Union[str, Path], reason: str):
        super().__init__(
            f"Upstream {operation} failed for {path}",
            details={"operation": operation, "path": str(path), "reason": reason},
        )
        self.operation = operation
        self.path = path
        self.reason = reason


class InvalidGroupingError(LineageInsightError):
    """Raised when sessions are grouped by an unsupported granularity."""

    def __init__(self, group_by: str, supported: Optional[Iterable[str]] = None):
        details = {"group_by": str(group_by)}
        if supported is not None:
            details["supported"] = ", ".join(supported)
        super().__init__(f"Unsupported grouping: {group_by}", details=details)
        self.group_by = group_by
