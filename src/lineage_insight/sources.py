"""Upstream collaborators that produce project snapshots.

The extractor that walks git history, clusters commits and parses
assistant session logs lives outside this package. ``ProjectSource`` is
the narrow boundary it is reached through.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, Union

from .exceptions import CollaboratorError, SnapshotLoadError
from .models import ProjectData, PromptSession
from .snapshot.reader import load_project, load_prompt_sessions

PathLike = Union[str, Path]

DEFAULT_SNAPSHOT_NAME = "lineage.json"


class ProjectSource(Protocol):
    """Produces snapshots for a repository path. Any call may raise."""

    def scan(self, path: PathLike) -> ProjectData:
        ...

    def fetch_sessions(self, path: PathLike) -> Sequence[PromptSession]:
        ...

    def delete_sessions(self, path: PathLike) -> int:
        ...


class JsonSnapshotSource:
    """Reads snapshots exported as JSON files.

    ``path`` may be the export itself or a directory containing
    ``lineage.json``. Exports are read-only, so deleting sessions is
    refused.
    """

    def __init__(self, snapshot_name: str = DEFAULT_SNAPSHOT_NAME):
        self.snapshot_name = snapshot_name

    def resolve(self, path: PathLike) -> Path:
        path = Path(path)
        if path.is_dir():
            return path / self.snapshot_name
        return path

    def scan(self, path: PathLike) -> ProjectData:
        try:
            return load_project(self.resolve(path))
        except SnapshotLoadError as e:
            raise CollaboratorError("scan", path, e.reason) from e

    def fetch_sessions(self, path: PathLike) -> Sequence[PromptSession]:
        try:
            return load_prompt_sessions(self.resolve(path))
        except SnapshotLoadError as e:
            raise CollaboratorError("session refresh", path, e.reason) from e

    def delete_sessions(self, path: PathLike) -> int:
        raise CollaboratorError("session delete", path, "JSON exports are read-only")
