"""
Memoization of derived views.

Derivations are pure functions of a snapshot and a few parameters, so
their results can be reused until a different snapshot is installed.
Entries are keyed by the snapshot's identity plus the derivation name and
parameters; presenting a new snapshot drops every entry.
"""

import threading
from typing import Any, Callable, Hashable, Optional, TypeVar

from .logging_config import get_logger
from .models import ProjectData

logger = get_logger(__name__)

T = TypeVar("T")


class DerivationMemo:
    """
    In-memory memo table for one active snapshot.

    Features:
    - Invalidation on snapshot identity change
    - Thread-safe: a result computed against an old snapshot is never stored
      under a newer one
    - Hit/miss counters for diagnostics
    """

    def __init__(self, enabled: bool = True):
        """
        Initialize memo.

        Args:
            enabled: Whether memoization is enabled
        """
        self.enabled = enabled
        self._lock = threading.Lock()
        # Holding the snapshot keeps its id() from being reused while entries exist
        self._snapshot: Optional[ProjectData] = None
        self._entries: dict[tuple[str, Hashable], Any] = {}
        self.hits = 0
        self.misses = 0

    def get_or_compute(
        self,
        snapshot: ProjectData,
        name: str,
        params: Hashable,
        compute: Callable[[], T],
    ) -> T:
        """
        Return the memoized value for ``(snapshot, name, params)``, computing it if absent.

        Args:
            snapshot: Snapshot the derivation reads
            name: Derivation name
            params: Hashable parameters of the derivation
            compute: Zero-argument callable producing the value

        Returns:
            Memoized or freshly computed value
        """
        if not self.enabled:
            return compute()

        key = (name, params)
        with self._lock:
            if self._snapshot is not snapshot:
                self._reset(snapshot)
            elif key in self._entries:
                self.hits += 1
                logger.debug(f"Memo hit: {name}{params!r}")
                return self._entries[key]

        value = compute()

        with self._lock:
            # Skip storing if the snapshot was swapped while computing
            if self._snapshot is snapshot:
                self._entries[key] = value
                self.misses += 1
                logger.debug(f"Memo miss: {name}{params!r}")
        return value

    def invalidate(self) -> None:
        """Drop all entries and forget the snapshot."""
        with self._lock:
            self._reset(None)

    def _reset(self, snapshot: Optional[ProjectData]) -> None:
        if self._entries:
            logger.debug(f"Memo invalidated ({len(self._entries)} entries)")
        self._snapshot = snapshot
        self._entries = {}

    def __len__(self) -> int:
        return len(self._entries)

    def stats(self) -> dict:
        """
        Get memo statistics.

        Returns:
            Dictionary with entry count and hit/miss counters
        """
        return {
            "enabled": self.enabled,
            "entries": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
        }
