"""Mine files that are repeatedly changed in the same commit."""

from collections import defaultdict
from itertools import combinations
from typing import Sequence

from ..config import DEFAULT_THRESHOLDS
from ..models import Commit

FileCoupling = tuple[str, str, int]


def file_couplings(
    commits: Sequence[Commit], min_count: int = DEFAULT_THRESHOLDS.coupling_min_count
) -> list[FileCoupling]:
    """Return ``(file_a, file_b, count)`` for every recurring co-changed pair.

    Each commit contributes its distinct paths, sorted, so ``(a, b)`` and
    ``(b, a)`` always share one key with ``a < b``. Pairs below
    ``min_count`` are dropped. The result is ordered by count descending,
    then by pair for a stable order among equal counts.
    """
    pair_counts: dict[tuple[str, str], int] = defaultdict(int)

    for commit in commits:
        paths = sorted({change.path for change in commit.files_changed})
        for a, b in combinations(paths, 2):
            pair_counts[(a, b)] += 1

    recurring = [(a, b, count) for (a, b), count in pair_counts.items() if count >= min_count]
    recurring.sort(key=lambda pair: (-pair[2], pair[0], pair[1]))
    return recurring
