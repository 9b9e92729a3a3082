"""Which functions each file has had touched."""

from typing import Sequence

from ..models import Commit


def function_tree(commits: Sequence[Commit]) -> dict[str, list[str]]:
    """Map each changed path to its distinct touched function names.

    Paths and names keep the order in which they were first seen. Files
    without function-level data still appear, with an empty list.
    """
    tree: dict[str, list[str]] = {}
    for commit in commits:
        for change in commit.files_changed:
            names = tree.setdefault(change.path, [])
            for fn in change.functions:
                if fn.name not in names:
                    names.append(fn.name)
    return tree
