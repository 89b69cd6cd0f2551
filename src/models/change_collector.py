"""Normalizes push commits and pull request file listings into ChangeEntry lists."""

from typing import Dict, Iterable, List, Tuple

from src.schemas import ChangeEntry, ChangeType, CommitRecord, PRFileStatus

_PR_STATUS_MAP: Dict[str, ChangeType] = {
    "added": ChangeType.ADDED,
    "removed": ChangeType.REMOVED,
    "modified": ChangeType.MODIFIED,
    "changed": ChangeType.MODIFIED,
    "renamed": ChangeType.RENAMED,
}


def normalize_change_type(status: str) -> str:
    """Map a GitHub file status to a ChangeType value; unknown statuses pass through."""
    change_type = _PR_STATUS_MAP.get(status)
    return change_type.value if change_type is not None else status


def collect_push_changes(commits: Iterable[CommitRecord]) -> List[ChangeEntry]:
    """
    Collect the files touched by the commits of a push.

    Entries are unique on (path, change_type) and keep the order in which they
    were first seen. A path added in one commit and modified in a later one
    yields two entries. An empty result means there is nothing to document.
    """
    seen: Dict[Tuple[str, str], ChangeEntry] = {}
    for commit in commits:
        for change_type, paths in (
            (ChangeType.ADDED, commit.added),
            (ChangeType.MODIFIED, commit.modified),
            (ChangeType.REMOVED, commit.removed),
        ):
            for path in paths:
                key = (path, change_type.value)
                if key not in seen:
                    seen[key] = ChangeEntry(path=path, change_type=change_type.value)
    return list(seen.values())


def collect_pr_changes(file_statuses: Iterable[PRFileStatus]) -> List[ChangeEntry]:
    """Convert a pull request file listing, keeping the API's order."""
    return [
        ChangeEntry(
            path=status.filename,
            change_type=normalize_change_type(status.status),
            additions=status.additions,
            deletions=status.deletions,
            changes=status.changes,
        )
        for status in file_statuses
    ]
