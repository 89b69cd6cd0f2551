"""Unit tests for the change collector."""

import pytest

from src.models.change_collector import (
    collect_pr_changes,
    collect_push_changes,
    normalize_change_type,
)
from src.schemas import ChangeEntry, ChangeType, CommitRecord, PRFileStatus


class TestCollectPushChanges:
    """Test cases for collect_push_changes."""

    def test_dedups_identical_entries_across_commits(self):
        """A path modified in two commits yields a single modified entry."""
        commits = [
            CommitRecord(id="c1", added=["a.js"], modified=["b.js"]),
            CommitRecord(id="c2", modified=["b.js"], removed=["c.js"]),
        ]

        result = collect_push_changes(commits)

        assert result == [
            ChangeEntry(path="a.js", change_type="added"),
            ChangeEntry(path="b.js", change_type="modified"),
            ChangeEntry(path="c.js", change_type="removed"),
        ]

    def test_keeps_distinct_change_types_for_same_path(self):
        """Added then modified in one push stays as two entries."""
        commits = [
            CommitRecord(id="c1", added=["src/new.py"]),
            CommitRecord(id="c2", modified=["src/new.py"]),
        ]

        result = collect_push_changes(commits)

        assert [(e.path, e.change_type) for e in result] == [
            ("src/new.py", "added"),
            ("src/new.py", "modified"),
        ]

    def test_no_commits(self):
        assert collect_push_changes([]) == []

    def test_commits_without_files(self):
        """A merge commit without a direct diff produces nothing."""
        assert collect_push_changes([CommitRecord(id="merge", message="Merge")]) == []

    def test_push_entries_carry_no_counts(self):
        (entry,) = collect_push_changes([CommitRecord(added=["a.js"])])
        assert entry.additions is None
        assert entry.deletions is None
        assert entry.changes is None
        assert entry.content is None


class TestCollectPRChanges:
    """Test cases for collect_pr_changes."""

    @pytest.mark.parametrize(
        "status,expected",
        [
            ("added", "added"),
            ("removed", "removed"),
            ("modified", "modified"),
            ("changed", "modified"),
            ("renamed", "renamed"),
            ("copied", "copied"),
            ("unchanged", "unchanged"),
        ],
    )
    def test_normalize_change_type(self, status, expected):
        assert normalize_change_type(status) == expected

    def test_preserves_order_and_counts(self):
        statuses = [
            PRFileStatus(filename="z.py", status="changed", additions=3, deletions=1, changes=4),
            PRFileStatus(filename="a.py", status="renamed", additions=0, deletions=0, changes=0),
            PRFileStatus(filename="m.py", status="copied", additions=7, deletions=0, changes=7),
        ]

        result = collect_pr_changes(statuses)

        assert [e.path for e in result] == ["z.py", "a.py", "m.py"]
        assert [e.change_type for e in result] == ["modified", "renamed", "copied"]
        assert result[0].additions == 3
        assert result[0].deletions == 1
        assert result[0].changes == 4
        assert result[1].changes == 0

    def test_change_type_compares_with_enum(self):
        (entry,) = collect_pr_changes([PRFileStatus(filename="a.py", status="removed")])
        assert entry.change_type == ChangeType.REMOVED
        assert entry.is_removed is True

    def test_empty_listing(self):
        assert collect_pr_changes([]) == []
