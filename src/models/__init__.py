"""Models for the application."""

from .change_collector import (
    collect_pr_changes,
    collect_push_changes,
    normalize_change_type,
)
from .documentability import should_document
from .github_client import GitHubClient

__all__ = [
    "GitHubClient",
    "collect_pr_changes",
    "collect_push_changes",
    "normalize_change_type",
    "should_document",
]
