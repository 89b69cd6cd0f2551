"""Schemas for the application."""

from .app_schemas import (
    ChangeEntry,
    ChangeType,
    DispatchOutcome,
    DispatchStatus,
    DocumentationRequest,
)
from .git import CommitRecord, PRFileStatus

__all__ = [
    "ChangeEntry",
    "ChangeType",
    "CommitRecord",
    "DispatchOutcome",
    "DispatchStatus",
    "DocumentationRequest",
    "PRFileStatus",
]
