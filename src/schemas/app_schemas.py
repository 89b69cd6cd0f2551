"""Application-wide schema classes."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChangeType(str, Enum):
    """Normalized change types for a touched file."""

    ADDED = "added"
    MODIFIED = "modified"
    REMOVED = "removed"
    RENAMED = "renamed"


class ChangeEntry(BaseModel):
    """Represents one file touched by a push commit or a pull request."""

    model_config = ConfigDict(frozen=True)

    path: str
    change_type: str  # A ChangeType value, or an unrecognized GitHub status
    additions: Optional[int] = Field(default=None, ge=0)
    deletions: Optional[int] = Field(default=None, ge=0)
    changes: Optional[int] = Field(default=None, ge=0)
    content: Optional[str] = None

    @property
    def is_removed(self) -> bool:
        return self.change_type == ChangeType.REMOVED


class DocumentationRequest(BaseModel):
    """Outbound unit of work for the documentation server."""

    owner: str
    repo: str
    branch: Optional[str] = None
    pr_number: Optional[int] = Field(default=None, gt=0)
    files: List[ChangeEntry] = Field(default_factory=list)


class DispatchStatus(str, Enum):
    SKIPPED = "skipped"
    ACCEPTED = "accepted"
    FAILED = "failed"


class DispatchOutcome(BaseModel):
    """Result of handing a DocumentationRequest to the documentation server."""

    status: DispatchStatus
    reason: Optional[str] = None
    response: Optional[Any] = None
    error: Optional[str] = None
    files: List[str] = Field(default_factory=list)

    @classmethod
    def skipped(cls, reason: str) -> "DispatchOutcome":
        return cls(status=DispatchStatus.SKIPPED, reason=reason)

    @classmethod
    def accepted(cls, response: Any, files: List[str]) -> "DispatchOutcome":
        return cls(status=DispatchStatus.ACCEPTED, response=response, files=files)

    @classmethod
    def failed(cls, error: str, files: List[str]) -> "DispatchOutcome":
        return cls(status=DispatchStatus.FAILED, error=error, files=files)
