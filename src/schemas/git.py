from typing import List

from pydantic import BaseModel, Field


class CommitRecord(BaseModel):
    """One commit from a push webhook payload."""

    id: str = ""
    message: str = ""
    added: List[str] = Field(default_factory=list)
    modified: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)


class PRFileStatus(BaseModel):
    """One entry of the pull request files listing."""

    filename: str
    status: str
    additions: int = 0
    deletions: int = 0
    changes: int = 0
