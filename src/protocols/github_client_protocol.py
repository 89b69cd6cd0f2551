"""GitHub client protocol interface."""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ..schemas import PRFileStatus


@runtime_checkable
class GitHubClientProtocol(Protocol):
    """Protocol for the GitHub REST operations used by the change tracker."""

    async def list_pull_request_files(
        self, owner: str, repo: str, pr_number: int
    ) -> List[PRFileStatus]:
        """List all files changed by a pull request."""
        ...

    async def get_content(
        self, owner: str, repo: str, path: str, ref: Optional[str] = None
    ) -> Dict[str, Any]:
        """Get the contents API record of a file at a ref."""
        ...

    async def create_comment(
        self, owner: str, repo: str, issue_number: int, body: str
    ) -> Dict[str, Any]:
        """Post a comment on an issue or pull request."""
        ...

    async def aclose(self) -> None:
        """Release the underlying HTTP resources."""
        ...
