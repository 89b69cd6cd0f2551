"""Sends documentable changes to the documentation server."""

import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel

from src.config.settings import Settings
from src.exceptions import ConfigurationError
from src.models import should_document
from src.protocols.github_client_protocol import GitHubClientProtocol
from src.schemas import (
    ChangeEntry,
    DispatchOutcome,
    DispatchStatus,
    DocumentationRequest,
)

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate"

ACCEPTED_COMMENT = (
    "📚 Documentation update has been triggered for the changes in this pull request.\n\n"
    "The documentation is being generated and will be available soon at your GeniDocs platform."
)
FAILED_COMMENT = (
    "⚠️ There was an error updating the documentation: {error}. "
    "Please check the logs for more details."
)


class DocsServerConfig(BaseModel):
    """Connection settings for the documentation server."""

    server_url: str = ""
    api_key: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> "DocsServerConfig":
        return cls(server_url=settings.DOCS_SERVER_URL, api_key=settings.DOCS_API_KEY)

    @property
    def generate_url(self) -> str:
        if not self.server_url:
            raise ConfigurationError("DOCS_SERVER_URL not configured")
        url = f"{self.server_url.rstrip('/')}{GENERATE_PATH}"
        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"DOCS_SERVER_URL is invalid: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise ConfigurationError(f"DOCS_SERVER_URL is invalid: {self.server_url!r}")
        return url

    def headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers


def filter_documentable(files: List[ChangeEntry]) -> List[ChangeEntry]:
    documentable = []
    for entry in files:
        keep = should_document(entry.path)
        logger.info(
            f"File {entry.path}: {'Will document' if keep else 'Skipping'} ({entry.change_type})"
        )
        if keep:
            documentable.append(entry)
    return documentable


def build_payload(
    request: DocumentationRequest, files: List[ChangeEntry]
) -> Dict[str, Any]:
    """Build the JSON body for POST /api/generate; absent optional keys are omitted."""
    payload: Dict[str, Any] = {"owner": request.owner, "repo": request.repo}
    if request.branch:
        payload["branch"] = request.branch
    if request.pr_number is not None:
        payload["prNumber"] = request.pr_number

    payload["files"] = []
    for entry in files:
        item: Dict[str, Any] = {
            "path": entry.path,
            "content": entry.content or "",
            "changeType": entry.change_type,
        }
        for key in ("additions", "deletions", "changes"):
            value = getattr(entry, key)
            if value is not None:
                item[key] = value
        payload["files"].append(item)
    return payload


class DocumentationDispatcher:
    """Filters a DocumentationRequest, submits it and reports back on pull requests."""

    def __init__(
        self,
        config: DocsServerConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        github: Optional[GitHubClientProtocol] = None,
    ):
        self.config = config
        self.github = github
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def dispatch(self, request: DocumentationRequest) -> DispatchOutcome:
        """
        Send the documentable files of `request` to the documentation server.

        Returns a skipped outcome without any network call when nothing is
        documentable. Raises ConfigurationError when the server URL is missing or invalid.
        Transport errors and non-2xx answers become a failed outcome; they are
        never retried.
        """
        logger.info(
            f"Processing {len(request.files)} files for {request.owner}/{request.repo}"
        )
        files = filter_documentable(request.files)
        if not files:
            logger.warning("No documentable files found in this change. Skipping update.")
            return DispatchOutcome.skipped("no documentable files")

        url = self.config.generate_url
        paths = [entry.path for entry in files]
        logger.info(f"Will document {len(files)} files: {', '.join(paths)}")

        outcome = await self._post(url, build_payload(request, files), paths)
        if request.pr_number is not None:
            await self.notify(request, outcome)
        return outcome

    async def _post(
        self, url: str, payload: Dict[str, Any], paths: List[str]
    ) -> DispatchOutcome:
        try:
            response = await self._client.post(
                url, json=payload, headers=self.config.headers()
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = f"documentation server returned {e.response.status_code}"
            logger.error(f"Error updating documentation: {error}")
            return DispatchOutcome.failed(error, paths)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error = str(e) or e.__class__.__name__
            logger.error(f"Error updating documentation: {error}")
            return DispatchOutcome.failed(error, paths)

        try:
            body: Any = response.json()
        except ValueError:
            body = response.text
        logger.info("Documentation server response received. Documentation generation started.")
        return DispatchOutcome.accepted(body, paths)

    async def notify(self, request: DocumentationRequest, outcome: DispatchOutcome) -> None:
        """Comment `outcome` on the pull request of `request`; comment failures are only logged."""
        if self.github is None:
            return
        if outcome.status == DispatchStatus.ACCEPTED:
            body = ACCEPTED_COMMENT
        else:
            body = FAILED_COMMENT.format(error=outcome.error)

        try:
            await self.github.create_comment(
                request.owner, request.repo, request.pr_number, body
            )
        except Exception as e:
            logger.error(
                f"Failed to comment on PR #{request.pr_number} in {request.owner}/{request.repo}: {e}"
            )
