import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from src.exceptions import GitHubAPIError
from src.schemas import PRFileStatus

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"


class GitHubClient:
    """Calls the GitHub REST endpoints the change tracker needs."""

    def __init__(
        self,
        token: str = "",
        api_url: str = DEFAULT_API_URL,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.token = token
        self.api_url = api_url.rstrip("/")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "genidocs-change-tracker",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(
                method, url, headers=self._headers(), **kwargs
            )
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"{method} {url} failed: {e}") from e

        if response.is_error:
            raise GitHubAPIError(
                f"{method} {url} returned {response.status_code}: {_error_detail(response)}",
                status_code=response.status_code,
            )
        return response

    async def list_pull_request_files(
        self, owner: str, repo: str, pr_number: int
    ) -> List[PRFileStatus]:
        """List every file of a pull request, following pagination links."""
        url: Optional[str] = f"{self.api_url}/repos/{owner}/{repo}/pulls/{pr_number}/files"
        params: Optional[Dict[str, Any]] = {"per_page": 100}

        files: List[PRFileStatus] = []
        while url:
            response = await self._request("GET", url, params=params)
            files.extend(PRFileStatus.model_validate(item) for item in response.json())

            # The next link already carries the query string
            next_link = response.links.get("next")
            url = next_link.get("url") if next_link else None
            params = None

        logger.debug(f"PR #{pr_number} in {owner}/{repo} lists {len(files)} files")
        return files

    async def get_content(
        self, owner: str, repo: str, path: str, ref: Optional[str] = None
    ) -> Dict[str, Any]:
        """Return the contents API record of a single file."""
        url = f"{self.api_url}/repos/{owner}/{repo}/contents/{quote(path)}"
        params = {"ref": ref} if ref else None
        response = await self._request("GET", url, params=params)

        data = response.json()
        if not isinstance(data, dict):
            raise GitHubAPIError(f"{path} is not a file")
        return data

    async def create_comment(
        self, owner: str, repo: str, issue_number: int, body: str
    ) -> Dict[str, Any]:
        """Post a comment on an issue or pull request."""
        url = f"{self.api_url}/repos/{owner}/{repo}/issues/{issue_number}/comments"
        response = await self._request("POST", url, json={"body": body})
        return response.json()


def _error_detail(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return response.reason_phrase
