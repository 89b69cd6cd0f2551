"""Factory for creating GitHub clients and change trackers from settings."""

import logging
from typing import Optional

import httpx

from ..config.settings import Settings
from ..models import GitHubClient
from ..protocols.github_client_protocol import GitHubClientProtocol
from .change_tracker import ChangeTracker
from .dispatcher import DocsServerConfig, DocumentationDispatcher

logger = logging.getLogger(__name__)


def create_github_client(
    token: str = "",
    api_url: str = "https://api.github.com",
    http_client: Optional[httpx.AsyncClient] = None,
) -> GitHubClientProtocol:
    """
    Create a GitHub client.

    Args:
        token: Installation or personal access token; empty for anonymous calls
        api_url: GitHub REST base URL (GitHub Enterprise uses https://host/api/v3)
        http_client: Optional shared httpx client, left open on close

    Returns:
        GitHubClientProtocol implementation
    """
    if not token:
        logger.warning("GITHUB_TOKEN is not set: GitHub API calls are anonymous")
    return GitHubClient(token=token, api_url=api_url, http_client=http_client)


def create_github_client_from_settings(settings: Settings) -> GitHubClientProtocol:
    return create_github_client(
        token=settings.GITHUB_TOKEN,
        api_url=settings.GITHUB_API_URL,
    )


def create_change_tracker_from_settings(settings: Settings) -> ChangeTracker:
    """
    Create a ChangeTracker wired to GitHub and the documentation server.

    Args:
        settings: Application settings

    Returns:
        ChangeTracker owning its HTTP clients; close it with `aclose()`
    """
    github = create_github_client_from_settings(settings)
    dispatcher = DocumentationDispatcher(
        config=DocsServerConfig.from_settings(settings),
        github=github,
    )
    return ChangeTracker(github=github, dispatcher=dispatcher)
