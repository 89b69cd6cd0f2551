"""Services for the application."""

from .change_tracker import ChangeTracker
from .content_fetcher import fetch_all_contents, fetch_content
from .dispatcher import DocsServerConfig, DocumentationDispatcher
from .github_client_factory import (
    create_change_tracker_from_settings,
    create_github_client,
    create_github_client_from_settings,
)
from .webhook_security import verify_webhook_signature

__all__ = [
    "ChangeTracker",
    "DocsServerConfig",
    "DocumentationDispatcher",
    "create_change_tracker_from_settings",
    "create_github_client",
    "create_github_client_from_settings",
    "fetch_all_contents",
    "fetch_content",
    "verify_webhook_signature",
]
