"""Exception types raised by the change tracker."""

from typing import Optional


class ChangeTrackerError(Exception):
    """Base class for errors raised by this service."""


class ConfigurationError(ChangeTrackerError):
    """Raised when a required setting is missing for the requested call."""


class GitHubAPIError(ChangeTrackerError):
    """Raised when a GitHub REST call fails or returns a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ContentDecodeError(ChangeTrackerError):
    """Raised when file content returned by GitHub cannot be decoded to text."""
