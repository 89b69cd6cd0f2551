"""Unit tests for the client and tracker factories."""

import logging

import pytest

from src.config.logging import configure_logging
from src.config.settings import Settings
from src.models import GitHubClient
from src.services import (
    ChangeTracker,
    create_change_tracker_from_settings,
    create_github_client,
)


@pytest.mark.asyncio
async def test_create_github_client():
    client = create_github_client(token="t", api_url="https://ghe.example.com/api/v3/")

    assert isinstance(client, GitHubClient)
    assert client.token == "t"
    assert client.api_url == "https://ghe.example.com/api/v3"
    await client.aclose()


@pytest.mark.asyncio
async def test_create_change_tracker_from_settings():
    settings = Settings(
        _env_file=None,
        DOCS_SERVER_URL="http://docs.test",
        DOCS_API_KEY="k",
        GITHUB_TOKEN="gh",
    )

    async with create_change_tracker_from_settings(settings) as tracker:
        assert isinstance(tracker, ChangeTracker)
        assert tracker.github.token == "gh"
        assert tracker.dispatcher.github is tracker.github
        assert tracker.dispatcher.config.generate_url == "http://docs.test/api/generate"
        assert tracker.dispatcher.config.api_key == "k"


def test_configure_logging_is_idempotent():
    configure_logging("DEBUG")
    logger = configure_logging("warning")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING


def test_configure_logging_debug_flag_and_unknown_level():
    assert configure_logging("INFO", debug=True).level == logging.DEBUG
    assert configure_logging("chatty").level == logging.INFO
