"""Augments change entries with file content from the GitHub contents API."""

import asyncio
import base64
import binascii
import logging
from typing import Any, Dict, List, Optional, Sequence

from src.exceptions import ContentDecodeError
from src.protocols.github_client_protocol import GitHubClientProtocol
from src.schemas import ChangeEntry

logger = logging.getLogger(__name__)


def decode_content(record: Dict[str, Any]) -> str:
    """Decode the base64 payload of a contents API record into text."""
    encoding = record.get("encoding")
    raw = record.get("content")
    if encoding != "base64" or not isinstance(raw, str):
        # Blobs over 1 MB come back with encoding "none" and no inline content
        raise ContentDecodeError(
            f"no inline content (encoding={encoding!r}, size={record.get('size')})"
        )
    try:
        return base64.b64decode(raw).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ContentDecodeError(f"undecodable content: {e}") from e


async def fetch_content(
    github: GitHubClientProtocol,
    entry: ChangeEntry,
    owner: str,
    repo: str,
    ref: Optional[str],
) -> ChangeEntry:
    """Return `entry` with its content at `ref`, or unchanged when it cannot be read."""
    if entry.is_removed:
        return entry

    try:
        record = await github.get_content(owner, repo, entry.path, ref=ref)
        content = decode_content(record)
    except Exception as e:
        logger.error(f"Error getting content for {entry.path}: {e}")
        return entry

    return entry.model_copy(update={"content": content})


async def fetch_all_contents(
    github: GitHubClientProtocol,
    entries: Sequence[ChangeEntry],
    owner: str,
    repo: str,
    ref: Optional[str],
) -> List[ChangeEntry]:
    """Fetch contents concurrently; the result keeps the order of `entries`."""
    results = await asyncio.gather(
        *(fetch_content(github, entry, owner, repo, ref) for entry in entries)
    )
    return list(results)
