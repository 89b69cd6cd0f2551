"""Webhook signature verification."""

import hashlib
import hmac
import logging
from typing import Optional

logger = logging.getLogger(__name__)

SIGNATURE_PREFIX = "sha256="


def compute_signature(payload_body: bytes, secret: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), payload_body, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_webhook_signature(
    payload_body: bytes, signature_header: Optional[str], secret: str
) -> bool:
    """
    Verify the X-Hub-Signature-256 header of a GitHub delivery.

    Args:
        payload_body: Raw request body, exactly as received
        signature_header: Value of X-Hub-Signature-256 (may be missing)
        secret: Webhook secret configured on the GitHub App

    Returns:
        True if the header matches the HMAC-SHA256 of the body
    """
    if not signature_header or not signature_header.startswith(SIGNATURE_PREFIX):
        logger.warning("Missing or malformed webhook signature header")
        return False

    expected = compute_signature(payload_body, secret)
    if not hmac.compare_digest(signature_header, expected):
        logger.warning("Webhook signature verification failed")
        return False
    return True
