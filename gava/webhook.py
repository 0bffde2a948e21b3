"""
Validation of inbound webhook notifications.

A notification that passes these checks is well formed and carries a
valid signature. That alone does not make it current: a replayed signed
body passes too, so the client always confirms the checkout with Gava
before trusting it.
"""
import json
import logging
from typing import Any, Dict, Optional, Union

from .exceptions import MISSING_PARAMETERS, SIGNATURE_INVALID, WebhookError
from .signing import REQUIRED_FIELDS, SIGNATURE_FIELD, checkout_fields, verify

# Set up logging
logger = logging.getLogger('gava.webhook')


def parse_payload(raw_body: Union[bytes, str, None]) -> Optional[Dict[str, Any]]:
    """
    Decode a JSON checkout payload.

    Returns:
        The decoded object, or None if the body is not a non-empty JSON object
    """
    if not raw_body:
        return None
    try:
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode("utf-8")
        payload = json.loads(raw_body)
    except (UnicodeDecodeError, ValueError):
        return None

    if not payload or not isinstance(payload, dict):
        return None
    return payload


def has_required_fields(payload: Dict[str, Any]) -> bool:
    """Check that every required field is present; null values count as present."""
    return all(name in payload for name in REQUIRED_FIELDS)


def validate_notification(raw_body: Union[bytes, str, None], secret: str) -> Dict[str, Any]:
    """
    Parse a raw webhook body and verify its signature.

    Args:
        raw_body: Request body exactly as received
        secret: Shared API secret

    Returns:
        The decoded notification

    Raises:
        WebhookError: If parameters are missing or the signature is invalid
    """
    payload = parse_payload(raw_body)
    if payload is None or not has_required_fields(payload):
        logger.warning("Rejected webhook: missing parameters")
        raise WebhookError(MISSING_PARAMETERS)

    if not verify(checkout_fields(payload), payload[SIGNATURE_FIELD], secret):
        logger.warning(f"Rejected webhook for checkout {payload['checkoutHash']}: bad signature")
        raise WebhookError(SIGNATURE_INVALID)

    return payload
