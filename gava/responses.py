"""
JSON bodies returned by the webhook endpoint.
"""
import logging
from http import HTTPStatus
from typing import Any, Dict

# Set up logging
logger = logging.getLogger('gava.responses')

# Error codes
ERROR_WEBHOOK = "webhook_error"
ERROR_DEPENDENCY = "dependency_error"


def success(data: Any, message: str = "Success") -> Dict[str, Any]:
    """Body for a confirmed checkout."""
    return {"status": "success", "code": HTTPStatus.OK.value, "message": message, "data": data}


def error(message: str, error_code: str, http_status: int) -> Dict[str, Any]:
    """
    Body for a rejected notification.

    Args:
        message: One of the WebhookError messages
        error_code: ERROR_WEBHOOK or ERROR_DEPENDENCY
        http_status: Status code the endpoint answers with
    """
    logger.error(f"Webhook rejected ({error_code}): {message}")
    return {
        "status": "error",
        "code": http_status,
        "message": message,
        "error": {"code": error_code}
    }
