"""
Flask integration for receiving Gava webhooks.

The blueprint hands the raw request body to Gava.process_webhook, so the
signature is checked against exactly the bytes Gava sent.
"""
import logging
from http import HTTPStatus
from typing import Callable, Optional

from flask import Blueprint, jsonify, request

from . import responses
from .client import Gava
from .exceptions import LOOKUP_FAILED, WebhookError
from .models import Checkout

# Set up logging
logger = logging.getLogger('gava.flask_webhook')


def create_webhook_blueprint(
        client: Gava,
        on_paid: Optional[Callable[[Checkout], None]] = None,
        url_prefix: Optional[str] = None,
        path: str = "/webhook",
        name: str = "gava_webhook"
) -> Blueprint:
    """
    Create a blueprint exposing a Gava webhook endpoint.

    Args:
        client: Configured Gava client
        on_paid: Called with each confirmed, paid checkout
        url_prefix: Prefix the blueprint is mounted under
        path: Path of the endpoint within the blueprint
        name: Blueprint name

    Returns:
        Blueprint with a single POST route
    """
    blueprint = Blueprint(name, __name__, url_prefix=url_prefix)

    @blueprint.route(path, methods=['POST'])
    def receive_webhook():
        try:
            checkout = client.process_webhook(request.get_data())
        except WebhookError as e:
            if e.message == LOOKUP_FAILED:
                status = HTTPStatus.BAD_GATEWAY.value
                error_code = responses.ERROR_DEPENDENCY
            else:
                status = HTTPStatus.BAD_REQUEST.value
                error_code = responses.ERROR_WEBHOOK
            return jsonify(responses.error(e.message, error_code=error_code, http_status=status)), status

        if on_paid is not None:
            on_paid(checkout)

        return jsonify(responses.success(checkout.to_dict(), message="Checkout confirmed"))

    return blueprint
