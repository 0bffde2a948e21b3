"""
Exceptions raised by the Gava client.

Every failure is raised straight to the caller of the client; nothing is
retried or swallowed at this layer.
"""
from typing import Optional

# Webhook failure messages, used as the discriminant of WebhookError
MISSING_PARAMETERS = "Missing parameters"
SIGNATURE_INVALID = "Callback signature validation failed"
FETCH_FAILED = "Checkout fetch failed"
LOOKUP_FAILED = "Checkout lookup request failed"
NOT_PAID = "Checkout not paid"


class GavaError(Exception):
    """Base exception for errors raised by the Gava client"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(GavaError):
    """Exception raised when the client is missing its API URL or secret"""
    pass


class TransportError(GavaError):
    """Exception raised when an HTTP request could not be completed"""
    pass


class CheckoutCreationError(GavaError):
    """
    Exception raised when a checkout could not be created.

    Attributes:
        response_body: Body returned by Gava, if a response was obtained
        status_code: HTTP status of that response, if any
    """

    def __init__(
            self,
            message: str,
            response_body: Optional[str] = None,
            status_code: Optional[int] = None
    ):
        self.response_body = response_body
        self.status_code = status_code
        super().__init__(message)


class WebhookError(GavaError):
    """
    Exception raised when a webhook notification cannot be trusted.

    The message is always one of MISSING_PARAMETERS, SIGNATURE_INVALID,
    FETCH_FAILED, LOOKUP_FAILED or NOT_PAID.
    """
    pass
