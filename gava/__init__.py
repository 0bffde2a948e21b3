"""
Gava - Python client for the Gava hosted checkout service

Creates hosted checkouts and authenticates the webhook notifications Gava
sends for paid checkouts, confirming each one with Gava before trusting
it.

Modules:
- client: Gava facade (create_checkout, process_webhook, hash_from_url)
- signing: SHA-512 payload signing and verification
- checkout: Signed checkout creation requests
- webhook: Inbound notification validation
- confirmation: Re-fetch and re-validation of notified checkouts
- flask_webhook: Flask blueprint for the webhook endpoint
"""

__version__ = "1.0.0"
__title__ = "gava"
__description__ = "Client library for the Gava hosted checkout service"

from .client import Gava
from .config import Settings, load_settings
from .exceptions import (
    CheckoutCreationError,
    ConfigurationError,
    GavaError,
    TransportError,
    WebhookError,
)
from .models import Checkout, FetchResult, FetchStatus
from .signing import sign, verify
from .transport import RequestsTransport, TransportResponse

__all__ = [
    'Gava',
    'Settings',
    'load_settings',
    'Checkout',
    'FetchResult',
    'FetchStatus',
    'GavaError',
    'CheckoutCreationError',
    'ConfigurationError',
    'TransportError',
    'WebhookError',
    'RequestsTransport',
    'TransportResponse',
    'sign',
    'verify',
    '__version__'
]
