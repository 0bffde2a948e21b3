"""
Gava API Client

Entry point for merchants: create hosted checkouts and process the
webhook notifications Gava sends once a checkout has been paid.

Example:
    gava = Gava("https://pay.example.com", "secret")
    url = gava.create_checkout("INV-1", 100, "https://shop/ok", "https://shop/cancel")

    # in the webhook endpoint
    checkout = gava.process_webhook(request_body)
"""
import logging
from typing import Optional, Union

from . import checkout as checkout_api
from . import confirmation
from .config import Settings, load_settings
from .exceptions import (
    FETCH_FAILED,
    LOOKUP_FAILED,
    NOT_PAID,
    ConfigurationError,
    WebhookError,
)
from .models import Checkout, FetchResult, FetchStatus
from .transport import DEFAULT_TIMEOUT, RequestsTransport
from .webhook import validate_notification

# Set up logging
logger = logging.getLogger('gava.client')


class Gava:
    """Client for a Gava installation."""

    def __init__(
            self,
            api_url: str,
            secret: str,
            transport=None,
            timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        """
        Args:
            api_url: Base URL of the Gava installation
            secret: API secret key as set in the Gava configuration
            transport: Object with ``post``/``get`` methods; a requests-based
                transport is used if None
            timeout: Request timeout for the default transport, in seconds

        Raises:
            ConfigurationError: If the URL or secret is empty
        """
        self._settings = Settings(api_url, secret, timeout=timeout)
        is_valid, missing = self._settings.validate()
        if not is_valid:
            raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")

        self.transport = transport or RequestsTransport(timeout=timeout)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, transport=None) -> "Gava":
        """Build a client from GAVA_* environment variables."""
        settings = load_settings(env_file)
        return cls(settings.api_url, settings.secret, transport=transport, timeout=settings.timeout)

    @property
    def api_url(self) -> str:
        return self._settings.api_url

    @property
    def secret(self) -> str:
        return self._settings.secret

    def create_checkout(
            self,
            reference: str,
            amount,
            return_url: str,
            cancel_url: str,
            phone: Optional[str] = None,
            transaction_code: Optional[str] = None,
            payment_method: Optional[str] = None
    ) -> str:
        """
        Create a checkout and return the checkout URL sent back by Gava.

        Raises:
            CheckoutCreationError: If the request failed or Gava rejected it
            ValueError: If the reference is empty or the amount not positive
        """
        return checkout_api.create_checkout(
            self.transport, self.api_url, self.secret,
            reference, amount, return_url, cancel_url,
            phone=phone,
            transaction_code=transaction_code,
            payment_method=payment_method
        )

    def fetch_checkout(self, checkout_hash: str) -> FetchResult:
        """Fetch the checkout with the given hash and re-validate its signature."""
        return confirmation.fetch_checkout(self.transport, self.api_url, checkout_hash, self.secret)

    def process_webhook(self, raw_body: Union[bytes, str, None]) -> Checkout:
        """
        Validate a webhook notification and confirm it with Gava.

        The notification body is only used to find the checkout; the
        returned checkout is the copy fetched from Gava.

        Args:
            raw_body: Request body exactly as received

        Returns:
            The confirmed, paid checkout

        Raises:
            WebhookError: If any validation or confirmation step fails
        """
        notification = validate_notification(raw_body, self.secret)

        result = self.fetch_checkout(notification["checkoutHash"])
        if result.status is FetchStatus.TRANSPORT_FAILED:
            raise WebhookError(LOOKUP_FAILED)
        if result.status is FetchStatus.REJECTED:
            raise WebhookError(FETCH_FAILED)

        checkout = result.checkout
        # Gava never moves a checkout from paid back to unpaid, and only
        # sends webhooks for paid checkouts.
        if not checkout.paid:
            logger.warning(f"Checkout {checkout.checkout_hash} notified but not paid")
            raise WebhookError(NOT_PAID)

        logger.info(f"Confirmed paid checkout {checkout.checkout_hash} (reference {checkout.reference})")
        return checkout

    def hash_from_url(self, url: str) -> str:
        """Extract the checkout hash from a checkout URL. No validation is done."""
        return url.replace(f"{self.api_url}/{confirmation.CHECKOUT_PATH}/", "")
