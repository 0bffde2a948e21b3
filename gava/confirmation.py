"""
Trust confirmation of checkouts.

The checkout named by a webhook is fetched again from Gava and its
signature re-verified. Only this fetched copy is ever handed to the
caller.
"""
import logging

from .exceptions import TransportError
from .models import Checkout, FetchResult
from .signing import SIGNATURE_FIELD, checkout_fields, verify
from .webhook import has_required_fields, parse_payload

# Set up logging
logger = logging.getLogger('gava.confirmation')

CHECKOUT_PATH = "checkout"


def fetch_checkout(transport, api_url: str, checkout_hash: str, secret: str) -> FetchResult:
    """
    Fetch a checkout from Gava and re-validate it.

    Args:
        transport: HTTP transport with a ``get`` method
        api_url: Base URL of the Gava installation
        checkout_hash: Hash of the checkout to fetch
        secret: Shared API secret

    Returns:
        A trusted result holding the checkout, a rejected result when Gava's
        answer cannot be confirmed, or a transport failure
    """
    try:
        response = transport.get(f"{api_url}/{CHECKOUT_PATH}/{checkout_hash}")
    except TransportError as e:
        logger.error(f"Checkout lookup failed for {checkout_hash}: {e.message}")
        return FetchResult.transport_failed(e.message)

    if not response.success:
        return _reject(checkout_hash, f"Unexpected response status {response.status_code}")

    payload = parse_payload(response.body)
    if payload is None:
        return _reject(checkout_hash, "Unparseable response body")

    if not has_required_fields(payload):
        return _reject(checkout_hash, "Missing parameters")

    if not verify(checkout_fields(payload), payload[SIGNATURE_FIELD], secret):
        return _reject(checkout_hash, "Signature validation failed")

    try:
        checkout = Checkout.from_payload(payload)
    except ValueError as e:
        return _reject(checkout_hash, str(e))

    return FetchResult.trusted(checkout)


def _reject(checkout_hash: str, reason: str) -> FetchResult:
    logger.warning(f"Could not confirm checkout {checkout_hash}: {reason}")
    return FetchResult.rejected(reason)
