"""
Checkout creation.

Builds the signed form payload for Gava's create endpoint and submits it
in a single request. The response body (the checkout URL) is returned as
is.
"""
import logging
import math
from decimal import Decimal
from typing import List, Optional, Tuple, Union

from .exceptions import CheckoutCreationError, TransportError
from .signing import sign_payload

# Set up logging
logger = logging.getLogger('gava.checkout')

CREATE_PATH = "create"

Amount = Union[int, float, Decimal]


def _is_positive_amount(amount) -> bool:
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        return False
    if isinstance(amount, float) and not math.isfinite(amount):
        return False
    if isinstance(amount, Decimal) and not amount.is_finite():
        return False
    return amount > 0


def build_checkout_payload(
        reference: str,
        amount: Amount,
        return_url: str,
        cancel_url: str,
        secret: str,
        phone: Optional[str] = None,
        transaction_code: Optional[str] = None,
        payment_method: Optional[str] = None
) -> List[Tuple[str, str]]:
    """
    Build the ordered, signed form fields for a new checkout.

    Optional fields are only included when set; leaving one out changes
    the signed string, so they are never sent empty.

    Args:
        reference: Merchant reference for the checkout
        amount: Amount to be paid by the customer
        return_url: URL the customer returns to after paying
        cancel_url: URL the customer returns to on cancelling
        secret: Shared API secret
        phone: Phone number the payment will be made from
        transaction_code: Transaction code of a payment already made
        payment_method: Payment method the customer will use

    Returns:
        List of (name, value) pairs ending with the signature

    Raises:
        ValueError: If the reference is empty or the amount is not positive
    """
    if not reference or not isinstance(reference, str):
        raise ValueError("Reference must be a non-empty string")
    if not _is_positive_amount(amount):
        raise ValueError("Amount must be a positive number")

    fields = [
        ("reference", reference),
        ("amount", amount),
        ("return_url", return_url),
        ("cancel_url", cancel_url),
    ]

    if phone:
        fields.append(("phone", phone))
    if transaction_code:
        fields.append(("transaction_code", transaction_code))
    if payment_method:
        fields.append(("payment_method", payment_method))

    return sign_payload(fields, secret)


def create_checkout(
        transport,
        api_url: str,
        secret: str,
        reference: str,
        amount: Amount,
        return_url: str,
        cancel_url: str,
        phone: Optional[str] = None,
        transaction_code: Optional[str] = None,
        payment_method: Optional[str] = None
) -> str:
    """
    Create a checkout on Gava and return the response body.

    Raises:
        CheckoutCreationError: If the request failed or Gava rejected it
    """
    payload = build_checkout_payload(
        reference, amount, return_url, cancel_url, secret,
        phone=phone,
        transaction_code=transaction_code,
        payment_method=payment_method
    )

    try:
        response = transport.post(f"{api_url}/{CREATE_PATH}", payload)
    except TransportError as e:
        logger.error(f"Checkout creation request failed for reference {reference}: {e.message}")
        raise CheckoutCreationError("Request failed")

    if not response.success:
        logger.warning(f"Gava rejected checkout for reference {reference} (status {response.status_code})")
        raise CheckoutCreationError(
            response.body,
            response_body=response.body,
            status_code=response.status_code
        )

    return response.body
