"""Value types returned by the Gava client."""
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .signing import stringify


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        return Decimal(stringify(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}")


class Checkout:
    """A checkout as reported by Gava.

    Instances are only built from payloads whose signature has already
    been verified.

    Attributes:
        checkout_id: Gava-assigned identifier
        checkout_hash: Token addressing the checkout in URLs
        reference: Merchant reference, echoed back unchanged
        paid: Whether the checkout has been paid
        amount: Amount of the checkout
        phone: Phone number the payment was made from, may be empty
        transaction_code: Payment transaction code, may be empty
        payment_method: Payment method used, may be empty
        note: Free-form note, may be empty
        signature: Signature Gava computed over the other fields
    """

    __slots__ = (
        "checkout_id", "checkout_hash", "reference", "paid", "amount",
        "phone", "transaction_code", "payment_method", "note", "signature",
    )

    def __init__(
        self,
        checkout_id: Any,
        checkout_hash: str,
        reference: str,
        paid: bool,
        amount: Decimal,
        phone: Optional[str] = None,
        transaction_code: Optional[str] = None,
        payment_method: Optional[str] = None,
        note: Optional[str] = None,
        signature: str = "",
    ) -> None:
        self.checkout_id = checkout_id
        self.checkout_hash = checkout_hash
        self.reference = reference
        self.paid = paid
        self.amount = amount
        self.phone = phone
        self.transaction_code = transaction_code
        self.payment_method = payment_method
        self.note = note
        self.signature = signature

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Checkout":
        """Build a checkout from a decoded Gava payload.

        Raises:
            KeyError: If a field is missing
            ValueError: If the amount is not a number
        """
        return cls(
            checkout_id=payload["checkoutId"],
            checkout_hash=payload["checkoutHash"],
            reference=payload["reference"],
            paid=_to_bool(payload["paid"]),
            amount=_to_decimal(payload["amount"]),
            phone=payload["phone"],
            transaction_code=payload["transactionCode"],
            payment_method=payload["paymentMethod"],
            note=payload["note"],
            signature=payload["signature"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the checkout with Gava's field names."""
        return {
            "checkoutId": self.checkout_id,
            "checkoutHash": self.checkout_hash,
            "reference": self.reference,
            "paid": self.paid,
            "amount": str(self.amount),
            "phone": self.phone,
            "transactionCode": self.transaction_code,
            "paymentMethod": self.payment_method,
            "note": self.note,
            "signature": self.signature,
        }

    def _key(self):
        return tuple(getattr(self, name) for name in self.__slots__)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Checkout):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Checkout(checkout_id={self.checkout_id!r}, checkout_hash={self.checkout_hash!r}, "
            f"reference={self.reference!r}, paid={self.paid!r}, amount={self.amount!r})"
        )


class FetchStatus(str, Enum):
    """Outcome of a trust-confirmation fetch.

    Attributes:
        TRUSTED: The fetched checkout passed every check
        REJECTED: Gava answered but the checkout could not be confirmed
        TRANSPORT_FAILED: The lookup request itself failed
    """
    TRUSTED = "trusted"
    REJECTED = "rejected"
    TRANSPORT_FAILED = "transport_failed"


class FetchResult:
    """Result of fetching and re-validating a checkout."""

    def __init__(
        self,
        status: FetchStatus,
        checkout: Optional[Checkout] = None,
        detail: str = "",
    ) -> None:
        self.status = status
        self.checkout = checkout
        self.detail = detail

    @classmethod
    def trusted(cls, checkout: Checkout) -> "FetchResult":
        return cls(FetchStatus.TRUSTED, checkout=checkout)

    @classmethod
    def rejected(cls, reason: str) -> "FetchResult":
        return cls(FetchStatus.REJECTED, detail=reason)

    @classmethod
    def transport_failed(cls, detail: str) -> "FetchResult":
        return cls(FetchStatus.TRANSPORT_FAILED, detail=detail)

    @property
    def is_trusted(self) -> bool:
        return self.status is FetchStatus.TRUSTED

    def __repr__(self) -> str:
        return f"FetchResult(status={self.status.value!r}, detail={self.detail!r})"
