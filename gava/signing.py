"""
Request and payload signing for the Gava API.

Gava authenticates messages with a shared secret: the values of a payload
are concatenated in order, the secret is appended and the result is hashed
with SHA-512. Field order is part of the contract, so every signed payload
is handled as an explicit sequence of (name, value) pairs.
"""
import hashlib
import hmac
from typing import Any, Iterable, List, Mapping, Tuple, Union

# Fields of a checkout object covered by its signature, in signing order
CHECKOUT_FIELDS = (
    "checkoutId",
    "checkoutHash",
    "reference",
    "paid",
    "amount",
    "phone",
    "transactionCode",
    "paymentMethod",
    "note",
)

SIGNATURE_FIELD = "signature"

# Fields every webhook body and fetched checkout must carry
REQUIRED_FIELDS = CHECKOUT_FIELDS + (SIGNATURE_FIELD,)

Fields = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def stringify(value: Any) -> str:
    """
    Render a value the way Gava does when it concatenates a payload.

    Gava coerces values with PHP string semantics: null and false become
    an empty string, true becomes "1" and integral floats drop their
    fractional part.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        text = repr(value)
        if "e" in text:
            mantissa, exponent = text.split("e")
            if "." not in mantissa:
                mantissa += ".0"
            text = f"{mantissa}E{int(exponent):+d}"
        return text
    return str(value)


def _pairs(fields: Fields) -> List[Tuple[str, Any]]:
    if isinstance(fields, Mapping):
        return list(fields.items())
    return list(fields)


def sign(fields: Fields, secret: str) -> str:
    """
    Compute the signature of an ordered set of fields.

    Args:
        fields: Ordered (name, value) pairs or an insertion-ordered mapping.
            A field named "signature" is skipped.
        secret: Shared API secret

    Returns:
        Lowercase hexadecimal SHA-512 digest
    """
    message = "".join(
        stringify(value) for name, value in _pairs(fields) if name != SIGNATURE_FIELD
    )
    return hashlib.sha512((message + secret).encode("utf-8")).hexdigest()


def verify(fields: Fields, claimed_signature: Any, secret: str) -> bool:
    """
    Check a claimed signature against the one computed for the fields.

    Returns:
        True if the signatures match, False otherwise
    """
    if not isinstance(claimed_signature, str):
        return False
    try:
        claimed = claimed_signature.encode("ascii")
    except UnicodeEncodeError:
        return False
    expected = sign(fields, secret).encode("ascii")
    return hmac.compare_digest(expected, claimed)


def checkout_fields(payload: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """Ordered signed fields of a decoded checkout payload."""
    return [(name, payload[name]) for name in CHECKOUT_FIELDS]


def sign_payload(fields: Iterable[Tuple[str, Any]], secret: str) -> List[Tuple[str, str]]:
    """
    Render fields to strings and append their signature as the last pair.

    The rendered strings are what gets sent, so the values on the wire are
    exactly the values that were signed.
    """
    rendered = [(name, stringify(value)) for name, value in fields if name != SIGNATURE_FIELD]
    rendered.append((SIGNATURE_FIELD, sign(rendered, secret)))
    return rendered
