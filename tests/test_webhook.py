import json
from decimal import Decimal

import pytest

from gava import Checkout, WebhookError
from gava.exceptions import (
    FETCH_FAILED,
    LOOKUP_FAILED,
    MISSING_PARAMETERS,
    NOT_PAID,
    SIGNATURE_INVALID,
)
from gava.signing import REQUIRED_FIELDS
from gava.webhook import parse_payload, validate_notification

from tests.helpers import API_URL, SECRET, make_checkout_payload

DETAILS_URL = f"{API_URL}/checkout/h1"


def test_process_webhook_returns_fetched_checkout(client, transport, paid_payload, paid_body):
    """Test a valid notification returns the fetched checkout"""
    transport.respond(DETAILS_URL, paid_body)

    checkout = client.process_webhook(paid_body.encode("utf-8"))

    assert checkout == Checkout.from_payload(paid_payload)
    assert checkout.paid is True
    assert checkout.amount == Decimal("100")
    assert checkout.payment_method == "mobile"
    assert transport.requests == [("GET", DETAILS_URL, None)]


def test_process_webhook_accepts_str_body(client, transport, paid_body):
    """Test a str body is accepted"""
    transport.respond(DETAILS_URL, paid_body)
    assert client.process_webhook(paid_body).reference == "R1"


@pytest.mark.parametrize("raw_body", [b"", None, b"not json", b"[]", b"{}", b"null", b"42", b"\xff\xfe"])
def test_process_webhook_rejects_unparseable_body(client, transport, raw_body):
    """Test bodies that are not a JSON object"""
    with pytest.raises(WebhookError) as exc_info:
        client.process_webhook(raw_body)
    assert exc_info.value.message == MISSING_PARAMETERS
    assert transport.requests == []


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_process_webhook_rejects_missing_field(client, transport, paid_payload, field):
    """Test each required field is enforced"""
    del paid_payload[field]

    with pytest.raises(WebhookError) as exc_info:
        client.process_webhook(json.dumps(paid_payload))

    assert exc_info.value.message == MISSING_PARAMETERS
    assert transport.requests == []


def test_null_fields_count_as_present():
    """Test null fields satisfy the presence check"""
    payload = make_checkout_payload(phone=None, note=None)
    assert validate_notification(json.dumps(payload), SECRET)["phone"] is None


def test_process_webhook_rejects_bad_signature(client, transport, paid_payload):
    """Test a wrong signature is rejected before any lookup"""
    paid_payload["signature"] = make_checkout_payload(secret="wrong")["signature"]

    with pytest.raises(WebhookError) as exc_info:
        client.process_webhook(json.dumps(paid_payload))

    assert exc_info.value.message == SIGNATURE_INVALID
    assert transport.requests == []


def test_process_webhook_rejects_tampered_amount(client, paid_payload):
    """Test a changed amount breaks the signature"""
    paid_payload["amount"] = 1

    with pytest.raises(WebhookError) as exc_info:
        client.process_webhook(json.dumps(paid_payload))

    assert exc_info.value.message == SIGNATURE_INVALID


# Test confirmation of the notified checkout

def test_process_webhook_rejects_unpaid_fetched_checkout(client, transport, paid_body):
    """Test an unpaid fetched checkout is rejected"""
    transport.respond(DETAILS_URL, json.dumps(make_checkout_payload(paid=False)))

    with pytest.raises(WebhookError) as exc_info:
        client.process_webhook(paid_body)

    assert exc_info.value.message == NOT_PAID


def test_process_webhook_lookup_request_failure(client, transport, paid_body):
    """Test a failed lookup request"""
    transport.fail(DETAILS_URL)

    with pytest.raises(WebhookError) as exc_info:
        client.process_webhook(paid_body)

    assert exc_info.value.message == LOOKUP_FAILED


@pytest.mark.parametrize("body,success", [
    ("Not Found", False),
    ("<html>oops</html>", True),
    ("{}", True),
    (json.dumps({"checkoutId": "c1", "checkoutHash": "h1"}), True),
    (json.dumps(make_checkout_payload(secret="wrong")), True),
    (json.dumps(make_checkout_payload(amount="lots")), True),
])
def test_process_webhook_fetch_failed(client, transport, paid_body, body, success):
    """Test every way a fetched checkout can fail confirmation"""
    transport.respond(DETAILS_URL, body, success=success, status_code=200 if success else 404)

    with pytest.raises(WebhookError) as exc_info:
        client.process_webhook(paid_body)

    assert exc_info.value.message == FETCH_FAILED


def test_fetched_state_wins_over_notification(client, transport):
    """Test the fetched checkout replaces the notification body"""
    notification = make_checkout_payload(note="from webhook")
    fetched = make_checkout_payload(note="from gava", transactionCode="TX9")
    transport.respond(DETAILS_URL, json.dumps(fetched))

    checkout = client.process_webhook(json.dumps(notification))

    assert checkout.note == "from gava"
    assert checkout.transaction_code == "TX9"


def test_parse_payload():
    """Test JSON object parsing"""
    assert parse_payload(b'{"a": 1}') == {"a": 1}
    assert parse_payload('{"a": 1}') == {"a": 1}
    assert parse_payload(b"[1, 2]") is None
    assert parse_payload(b"{") is None


def test_checkout_with_structured_note_is_usable(client, transport):
    """Test a verified checkout carrying a JSON object note"""
    fetched = make_checkout_payload(note={"items": [1, 2]})
    transport.respond(DETAILS_URL, json.dumps(fetched))

    checkout = client.process_webhook(json.dumps(make_checkout_payload()))

    assert checkout.note == {"items": [1, 2]}
    assert checkout == Checkout.from_payload(fetched)
    with pytest.raises(TypeError):
        hash(checkout)
