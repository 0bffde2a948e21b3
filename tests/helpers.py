"""Shared constants and fakes for the Gava tests"""
from gava import TransportError, TransportResponse
from gava.signing import checkout_fields, sign

API_URL = "https://gava.example.com"
SECRET = "s"


class FakeTransport:
    """In-memory transport recording every request it receives"""

    def __init__(self):
        self.responses = {}
        self.failures = set()
        self.requests = []

    def respond(self, url, body, success=True, status_code=200):
        self.responses[url] = TransportResponse(success, body, status_code)

    def fail(self, url):
        self.failures.add(url)

    def _handle(self, method, url, fields=None):
        self.requests.append((method, url, fields))
        if url in self.failures:
            raise TransportError("Request failed: connection refused")
        if url not in self.responses:
            return TransportResponse(False, "Not Found", 404)
        return self.responses[url]

    def post(self, url, form_fields):
        return self._handle("POST", url, list(form_fields))

    def get(self, url):
        return self._handle("GET", url)


def make_checkout_payload(secret=SECRET, **overrides):
    """Build a signed checkout payload, paid by default"""
    payload = {
        "checkoutId": "c1",
        "checkoutHash": "h1",
        "reference": "R1",
        "paid": True,
        "amount": 100,
        "phone": "",
        "transactionCode": "",
        "paymentMethod": "mobile",
        "note": "",
    }
    payload.update(overrides)
    payload["signature"] = sign(checkout_fields(payload), secret)
    return payload
