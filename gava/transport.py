"""
HTTP transport used by the Gava client.

The client only needs two calls, a form POST and a plain GET, each
returning whether the request succeeded together with the raw body.
Any object with the same ``post``/``get`` methods can stand in for
RequestsTransport, which is how the tests drive the client.
"""
import logging
from typing import Any, Iterable, NamedTuple, Optional, Tuple

import requests

from .exceptions import TransportError

# Set up logging
logger = logging.getLogger('gava.transport')

DEFAULT_TIMEOUT = 10  # seconds


class TransportResponse(NamedTuple):
    """Outcome of an HTTP request: 2xx flag, raw body and status code"""
    success: bool
    body: str
    status_code: Optional[int] = None


class RequestsTransport:
    """Transport backed by a requests session."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def _send(self, method: str, url: str, **kwargs: Any) -> TransportResponse:
        try:
            logger.debug(f"Making {method} request to {url}")
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {str(e)}")
            raise TransportError(f"Request failed: {str(e)}")

        return TransportResponse(
            success=200 <= response.status_code < 300,
            body=response.text,
            status_code=response.status_code
        )

    def post(self, url: str, form_fields: Iterable[Tuple[str, str]]) -> TransportResponse:
        """
        POST form-encoded fields, keeping their order.

        Raises:
            TransportError: If no response could be obtained
        """
        return self._send("POST", url, data=list(form_fields))

    def get(self, url: str) -> TransportResponse:
        """
        GET a URL.

        Raises:
            TransportError: If no response could be obtained
        """
        return self._send("GET", url)
