import json

import pytest

from gava import Gava

from tests.helpers import API_URL, SECRET, FakeTransport, make_checkout_payload


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return Gava(API_URL, SECRET, transport=transport)


@pytest.fixture
def paid_payload():
    return make_checkout_payload()


@pytest.fixture
def paid_body(paid_payload):
    return json.dumps(paid_payload)
