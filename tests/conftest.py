# tests/conftest.py
import json
import pytest
import requests
from unittest.mock import Mock
from bigcommerce_client.api.client import BigCommerceClient, SessionDispatcher

BASE_URL = "https://api.test/stores/abc123"

def make_response(status_code: int, payload=None, content: bytes = None, url: str = BASE_URL) -> requests.Response:
    """Build a real requests.Response with a fully read body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = "TEST"
    response.url = url
    if content is None:
        content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    response._content = content
    response._content_consumed = True
    return response

@pytest.fixture
def session():
    session = requests.Session()
    session.send = Mock(return_value=make_response(200, {}))
    return session

@pytest.fixture
def dispatcher(session):
    return SessionDispatcher("abc123", "test_token", client_id="test_client", base_url="https://api.test", timeout=5.0, session=session)

@pytest.fixture
def client(dispatcher):
    return BigCommerceClient(dispatcher)

@pytest.fixture
def strict_client(dispatcher):
    return BigCommerceClient(dispatcher, strict_deletes=True)

def sent_request(session) -> requests.PreparedRequest:
    """Return the last request passed to session.send."""
    return session.send.call_args[0][0]
