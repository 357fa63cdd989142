"""Tests for the requests and aiohttp transports."""

import asyncio

import aiohttp
import pytest
import requests

from tinytwitter.errors import RemoteRejectionError, TransportError
from tinytwitter.request_builder import SignedRequest
from tinytwitter.transport import AsyncTransport, Response, Transport

SIGNED = SignedRequest(
    method="POST",
    url="https://api.twitter.com/1.1/statuses/update.json",
    authorization='OAuth oauth_nonce="1"',
    body=b"status=hi",
)


class FakeRequestsResponse:
    def __init__(self, status_code=200, content=b"{}"):
        self.status_code = status_code
        self.content = content
        self.headers = {"Content-Type": "application/json"}
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True


class FakeSession:
    """Stands in for requests.Session; one instance per request."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeRequestsResponse()
        self.error = error
        self.calls = []
        self.closed = False

    def __call__(self):
        return self

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_send_success():
    """Test the signed request is sent as-is and the session is closed."""
    session = FakeSession(FakeRequestsResponse(content=b'{"id": 1}'))
    response = Transport(timeout=5, session_factory=session).send(SIGNED)
    assert response == Response(200, {"Content-Type": "application/json"}, b'{"id": 1}')
    assert response.text == '{"id": 1}'
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", SIGNED.url)
    assert kwargs["headers"]["Authorization"] == SIGNED.authorization
    assert kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
    assert kwargs["data"] == b"status=hi"
    assert kwargs["timeout"] == 5
    assert session.closed
    assert session.response.closed


def test_send_rejected():
    """Test HTTP errors surface as RemoteRejectionError after release."""
    session = FakeSession(FakeRequestsResponse(401, b'{"errors":[{"code":32}]}'))
    with pytest.raises(RemoteRejectionError) as excinfo:
        Transport(session_factory=session).send(SIGNED)
    assert excinfo.value.status == 401
    assert "32" in excinfo.value.body
    assert session.closed


def test_send_connection_error():
    """Test requests failures are wrapped in TransportError."""
    session = FakeSession(error=requests.ConnectionError("boom"))
    with pytest.raises(TransportError) as excinfo:
        Transport(session_factory=session).send(SIGNED)
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    assert session.closed


class FakeAiohttpResponse:
    def __init__(self, status=200, content=b"[]"):
        self.status = status
        self.headers = {}
        self._content = content
        self.released = False

    async def read(self):
        return self._content

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.released = True


class FakeClientSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeAiohttpResponse()
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def test_async_send_success():
    """Test the aiohttp transport reads the full body."""
    session = FakeClientSession(FakeAiohttpResponse(content=b'{"id": 2}'))
    response = asyncio.run(AsyncTransport(session=session, timeout=3).send(SIGNED))
    assert response.status == 200
    assert response.content == b'{"id": 2}'
    method, url, kwargs = session.calls[0]
    assert (method, url) == ("POST", SIGNED.url)
    assert kwargs["data"] == b"status=hi"
    assert kwargs["timeout"].total == 3
    assert session.response.released


def test_async_send_rejected():
    """Test HTTP errors from aiohttp surface as RemoteRejectionError."""
    session = FakeClientSession(FakeAiohttpResponse(status=500, content=b"oops"))
    with pytest.raises(RemoteRejectionError) as excinfo:
        asyncio.run(AsyncTransport(session=session).send(SIGNED))
    assert excinfo.value.status == 500


def test_async_send_client_error():
    """Test aiohttp failures are wrapped in TransportError."""
    session = FakeClientSession(error=aiohttp.ClientConnectionError("down"))
    with pytest.raises(TransportError):
        asyncio.run(AsyncTransport(session=session).send(SIGNED))
