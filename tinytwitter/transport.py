"""
Transport Module
Send signed requests over HTTP and read the full response.

Each call is exactly one round trip. The connection is released as soon as
the body has been read, on success and on error alike.
"""

import asyncio
from typing import Callable, Mapping, NamedTuple, Optional

import aiohttp
import requests

from .config import Config
from .errors import RemoteRejectionError, TransportError
from .logger import logger
from .request_builder import SignedRequest


class Response(NamedTuple):
    """Status, headers and raw body of an HTTP response."""
    status: int
    headers: Mapping[str, str]
    content: bytes

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


def _check_status(response: Response, url: str) -> Response:
    if response.status >= 400:
        logger.error("Twitter API rejected %s with HTTP %s", url, response.status)
        raise RemoteRejectionError(response.status, response.text, url)
    return response


class Transport:
    """Blocking transport backed by requests."""

    def __init__(self, timeout: Optional[float] = None,
                 session_factory: Callable[[], requests.Session] = requests.Session):
        """
        Initialize transport.

        Args:
            timeout: Seconds to wait for the server (default Config.TWITTER_TIMEOUT)
            session_factory: Creates the session used for a single request
        """
        self.timeout = Config.TWITTER_TIMEOUT if timeout is None else timeout
        self.session_factory = session_factory

    def send(self, signed: SignedRequest) -> Response:
        """
        Send a signed request and read the whole body.

        Raises:
            TransportError: the exchange failed before a response was read
            RemoteRejectionError: the server answered with status >= 400
        """
        logger.debug("%s %s", signed.method, signed.url)
        try:
            with self.session_factory() as session:
                with session.request(
                    signed.method,
                    signed.url,
                    headers=signed.headers,
                    data=signed.body,
                    timeout=self.timeout,
                ) as resp:
                    response = Response(resp.status_code, dict(resp.headers), resp.content)
        except requests.RequestException as exc:
            logger.error("Request to %s failed: %s", signed.url, exc)
            raise TransportError(f"{signed.method} {signed.url} failed: {exc}") from exc
        return _check_status(response, signed.url)


class AsyncTransport:
    """Non-blocking transport backed by aiohttp."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None,
                 timeout: Optional[float] = None):
        """
        Initialize transport.

        Args:
            session: Shared client session; a fresh one per request if omitted
            timeout: Seconds to wait for the server (default Config.TWITTER_TIMEOUT)
        """
        self.session = session
        self.timeout = Config.TWITTER_TIMEOUT if timeout is None else timeout

    async def send(self, signed: SignedRequest) -> Response:
        """Async counterpart of ``Transport.send``."""
        logger.debug("%s %s", signed.method, signed.url)
        try:
            if self.session is not None:
                response = await self._exchange(self.session, signed)
            else:
                async with aiohttp.ClientSession() as session:
                    response = await self._exchange(session, signed)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.error("Request to %s failed: %s", signed.url, exc)
            raise TransportError(f"{signed.method} {signed.url} failed: {exc}") from exc
        return _check_status(response, signed.url)

    async def _exchange(self, session, signed: SignedRequest) -> Response:
        async with session.request(
            signed.method,
            signed.url,
            headers=signed.headers,
            data=signed.body,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
        ) as resp:
            content = await resp.read()
            return Response(resp.status, dict(resp.headers), content)
