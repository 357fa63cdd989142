"""
Errors Module
Exceptions raised while signing, sending and decoding Twitter API requests.
"""

from typing import Optional


class TinyTwitterError(Exception):
    """Base class for every error raised by this package."""


class EncodingError(TinyTwitterError):
    """A value could not be percent-encoded."""


class DuplicateParameterError(TinyTwitterError):
    """A request parameter name was added twice or clashes with an OAuth name."""

    def __init__(self, name: str):
        super().__init__(f"Parameter {name!r} is already set")
        self.name = name


class BuilderStateError(TinyTwitterError):
    """The request builder was mutated after it produced a signed request."""


class SigningError(TinyTwitterError):
    """Computing the HMAC-SHA1 signature failed."""


class TransportError(TinyTwitterError):
    """The HTTP exchange itself failed (connection, DNS, timeout, ...)."""


class RemoteRejectionError(TinyTwitterError):
    """The API answered with an HTTP error status."""

    def __init__(self, status: int, body: str = "", url: Optional[str] = None):
        super().__init__(f"HTTP {status} from {url or 'Twitter API'}: {body[:200]}")
        self.status = status
        self.body = body
        self.url = url


class MalformedResponseError(TinyTwitterError):
    """The response body did not have the expected JSON shape."""
