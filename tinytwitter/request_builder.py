"""
Request Builder Module
Sign Twitter API requests with OAuth 1.0a (HMAC-SHA1).

The builder collects the caller's parameters, merges them with the OAuth
protocol parameters, signs the result and hands back a ``SignedRequest``
that a transport can send as-is. No network I/O happens here.
"""

import base64
import hashlib
import hmac
import random
import time
from typing import Callable, Dict, Iterable, Mapping, NamedTuple, Optional, Tuple, Union

from .auth import OAuthInfo
from .encoding import encode, encode_pairs
from .errors import BuilderStateError, DuplicateParameterError, EncodingError, SigningError
from .logger import logger

OAUTH_PREFIX = "oauth_"
OAUTH_VERSION = "1.0"
SIGNATURE_METHOD = "HMAC-SHA1"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

Parameters = Union[Mapping[str, object], Iterable[Tuple[str, object]]]


class SignedRequest(NamedTuple):
    """A fully signed request, ready to be sent once."""
    method: str
    url: str
    authorization: str
    body: Optional[bytes] = None

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": self.authorization,
            "Content-Type": FORM_CONTENT_TYPE,
        }


def random_nonce_factory() -> Callable[[], str]:
    """Return a nonce generator backed by its own OS-seeded random source."""
    rng = random.SystemRandom()

    def _nonce() -> str:
        return format(rng.getrandbits(64), "016X")

    return _nonce


class RequestBuilder:
    """Build and sign a single OAuth 1.0a request."""

    def __init__(self, oauth: OAuthInfo, method: str, url: str,
                 clock: Callable[[], float] = time.time,
                 nonce_factory: Optional[Callable[[], str]] = None):
        """
        Initialize the builder.

        Args:
            oauth: Consumer and access credentials
            method: HTTP method, e.g. "GET" or "POST"
            url: Endpoint URL without a query string
            clock: Returns the current epoch time in seconds
            nonce_factory: Returns a fresh nonce per call
        """
        if "?" in url:
            raise ValueError(f"URL must not carry a query string: {url}")
        self.oauth = oauth
        self.method = method.upper()
        self.url = url
        self._clock = clock
        self._nonce_factory = nonce_factory or random_nonce_factory()
        self._parameters: Dict[str, str] = {}
        self._built = False

    @property
    def parameters(self) -> Dict[str, str]:
        """Caller parameters, already percent-encoded."""
        return dict(self._parameters)

    def add_parameter(self, name: str, value) -> "RequestBuilder":
        """
        Add a request parameter; the value is percent-encoded on insertion.

        Raises:
            EncodingError: name is empty or needs percent-encoding
            DuplicateParameterError: name already added or in the OAuth namespace
            BuilderStateError: the request was already built
        """
        if self._built:
            raise BuilderStateError("Cannot add parameters after build()")
        if not name or encode(name) != name:
            raise EncodingError(f"Parameter name {name!r} must consist of unreserved characters")
        if name in self._parameters or name.startswith(OAUTH_PREFIX):
            raise DuplicateParameterError(name)
        self._parameters[name] = encode(value)
        return self

    def build(self) -> SignedRequest:
        """Sign the request with a fresh timestamp and nonce."""
        timestamp = str(int(self._clock()))
        nonce = self._nonce_factory()

        parameters = dict(self._parameters)
        parameters.update(self._oauth_parameters(timestamp, nonce))

        signature = self._sign(parameters)
        authorization = self._authorization_header(parameters, signature)
        url, body = self._request_target()
        self._built = True

        logger.debug("Signed %s %s (nonce=%s, timestamp=%s)", self.method, self.url, nonce, timestamp)
        return SignedRequest(method=self.method, url=url, authorization=authorization, body=body)

    def signature_base_string(self, parameters: Mapping[str, str]) -> str:
        """METHOD&encode(url)&encode(k1=v1&k2=v2...) with keys sorted."""
        normalized = encode_pairs(sorted(parameters.items(), key=lambda item: item[0]))
        return "&".join((self.method, encode(self.url), encode(normalized)))

    def signing_key(self) -> str:
        return f"{encode(self.oauth.consumer_secret)}&{encode(self.oauth.access_secret)}"

    def _oauth_parameters(self, timestamp: str, nonce: str) -> Dict[str, str]:
        # consumer key and token go in raw; the base string encodes them once
        return {
            "oauth_consumer_key": self.oauth.consumer_key,
            "oauth_nonce": nonce,
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_timestamp": timestamp,
            "oauth_token": self.oauth.access_token,
            "oauth_version": OAUTH_VERSION,
        }

    def _sign(self, parameters: Mapping[str, str]) -> str:
        base_string = self.signature_base_string(parameters)
        logger.debug("Signature base string: %s", base_string)
        try:
            digest = hmac.new(
                self.signing_key().encode("ascii"),
                base_string.encode("ascii"),
                hashlib.sha1,
            ).digest()
        except (TypeError, ValueError) as exc:
            raise SigningError(f"Could not sign {self.method} {self.url}") from exc
        return base64.b64encode(digest).decode("ascii")

    @staticmethod
    def _authorization_header(parameters: Mapping[str, str], signature: str) -> str:
        signed = dict(parameters, oauth_signature=signature)
        pairs = sorted((key, value) for key, value in signed.items() if key.startswith(OAUTH_PREFIX))
        return "OAuth " + ",".join(f'{key}="{encode(value)}"' for key, value in pairs)

    def _request_target(self) -> Tuple[str, Optional[bytes]]:
        # Query/body keep insertion order; only the signature needs sorting.
        query = encode_pairs(self._parameters.items())
        if self.method == "GET":
            return (f"{self.url}?{query}" if query else self.url), None
        return self.url, query.encode("ascii")


def build_signed_request(method: str, url: str, parameters: Optional[Parameters],
                         oauth: OAuthInfo, **kwargs) -> SignedRequest:
    """
    Sign a one-off request.

    Args:
        method: HTTP method
        url: Endpoint URL without a query string
        parameters: Mapping or ``(name, value)`` pairs of raw values
        oauth: Credentials
        **kwargs: Passed to ``RequestBuilder`` (``clock``, ``nonce_factory``)

    Returns:
        SignedRequest
    """
    builder = RequestBuilder(oauth, method, url, **kwargs)
    if parameters:
        items = parameters.items() if isinstance(parameters, Mapping) else parameters
        for name, value in items:
            builder.add_parameter(name, value)
    return builder.build()
