"""
TinyTwitter - Twitter API Client
A small Twitter REST API v1.1 client with OAuth 1.0a request signing.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .auth import OAuthInfo
from .client import AsyncTwitterClient, TwitterClient
from .encoding import encode
from .errors import (
    BuilderStateError,
    DuplicateParameterError,
    EncodingError,
    MalformedResponseError,
    RemoteRejectionError,
    SigningError,
    TinyTwitterError,
    TransportError,
)
from .models import Tweet
from .request_builder import RequestBuilder, SignedRequest, build_signed_request
from .transport import AsyncTransport, Response, Transport

__all__ = [
    "TwitterClient",
    "AsyncTwitterClient",
    "OAuthInfo",
    "Tweet",
    "RequestBuilder",
    "SignedRequest",
    "build_signed_request",
    "encode",
    "Transport",
    "AsyncTransport",
    "Response",
    "TinyTwitterError",
    "EncodingError",
    "DuplicateParameterError",
    "BuilderStateError",
    "SigningError",
    "TransportError",
    "RemoteRejectionError",
    "MalformedResponseError",
]
