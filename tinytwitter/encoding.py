"""
Encoding Module
RFC 3986 percent-encoding as required by OAuth 1.0a signatures.
"""

from typing import Any, Iterable, Tuple
from urllib.parse import quote

from .errors import EncodingError

# quote() keeps "-_." and alphanumerics; "~" is the only extra unreserved char.
_UNRESERVED = "~"


def encode(value: Any) -> str:
    """
    Percent-encode a value for use in an OAuth signature or header.

    Everything outside ``A-Z a-z 0-9 - _ . ~`` is escaped as ``%XX`` with
    uppercase hex, which includes ``( ) $ ! * '`` and the space character.

    Args:
        value: Raw value; ``None`` and empty strings encode to ``""``

    Returns:
        Encoded string
    """
    if value is None or value == "":
        return ""
    if not isinstance(value, str):
        value = str(value)
    try:
        return quote(value.encode("utf-8"), safe=_UNRESERVED)
    except UnicodeEncodeError as exc:
        raise EncodingError(f"Cannot encode {value!r} as UTF-8") from exc


def encode_pairs(pairs: Iterable[Tuple[str, str]]) -> str:
    """Join already-encoded ``(key, value)`` pairs as ``key=value&...``."""
    return "&".join(f"{key}={value}" for key, value in pairs)
