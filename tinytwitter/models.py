"""
Models Module
Typed records decoded from Twitter API v1.1 JSON responses.
"""

import json
from datetime import datetime
from typing import Any, List, Mapping, NamedTuple

from .errors import MalformedResponseError

CREATED_AT_FORMAT = "%a %b %d %H:%M:%S %z %Y"


class Tweet(NamedTuple):
    """A status as returned by the statuses/* endpoints."""
    id: int
    created_at: datetime
    user_name: str
    screen_name: str
    text: str


def _require(obj: Mapping[str, Any], key: str, kind: type, where: str):
    value = obj.get(key)
    # bool is an int subclass; never accept it as an id
    if not isinstance(value, kind) or isinstance(value, bool):
        raise MalformedResponseError(
            f"{where}.{key}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def parse_created_at(value: str) -> datetime:
    """Parse Twitter's ``Wed Aug 27 13:08:45 +0000 2008`` timestamps."""
    try:
        return datetime.strptime(value, CREATED_AT_FORMAT)
    except ValueError as exc:
        raise MalformedResponseError(f"Unparseable created_at: {value!r}") from exc


def decode_tweet(obj: Any) -> Tweet:
    """
    Validate one status object and convert it to a ``Tweet``.

    Args:
        obj: Decoded JSON object of a single status

    Returns:
        Tweet

    Raises:
        MalformedResponseError: a required field is missing or has the wrong type
    """
    if not isinstance(obj, dict):
        raise MalformedResponseError(f"Expected a status object, got {type(obj).__name__}")
    user = _require(obj, "user", dict, "status")
    text = obj.get("full_text") or obj.get("text")
    if not isinstance(text, str):
        raise MalformedResponseError("status.text: expected str")
    return Tweet(
        id=_require(obj, "id", int, "status"),
        created_at=parse_created_at(_require(obj, "created_at", str, "status")),
        user_name=_require(user, "name", str, "status.user"),
        screen_name=_require(user, "screen_name", str, "status.user"),
        text=text,
    )


def _load_json(content: str) -> Any:
    try:
        return json.loads(content)
    except ValueError as exc:
        raise MalformedResponseError(f"Response is not valid JSON: {exc}") from exc


def decode_status(content: str) -> Tweet:
    """Decode the body of statuses/update.json."""
    return decode_tweet(_load_json(content))


def decode_timeline(content: str) -> List[Tweet]:
    """Decode the body of a statuses/*_timeline.json response."""
    data = _load_json(content)
    if not isinstance(data, list):
        raise MalformedResponseError(f"Expected a list of statuses, got {type(data).__name__}")
    return [decode_tweet(item) for item in data]
