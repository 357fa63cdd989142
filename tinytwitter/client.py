"""
Twitter API Client
Post status updates and read timelines over the v1.1 REST API.
"""

from typing import List, Optional

from .auth import OAuthInfo
from .config import Config
from .errors import TinyTwitterError
from .logger import logger
from .models import Tweet, decode_status, decode_timeline
from .request_builder import RequestBuilder
from .transport import AsyncTransport, Transport

UPDATE_STATUS_PATH = "/statuses/update.json"
HOME_TIMELINE_PATH = "/statuses/home_timeline.json"
MENTIONS_TIMELINE_PATH = "/statuses/mentions_timeline.json"
USER_TIMELINE_PATH = "/statuses/user_timeline.json"


class _BaseClient:
    """Request construction shared by the blocking and async clients."""

    def __init__(self, oauth: OAuthInfo, base_url: Optional[str] = None):
        self.oauth = oauth
        self.base_url = (base_url or Config.TWITTER_API_BASE_URL).rstrip("/")

    def _update_status_request(self, message: str) -> RequestBuilder:
        return (RequestBuilder(self.oauth, "POST", self.base_url + UPDATE_STATUS_PATH)
                .add_parameter("status", message))

    def _timeline_request(self, path: str, since_id: Optional[int],
                          count: Optional[int]) -> RequestBuilder:
        builder = RequestBuilder(self.oauth, "GET", self.base_url + path)
        if since_id is not None:
            builder.add_parameter("since_id", since_id)
        if count is not None:
            builder.add_parameter("count", count)
        return builder


class TwitterClient(_BaseClient):
    """Blocking Twitter API client signing every call with OAuth 1.0a."""

    def __init__(self, oauth: OAuthInfo, transport: Optional[Transport] = None,
                 base_url: Optional[str] = None):
        """
        Initialize Twitter API client.

        Args:
            oauth: Consumer and access credentials
            transport: HTTP transport (default: requests-based Transport)
            base_url: API root (default Config.TWITTER_API_BASE_URL)
        """
        super().__init__(oauth, base_url)
        self.transport = transport or Transport()

    def update_status(self, message: str) -> Tweet:
        """
        Post a status update.

        Args:
            message: Status text

        Returns:
            The created Tweet
        """
        signed = self._update_status_request(message).build()
        try:
            response = self.transport.send(signed)
            tweet = decode_status(response.text)
        except TinyTwitterError as e:
            logger.debug("Failed to update status: %s", e)
            raise
        logger.info('Posted status id=%s', tweet.id)
        return tweet

    def get_home_timeline(self, since_id: Optional[int] = None, count: Optional[int] = 20) -> List[Tweet]:
        """Statuses from the authenticated user and the accounts they follow."""
        return self._get_timeline(HOME_TIMELINE_PATH, since_id, count)

    def get_mentions(self, since_id: Optional[int] = None, count: Optional[int] = 20) -> List[Tweet]:
        """Statuses mentioning the authenticated user."""
        return self._get_timeline(MENTIONS_TIMELINE_PATH, since_id, count)

    def get_user_timeline(self, since_id: Optional[int] = None, count: Optional[int] = 20) -> List[Tweet]:
        """Statuses posted by the authenticated user."""
        return self._get_timeline(USER_TIMELINE_PATH, since_id, count)

    def _get_timeline(self, path: str, since_id: Optional[int], count: Optional[int]) -> List[Tweet]:
        signed = self._timeline_request(path, since_id, count).build()
        try:
            response = self.transport.send(signed)
            tweets = decode_timeline(response.text)
        except TinyTwitterError as e:
            logger.debug("Failed to fetch %s: %s", path, e)
            raise
        logger.debug('Fetched %d statuses from %s', len(tweets), path)
        return tweets


class AsyncTwitterClient(_BaseClient):
    """asyncio flavour of ``TwitterClient`` using aiohttp."""

    def __init__(self, oauth: OAuthInfo, transport: Optional[AsyncTransport] = None,
                 base_url: Optional[str] = None):
        super().__init__(oauth, base_url)
        self.transport = transport or AsyncTransport()

    async def update_status(self, message: str) -> Tweet:
        signed = self._update_status_request(message).build()
        try:
            response = await self.transport.send(signed)
            tweet = decode_status(response.text)
        except TinyTwitterError as e:
            logger.debug("Failed to update status: %s", e)
            raise
        logger.info('Posted status id=%s', tweet.id)
        return tweet

    async def get_home_timeline(self, since_id: Optional[int] = None, count: Optional[int] = 20) -> List[Tweet]:
        return await self._get_timeline(HOME_TIMELINE_PATH, since_id, count)

    async def get_mentions(self, since_id: Optional[int] = None, count: Optional[int] = 20) -> List[Tweet]:
        return await self._get_timeline(MENTIONS_TIMELINE_PATH, since_id, count)

    async def get_user_timeline(self, since_id: Optional[int] = None, count: Optional[int] = 20) -> List[Tweet]:
        return await self._get_timeline(USER_TIMELINE_PATH, since_id, count)

    async def _get_timeline(self, path: str, since_id: Optional[int], count: Optional[int]) -> List[Tweet]:
        signed = self._timeline_request(path, since_id, count).build()
        try:
            response = await self.transport.send(signed)
            tweets = decode_timeline(response.text)
        except TinyTwitterError as e:
            logger.debug("Failed to fetch %s: %s", path, e)
            raise
        logger.debug('Fetched %d statuses from %s', len(tweets), path)
        return tweets
