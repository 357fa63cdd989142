"""
Authentication Module
OAuth 1.0a consumer and access credentials.
"""

import os
from typing import NamedTuple, Optional


class OAuthInfo(NamedTuple):
    """Consumer (application) and access (user) credentials."""
    consumer_key: str
    consumer_secret: str
    access_token: str
    access_secret: str

    @classmethod
    def from_env(cls, consumer_key: Optional[str] = None, consumer_secret: Optional[str] = None,
                 access_token: Optional[str] = None, access_secret: Optional[str] = None) -> "OAuthInfo":
        """
        Build credentials from arguments, falling back to the environment.

        Args:
            consumer_key: Consumer key (or from env TWITTER_CONSUMER_KEY)
            consumer_secret: Consumer secret (or from env TWITTER_CONSUMER_SECRET)
            access_token: Access token (or from env TWITTER_ACCESS_TOKEN)
            access_secret: Access token secret (or from env TWITTER_ACCESS_SECRET)

        Missing values become empty strings; the API rejects such requests.
        """
        return cls(
            consumer_key=consumer_key or os.getenv("TWITTER_CONSUMER_KEY", ""),
            consumer_secret=consumer_secret or os.getenv("TWITTER_CONSUMER_SECRET", ""),
            access_token=access_token or os.getenv("TWITTER_ACCESS_TOKEN", ""),
            access_secret=access_secret or os.getenv("TWITTER_ACCESS_SECRET", ""),
        )

    def __repr__(self) -> str:
        return f"OAuthInfo(consumer_key={self.consumer_key!r}, access_token={self.access_token!r})"
