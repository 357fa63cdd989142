"""Shared test data and fakes for the TinyTwitter tests."""

import json

from tinytwitter.auth import OAuthInfo
from tinytwitter.transport import Response

# Credentials from Twitter's "Creating a signature" documentation.
DOC_OAUTH = OAuthInfo(
    consumer_key="xvz1evFS4wEEPTGEFPHBog",
    consumer_secret="kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw",
    access_token="370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb",
    access_secret="LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",
)
DOC_TIMESTAMP = 1318622958
DOC_NONCE = "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"


def status_json(tweet_id=1050118621198921728, text="hello", screen_name="jack"):
    return {
        "id": tweet_id,
        "created_at": "Wed Oct 10 20:19:24 +0000 2018",
        "text": text,
        "user": {"name": "Jack", "screen_name": screen_name},
    }


class FakeTransport:
    """Records signed requests and answers with canned responses."""

    def __init__(self, payload=None, status=200):
        self.payload = payload
        self.status = status
        self.sent = []

    def send(self, signed):
        self.sent.append(signed)
        return Response(self.status, {}, json.dumps(self.payload).encode("utf-8"))
