"""Command line access to status updates and timelines."""
import argparse
import sys

from .auth import OAuthInfo
from .client import TwitterClient
from .errors import TinyTwitterError
from .logger import logger

TIMELINES = {
    "home": "get_home_timeline",
    "mentions": "get_mentions",
    "user": "get_user_timeline",
}


def format_tweet(tweet) -> str:
    return f"{tweet.id}  @{tweet.screen_name}: {tweet.text}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinytwitter",
        description="Post statuses and read timelines (credentials from TWITTER_* env / .env)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    post = sub.add_parser("post", help="Post a status update")
    post.add_argument("text", help="Status text")

    for name in TIMELINES:
        timeline = sub.add_parser(name, help=f"Show the {name} timeline")
        timeline.add_argument("--since-id", type=int, default=None, help="Only statuses newer than this id")
        timeline.add_argument("--count", type=int, default=20, help="Number of statuses to fetch")
    return parser


def main(argv=None, client=None) -> int:
    args = build_parser().parse_args(argv)
    client = client or TwitterClient(OAuthInfo.from_env())
    try:
        if args.command == "post":
            tweets = [client.update_status(args.text)]
        else:
            fetch = getattr(client, TIMELINES[args.command])
            tweets = fetch(since_id=args.since_id, count=args.count)
    except TinyTwitterError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for tweet in tweets:
        print(format_tweet(tweet))
    return 0
