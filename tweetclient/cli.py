#!/usr/bin/env python3
"""
Command line interface.

Usage:
    tweetclient search <query>            # Search recent tweets
    tweetclient post <text>               # Post a status update
    tweetclient --config path.toml ...    # Use another config file
    tweetclient --env ...                 # Read credentials from X_* env vars
"""
import argparse
import sys

from .client import TwitterClient
from .config import config_from_env, load_config
from .errors import ConfigError, TweetClientError
from .logger import logger
from .utils import prepare_status


def search(client: TwitterClient, query: str):
    """Print recent tweets matching a query."""
    result = client.search_recent(query)
    if not result.posts:
        print(f"No tweets found for {query!r}")
        return

    print(f"\n{result.meta.result_count} tweets for {query!r}:\n")
    for post in result.posts:
        author = result.author_of(post)
        handle = f"@{author.username}" if author else post.author_id
        print(f"{post.created_at} {handle} [{post.id}]")
        print(f"   {post.text}")
        print()


def post(client: TwitterClient, text: str):
    """Post a status update and print its id."""
    status = client.update_status(text)
    print(f"✓ Posted status {status.id_str} at {status.created_at}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Search and post to Twitter')
    parser.add_argument('--config', help='Path to the TOML config file')
    parser.add_argument('--env', action='store_true', help='Read credentials from environment variables')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # search command
    search_parser = subparsers.add_parser('search', help='Search recent tweets')
    search_parser.add_argument('query', help='Search query')

    # post command
    post_parser = subparsers.add_parser('post', help='Post a status update')
    post_parser.add_argument('text', help='Status text')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 2

    if args.command == 'post':
        try:
            text = prepare_status(args.text)
        except ValueError as e:
            print(f"✗ Error: {e}", file=sys.stderr)
            return 2

    try:
        config = config_from_env() if args.env else load_config(args.config)
    except ConfigError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    with TwitterClient(config) as client:
        try:
            if args.command == 'search':
                search(client, args.query)
            else:
                post(client, text)
        except TweetClientError as e:
            logger.error(f"{args.command} failed: {e}")
            print(f"✗ {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
