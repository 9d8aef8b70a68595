"""
tweetclient - Twitter API Client
Recent search with a bearer token and OAuth 1.0a signed status updates.
"""

__version__ = "0.1.0"
__author__ = "Developer"

from .aio import AsyncTwitterClient
from .auth import OAuth1Auth
from .client import TwitterClient
from .config import Credentials, Endpoints, Secret, TwitterConfig, config_from_env, load_config
from .errors import ConfigError, DeserializationError, TransportError, TweetClientError

__all__ = [
    "TwitterClient",
    "AsyncTwitterClient",
    "OAuth1Auth",
    "Credentials",
    "Endpoints",
    "Secret",
    "TwitterConfig",
    "load_config",
    "config_from_env",
    "TweetClientError",
    "ConfigError",
    "TransportError",
    "DeserializationError",
]
