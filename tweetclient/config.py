"""
Configuration Module
Load Twitter credentials and endpoint URLs.
"""
import os
import tomllib
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

DEFAULT_SEARCH_RECENT_URL = 'https://api.twitter.com/2/tweets/search/recent'
DEFAULT_UPDATE_STATUSES_URL = 'https://api.twitter.com/1.1/statuses/update.json'


class Config:
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    CONFIG_PATH = os.getenv('TWEETCLIENT_CONFIG', os.path.join('config', 'twitter_config.toml'))
    HTTP_TIMEOUT = float(os.getenv('HTTP_TIMEOUT', '10'))


class Secret:
    """A sensitive string that stays masked in reprs and log output."""

    __slots__ = ('_value',)

    def __init__(self, value: str):
        self._value = value

    def reveal(self) -> str:
        return self._value

    def __repr__(self):
        return "Secret('***')"

    __str__ = __repr__

    def __eq__(self, other):
        if not isinstance(other, Secret):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def __bool__(self):
        return bool(self._value)


class Credentials(NamedTuple):
    bearer_token: Secret
    consumer_key: Secret
    consumer_secret: Secret
    access_token: Secret
    access_secret: Secret


class Endpoints(NamedTuple):
    search_recent: str = DEFAULT_SEARCH_RECENT_URL
    update_statuses: str = DEFAULT_UPDATE_STATUSES_URL


class TwitterConfig(NamedTuple):
    """Immutable credentials and endpoints shared by every client call."""
    credentials: Credentials
    endpoints: Endpoints


def _require_table(data: dict, name: str, path: str) -> dict:
    table = data.get(name)
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: missing [{name}] table")
    return table


def _require_str(table: dict, table_name: str, key: str, path: str) -> str:
    value = table.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{path}: {table_name}.{key} must be a non-empty string")
    return value


def load_config(path: Optional[str] = None) -> TwitterConfig:
    """
    Load configuration from a TOML file.

    The file holds a [credentials] table (bearer_token, consumer_key,
    consumer_secret, access_token, access_secret) and an [endpoints] table
    (search_recent, update_statuses).

    Args:
        path: Path to the TOML file (default: Config.CONFIG_PATH)

    Returns:
        TwitterConfig with every secret wrapped in Secret

    Raises:
        ConfigError: if the file is missing, unparsable or incomplete
    """
    path = path or Config.CONFIG_PATH
    try:
        with open(path, 'rb') as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigError(f"{path} not found") from e
    except OSError as e:
        raise ConfigError(f"something went wrong reading {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"failed to parse {path}: {e}") from e

    credentials = _require_table(data, 'credentials', path)
    endpoints = _require_table(data, 'endpoints', path)
    return TwitterConfig(
        credentials=Credentials(**{
            key: Secret(_require_str(credentials, 'credentials', key, path))
            for key in Credentials._fields
        }),
        endpoints=Endpoints(**{
            key: _require_str(endpoints, 'endpoints', key, path)
            for key in Endpoints._fields
        }),
    )


_ENV_CREDENTIALS = {
    'bearer_token': 'X_BEARER_TOKEN',
    'consumer_key': 'X_API_KEY',
    'consumer_secret': 'X_API_SECRET',
    'access_token': 'X_ACCESS_TOKEN',
    'access_secret': 'X_ACCESS_SECRET',
}


def config_from_env() -> TwitterConfig:
    """Build configuration from X_* environment variables (and .env)."""
    missing = [env for env in _ENV_CREDENTIALS.values() if not os.getenv(env)]
    if missing:
        raise ConfigError(f"Missing required credentials: {', '.join(missing)}")
    return TwitterConfig(
        credentials=Credentials(**{
            key: Secret(os.getenv(env)) for key, env in _ENV_CREDENTIALS.items()
        }),
        endpoints=Endpoints(
            search_recent=os.getenv('X_SEARCH_RECENT_URL', DEFAULT_SEARCH_RECENT_URL),
            update_statuses=os.getenv('X_UPDATE_STATUSES_URL', DEFAULT_UPDATE_STATUSES_URL),
        ),
    )
