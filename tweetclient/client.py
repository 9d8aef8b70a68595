"""
Twitter API Client
Recent search with a bearer token and status updates signed with OAuth 1.0a.
"""
from typing import Any, Dict, Optional

import requests

from .auth import OAuth1Auth, bearer_header
from .config import Config, TwitterConfig
from .errors import DeserializationError, TransportError
from .logger import logger
from .models import SearchResult, StatusResult


def search_params(query: str) -> Dict[str, str]:
    """Query string for the recent search endpoint."""
    return {
        'query': query,
        'tweet.fields': 'created_at',
        'expansions': 'author_id',
        'user.fields': 'created_at',
    }


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def status_params(text: str, extra_params: Dict[str, Any]) -> Dict[str, str]:
    """Parameters for a status update; all of them are signed and sent in the query string."""
    if 'status' in extra_params:
        raise ValueError("Pass the status text as 'text', not as an extra parameter")
    params = {'status': text}
    params.update({key: _param_value(value) for key, value in extra_params.items()})
    return params


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


class TwitterClient:
    """Twitter API client for recent search and status updates."""

    def __init__(self, config: TwitterConfig, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        """
        Initialize Twitter API client.

        Args:
            config: Credentials and endpoint URLs
            session: HTTP session to reuse (default: a new requests.Session owned by the client)
            timeout: Per-request timeout in seconds (default: Config.HTTP_TIMEOUT)
        """
        self.config = config
        self.session = session or requests.Session()
        self._owns_session = session is None
        self.timeout = timeout if timeout is not None else Config.HTTP_TIMEOUT
        self.oauth = OAuth1Auth(config.credentials)

    def search_recent(self, query: str) -> SearchResult:
        """
        Search recent tweets.

        Args:
            query: Search query

        Returns:
            Matching posts, their authors and pagination metadata
        """
        headers = {'Authorization': bearer_header(self.config.credentials.bearer_token)}
        payload = self._request('GET', self.config.endpoints.search_recent,
                                params=search_params(query), headers=headers)
        return SearchResult.from_json(payload)

    def update_status(self, text: str, **extra_params) -> StatusResult:
        """
        Post a status update.

        Args:
            text: Status text
            **extra_params: Additional update parameters, e.g. in_reply_to_status_id

        Returns:
            The created status
        """
        url = self.config.endpoints.update_statuses
        params = status_params(text, extra_params)
        headers = {'Authorization': self.oauth.authorization_header('POST', url, params)}
        payload = self._request('POST', url, params=params, headers=headers)
        status = StatusResult.from_json(payload)
        logger.info('Posted status id=%s', status.id_str)
        return status

    def _request(self, method: str, url: str, **kwargs) -> Any:
        logger.info('%s %s', method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error('Request to %s failed: %s', url, e)
            raise TransportError(f"{method} {url} failed: {e}") from e
        if not is_success(response.status_code):
            logger.error('Twitter API error. Code: %s, Reason: %s', response.status_code, response.reason)
            raise TransportError(f"{method} {url} returned HTTP {response.status_code}",
                                 status_code=response.status_code, body=response.text)
        try:
            return response.json()
        except ValueError as e:
            raise DeserializationError(f"Response from {url} is not valid JSON") from e

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
