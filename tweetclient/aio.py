"""
Asynchronous Twitter API Client
Same operations as TwitterClient on top of aiohttp, safe to run concurrently.
"""
import asyncio
from typing import Any, Optional

import aiohttp

from .auth import OAuth1Auth, bearer_header
from .client import is_success, search_params, status_params
from .config import Config, TwitterConfig
from .errors import DeserializationError, TransportError
from .logger import logger
from .models import SearchResult, StatusResult


class AsyncTwitterClient:
    """aiohttp-based client for recent search and status updates."""

    def __init__(self, config: TwitterConfig, session: Optional[aiohttp.ClientSession] = None,
                 timeout: Optional[float] = None):
        self.config = config
        self._session = session
        self._owns_session = session is None
        self.timeout = aiohttp.ClientTimeout(total=timeout if timeout is not None else Config.HTTP_TIMEOUT)
        self.oauth = OAuth1Auth(config.credentials)

    @property
    def session(self) -> aiohttp.ClientSession:
        # Created lazily so it binds to the running event loop
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def search_recent(self, query: str) -> SearchResult:
        headers = {'Authorization': bearer_header(self.config.credentials.bearer_token)}
        payload = await self._request('GET', self.config.endpoints.search_recent,
                                      params=search_params(query), headers=headers)
        return SearchResult.from_json(payload)

    async def update_status(self, text: str, **extra_params) -> StatusResult:
        url = self.config.endpoints.update_statuses
        params = status_params(text, extra_params)
        headers = {'Authorization': self.oauth.authorization_header('POST', url, params)}
        payload = await self._request('POST', url, params=params, headers=headers)
        status = StatusResult.from_json(payload)
        logger.info('Posted status id=%s', status.id_str)
        return status

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        logger.info('%s %s', method, url)
        try:
            async with self.session.request(method, url, timeout=self.timeout, **kwargs) as response:
                if not is_success(response.status):
                    body = await response.text(errors='replace')
                    logger.error('Twitter API error. Code: %s, Reason: %s', response.status, response.reason)
                    raise TransportError(f"{method} {url} returned HTTP {response.status}",
                                         status_code=response.status, body=body)
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise DeserializationError(f"Response from {url} is not valid JSON") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error('Request to %s failed: %s', url, e)
            raise TransportError(f"{method} {url} failed: {e!r}") from e

    async def close(self):
        if self._owns_session and self._session is not None:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
