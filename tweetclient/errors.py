"""
Errors Module
Exceptions raised by the Twitter client.
"""
from typing import Optional


class TweetClientError(Exception):
    """Base class for every error the client surfaces to callers."""

    def __init__(self, *args):
        super().__init__(*args)
        if args:
            self.message = args[0]
        else:
            self.message = None

    def __str__(self):
        if self.message:
            return "Twitter client error: {0}".format(self.message)
        else:
            return "Twitter client error: unknown"


class ConfigError(TweetClientError):
    """Configuration file is missing, unreadable or incomplete."""


class TransportError(TweetClientError):
    """Network failure, timeout or a non-2xx response."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DeserializationError(TweetClientError):
    """Response body is not JSON or does not have the expected shape."""
