"""
Authentication Module
Sign Twitter API requests with OAuth 1.0a (HMAC-SHA1) and build bearer headers.
"""
import base64
import hashlib
import hmac
import time
import uuid
from typing import Dict, Mapping, Optional, Union
from urllib.parse import quote, urlsplit

from .config import Credentials, Secret
from .logger import logger

SIGNATURE_METHOD = 'HMAC-SHA1'
OAUTH_VERSION = '1.0'

# Authorization header field order
HEADER_FIELDS = (
    'oauth_consumer_key',
    'oauth_nonce',
    'oauth_signature',
    'oauth_signature_method',
    'oauth_timestamp',
    'oauth_token',
    'oauth_version',
)


def percent_encode(value: str) -> str:
    """Encode every octet except A-Z a-z 0-9 - _ . ~ as uppercase %XX (RFC 3986)."""
    return quote(value, safe='')


def normalize_parameters(oauth_params: Mapping[str, str], request_params: Mapping[str, str]) -> str:
    """
    Merge protocol and request parameters into the normalized parameter string.

    Keys and values are encoded independently, paired as key=value and
    sorted on the encoded pair. Duplicate keys across the two sets are kept.

    Args:
        oauth_params: The oauth_* protocol parameters
        request_params: Parameters sent with the request

    Returns:
        Encoded pairs joined with '&'
    """
    pairs = [
        f"{percent_encode(key)}={percent_encode(value)}"
        for params in (oauth_params, request_params)
        for key, value in params.items()
    ]
    return '&'.join(sorted(pairs))


def build_signature_base(method: str, url: str, normalized_params: str) -> str:
    """Build METHOD&encoded(url)&encoded(normalized_params)."""
    return '&'.join([method, percent_encode(url), percent_encode(normalized_params)])


def compute_signature(base_string: str, consumer_secret: str, token_secret: str) -> str:
    """
    Sign the base string with HMAC-SHA1.

    Args:
        base_string: Signature base string
        consumer_secret: Consumer (API key) secret
        token_secret: Access token secret

    Returns:
        Base64 digest, not percent-encoded
    """
    signing_key = f"{percent_encode(consumer_secret)}&{percent_encode(token_secret)}"
    hashed = hmac.new(signing_key.encode('utf-8'), base_string.encode('utf-8'), hashlib.sha1)
    return base64.b64encode(hashed.digest()).decode('ascii')


def build_auth_header(oauth_params: Mapping[str, str]) -> str:
    """
    Assemble the OAuth Authorization header value.

    Every field in HEADER_FIELDS must be present, oauth_signature included;
    a missing one raises KeyError. Values must be raw, not pre-encoded.
    """
    fields = ', '.join(f"{name}={percent_encode(oauth_params[name])}" for name in HEADER_FIELDS)
    return f"OAuth {fields}"


def generate_nonce() -> str:
    return uuid.uuid4().hex


def generate_timestamp() -> str:
    return str(int(time.time()))


def build_oauth_params(consumer_key: str, access_token: str, timestamp: str, nonce: str) -> Dict[str, str]:
    """Create the six protocol parameters for a signed request."""
    return {
        'oauth_consumer_key': consumer_key,
        'oauth_token': access_token,
        'oauth_signature_method': SIGNATURE_METHOD,
        'oauth_version': OAUTH_VERSION,
        'oauth_timestamp': timestamp,
        'oauth_nonce': nonce,
    }


def bearer_header(token: Union[Secret, str]) -> str:
    if isinstance(token, Secret):
        token = token.reveal()
    return f"Bearer {token}"


class OAuth1Auth:
    """Produce OAuth 1.0a Authorization headers for one set of user credentials."""

    def __init__(self, credentials: Credentials):
        """
        Initialize the signer.

        Args:
            credentials: Consumer key/secret and access token/secret to sign with
        """
        self.credentials = credentials

    def authorization_header(self, method: str, url: str, request_params: Mapping[str, str],
                             timestamp: Optional[str] = None, nonce: Optional[str] = None) -> str:
        """
        Sign a request and return its Authorization header value.

        Args:
            method: HTTP verb
            url: Endpoint URL without a query string
            request_params: Parameters sent with the request (signed as well)
            timestamp: Unix seconds (default: now)
            nonce: Single-use token (default: random)

        Returns:
            The 'OAuth ...' header value
        """
        if urlsplit(url).query:
            raise ValueError(f"Signed URL must not carry a query string: {url}")
        timestamp = timestamp or generate_timestamp()
        nonce = nonce or generate_nonce()
        logger.debug('Signing %s %s (timestamp=%s, nonce=%s)', method.upper(), url, timestamp, nonce)

        creds = self.credentials
        oauth_params = build_oauth_params(creds.consumer_key.reveal(), creds.access_token.reveal(),
                                          timestamp, nonce)
        normalized = normalize_parameters(oauth_params, request_params)
        base_string = build_signature_base(method.upper(), url, normalized)
        oauth_params['oauth_signature'] = compute_signature(base_string,
                                                            creds.consumer_secret.reveal(),
                                                            creds.access_secret.reveal())
        return build_auth_header(oauth_params)
