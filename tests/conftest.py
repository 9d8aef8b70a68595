"""Shared fixtures: credentials from the published OAuth 1.0a example and fake HTTP sessions."""
import pytest

from tweetclient.config import Credentials, Endpoints, Secret, TwitterConfig

CONSUMER_KEY = "xvz1evFS4wEEPTGEFPHBog"
CONSUMER_SECRET = "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw"
ACCESS_TOKEN = "370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb"
ACCESS_SECRET = "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE"
NONCE = "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg"
TIMESTAMP = "1318622958"
UPDATE_URL = "https://api.twitter.com/1.1/statuses/update.json"
SEARCH_URL = "https://api.twitter.com/2/tweets/search/recent"
STATUS_TEXT = "Hello Ladies + Gentlemen, a signed OAuth request!"

SEARCH_PAYLOAD = {
    "data": [
        {"author_id": "2244994945", "text": "Hello from the API", "id": "1373001119480344583",
         "created_at": "2021-03-19T19:59:10.000Z"},
    ],
    "includes": {
        "users": [
            {"created_at": "2013-12-14T04:35:55.000Z", "username": "TwitterDev",
             "id": "2244994945", "name": "Twitter Dev"},
        ],
    },
    "meta": {"newest_id": "1373001119480344583", "oldest_id": "1373001119480344583", "result_count": 1},
}

STATUS_PAYLOAD = {
    "created_at": "Wed Oct 19 12:00:00 +0000 2026",
    "id": 1050118621198921728,
    "id_str": "1050118621198921728",
    "text": STATUS_TEXT,
}


@pytest.fixture
def credentials():
    return Credentials(
        bearer_token=Secret("bearer-token"),
        consumer_key=Secret(CONSUMER_KEY),
        consumer_secret=Secret(CONSUMER_SECRET),
        access_token=Secret(ACCESS_TOKEN),
        access_secret=Secret(ACCESS_SECRET),
    )


@pytest.fixture
def config(credentials):
    return TwitterConfig(credentials=credentials,
                         endpoints=Endpoints(search_recent=SEARCH_URL, update_statuses=UPDATE_URL))


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, payload=None, text="", reason="OK"):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.reason = reason

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records requests and replays a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True
