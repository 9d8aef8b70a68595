"""Tests for response records."""
import pytest

from tweetclient.errors import DeserializationError
from tweetclient.models import Meta, Post, SearchResult, StatusResult

from conftest import SEARCH_PAYLOAD, STATUS_PAYLOAD


def test_search_result_from_json():
    """Posts, users and metadata are all read."""
    result = SearchResult.from_json(SEARCH_PAYLOAD)
    assert result.posts == [Post(id="1373001119480344583", text="Hello from the API",
                                 author_id="2244994945", created_at="2021-03-19T19:59:10.000Z")]
    assert result.users[0].name == "Twitter Dev"
    assert result.meta == Meta(result_count=1, newest_id="1373001119480344583",
                               oldest_id="1373001119480344583")


def test_empty_search_result():
    """No matches: the API omits data, includes and the ids."""
    result = SearchResult.from_json({"meta": {"result_count": 0}})
    assert result.posts == []
    assert result.users == []
    assert result.meta.newest_id is None


def test_author_of_unknown_user():
    """Posts whose author is not included have no author record."""
    result = SearchResult.from_json(SEARCH_PAYLOAD)
    stray = result.posts[0]._replace(author_id="1")
    assert result.author_of(stray) is None


@pytest.mark.parametrize("payload", [
    [],
    {"data": []},
    {"data": [{"id": "1"}], "meta": {"result_count": 1}},
    {"data": {}, "meta": {"result_count": 0}},
    {"meta": {"result_count": "many"}},
])
def test_search_result_shape_mismatch(payload):
    """Malformed search responses raise DeserializationError."""
    with pytest.raises(DeserializationError):
        SearchResult.from_json(payload)


def test_status_result_from_json():
    """Status records keep both id forms."""
    status = StatusResult.from_json(STATUS_PAYLOAD)
    assert status.id == 1050118621198921728
    assert status.id_str == "1050118621198921728"
    assert status.created_at == "Wed Oct 19 12:00:00 +0000 2026"


def test_status_result_shape_mismatch():
    """Missing fields or a string id are rejected."""
    with pytest.raises(DeserializationError):
        StatusResult.from_json({"id": 1, "text": "hi"})
    with pytest.raises(DeserializationError):
        StatusResult.from_json(dict(STATUS_PAYLOAD, id="1"))
