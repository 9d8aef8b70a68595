"""
Response records for the search and status-update endpoints.
"""
from typing import Any, List, NamedTuple, Optional

from .errors import DeserializationError


def _field(payload: Any, name: str, record: str) -> Any:
    if not isinstance(payload, dict):
        raise DeserializationError(f"{record} must be a JSON object, got {type(payload).__name__}")
    try:
        return payload[name]
    except KeyError as e:
        raise DeserializationError(f"{record} is missing field '{name}'") from e


def _list(payload: Any, name: str, record: str) -> list:
    value = payload.get(name, [])
    if not isinstance(value, list):
        raise DeserializationError(f"{record}.{name} must be a list")
    return value


class Post(NamedTuple):
    id: str
    text: str
    author_id: str
    created_at: str

    @classmethod
    def from_json(cls, payload: dict) -> 'Post':
        return cls(**{name: _field(payload, name, 'post') for name in cls._fields})


class User(NamedTuple):
    id: str
    username: str
    name: str
    created_at: str

    @classmethod
    def from_json(cls, payload: dict) -> 'User':
        return cls(**{name: _field(payload, name, 'user') for name in cls._fields})


class Meta(NamedTuple):
    """Pagination metadata; the ids are absent when nothing matched."""
    result_count: int
    newest_id: Optional[str] = None
    oldest_id: Optional[str] = None

    @classmethod
    def from_json(cls, payload: dict) -> 'Meta':
        result_count = _field(payload, 'result_count', 'meta')
        if not isinstance(result_count, int):
            raise DeserializationError("meta.result_count must be an integer")
        return cls(
            result_count=result_count,
            newest_id=payload.get('newest_id'),
            oldest_id=payload.get('oldest_id'),
        )


class SearchResult(NamedTuple):
    posts: List[Post]
    users: List[User]
    meta: Meta

    @classmethod
    def from_json(cls, payload: Any) -> 'SearchResult':
        meta = Meta.from_json(_field(payload, 'meta', 'search result'))
        includes = payload.get('includes', {})
        if not isinstance(includes, dict):
            raise DeserializationError("search result.includes must be a JSON object")
        return cls(
            posts=[Post.from_json(item) for item in _list(payload, 'data', 'search result')],
            users=[User.from_json(item) for item in _list(includes, 'users', 'includes')],
            meta=meta,
        )

    def author_of(self, post: Post) -> Optional[User]:
        """Find the included user record that wrote a post."""
        for user in self.users:
            if user.id == post.author_id:
                return user
        return None


class StatusResult(NamedTuple):
    id: int
    id_str: str
    text: str
    created_at: str

    @classmethod
    def from_json(cls, payload: Any) -> 'StatusResult':
        status_id = _field(payload, 'id', 'status')
        if not isinstance(status_id, int):
            raise DeserializationError("status.id must be an integer")
        return cls(
            id=status_id,
            id_str=_field(payload, 'id_str', 'status'),
            text=_field(payload, 'text', 'status'),
            created_at=_field(payload, 'created_at', 'status'),
        )
