"""Response envelopes and shared payload types of the chat HTTP API."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_PAGE_SIZE = 100


def _to_json(value: Any) -> Any:
    """Turn a payload value into plain JSON-compatible data."""
    if value is None:
        return None
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime(TIME_FORMAT)
    if isinstance(value, dict):
        return {key: _to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    return value


@dataclass
class NormalResponse:
    """A successful response carrying arbitrary data."""

    data: Any = None
    code: int = 0
    success: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "data": _to_json(self.data), "success": self.success}


@dataclass
class ListResponse:
    """A successful response carrying a page of items and the overall total."""

    data: list[Any] = field(default_factory=list)
    total: int = 0
    code: int = 0
    success: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "data": _to_json(self.data),
            "success": self.success,
            "total": self.total,
        }


@dataclass
class FailResponse:
    """A failed response with an error message."""

    message: str
    code: int
    success: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "success": self.success, "message": self.message}


@dataclass
class Paginate:
    """Paging parameters of list requests."""

    page_size: int = 20
    current: int = 1

    def __post_init__(self) -> None:
        if self.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"page_size must not exceed {MAX_PAGE_SIZE}")


@dataclass
class Option:
    """A value/label pair for select inputs."""

    value: Any
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {"value": _to_json(self.value), "label": self.label}


@dataclass
class File:
    """A stored file as exposed by the API."""

    id: int = 0
    path: str = ""
    url: str = ""
    thumb_url: str = ""
    name: str = ""
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "path": self.path,
            "url": self.url,
            "thumb_url": self.thumb_url,
            "name": self.name,
            "type": self.type,
        }


@dataclass
class ChatMessage:
    """A chat message as exposed to clients."""

    id: int = 0
    user_id: int = 0
    admin_id: int = 0
    admin_name: str = ""
    type: str = ""
    content: str = ""
    received_at: datetime | None = None
    source: int = 0
    req_id: str = ""
    is_success: bool = False
    is_read: bool = False
    avatar: str = ""
    username: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "admin_id": self.admin_id,
            "admin_name": self.admin_name,
            "type": _to_json(self.type),
            "content": self.content,
            "received_at": _to_json(self.received_at),
            "source": _to_json(self.source),
            "req_id": self.req_id,
            "is_success": self.is_success,
            "is_read": self.is_read,
            "avatar": self.avatar,
            "username": self.username,
        }


@dataclass
class ChatAction:
    """A websocket action frame."""

    action: str
    data: Any = None
    time: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"data": _to_json(self.data), "time": self.time, "action": _to_json(self.action)}


def new_resp(data: Any) -> NormalResponse:
    """Wrap data in a successful response."""
    return NormalResponse(data=data)


def new_nil_resp() -> NormalResponse:
    """A successful response without data."""
    return NormalResponse(data=None)


def new_list_resp(items: list[Any], total: int) -> ListResponse:
    """A successful list response."""
    return ListResponse(data=list(items), total=total)


def new_option_resp(options: list[Option]) -> NormalResponse:
    """A successful response carrying select options."""
    return NormalResponse(data=list(options))


def new_fail_resp(message: str, code: int) -> FailResponse:
    """A failed response with the given message and code."""
    return FailResponse(message=message, code=code)