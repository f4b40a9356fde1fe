"""Payloads of the customer-facing chat API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from chatdesk.responses import ValidationError


@dataclass
class UserLoginRequest:
    username: str = ""
    password: str = ""

    def validate(self) -> UserLoginRequest:
        if not self.username:
            raise ValidationError("The username field is required")
        if not self.password:
            raise ValidationError("The password field is required")
        return self


@dataclass
class UserLoginResult:
    token: str = ""


@dataclass
class SettingResult:
    is_show_queue: bool = False
    is_show_read: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"is_show_queue": self.is_show_queue, "is_show_read": self.is_show_read}


@dataclass
class ChatReadRequest:
    msg_id: int = 0


@dataclass
class ChatRateRequest:
    rate: int = 0

    def validate(self) -> ChatRateRequest:
        if self.rate > 5:
            raise ValidationError("The rate value must be equal or lesser than 5")
        if self.rate < 0:
            raise ValidationError("The rate value must be equal or greater than 0")
        return self


@dataclass
class ChatMessageQuery:
    id: int = 0
    page_size: int = 20


@dataclass
class ChatReqId:
    req_id: str = ""