"""Validation rules shared by back-office forms."""

from __future__ import annotations

from enum import Enum
from typing import Any

from chatdesk.consts import (
    AUTO_RULE_MATCH_TYPE_ALL,
    AUTO_RULE_MATCH_TYPE_PART,
    AUTO_RULE_REPLY_TYPE_MESSAGE,
    AUTO_RULE_REPLY_TYPE_TRANSFER,
    AUTO_RULE_SCENE_ADMIN_OFFLINE,
    AUTO_RULE_SCENE_ADMIN_ONLINE,
    AUTO_RULE_SCENE_NOT_ACCEPTED,
)
from chatdesk.responses import ValidationError

MATCH_TYPES: tuple[str, ...] = (AUTO_RULE_MATCH_TYPE_ALL, AUTO_RULE_MATCH_TYPE_PART)
REPLY_TYPES: tuple[str, ...] = (AUTO_RULE_REPLY_TYPE_MESSAGE, AUTO_RULE_REPLY_TYPE_TRANSFER)
SCENES: tuple[str, ...] = (
    AUTO_RULE_SCENE_NOT_ACCEPTED,
    AUTO_RULE_SCENE_ADMIN_OFFLINE,
    AUTO_RULE_SCENE_ADMIN_ONLINE,
)


def parse_rule_params(rule: str) -> list[str]:
    """Return the comma separated parameters after the first colon of a rule."""
    _, colon, params = rule.partition(":")
    if not colon:
        return []
    return params.split(",")


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set)):
        return len(value) == 0
    return value == 0


def _as_text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _check(value: Any, allowed: tuple[str, ...], message: str) -> Any:
    if _is_empty(value) or _as_text(value) in allowed:
        return value
    raise ValidationError(message)


def check_auto_rule_match_type(value: Any) -> Any:
    """Accept an empty value or a known match type; return it unchanged."""
    return _check(value, MATCH_TYPES, "匹配类型不正确")


def check_auto_rule_reply_type(value: Any) -> Any:
    """Accept an empty value or a known reply type; return it unchanged."""
    return _check(value, REPLY_TYPES, "回复类型不正确")


def check_auto_rule_scene(value: Any) -> Any:
    """Accept an empty value or a known scene; return it unchanged."""
    return _check(value, SCENES, "触发场景不正确")