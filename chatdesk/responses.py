"""Turning handler results and errors into HTTP replies."""

from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from enum import IntEnum
from http import HTTPStatus
from typing import Any

from chatdesk.api import new_fail_resp

logger = logging.getLogger(__name__)


class ErrorCode(IntEnum):
    """Error codes carried by application errors."""

    NIL = -1
    OK = 0
    INTERNAL_ERROR = 50
    VALIDATION_FAILED = 51
    INVALID_OPERATION = 55
    NOT_FOUND = 65
    BUSINESS_VALIDATION_FAILED = 300


class AppError(Exception):
    """An error with a code that decides how it is reported."""

    default_code: ErrorCode = ErrorCode.NIL

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code if code is None else code


class NotFoundError(AppError):
    """The requested record or route does not exist."""

    default_code = ErrorCode.NOT_FOUND


class ValidationError(AppError):
    """Input failed validation."""

    default_code = ErrorCode.VALIDATION_FAILED


class BusinessError(AppError):
    """A business rule refused the operation."""

    default_code = ErrorCode.BUSINESS_VALIDATION_FAILED


def _encode(part: Any) -> str:
    if isinstance(part, str):
        return part
    return json.dumps(part, ensure_ascii=False, separators=(",", ":"))


@dataclass(frozen=True)
class HttpReply:
    """The status and the pieces of body written, in order."""

    status: int
    parts: tuple[Any, ...]

    @property
    def body(self) -> str:
        return "".join(_encode(part) for part in self.parts)


def _payload(result: Any) -> Any:
    to_dict = getattr(result, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(result) and not isinstance(result, type):
        return dataclasses.asdict(result)
    return result


def _status_text(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


def handle_response(result: Any, error: BaseException | None = None, status: int = 0) -> HttpReply:
    """Build the reply for a handler's result, error and explicit status."""
    if error is not None:
        message = str(error)
        code = getattr(error, "code", ErrorCode.NIL)
        if isinstance(error, NotFoundError) or code == ErrorCode.NOT_FOUND:
            return HttpReply(HTTPStatus.NOT_FOUND, ({"message": "not found"},))
        if code == ErrorCode.VALIDATION_FAILED:
            return HttpReply(HTTPStatus.UNPROCESSABLE_ENTITY, ({"message": message},))
        parts: list[Any] = []
        if code == ErrorCode.BUSINESS_VALIDATION_FAILED:
            parts.append(new_fail_resp(message, int(code)).to_dict())
        else:
            logger.error("%s", error, exc_info=error)
        parts.append({"message": "internal server error"})
        return HttpReply(HTTPStatus.INTERNAL_SERVER_ERROR, tuple(parts))
    if status > 0 and status != HTTPStatus.OK:
        return HttpReply(status, (_status_text(status),))
    return HttpReply(HTTPStatus.OK, (_payload(result),))