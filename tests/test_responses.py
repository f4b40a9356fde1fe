import json

import pytest

from chatdesk.api import new_nil_resp, new_resp
from chatdesk.responses import (
    AppError,
    BusinessError,
    ErrorCode,
    NotFoundError,
    ValidationError,
    handle_response,
)


def test_success_writes_json_of_result():
    reply = handle_response(new_resp({"a": 1}))
    assert reply.status == 200
    assert reply.parts == ({"code": 0, "data": {"a": 1}, "success": True},)


def test_body_round_trips_as_json():
    reply = handle_response(new_nil_resp())
    assert json.loads(reply.body) == new_nil_resp().to_dict()


def test_not_found_error():
    reply = handle_response(None, NotFoundError("missing"))
    assert reply.status == 404
    assert reply.parts == ({"message": "not found"},)


def test_app_error_with_not_found_code():
    reply = handle_response(None, AppError("gone", ErrorCode.NOT_FOUND))
    assert reply.status == 404


def test_validation_error_passes_message():
    reply = handle_response(None, ValidationError("bad input"))
    assert reply.status == 422
    assert reply.parts == ({"message": "bad input"},)


def test_business_error_writes_fail_then_internal_error():
    reply = handle_response(None, BusinessError("refused"))
    assert reply.status == 500
    fail, tail = reply.parts
    assert fail == {
        "code": int(ErrorCode.BUSINESS_VALIDATION_FAILED),
        "success": False,
        "message": "refused",
    }
    assert tail == {"message": "internal server error"}


def test_other_errors_are_internal():
    reply = handle_response(None, RuntimeError("boom"))
    assert reply.status == 500
    assert reply.parts == ({"message": "internal server error"},)


def test_explicit_status_writes_status_text():
    reply = handle_response(None, status=403)
    assert reply.status == 403
    assert reply.body == "Forbidden"


def test_explicit_ok_status_still_writes_result():
    reply = handle_response(new_resp("x"), status=200)
    assert reply.parts[0]["data"] == "x"


@pytest.mark.parametrize(
    "cls,code",
    [
        (NotFoundError, ErrorCode.NOT_FOUND),
        (ValidationError, ErrorCode.VALIDATION_FAILED),
        (BusinessError, ErrorCode.BUSINESS_VALIDATION_FAILED),
        (AppError, ErrorCode.NIL),
    ],
)
def test_error_default_codes(cls, code):
    assert cls("m").code == code
    assert str(cls("m")) == "m"