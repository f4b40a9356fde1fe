import pytest

from chatdesk.frontend_schemas import (
    ChatMessageQuery,
    ChatRateRequest,
    SettingResult,
    UserLoginRequest,
)
from chatdesk.responses import ValidationError


def test_login_valid():
    password = "password"
    req = UserLoginRequest(username="user1", password=password)
    assert req.validate() is req


@pytest.mark.parametrize("username", ["", "user1"])
def test_login_missing_fields(username):
    with pytest.raises(ValidationError):
        UserLoginRequest(username=username).validate()


@pytest.mark.parametrize("rate", [0, 3, 5])
def test_rate_in_range(rate):
    assert ChatRateRequest(rate=rate).validate().rate == rate


@pytest.mark.parametrize("rate", [-1, 6])
def test_rate_out_of_range(rate):
    with pytest.raises(ValidationError):
        ChatRateRequest(rate=rate).validate()


def test_setting_result_dict():
    result = SettingResult(is_show_queue=True, is_show_read=False)
    assert result.to_dict() == {"is_show_queue": True, "is_show_read": False}


def test_message_query_default_page_size():
    assert ChatMessageQuery().page_size == 20
    assert ChatMessageQuery(id=9).id == 9