"""Select options offered to the back office."""

from __future__ import annotations

from chatdesk.api import Option
from chatdesk.consts import (
    AUTO_RULE_MATCH_TYPE_ALL,
    AUTO_RULE_MATCH_TYPE_PART,
    AUTO_RULE_REPLY_TYPE_MESSAGE,
    AUTO_RULE_REPLY_TYPE_TRANSFER,
    AUTO_RULE_SCENE_ADMIN_OFFLINE,
    AUTO_RULE_SCENE_ADMIN_ONLINE,
    AUTO_RULE_SCENE_NOT_ACCEPTED,
    USER_ALLOW_MESSAGE_TYPE,
    ChatSessionStatus,
    MessageType,
)


def message_type_options() -> list[Option]:
    """Message types that an auto message may have."""
    return [
        Option(label="文本", value=MessageType.TEXT.value),
        Option(label="图片", value=MessageType.IMAGE.value),
        Option(label="音频", value=MessageType.AUDIO.value),
        Option(label="视频", value=MessageType.VIDEO.value),
        Option(label="导航卡片", value=MessageType.NAVIGATE.value),
    ]


def auto_rule_match_type_options() -> list[Option]:
    """How an auto rule matches incoming text."""
    return [
        Option(label="全匹配", value=AUTO_RULE_MATCH_TYPE_ALL),
        Option(label="半匹配", value=AUTO_RULE_MATCH_TYPE_PART),
    ]


def auto_rule_reply_type_options() -> list[Option]:
    """What an auto rule does when it matches."""
    return [
        Option(label="回复消息", value=AUTO_RULE_REPLY_TYPE_MESSAGE),
        Option(label="转接人工", value=AUTO_RULE_REPLY_TYPE_TRANSFER),
    ]


def auto_rule_scene_options() -> list[Option]:
    """Situations in which an auto rule applies."""
    return [
        Option(label="人工未接入", value=AUTO_RULE_SCENE_NOT_ACCEPTED),
        Option(label="已接入但客服离线", value=AUTO_RULE_SCENE_ADMIN_OFFLINE),
        Option(label="已接入客服在线", value=AUTO_RULE_SCENE_ADMIN_ONLINE),
    ]


def file_type_options() -> list[Option]:
    """Message types a user may send."""
    return list(USER_ALLOW_MESSAGE_TYPE)


def session_status_options() -> list[Option]:
    """Statuses of a chat session."""
    return [
        Option(label="已取消", value=ChatSessionStatus.CANCEL.value),
        Option(label="已关闭", value=ChatSessionStatus.CLOSE.value),
        Option(label="待接入", value=ChatSessionStatus.WAIT.value),
        Option(label="已接入", value=ChatSessionStatus.ACCEPT.value),
    ]