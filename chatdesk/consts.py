"""Constants shared across the chat service."""

from __future__ import annotations

from enum import Enum, IntEnum

from chatdesk.api import Option


class MessageType(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    PDF = "pdf"
    NAVIGATE = "navigator"
    RATE = "rate"
    NOTICE = "notice"


MESSAGE_TYPE_FILE_TYPES: tuple[str, ...] = (
    MessageType.IMAGE.value,
    MessageType.AUDIO.value,
    MessageType.VIDEO.value,
    MessageType.PDF.value,
)

USER_ALLOW_MESSAGE_TYPE: tuple[Option, ...] = (
    Option(label="文本", value=MessageType.TEXT.value),
    Option(label="图片", value=MessageType.IMAGE.value),
    Option(label="语音", value=MessageType.AUDIO.value),
    Option(label="视频", value=MessageType.VIDEO.value),
    Option(label="PDF", value=MessageType.PDF.value),
    Option(label="导航卡片", value=MessageType.NAVIGATE.value),
)

CHAT_SESSION_TYPE_NORMAL = 0
CHAT_SESSION_TYPE_TRANSFER = 1


class Action(str, Enum):
    RECEIPT = "receipt"
    PING = "ping"
    USER_ONLINE = "user-online"
    USER_OFFLINE = "user-offline"
    WAITING_USER = "waiting-users"
    WAITING_USER_COUNT = "waiting-user-count"
    ADMINS = "admins"
    SEND_MESSAGE = "send-message"
    RECEIVE_MESSAGE = "receive-message"
    OTHER_LOGIN = "other-login"
    MORE_THAN_ONE = "more-than-one"
    USER_TRANSFER = "user-transfer"
    ERROR_MESSAGE = "error-message"
    READ = "read"
    USER_RATE = "user-rate"


AUTO_RULE_MATCH_TYPE_ALL = "all"
AUTO_RULE_MATCH_TYPE_PART = "part"

AUTO_RULE_MATCH_ENTER = "enter"
AUTO_RULE_MATCH_ADMIN_ALL_OFFLINE = "u-offline"

AUTO_RULE_REPLY_TYPE_MESSAGE = "message"
AUTO_RULE_REPLY_TYPE_TRANSFER = "transfer"

AUTO_RULE_SCENE_NOT_ACCEPTED = "not-accepted"
AUTO_RULE_SCENE_ADMIN_ONLINE = "admin-online"
AUTO_RULE_SCENE_ADMIN_OFFLINE = "admin-offline"


class ChatSessionStatus(str, Enum):
    WAIT = "wait"
    CANCEL = "cancel"
    ACCEPT = "accept"
    CLOSE = "close"


class MessageSource(IntEnum):
    USER = 0
    ADMIN = 1
    SYSTEM = 2


CHAT_SETTING_TYPE_IMAGE = "image"
CHAT_SETTING_TYPE_TEXT = "text"
CHAT_SETTING_TYPE_SELECT = "select"

CHAT_SETTING_IS_AUTO_TRANSFER = "is-auto-transfer"
CHAT_SETTING_MINUTE_TO_BREAK = "minute-to-break"
CHAT_SETTING_SYSTEM_NAME = "system-name"
CHAT_SETTING_SYSTEM_AVATAR = "system-avatar"
CHAT_SETTING_SHOW_QUEUE = "show-queue"
CHAT_SETTING_SHOW_READ = "show-read"

STORAGE_QINIU = "qiniu"
STORAGE_LOCAL = "local"


class FileType(str, Enum):
    DIR = "dir"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    PDF = "pdf"


PLATFORM_WEB = "web"
PLATFORM_H5 = "h5"
PLATFORM_WEAPP = "weapp"
PLATFORM_APP = "app"

WS_TYPE_ADMIN = "admin"
WS_TYPE_USER = "user"


def is_file_message_type(message_type: str | MessageType) -> bool:
    """Whether a message type carries a file."""
    if isinstance(message_type, MessageType):
        message_type = message_type.value
    return message_type in MESSAGE_TYPE_FILE_TYPES