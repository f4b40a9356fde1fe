"""Payloads, forms and routes of the back-office API."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from chatdesk.api import TIME_FORMAT, ChatMessage, File, Option
from chatdesk.consts import (
    AUTO_RULE_MATCH_TYPE_ALL,
    AUTO_RULE_MATCH_TYPE_PART,
    AUTO_RULE_REPLY_TYPE_MESSAGE,
    AUTO_RULE_REPLY_TYPE_TRANSFER,
    AUTO_RULE_SCENE_ADMIN_OFFLINE,
    AUTO_RULE_SCENE_ADMIN_ONLINE,
    AUTO_RULE_SCENE_NOT_ACCEPTED,
    MessageType,
    is_file_message_type,
)
from chatdesk.responses import NotFoundError, ValidationError


def _is_empty(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if value is None or value == "" or value == 0:
        return True
    return isinstance(value, (list, tuple, dict)) and not value


def _required(value: Any, name: str, message: str | None = None) -> None:
    if _is_empty(value):
        raise ValidationError(message or f"The {name} field is required")


def _max_length(value: str | None, limit: int, name: str, message: str | None = None) -> None:
    if value is not None and len(value) > limit:
        raise ValidationError(
            message or f"The {name} value length must be equal or lesser than {limit}"
        )


def _one_of(value: Any, allowed: tuple[str, ...], message: str) -> None:
    if _is_empty(value):
        return
    if isinstance(value, Enum):
        value = value.value
    if value not in allowed:
        raise ValidationError(message)


def _convert(value: Any) -> Any:
    if value is None:
        return None
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_json_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.strftime(TIME_FORMAT)
    if isinstance(value, dict):
        return {key: _convert(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_convert(item) for item in value]
    return value


def to_json_dict(obj: Any) -> dict[str, Any]:
    """Serialise a payload dataclass under its wire field names."""
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"{type(obj).__name__} is not a payload object")
    result: dict[str, Any] = {}
    for item in dataclasses.fields(obj):
        value = getattr(obj, item.name)
        if item.metadata.get("flatten"):
            if value is not None:
                result.update(_convert(value))
            continue
        key = item.metadata.get("json", item.name)
        if key is None:
            continue
        result[key] = _convert(value)
    return result


@dataclass
class AutoMessageNavigator:
    url: str = ""
    title: str = ""
    image: File | None = None


@dataclass
class AutoMessageForm:
    type: str = ""
    name: str = ""
    content: str = ""
    navigator: AutoMessageNavigator | None = None
    file: File | None = None

    def validate(self) -> AutoMessageForm:
        _required(self.type, "type")
        _required(self.name, "name")
        _max_length(self.name, 32, "name")
        if self.type == MessageType.TEXT:
            _required(self.content, "content")
        _max_length(self.content, 512, "content")
        if self.type == MessageType.NAVIGATE:
            _required(self.navigator, "navigator")
        if self.navigator is not None:
            if self.type == MessageType.NAVIGATE:
                _required(self.navigator.url, "url")
                _required(self.navigator.title, "title")
                _required(self.navigator.image, "image")
            _max_length(self.navigator.url, 512, "url")
            _max_length(self.navigator.title, 32, "title")
        if is_file_message_type(self.type) and self.file is None:
            raise ValidationError("请选择文件")
        return self


@dataclass
class AutoMessage:
    id: int = 0
    name: str = ""
    type: str = ""
    content: str = ""
    file: File | None = None
    navigator: AutoMessageNavigator | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


_MATCH_TYPES = (AUTO_RULE_MATCH_TYPE_ALL, AUTO_RULE_MATCH_TYPE_PART)
_REPLY_TYPES = (AUTO_RULE_REPLY_TYPE_MESSAGE, AUTO_RULE_REPLY_TYPE_TRANSFER)
_SCENES = (
    AUTO_RULE_SCENE_NOT_ACCEPTED,
    AUTO_RULE_SCENE_ADMIN_OFFLINE,
    AUTO_RULE_SCENE_ADMIN_ONLINE,
)


@dataclass
class AutoRuleForm:
    name: str = ""
    match: str = ""
    match_type: str = ""
    reply_type: str = ""
    message_id: int = 0
    is_open: bool = False
    sort: int | None = None
    scenes: list[str] = field(default_factory=list)

    def validate(self) -> AutoRuleForm:
        _required(self.name, "name")
        _max_length(self.name, 32, "name")
        _required(self.match, "match")
        _required(self.match_type, "match_type")
        _one_of(self.match_type, _MATCH_TYPES, "匹配类型不正确")
        _required(self.reply_type, "reply_type")
        _one_of(self.reply_type, _REPLY_TYPES, "回复类型不正确")
        is_message = self.reply_type == AUTO_RULE_REPLY_TYPE_MESSAGE
        if is_message:
            _required(self.message_id, "message_id")
        if self.sort is None:
            raise ValidationError("The sort field is required")
        if not 0 <= self.sort <= 10000:
            raise ValidationError("The sort value must be between 0 and 10000")
        if is_message:
            _required(self.scenes, "scenes")
        for scene in self.scenes:
            _one_of(scene, _SCENES, "触发场景不正确")
        return self


@dataclass
class AutoRule:
    id: int = 0
    name: str = ""
    match: str = ""
    match_type: str = ""
    reply_type: str = ""
    sort: int = 0
    is_open: bool = False
    count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    event_label: str = ""
    scenes: list[str] = field(default_factory=list)
    message: AutoMessage | None = None


@dataclass
class ChatOnlineCount:
    admin: int = 0
    user: int = 0
    waiting: int = 0


@dataclass
class ChatSimpleMessage:
    id: int = 0
    type: str = ""
    time: datetime | None = None
    content: str = ""


@dataclass
class ChatWaitingUser:
    username: str = ""
    avatar: str = ""
    user_id: int = field(default=0, metadata={"json": "id"})
    last_time: datetime | None = None
    messages: list[ChatSimpleMessage] = field(default_factory=list)
    message_count: int = 0
    description: str = ""
    session_id: int = 0


@dataclass
class ChatCustomerAdmin:
    username: str = ""
    online: bool = False
    id: int = 0
    accepted_count: int = 0
    platform: str = ""


@dataclass
class ChatTransfer:
    id: int = 0
    from_session_id: int = 0
    to_session_id: int = 0
    user_id: int = 0
    remark: str = ""
    from_admin_name: str = ""
    to_admin_name: str = ""
    username: str = ""
    created_at: datetime | None = None
    accepted_at: datetime | None = None
    canceled_at: datetime | None = None
    status: str = ""


@dataclass
class ChatUser:
    id: int = 0
    username: str = ""
    last_chat_time: datetime | None = None
    disabled: bool = False
    online: bool = False
    last_message: ChatMessage | None = None
    unread: int = 0
    avatar: str = ""
    platform: str = ""


@dataclass
class ChatSimpleUser:
    id: int = 0
    username: str = ""


@dataclass
class UserInfoItem:
    name: str = ""
    label: str = ""
    description: str = ""


@dataclass
class StoreTransferRequest:
    user_id: int = 0
    to_id: int = 0
    remark: str = ""

    def validate(self) -> StoreTransferRequest:
        _required(self.user_id, "user_id")
        _required(self.to_id, "to_id")
        _max_length(self.remark, 255, "remark")
        return self


@dataclass
class ChatFile:
    file: File | None = field(default=None, metadata={"flatten": True})
    admin_name: str = ""
    user_name: str = ""
    created_at: datetime | None = None


@dataclass
class ChatSetting:
    id: int = 0
    name: str = ""
    value: Any = None
    options: list[Option] = field(default_factory=list)
    title: str = ""
    type: str = ""
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class LoginRequest:
    username: str = ""
    password: str = ""

    def validate(self) -> LoginRequest:
        _required(self.username, "username")
        _required(self.password, "password")
        return self


@dataclass
class LoginResult:
    token: str = ""


@dataclass
class CurrentAdmin:
    id: int = 0
    customer_id: int = 0
    username: str = ""


@dataclass
class CurrentAdminSettingForm:
    background: File | None = None
    is_auto_accept: bool = False
    welcome_content: str = ""
    offline_content: str = ""
    name: str = ""
    avatar: File | None = None

    def validate(self) -> CurrentAdminSettingForm:
        _max_length(self.welcome_content, 512, "welcome_content")
        _max_length(self.offline_content, 512, "offline_content")
        _max_length(self.name, 20, "name")
        return self


@dataclass
class CurrentAdminSetting(CurrentAdminSettingForm):
    admin_id: int = field(default=0, metadata={"json": "AdminId"})


@dataclass
class CustomerAdminForm:
    username: str = ""
    password: str = ""

    def validate(self) -> CustomerAdminForm:
        _required(self.username, "username")
        _max_length(self.username, 32, "username")
        _required(self.password, "password")
        _max_length(self.password, 32, "password")
        return self


@dataclass
class CustomerAdmin:
    id: int = 0
    username: str = ""
    avatar: str = ""
    online: bool = False
    accepted_count: int = 0
    last_online: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class DashboardAdminInfo:
    admins: list[ChatSimpleUser] = field(default_factory=list)
    total: int = 0


@dataclass
class DashboardOnlineUserInfo:
    users: list[ChatSimpleUser] = field(default_factory=list)
    active_count: int = 0


@dataclass
class DashboardWaitingUserInfo:
    users: list[ChatSimpleUser] = field(default_factory=list)
    today_total: int = 0


@dataclass
class FileDirForm:
    """Name (and parent) of a directory to create, or a new file name."""

    name: str = ""
    pid: int = 0

    def validate(self) -> FileDirForm:
        _required(self.name, "name", "请输入文件夹名称")
        _max_length(self.name, 20, "name", "名称最长20个字符")
        return self


@dataclass
class ChatSession:
    id: int = 0
    user_id: int = field(default=0, metadata={"json": None})
    queried_at: datetime | None = None
    accepted_at: datetime | None = None
    broken_at: datetime | None = None
    canceled_at: datetime | None = None
    admin_id: int = 0
    user_name: str = field(default="", metadata={"json": "username"})
    admin_name: str = ""
    type_label: str = ""
    status: str = ""
    status_label: str = ""
    rate: int = 0


@dataclass
class SessionDetail:
    messages: list[ChatMessage] = field(default_factory=list)
    session: ChatSession = field(default_factory=ChatSession)


@dataclass
class SystemAutoRule:
    id: int = 0
    message_id: int = 0
    name: str = ""


@dataclass
class Transfer:
    id: int = 0
    session_id: int = 0
    user_id: int = 0
    remark: str = ""
    from_admin_name: str = ""
    to_admin_name: str = ""
    username: str = ""
    created_at: int = 0
    accepted_at: int = 0
    canceled_at: int = 0


@dataclass(frozen=True)
class Route:
    """One back-office endpoint."""

    method: str
    path: str
    name: str
    tag: str
    summary: str


def _routes(tag: str, *entries: tuple[str, str, str, str]) -> list[Route]:
    return [Route(method, path, name, tag, summary) for method, path, name, summary in entries]


ROUTES: tuple[Route, ...] = tuple(
    _routes(
        "后台快捷回复",
        ("GET", "/auto-messages", "AutoMessageListReq", "获取快捷回复详情"),
        ("GET", "/auto-messages/:id/form", "AutoMessageFormReq", "获取编辑表单数据"),
        ("POST", "/auto-messages", "AutoMessageStoreReq", "新增快捷回复"),
        ("PUT", "/auto-messages/:id", "AutoMessageUpdateReq", "修改快捷回复"),
        ("DELETE", "/auto-messages/:id", "AutoMessageDeleteReq", "删除快捷回复"),
    )
    + _routes(
        "后台自动回复规则",
        ("GET", "/auto-rules", "AutoRuleListReq", "获取自动回复规则"),
        ("POST", "/auto-rules", "AutoRuleStoreReq", "新增自动回复规则"),
        ("PUT", "/auto-rules/:id", "AutoRuleUpdateReq", "编辑自动回复规则"),
        ("DELETE", "/auto-rules/:id", "AutoRuleDeleteReq", "删除自动回复规则"),
        ("GET", "/auto-rules/:id/form", "AutoRuleFormReq", "获取自动回复规则表单"),
    )
    + _routes(
        "后台客服面板",
        ("GET", "/ws/chat-user/:id", "GetUserChatInfoReq", "获取用户信息"),
        ("POST", "/ws/chat-user", "AcceptUserReq", "接入用户"),
        ("DELETE", "/ws/chat-user/:id", "RemoveUserReq", "移除用户"),
        ("DELETE", "/ws/chat-user", "RemoveAllUserReq", "移除所有失效用户"),
        ("POST", "/ws/read", "MessageReadReq", "消息已读"),
        ("GET", "/ws/messages", "GetMessageReq", "获取消息"),
        ("POST", "/ws/transfer/:id/cancel", "CancelTransferReq", "取消转接"),
        ("POST", "/ws/transfer", "StoreTransferReq", "转接用户"),
        ("GET", "/ws/transfer/:id/messages", "TransferMessageReq", "获取转接消息记录"),
        ("GET", "/ws/req-id", "ReqIdReq", "获取message reqId"),
        ("GET", "/ws/sessions/:id", "GetUserSessionReq", "获取用户历史session"),
        ("GET", "/ws/chat-users", "UserListReq", "获取客户对应用户列表"),
    )
    + _routes(
        "后台websocket链接",
        ("GET", "/ws", "ChatConnectReq", "连接websocket服务"),
    )
    + _routes(
        "聊天文件管理",
        ("GET", "/chat-files", "ChatFileListReq", "文件列表"),
        ("DELETE", "/chat-files/:id", "ChatFileDeleteReq", "删除文件"),
    )
    + _routes(
        "后台系统设置",
        ("GET", "/settings", "ChatSettingListReq", "获取系统设置列表"),
        ("PUT", "/settings/:id", "ChatSettingUpdateReq", "修改系统设置列表"),
    )
    + _routes(
        "管理员",
        ("GET", "/current-admin/info", "CurrentAdminInfoReq", "获取管理员信息"),
        ("PUT", "/current-admin/settings", "CurrentAdminSettingUpdateReq", "更新管理员设置"),
        ("GET", "/current-admin/settings", "CurrentAdminSettingReq", "获取管理员设置"),
    )
    + _routes("后台登录", ("POST", "/login", "LoginReq", "账号密码登录"))
    + _routes(
        "后台管理员",
        ("GET", "/admins", "CustomerAdminListReq", "获取管理员列表"),
        ("POST", "/admins", "StoreCustomerAdminReq", "新增管理员"),
        ("PUT", "/admins/:id", "UpdateCustomerAdminReq", "修改管理员"),
    )
    + _routes(
        "dashboard",
        ("GET", "/dashboard/online-info", "DashboardOnlineReq", "获取在线信息"),
        ("GET", "/dashboard/waiting-user-info", "DashboardWaitingUserInfoReq", "获取等待用户列表"),
        ("GET", "/dashboard/online-user-info", "DashboardOnlineUserInfoReq", "获取在线用户列表"),
        ("GET", "/dashboard/admin-info", "DashboardAdminInfoReq", "获取在线客服列表"),
    )
    + _routes(
        "后台文件管理",
        ("GET", "/files", "FileListReq", "文件列表"),
        ("POST", "/files", "FileStoreReq", "上传文件"),
        ("POST", "/file-dirs", "FileDirStoreReq", "新建目录"),
        ("PUT", "/files/:id", "FileUpdateReq", "修改文件名"),
        ("DELETE", "/files/:id", "FileDeleteReq", "删除文件"),
    )
    + _routes(
        "选项",
        ("GET", "/options/auto-messages", "OptionAutoMessageReq", "快捷回复"),
        ("GET", "/options/message-types", "OptionMessageTypeReq", "快捷回复类型"),
        ("GET", "/options/auto-rule-scenes", "OptionAutoRuleSceneReq", "自动回复规则场景"),
        ("GET", "/options/auto-rule-match-types", "OptionAutoRuleMatchTypeReq", "自动回复匹配规则"),
        ("GET", "/options/auto-rule-reply-types", "OptionAutoRuleReplyTypeReq", "自动回复回复类型"),
        ("GET", "/options/file-types", "OptionFileTypeReq", "文件类型"),
        ("GET", "/options/session-status", "OptionSessionStatusReq", "会话状态"),
    )
    + _routes(
        "客服对话",
        ("GET", "/chat-sessions", "SessionListReq", "客户对话列表"),
        ("POST", "/chat-sessions/:id/cancel", "SessionCancelReq", "取消客服对话"),
        ("POST", "/chat-sessions/:id/close", "SessionCloseReq", "关闭客服对话"),
        ("GET", "/chat-sessions/:id", "SessionDetailReq", "获取客服对话详情"),
    )
    + _routes(
        "系统规则",
        ("GET", "/system-auto-rules", "SystemRuleListReq", "获取系统规则设置"),
        ("PUT", "/system-auto-rules", "SystemRuleUpdateReq", "更新系统规则设置"),
    )
    + _routes(
        "后台转接记录",
        ("GET", "/transfers", "TransferListReq", "获取转接记录列表"),
        ("POST", "/transfers/:id/cancel", "TransferCancelReq", "取消转接记录"),
    )
)


def _segments(path: str) -> list[str]:
    return [part for part in path.strip("/").split("/") if part]


def _match(pattern: str, segments: list[str]) -> dict[str, str] | None:
    parts = _segments(pattern)
    if len(parts) != len(segments):
        return None
    params: dict[str, str] = {}
    for expected, actual in zip(parts, segments):
        if expected.startswith(":"):
            params[expected[1:]] = actual
        elif expected != actual:
            return None
    return params


def find_route(method: str, path: str) -> tuple[Route, dict[str, str]]:
    """Find the endpoint for a request, with its path parameters."""
    method = method.upper()
    segments = _segments(path)
    best: tuple[Route, dict[str, str]] | None = None
    for route in ROUTES:
        if route.method != method:
            continue
        params = _match(route.path, segments)
        if params is None:
            continue
        if best is None or len(params) < len(best[1]):
            best = (route, params)
    if best is None:
        raise NotFoundError(f"no route for {method} {path}")
    return best