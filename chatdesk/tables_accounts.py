"""Table layouts of customers, users and back-office accounts."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_GROUP = "default"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def _snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class Table:
    """A database table: its name, its configuration group and its columns."""

    name: str
    columns: tuple[str, ...]
    group: str = DEFAULT_GROUP

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("a table needs a name")
        if len(set(self.columns)) != len(self.columns):
            raise ValueError(f"duplicate columns in table {self.name}")

    def has_column(self, name: str) -> bool:
        """Whether the table has a column of exactly this name."""
        return name in self.columns

    def column(self, attribute: str) -> str:
        """Column name for an attribute, given in snake_case or CamelCase."""
        name = _snake(attribute)
        if name not in self.columns:
            raise KeyError(f"table {self.name} has no column for {attribute!r}")
        return name

    def __iter__(self):
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)


CUSTOMER = Table(
    "customer",
    ("id", "name", "created_at", "updated_at", "deleted_at"),
)

CUSTOMERS = Table(
    "customers",
    ("id", "name", "created_at", "updated_at", "deleted_at"),
)

USERS = Table(
    "users",
    ("id", "customer_id", "username", "password", "created_at", "updated_at", "deleted_at"),
)

CUSTOMER_ADMINS = Table(
    "customer_admins",
    ("id", "customer_id", "username", "password", "created_at", "updated_at", "deleted_at"),
)

CUSTOMER_ADMIN_CHAT_SETTINGS = Table(
    "customer_admin_chat_settings",
    (
        "id",
        "admin_id",
        "background",
        "is_auto_accept",
        "welcome_content",
        "offline_content",
        "name",
        "last_online",
        "avatar",
        "created_at",
        "updated_at",
        "deleted_at",
    ),
)

CUSTOMER_ADMIN_WECHAT = Table(
    "customer_admin_wechat",
    (
        "id",
        "admin_id",
        "open_id",
        "official_open_id",
        "unionid",
        "avatar",
        "created_at",
        "updated_at",
        "info",
        "is_wechat_only",
    ),
)

ACCOUNT_TABLES: tuple[Table, ...] = (
    CUSTOMER,
    CUSTOMERS,
    USERS,
    CUSTOMER_ADMINS,
    CUSTOMER_ADMIN_CHAT_SETTINGS,
    CUSTOMER_ADMIN_WECHAT,
)