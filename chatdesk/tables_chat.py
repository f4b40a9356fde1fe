"""Table layouts of chat files, messages, sessions and transfers."""

from __future__ import annotations

from chatdesk.tables_accounts import Table

CUSTOMER_CHAT_FILES = Table(
    "customer_chat_files",
    (
        "id",
        "customer_id",
        "disk",
        "path",
        "name",
        "from_model",
        "from_id",
        "type",
        "created_at",
        "updated_at",
        "deleted_at",
        "is_resource",
        "parent_id",
    ),
)

CUSTOMER_CHAT_MESSAGES = Table(
    "customer_chat_messages",
    (
        "id",
        "user_id",
        "admin_id",
        "customer_id",
        "type",
        "content",
        "received_at",
        "send_at",
        "source",
        "session_id",
        "req_id",
        "read_at",
        "created_at",
        "updated_at",
        "deleted_at",
    ),
)

CUSTOMER_CHAT_SESSIONS = Table(
    "customer_chat_sessions",
    (
        "id",
        "user_id",
        "queried_at",
        "accepted_at",
        "canceled_at",
        "broken_at",
        "customer_id",
        "admin_id",
        "type",
        "rate",
    ),
)

CUSTOMER_CHAT_TRANSFERS = Table(
    "customer_chat_transfers",
    (
        "id",
        "user_id",
        "from_session_id",
        "to_session_id",
        "from_admin_id",
        "to_admin_id",
        "customer_id",
        "remark",
        "accepted_at",
        "canceled_at",
        "created_at",
        "updated_at",
    ),
)

CHAT_TABLES: tuple[Table, ...] = (
    CUSTOMER_CHAT_FILES,
    CUSTOMER_CHAT_MESSAGES,
    CUSTOMER_CHAT_SESSIONS,
    CUSTOMER_CHAT_TRANSFERS,
)