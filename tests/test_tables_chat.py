import pytest

from chatdesk.tables_chat import (
    CHAT_TABLES,
    CUSTOMER_CHAT_FILES,
    CUSTOMER_CHAT_MESSAGES,
    CUSTOMER_CHAT_SESSIONS,
    CUSTOMER_CHAT_TRANSFERS,
)


def test_table_names():
    assert [table.name for table in CHAT_TABLES] == [
        "customer_chat_files",
        "customer_chat_messages",
        "customer_chat_sessions",
        "customer_chat_transfers",
    ]
    assert CUSTOMER_CHAT_FILES.has_column("name")
    assert CUSTOMER_CHAT_TRANSFERS.has_column("remark")


def test_all_in_default_group():
    assert {table.group for table in CHAT_TABLES} == {"default"}
    assert CUSTOMER_CHAT_SESSIONS.column("Type") == "type"


def test_every_table_has_id_first():
    assert CUSTOMER_CHAT_FILES.columns[0] == "id"
    assert CUSTOMER_CHAT_MESSAGES.columns[0] == "id"
    assert CUSTOMER_CHAT_SESSIONS.columns[0] == "id"
    assert CUSTOMER_CHAT_TRANSFERS.columns[0] == "id"
    assert CUSTOMER_CHAT_FILES.has_column("id")
    assert CUSTOMER_CHAT_MESSAGES.has_column("id")
    assert CUSTOMER_CHAT_SESSIONS.has_column("id")
    assert CUSTOMER_CHAT_TRANSFERS.has_column("id")


def test_files_columns():
    assert CUSTOMER_CHAT_FILES.column("IsResource") == "is_resource"
    assert CUSTOMER_CHAT_FILES.column("ParentId") == "parent_id"
    assert CUSTOMER_CHAT_FILES.column("from_model") == "from_model"
    assert CUSTOMER_CHAT_FILES.columns[-1] == "parent_id"


def test_messages_columns():
    assert CUSTOMER_CHAT_MESSAGES.column("ReqId") == "req_id"
    assert CUSTOMER_CHAT_MESSAGES.column("ReadAt") == "read_at"
    assert CUSTOMER_CHAT_MESSAGES.has_column("send_at")
    assert "session_id" in list(CUSTOMER_CHAT_MESSAGES)


def test_sessions_have_no_timestamps():
    assert not CUSTOMER_CHAT_SESSIONS.has_column("created_at")
    assert CUSTOMER_CHAT_SESSIONS.column("BrokenAt") == "broken_at"
    assert CUSTOMER_CHAT_SESSIONS.columns[-1] == "rate"


def test_transfers_columns():
    assert CUSTOMER_CHAT_TRANSFERS.column("FromSessionId") == "from_session_id"
    assert CUSTOMER_CHAT_TRANSFERS.column("ToAdminId") == "to_admin_id"
    assert not CUSTOMER_CHAT_TRANSFERS.has_column("deleted_at")


def test_unknown_column_raises():
    with pytest.raises(KeyError):
        CUSTOMER_CHAT_SESSIONS.column("DeletedAt")


def test_length_matches_columns():
    assert len(CUSTOMER_CHAT_FILES) == 13
    assert len(CUSTOMER_CHAT_MESSAGES) == 15
    assert len(CUSTOMER_CHAT_SESSIONS) == 10
    assert len(CUSTOMER_CHAT_TRANSFERS) == 12
    assert [CUSTOMER_CHAT_FILES.column(c) for c in CUSTOMER_CHAT_FILES.columns] == list(
        CUSTOMER_CHAT_FILES.columns
    )
    assert [
        CUSTOMER_CHAT_SESSIONS.column(c) for c in CUSTOMER_CHAT_SESSIONS.columns
    ] == list(CUSTOMER_CHAT_SESSIONS.columns)


@pytest.mark.parametrize(
    "table,attribute",
    [
        (CUSTOMER_CHAT_FILES, "CustomerId"),
        (CUSTOMER_CHAT_MESSAGES, "CustomerId"),
        (CUSTOMER_CHAT_SESSIONS, "CustomerId"),
        (CUSTOMER_CHAT_TRANSFERS, "CustomerId"),
    ],
)
def test_customer_id_everywhere(table, attribute):
    assert table.column(attribute) == "customer_id"