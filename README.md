# chatdesk

Building blocks for the server side of a customer-service chat desk, where
customers' users talk to support agents (admins).

The package gives you:

- **Response envelopes** (`chatdesk.api`): the JSON shapes endpoints return —
  plain results, paginated lists, option lists and failures — and the shared
  payload types `ChatMessage`, `ChatAction`, `File`, `Option` and `Paginate`.
- **Constants** (`chatdesk.consts`): message types, websocket actions,
  session statuses, message sources, file types, storage and platform names,
  and `is_file_message_type`.
- **Option lists** (`chatdesk.options`): label/value pairs for the admin
  panel's drop-downs, such as `message_type_options()` and
  `session_status_options()`.
- **Error handling** (`chatdesk.responses`): `AppError` and its subclasses
  `NotFoundError`, `ValidationError` and `BusinessError`, each with an
  `ErrorCode`, and `handle_response`, which turns a handler's result or error
  into an `HttpReply` with a status and body.
- **Request and result schemas** (`chatdesk.backend_schemas`,
  `chatdesk.frontend_schemas`): dataclasses whose `validate()` methods raise
  `ValidationError`, `to_json_dict` for serialising them under their wire
  names, and the route table of the admin API with `find_route`.
- **Validation rules** (`chatdesk.rules`): `parse_rule_params` and checks for
  auto-reply rule fields.
- **File storage** (`chatdesk.storage`): content sniffing of uploads, a local
  disk adapter and an object-storage bucket adapter.
- **Schema migration** (`chatdesk.migrate`) and the table/column catalogue of
  the account and chat tables (`chatdesk.tables_accounts`,
  `chatdesk.tables_chat`).

It has no runtime dependencies beyond the standard library.

## Installation

```
pip install chatdesk
```

For running the tests:

```
pip install "chatdesk[test]"
pytest
```

## Response envelopes

```python
from chatdesk.api import new_resp, new_list_resp, new_fail_resp

new_resp({"id": 1}).to_dict()
# {"code": 0, "data": {"id": 1}, "success": True}

new_list_resp(["a", "b"], 2).to_dict()
# {"code": 0, "data": ["a", "b"], "success": True, "total": 2}

new_fail_resp("not allowed", 1).to_dict()
# {"code": 1, "success": False, "message": "not allowed"}
```

`Paginate` defaults to a page size of 20 on page 1 and refuses page sizes
above 100.

## Turning errors into HTTP replies

Pass a handler's result, the error it raised (or `None`) and any explicit
status to `handle_response`:

- a `NotFoundError` (or any error with code `NOT_FOUND`) gives 404 with
  `{"message": "not found"}`;
- a validation failure gives 422 with the error's message;
- a `BusinessError` writes a failure envelope followed by a 500 body;
- any other error is logged and gives 500;
- an explicit non-200 status gives that status with its reason phrase;
- otherwise 200 with the result as JSON-ready data.

```python
from chatdesk.api import new_nil_resp
from chatdesk.responses import ValidationError, handle_response

reply = handle_response(new_nil_resp(), None, 200)
reply.status  # 200
reply = handle_response(None, ValidationError("name is required"), 200)
reply.body    # '{"message":"name is required"}'
```

## Validation and routes

```python
from chatdesk.backend_schemas import LoginRequest, find_route
from chatdesk.rules import parse_rule_params, check_auto_rule_match_type

password = "password"
LoginRequest(username="agent", password=password).validate()

parse_rule_params("unique:customer_admins,username")
# ["customer_admins", "username"]

check_auto_rule_match_type("all")  # returned unchanged; an unknown type raises

route, params = find_route("GET", "/auto-rules/7/form")
# route.name == "AutoRuleFormReq", params == {"id": "7"}
```

`find_route` raises `NotFoundError` when no route matches.

## File storage

`file_type` reads the first 512 bytes of an upload (putting a seekable stream
back where it was) and classifies it as `image`, `video`, `audio` or `pdf`,
raising `ValidationError` for anything else; `detect_content_type` gives the
underlying MIME guess.

`LocalAdapter(server_root, host)` saves uploads under the server root with a
generated file name, returns a `StoredFile`, builds public URLs from the host
and deletes files. `QiniuAdapter` builds URLs from a bucket's base URL; saving
and deleting go through an object-store client you pass in, with `put` and
`delete` methods, and raise `RuntimeError` when none was given. `disk` picks
one adapter by name from those you configure and raises `ValueError` for an
unknown name.

## Migrating the database

```
chatdesk-migrate path/to/chat.db
chatdesk-migrate path/to/chat.db --file schema.sql
```

The command opens the SQLite database, reads `database.sql` from the current
directory (or the file given with `--file`), splits it into statements on
`;`, skips blank ones and runs the rest inside one transaction. If any
statement fails, the transaction is rolled back and the error is raised. From
Python, `migrate(connection, sql_text)` and `run_migration_file(connection,
path)` do the same on any DB-API connection and return the number of
statements run.

## What it does not do

chatdesk is a set of parts, not a running chat desk. It has no HTTP or
websocket server, no handlers that read or write the database, no login or
token handling, and no real-time message delivery. Its table catalogue covers
the account and chat tables only; the tables of auto-reply messages, rules and
chat settings are not described. Storage in a Qiniu bucket needs a client
supplied by you.