# sharing-instant

Building blocks for real-time applications backed by an
entity-attribute-value store in the style of InstantDB. Stored values
are plain Python data: `None`, `bool`, `int`, `float`, `str`, `list` and
`dict` with string keys.

## Modules

### `sharing_instant.table`

- `Table`: a base class for dataclasses stored as entities. A subclass sets
  `TABLE_NAME` and may list `ColumnDef` entries in `COLUMNS`, which
  `columns()` returns.
  - `to_value()` converts a record to a stored value.
  - `from_value(value)` builds a record from a stored value. It ignores
    unknown attributes and sets missing optional fields to `None`. It raises
    `ValueError` when the value does not fit the fields.
  - `query()` starts a `QueryBuilder` for the table.
- `ColumnDef`: metadata for one column. It holds the name, the type name and
  the value type, and flags for optional, primary key, unique and indexed.
- `json_to_value` and `value_to_json` convert between JSON-like data and
  stored values. `json_to_value` turns integers outside the signed 64-bit
  range into floats. `value_to_json` turns non-finite floats into `None`.
  Both raise `TypeError` for data that has no JSON form.
- `QueryBuilder`: an immutable fluent builder. Each call returns a new
  builder. The methods are `where_eq`, `where_gt`, `where_lt`, `where_gte`,
  `where_lte`, `where_in`, `where_is_null`, `order(field, direction)`,
  `limit(n)` and `offset(n)`. `limit` and `offset` reject negative numbers
  and anything that is not an integer. `build()` returns
  `{table: {"$": {...}}}`. When no option is set, the `"$"` entry is left
  out. `WhereClause` and `WhereOp` describe the single conditions.

```python
from dataclasses import dataclass
from sharing_instant.table import Table

@dataclass
class Reminder(Table):
    TABLE_NAME = "reminders"
    id: str
    title: str
    is_completed: bool

query = (
    Reminder.query()
    .where_eq("is_completed", False)
    .order("title", "asc")
    .limit(10)
    .build()
)
# {"reminders": {"$": {"where": {"is_completed": False},
#                      "order": {"field": "title", "direction": "asc"},
#                      "limit": 10}}}
```

### `sharing_instant.sync_config`

- `SyncConfig` holds:
  - `app_id`
  - `ws_uri`, which defaults to `DEFAULT_WS_URI`, that is
    `wss://api.instantdb.com/runtime/session`
  - an optional `refresh_token` and an optional `admin_token`

  Its `connection_settings()` method returns a `ConnectionSettings` record:
  - an admin connection when an admin token is set;
  - otherwise a user connection when a refresh token is set;
  - otherwise an admin connection with an empty token.
- `SyncStatus` holds:
  - the flags `is_connected`, `is_sending_changes` and `is_receiving_changes`
  - an optional `session_id`
  - an optional monotonic `last_sync_at`

### `sharing_instant.topics`

- `TopicEvent`: the sender's `peer_id`, the `data` and a monotonic
  `received_at`.
- `TopicEventBuffer`: a ring buffer that keeps the most recent events. It
  holds `MAX_EVENTS` (50) by default and drops the oldest event first.
  - `push(event)` adds an event and returns a snapshot.
  - `events()` returns the events, oldest first.
  - `latest_event()` returns the newest event, or `None`.
- `parse_topic_message(message, decode)` accepts either
  `{"peer_id": ..., "data": ...}` or a bare payload. The sender defaults to
  `"unknown"`. It returns `None` when `decode` raises `ValueError`,
  `TypeError` or `KeyError`.

### `sharing_instant.render`

- `UserPresence` and `CursorPresence` are presence records.
- `color_to_ansi(color)` maps red, green, yellow, blue, magenta and cyan to
  ANSI escapes. Any other name gives white.
- `status_icon(status)` returns a glyph for `online`, `away` and `busy`, and
  `?` for anything else.
- `step_cursor(x, y, dx, dy)` moves a cursor and clamps it to the 40x20 grid.
- `format_presence(my_name, my_color_ansi, user, peers)` returns the text of a
  presence update.
- `render_grid(cursors)` returns a screen as a string: a clear-screen escape,
  a bordered 40x20 grid that shows each cursor's initial, and a legend.

## Command line

Installing the package adds the `trinity` command:

```
trinity init
trinity check
trinity status
```

Each subcommand prints a fixed set of messages. Any other argument, or none,
prints the usage text. The command always exits with status 0.

## What this package does not do

The package has no network client. It opens no WebSocket connections and
does not store or query data. It has no sync engine and no rooms or topic
subscriptions to drive the helpers above.

The `trinity` command only prints messages. It does not scan a repository,
ask for confirmation or run any checks.

## Tests

```
pip install -e ".[test]"
pytest
```