from __future__ import annotations

from typing import Callable

from clients.directory_sdk.models import UserRecord
from directory_console.columns import COLUMNS, COLUMNS_BY_ID, HIDEABLE_COLUMNS, row_actions
from directory_console.controller import ERROR, LOADING, REFRESHING, LoadState
from directory_console.table import TableState, TableWindow

EMPTY_MESSAGE = "No results."
TRUNCATE_AT = 24


def _truncate(value: str, limit: int = TRUNCATE_AT) -> str:
    return value if len(value) <= limit else value[: limit - 1] + "…"


def _status_badge(record: UserRecord) -> str:
    icon = "●" if record.is_active else "○"
    return f"{icon} {record.status.value.capitalize()}"


CELL_RENDERERS: dict[str, Callable[[UserRecord], str]] = {
    "name": lambda record: record.name,
    "email": lambda record: _truncate(record.email),
    "mobile": lambda record: record.mobile,
    "status": _status_badge,
    "actions": lambda record: "...",
}


def render_cell(column_id: str, record: UserRecord) -> str:
    return CELL_RENDERERS[column_id](record)


def _header(column_id: str, state: TableState) -> str:
    label = COLUMNS_BY_ID[column_id].label
    if state.sort and state.sort.field == column_id:
        label += " ↓" if state.sort.descending else " ↑"
    return label


def render_table(window: TableWindow, state: TableState) -> str:
    columns = window.visible_columns
    headers = [_header(column_id, state) for column_id in columns]
    if not window.rows:
        return "\n".join([" | ".join(headers), EMPTY_MESSAGE])

    rows = [[render_cell(column_id, record) for column_id in columns] for record in window.rows]
    widths = [max(len(headers[idx]), *(len(row[idx]) for row in rows)) for idx in range(len(columns))]
    lines = [
        " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)),
        "-+-".join("-" * width for width in widths),
    ]
    lines.extend(" | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row)) for row in rows)
    return "\n".join(lines)


def render_footer(window: TableWindow) -> str:
    previous = "[p] Previous" if window.can_previous else "( Previous )"
    following = "[n] Next" if window.can_next else "( Next )"
    return (
        f"Showing {window.total_matching} of {window.total_rows} users    "
        f"{previous}  Page {window.page_index + 1} of {window.total_pages}  {following}"
    )


def render_column_menu(state: TableState) -> str:
    lines = ["Columns:"]
    for column in COLUMNS:
        if column.id not in HIDEABLE_COLUMNS:
            continue
        mark = " " if column.id in state.hidden_columns else "x"
        lines.append(f"  [{mark}] {column.id}")
    return "\n".join(lines)


def render_row_actions(record: UserRecord) -> str:
    lines = [f"Actions for {record.name} (id={record.id}):"]
    lines.extend(f"  {action.id}: {action.label}" for action in row_actions(record))
    return "\n".join(lines)


def render_details(record: UserRecord) -> str:
    return "\n".join(
        [
            f"id:     {record.id}",
            f"name:   {record.name}",
            f"email:  {record.email}",
            f"mobile: {record.mobile}",
            f"status: {record.status.value}",
            f"avatar: {record.avatar}",
        ]
    )


def render_view(load_state: LoadState, window: TableWindow, state: TableState) -> str:
    if load_state.phase == LOADING:
        return "Loading users..."
    if load_state.phase == ERROR:
        return f"[error] {load_state.error_message}\nr=retry"
    parts = []
    if load_state.phase == REFRESHING:
        parts.append("[refreshing]")
    parts.append(render_table(window, state))
    if window.total_matching == 0 and state.filter_text:
        parts.append("c=clear filters")
    parts.append(render_footer(window))
    return "\n".join(parts)
