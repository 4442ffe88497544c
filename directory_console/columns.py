from __future__ import annotations

from dataclasses import dataclass

from clients.directory_sdk.models import UserRecord

ACTIONS_COLUMN = "actions"


@dataclass(frozen=True)
class ColumnDef:
    id: str
    label: str
    sortable: bool = False
    hideable: bool = True
    cell: str = "text"


COLUMNS: tuple[ColumnDef, ...] = (
    ColumnDef("name", "Name", sortable=True, cell="text"),
    ColumnDef("email", "Email", cell="truncated"),
    ColumnDef("mobile", "Mobile", cell="monospace"),
    ColumnDef("status", "Status", cell="badge"),
    ColumnDef(ACTIONS_COLUMN, "Actions", hideable=False, cell="menu"),
)

COLUMNS_BY_ID = {column.id: column for column in COLUMNS}
HIDEABLE_COLUMNS = frozenset(column.id for column in COLUMNS if column.hideable)
# id is sortable as a record field even though it has no display column.
SORTABLE_FIELDS = frozenset({"id"} | {column.id for column in COLUMNS if column.sortable})


@dataclass(frozen=True)
class RowAction:
    id: str
    label: str


@dataclass(frozen=True)
class RowActionIntent:
    action: str
    user_id: int
    target_status: str | None = None


COPY_ID = "copy_id"
VIEW_DETAILS = "view_details"
EDIT = "edit"
TOGGLE_STATUS = "toggle_status"


def row_actions(record: UserRecord) -> list[RowAction]:
    toggle_label = "Deactivate" if record.is_active else "Activate"
    return [
        RowAction(COPY_ID, "Copy User ID"),
        RowAction(VIEW_DETAILS, "View details"),
        RowAction(EDIT, "Edit user"),
        RowAction(TOGGLE_STATUS, toggle_label),
    ]


def build_row_action_intent(record: UserRecord, action: str) -> RowActionIntent:
    if action not in {COPY_ID, VIEW_DETAILS, EDIT, TOGGLE_STATUS}:
        raise ValueError(f"Unknown row action: {action}")
    target_status = record.status.toggled.value if action == TOGGLE_STATUS else None
    return RowActionIntent(action=action, user_id=record.id, target_status=target_status)
