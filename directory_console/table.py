"""Table state and the pure operations that derive a visible window from it.

Every operation takes the current ``TableState`` and returns a new one; the
record set is only needed by operations that depend on the page count.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from clients.directory_sdk.models import UserRecord
from directory_console.columns import ACTIONS_COLUMN, COLUMNS, HIDEABLE_COLUMNS, SORTABLE_FIELDS

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class SortSpec:
    field: str
    descending: bool = False


@dataclass(frozen=True)
class TableState:
    sort: SortSpec | None = None
    filter_text: str = ""
    hidden_columns: frozenset[str] = field(default_factory=frozenset)
    page_index: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")


@dataclass(frozen=True)
class TableWindow:
    rows: list[UserRecord]
    total_matching: int
    total_rows: int
    total_pages: int
    page_index: int
    visible_columns: list[str]

    @property
    def can_previous(self) -> bool:
        return self.page_index > 0

    @property
    def can_next(self) -> bool:
        return self.page_index < self.total_pages - 1

    @property
    def is_empty(self) -> bool:
        return not self.rows


def total_pages_for(total_matching: int, page_size: int) -> int:
    return max(1, math.ceil(total_matching / page_size))


def _clamp_page(page_index: int, total_pages: int) -> int:
    return min(max(0, page_index), total_pages - 1)


def filter_records(records: Sequence[UserRecord], filter_text: str) -> list[UserRecord]:
    if not filter_text:
        return list(records)
    needle = filter_text.casefold()
    return [record for record in records if needle in record.name.casefold()]


def _sort_key(sort_field: str):
    def key(record: UserRecord) -> Any:
        value = getattr(record, sort_field)
        if isinstance(value, str):
            return value.casefold()
        return value

    return key


def sort_records(records: Sequence[UserRecord], sort: SortSpec | None) -> list[UserRecord]:
    if sort is None:
        return list(records)
    # sorted() is stable for reverse=True as well.
    return sorted(records, key=_sort_key(sort.field), reverse=sort.descending)


def count_matching(records: Sequence[UserRecord], state: TableState) -> int:
    return len(filter_records(records, state.filter_text))


def visible_columns(state: TableState) -> list[str]:
    return [column.id for column in COLUMNS if column.id not in state.hidden_columns]


def derive_window(records: Sequence[UserRecord], state: TableState) -> TableWindow:
    """Filter, then sort, then paginate."""
    filtered = filter_records(records, state.filter_text)
    ordered = sort_records(filtered, state.sort)
    total_pages = total_pages_for(len(filtered), state.page_size)
    page_index = _clamp_page(state.page_index, total_pages)
    start = page_index * state.page_size
    return TableWindow(
        rows=ordered[start : start + state.page_size],
        total_matching=len(filtered),
        total_rows=len(records),
        total_pages=total_pages,
        page_index=page_index,
        visible_columns=visible_columns(state),
    )


def set_sort(state: TableState, sort_field: str) -> TableState:
    if sort_field not in SORTABLE_FIELDS:
        return state
    current = state.sort
    if current is None or current.field != sort_field:
        next_sort: SortSpec | None = SortSpec(sort_field)
    elif not current.descending:
        next_sort = SortSpec(sort_field, descending=True)
    else:
        next_sort = None
    return replace(state, sort=next_sort, page_index=0)


def set_filter_text(state: TableState, text: str) -> TableState:
    return replace(state, filter_text=text, page_index=0)


def toggle_column_visibility(state: TableState, column: str) -> TableState:
    if column == ACTIONS_COLUMN or column not in HIDEABLE_COLUMNS:
        return state
    return replace(state, hidden_columns=state.hidden_columns ^ {column})


def set_page_index(records: Sequence[UserRecord], state: TableState, page_index: int) -> TableState:
    total_pages = total_pages_for(count_matching(records, state), state.page_size)
    clamped = _clamp_page(page_index, total_pages)
    if clamped == state.page_index:
        return state
    return replace(state, page_index=clamped)


def next_page(records: Sequence[UserRecord], state: TableState) -> TableState:
    return set_page_index(records, state, state.page_index + 1)


def previous_page(records: Sequence[UserRecord], state: TableState) -> TableState:
    return set_page_index(records, state, state.page_index - 1)


def set_page_size(records: Sequence[UserRecord], state: TableState, page_size: int) -> TableState:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return set_page_index(records, replace(state, page_size=page_size), state.page_index)


def reset_filters(state: TableState) -> TableState:
    return replace(state, filter_text="", page_index=0)
