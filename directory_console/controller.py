from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from clients.directory_sdk.errors import ApiError
from clients.directory_sdk.models import UserRecord
from directory_console import table
from directory_console.columns import RowActionIntent, build_row_action_intent
from directory_console.error_presenter import build_error_payload
from directory_console.logger import get_logger, log_action
from directory_console.single_flight import SingleFlight
from directory_console.table import TableState, TableWindow

MODULE = "users"

IDLE = "idle"
LOADING = "loading"
REFRESHING = "refreshing"
READY = "ready"
ERROR = "error"


class RecordSource(Protocol):
    def list_users(self) -> list[UserRecord]: ...


@dataclass(frozen=True)
class LoadState:
    phase: str = IDLE
    error: dict[str, Any] | None = None

    @property
    def is_busy(self) -> bool:
        return self.phase in {LOADING, REFRESHING}

    @property
    def error_message(self) -> str | None:
        return self.error["display"] if self.error else None


class DirectoryController:
    """Hosts the loaded record set and the table state for one console session."""

    def __init__(
        self,
        source: RecordSource,
        page_size: int = table.DEFAULT_PAGE_SIZE,
        logger: logging.Logger | None = None,
    ) -> None:
        self.source = source
        self.records: list[UserRecord] = []
        self.state = TableState(page_size=page_size)
        self.load_state = LoadState()
        self._loader: SingleFlight[LoadState] = SingleFlight()
        self._loaded_once = False
        self._logger = logger or get_logger("directory.console")

    def load(self) -> LoadState:
        return self._loader.run(self._fetch)

    def retry(self) -> LoadState:
        log_action(self._logger, MODULE, "retry", self._trace_id(), "requested")
        return self.load()

    def _fetch(self) -> LoadState:
        self.load_state = LoadState(phase=REFRESHING if self._loaded_once else LOADING)
        try:
            records = self.source.list_users()
        except ApiError as error:
            payload = build_error_payload(error)
            self.load_state = LoadState(phase=ERROR, error=payload)
            log_action(
                self._logger,
                MODULE,
                "load",
                error.trace_id,
                "error",
                {"code": error.code, "category": payload["category"]},
            )
            return self.load_state

        if not self._loaded_once:
            self.state = TableState(page_size=self.state.page_size)
        self.records = records
        self._loaded_once = True
        self.state = table.set_page_index(self.records, self.state, self.state.page_index)
        self.load_state = LoadState(phase=READY)
        log_action(self._logger, MODULE, "load", self._trace_id(), "success", {"rows": len(records)})
        return self.load_state

    def window(self) -> TableWindow:
        return table.derive_window(self.records, self.state)

    def sort_by(self, field: str) -> TableWindow:
        self.state = table.set_sort(self.state, field)
        return self.window()

    def filter_names(self, text: str) -> TableWindow:
        self.state = table.set_filter_text(self.state, text)
        return self.window()

    def toggle_column(self, column: str) -> TableWindow:
        self.state = table.toggle_column_visibility(self.state, column)
        return self.window()

    def next_page(self) -> TableWindow:
        self.state = table.next_page(self.records, self.state)
        return self.window()

    def previous_page(self) -> TableWindow:
        self.state = table.previous_page(self.records, self.state)
        return self.window()

    def go_to_page(self, page_index: int) -> TableWindow:
        self.state = table.set_page_index(self.records, self.state, page_index)
        return self.window()

    def set_page_size(self, page_size: int) -> TableWindow:
        self.state = table.set_page_size(self.records, self.state, page_size)
        return self.window()

    def reset_filters(self) -> TableWindow:
        self.state = table.reset_filters(self.state)
        return self.window()

    def find_record(self, user_id: int) -> UserRecord:
        for record in self.records:
            if record.id == user_id:
                return record
        raise LookupError(f"User {user_id} is not loaded")

    def row_action(self, user_id: int, action: str) -> RowActionIntent:
        intent = build_row_action_intent(self.find_record(user_id), action)
        log_action(
            self._logger,
            MODULE,
            action,
            self._trace_id(),
            "intent",
            {"user_id": intent.user_id, "target_status": intent.target_status},
        )
        return intent

    def _trace_id(self) -> str | None:
        http_client = getattr(self.source, "http_client", None)
        return getattr(http_client, "last_trace_id", None)
