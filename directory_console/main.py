from __future__ import annotations

from typing import Callable

from clients.directory_sdk.config import SDKConfig
from clients.directory_sdk.http_client import HttpClient
from clients.directory_sdk.users_client import UsersClient
from directory_console.columns import COPY_ID, EDIT, TOGGLE_STATUS, VIEW_DETAILS
from directory_console.config import ConsoleConfig
from directory_console.controller import ERROR, DirectoryController
from directory_console.ui import render_column_menu, render_details, render_row_actions, render_view

COMMANDS = (
    "Commands: n=next, p=prev, g=goto, z=page_size, s=sort name, i=sort id, f=filter, "
    "c=clear filters, v=columns, a=row action, r=refresh, x=exit"
)


def _read_int(label: str, input_fn: Callable[[str], str]) -> int | None:
    raw = input_fn(label).strip()
    try:
        return int(raw)
    except ValueError:
        return None


def _run_row_action(controller: DirectoryController, input_fn: Callable[[str], str], output: Callable[[str], None]) -> None:
    user_id = _read_int("user id: ", input_fn)
    if user_id is None:
        output("[warn] user id must be a number")
        return
    try:
        record = controller.find_record(user_id)
    except LookupError as error:
        output(f"[warn] {error}")
        return
    output(render_row_actions(record))
    action = input_fn("action: ").strip()
    try:
        intent = controller.row_action(user_id, action)
    except ValueError as error:
        output(f"[warn] {error}")
        return
    if intent.action == COPY_ID:
        output(str(intent.user_id))
    elif intent.action == VIEW_DETAILS:
        output(render_details(record))
    elif intent.action == EDIT:
        output(f"[info] editing is not available for user {intent.user_id}")
    elif intent.action == TOGGLE_STATUS:
        output(f"[info] set status of user {intent.user_id} to {intent.target_status} (not saved)")


def run_console(
    controller: DirectoryController,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    controller.load()
    while True:
        output(render_view(controller.load_state, controller.window(), controller.state))
        if controller.load_state.phase == ERROR:
            command = input_fn("cmd error (r=retry, x=exit): ").strip().lower()
            if command == "r":
                controller.retry()
            elif command == "x":
                return
            continue

        output(COMMANDS)
        command = input_fn("cmd: ").strip().lower()
        if command == "x":
            return
        if command == "n":
            controller.next_page()
        elif command == "p":
            controller.previous_page()
        elif command == "g":
            page = _read_int("page: ", input_fn)
            if page is not None:
                controller.go_to_page(page - 1)
        elif command == "z":
            size = _read_int("page_size: ", input_fn)
            if size is not None and size > 0:
                controller.set_page_size(size)
        elif command == "s":
            controller.sort_by("name")
        elif command == "i":
            controller.sort_by("id")
        elif command == "f":
            controller.filter_names(input_fn("filter names: "))
        elif command == "c":
            controller.reset_filters()
        elif command == "v":
            output(render_column_menu(controller.state))
            controller.toggle_column(input_fn("toggle column: ").strip())
        elif command == "a":
            _run_row_action(controller, input_fn, output)
        elif command == "r":
            controller.load()


def main() -> None:
    sdk_config = SDKConfig.from_env()
    console_config = ConsoleConfig.from_env()
    http_client = HttpClient(config=sdk_config)
    controller = DirectoryController(UsersClient(http_client), page_size=console_config.page_size)
    print(f"User directory @ {sdk_config.base_url}")
    try:
        run_console(controller)
    finally:
        http_client.close()


if __name__ == "__main__":
    main()
