import logging

import httpx
import pytest

from clients.directory_sdk.config import SDKConfig
from clients.directory_sdk.errors import ValidationError
from clients.directory_sdk.http_client import HttpClient
from clients.directory_sdk.models import UserStatus
from clients.directory_sdk.users_client import UsersClient
from directory_console.controller import ERROR, DirectoryController


def _users_client(payload) -> UsersClient:
    config = SDKConfig(
        base_url="http://directory.test/",
        timeout_seconds=5.0,
        verify_ssl=True,
        retry_max_attempts=1,
        retry_backoff_ms=0,
    )

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload, headers={"X-Trace-ID": "trace-users"})

    http_client = HttpClient(config=config, client=httpx.Client(base_url=config.base_url, transport=httpx.MockTransport(handler)))
    return UsersClient(http_client)


def test_list_users_normalizes_records() -> None:
    client = _users_client([{"id": "5", "name": "X", "email": "x@y.com", "mobile": "000", "status": "INACTIVE"}])

    records = client.list_users()

    assert len(records) == 1
    assert records[0].id == 5
    assert records[0].status is UserStatus.INACTIVE


def test_non_array_payload_raises_validation_error_with_trace() -> None:
    client = _users_client({"error": "nope"})

    with pytest.raises(ValidationError) as exc_info:
        client.list_users()

    assert exc_info.value.code == "INVALID_PAYLOAD"
    assert exc_info.value.trace_id == "trace-users"


def test_overflowing_id_is_a_validation_error_and_console_recovers() -> None:
    config = SDKConfig(
        base_url="http://directory.test/",
        timeout_seconds=5.0,
        verify_ssl=True,
        retry_max_attempts=1,
        retry_backoff_ms=0,
    )
    body = b'[{"id": 1e999, "name": "X", "email": "x@y.com", "mobile": "0", "status": "active"}]'

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=body, headers={"Content-Type": "application/json"})

    http_client = HttpClient(config=config, client=httpx.Client(base_url=config.base_url, transport=httpx.MockTransport(handler)))
    controller = DirectoryController(UsersClient(http_client), logger=logging.getLogger("test.users_client"))

    state = controller.load()

    assert state.phase == ERROR
    assert state.error["category"] == "validation"
    assert state.error["code"] == "INVALID_ID"
