from __future__ import annotations

from typing import Any

from clients.directory_sdk.errors import ValidationError
from clients.directory_sdk.http_client import HttpClient
from clients.directory_sdk.models import UserRecord
from clients.directory_sdk.normalizers import normalize_users


class UsersClient:
    def __init__(self, http_client: HttpClient) -> None:
        self.http_client = http_client

    def fetch_raw_users(self) -> Any:
        return self.http_client.request("GET", "/api/users")

    def list_users(self) -> list[UserRecord]:
        payload = self.fetch_raw_users()
        try:
            return normalize_users(payload)
        except ValidationError as error:
            error.trace_id = error.trace_id or self.http_client.last_trace_id
            raise
