from __future__ import annotations

import time
import uuid
from typing import Any

import httpx

from clients.directory_sdk.config import SDKConfig
from clients.directory_sdk.errors import ApiError, FetchError, error_from_response

RETRYABLE_STATUS_CODES = {502, 503, 504}


class HttpClient:
    def __init__(
        self,
        config: SDKConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.config = config or SDKConfig.from_env()
        self._client = client or httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout_seconds,
            verify=self.config.verify_ssl,
        )
        self._retry_max_attempts = max(1, self.config.retry_max_attempts)
        self._retry_backoff_ms = max(0, self.config.retry_backoff_ms)
        self.last_trace_id: str | None = None

    def request(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        trace_id = str(uuid.uuid4())
        request_headers = {"Accept": "application/json", "X-Trace-ID": trace_id}
        request_headers.update(headers or {})
        self.last_trace_id = request_headers["X-Trace-ID"]

        normalized_path = path if path.startswith("/") else f"/{path}"
        allow_retry = method.upper() == "GET"

        for attempt in range(1, self._retry_max_attempts + 1):
            try:
                response = self._client.request(
                    method=method,
                    url=normalized_path,
                    headers=request_headers,
                    params=params,
                )
            except httpx.TimeoutException as exc:
                if (not allow_retry) or attempt >= self._retry_max_attempts:
                    raise FetchError(
                        code="TIMEOUT_ERROR",
                        message="Timed out while calling the directory API",
                        details=str(exc),
                        trace_id=self.last_trace_id,
                    ) from exc
                self._backoff(attempt)
                continue
            except httpx.TransportError as exc:
                if (not allow_retry) or attempt >= self._retry_max_attempts:
                    raise FetchError(
                        code="NETWORK_ERROR",
                        message="Network error while calling the directory API",
                        details=str(exc),
                        trace_id=self.last_trace_id,
                    ) from exc
                self._backoff(attempt)
                continue

            if response.status_code >= 400:
                error = error_from_response(response)
                if allow_retry and self._is_retryable_status(error.status_code) and attempt < self._retry_max_attempts:
                    self._backoff(attempt)
                    continue
                raise error

            self.last_trace_id = response.headers.get("X-Trace-ID") or self.last_trace_id
            try:
                return response.json()
            except ValueError as exc:
                raise FetchError(
                    code="INVALID_RESPONSE",
                    message="Response body is not valid JSON",
                    details=response.text[:200],
                    trace_id=self.last_trace_id,
                    status_code=response.status_code,
                ) from exc

        raise ApiError(code="NETWORK_ERROR", message="Network error while calling the directory API", details="retry exhausted")

    def close(self) -> None:
        self._client.close()

    def _backoff(self, attempt: int) -> None:
        time.sleep((self._retry_backoff_ms * attempt) / 1000)

    @staticmethod
    def _is_retryable_status(status_code: int | None) -> bool:
        return status_code in RETRYABLE_STATUS_CODES
