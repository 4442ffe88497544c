from __future__ import annotations

from typing import Any

from clients.directory_sdk.errors import ApiError, ValidationError

RETRY_ACTION = "Retry"


def build_error_payload(error: ApiError) -> dict[str, Any]:
    return {
        "category": _classify_api_error(error),
        "code": error.code,
        "message": error.message,
        "display": format_fetch_error(error.message),
        "trace_id": error.trace_id,
        "status_code": error.status_code,
        "action": RETRY_ACTION,
    }


def format_fetch_error(message: str) -> str:
    return f"Failed to fetch data: {message}"


def _classify_api_error(error: ApiError) -> str:
    if isinstance(error, ValidationError):
        return "validation"
    if error.code in {"NETWORK_ERROR", "TIMEOUT_ERROR"}:
        return "network"
    if error.status_code and error.status_code >= 500:
        return "server"
    return "http"
