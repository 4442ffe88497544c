from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from app.directory.core.config import settings
from app.directory.core.error_catalog import AppError, ErrorCatalog
from app.directory.core.logging import log_json
from app.directory.schemas.users import UserResponse

logger = logging.getLogger("directory.users")

REQUIRED_FIELDS = ("id", "name", "email", "mobile", "status")
KNOWN_STATUSES = {"active", "inactive"}
ID_PATTERN = re.compile(r"[0-9]+")


def _invalid(message: str, details: object | None = None) -> AppError:
    log_json(
        logger,
        {"event": "users_fixture_invalid", "message": message, "details": details},
        level=logging.ERROR,
    )
    return AppError(ErrorCatalog.INVALID_DATA_FORMAT, message=message, details=details)


def coerce_id(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and ID_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    return None


def read_fixture(path: str | Path | None = None) -> object:
    fixture_path = Path(path or settings.USERS_FIXTURE_PATH)
    try:
        raw = fixture_path.read_text(encoding="utf-8")
    except OSError as exc:
        log_json(
            logger,
            {"event": "users_fixture_unavailable", "path": str(fixture_path), "error_class": exc.__class__.__name__},
            level=logging.ERROR,
        )
        raise AppError(ErrorCatalog.FIXTURE_UNAVAILABLE, details={"path": str(fixture_path)}) from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise _invalid("Fixture is not valid JSON", {"line": exc.lineno, "column": exc.colno}) from exc


def validate_user(raw: object, index: int, avatar_template: str) -> UserResponse:
    if not isinstance(raw, dict):
        raise _invalid("Record is not an object", {"index": index})
    missing = [field for field in REQUIRED_FIELDS if raw.get(field) in (None, "")]
    if missing:
        raise _invalid("Missing required fields", {"index": index, "fields": missing})
    user_id = coerce_id(raw["id"])
    if user_id is None:
        raise _invalid("Record id is not an integer", {"index": index, "id": str(raw["id"])})
    status = str(raw["status"]).strip().lower()
    if status not in KNOWN_STATUSES:
        raise _invalid("Unknown status value", {"index": index, "status": str(raw["status"])})
    return UserResponse(
        id=user_id,
        name=str(raw["name"]),
        email=str(raw["email"]),
        mobile=str(raw["mobile"]),
        status=status,
        avatar=str(raw.get("avatar") or avatar_template.format(id=user_id)),
    )


def load_users(path: str | Path | None = None) -> list[UserResponse]:
    """Read the users fixture and validate every record.

    The whole batch fails on the first invalid record.
    """
    payload = read_fixture(path)
    if not isinstance(payload, list):
        raise _invalid("Data is not an array", {"type": type(payload).__name__})
    users = [validate_user(item, index, settings.AVATAR_URL_TEMPLATE) for index, item in enumerate(payload)]
    seen: set[int] = set()
    for index, user in enumerate(users):
        if user.id in seen:
            raise _invalid("Duplicate user id", {"index": index, "id": user.id})
        seen.add(user.id)
    return users
