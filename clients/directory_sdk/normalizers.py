from __future__ import annotations

import re
from typing import Any

from clients.directory_sdk.errors import ValidationError
from clients.directory_sdk.models import UserRecord, UserStatus

REQUIRED_FIELDS = ("id", "name", "email", "mobile", "status")
AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/150?img={id}"
ID_PATTERN = re.compile(r"[0-9]+")


def placeholder_avatar(user_id: int) -> str:
    return AVATAR_URL_TEMPLATE.format(id=user_id)


def coerce_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and ID_PATTERN.fullmatch(value.strip()):
        return int(value.strip())
    return None


def normalize_status(value: Any) -> UserStatus:
    token = str(value).strip().lower()
    try:
        return UserStatus(token)
    except ValueError as exc:
        raise ValidationError(
            code="INVALID_STATUS",
            message=f"Unknown status value: {value!r}",
            details={"status": value},
        ) from exc


def normalize_user(raw: Any) -> UserRecord:
    if not isinstance(raw, dict):
        raise ValidationError(code="INVALID_RECORD", message="User record is not an object", details={"type": type(raw).__name__})

    missing = [field for field in REQUIRED_FIELDS if raw.get(field) in (None, "")]
    if missing:
        raise ValidationError(
            code="MISSING_FIELDS",
            message=f"Missing required fields: {', '.join(missing)}",
            details={"fields": missing},
        )

    raw_id = raw["id"]
    user_id = coerce_id(raw_id)
    if user_id is None:
        raise ValidationError(code="INVALID_ID", message=f"Invalid user id: {raw_id!r}", details={"id": raw_id})

    return UserRecord(
        id=user_id,
        name=str(raw["name"]),
        email=str(raw["email"]),
        mobile=str(raw["mobile"]),
        status=normalize_status(raw["status"]),
        avatar=str(raw.get("avatar") or placeholder_avatar(user_id)),
    )


def normalize_users(payload: Any) -> list[UserRecord]:
    """Normalize a users payload, failing the whole batch on the first bad record."""
    if not isinstance(payload, list):
        raise ValidationError(
            code="INVALID_PAYLOAD",
            message="Expected an array of users",
            details={"type": type(payload).__name__},
        )

    records: list[UserRecord] = []
    seen: set[int] = set()
    for index, raw in enumerate(payload):
        try:
            record = normalize_user(raw)
        except ValidationError as error:
            details = error.details if isinstance(error.details, dict) else {}
            raise ValidationError(
                code=error.code,
                message=f"Record {index}: {error.message}",
                details={**details, "index": index},
            ) from error
        if record.id in seen:
            raise ValidationError(
                code="DUPLICATE_ID",
                message=f"Record {index}: duplicate user id {record.id}",
                details={"index": index, "id": record.id},
            )
        seen.add(record.id)
        records.append(record)
    return records
