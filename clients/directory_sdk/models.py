from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"

    @property
    def toggled(self) -> "UserStatus":
        return UserStatus.INACTIVE if self is UserStatus.ACTIVE else UserStatus.ACTIVE


@dataclass(frozen=True)
class UserRecord:
    id: int
    name: str
    email: str
    mobile: str
    status: UserStatus
    avatar: str

    @property
    def is_active(self) -> bool:
        return self.status is UserStatus.ACTIVE
