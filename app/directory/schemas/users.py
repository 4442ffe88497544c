from typing import Literal

from pydantic import BaseModel


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    mobile: str
    status: Literal["active", "inactive"]
    avatar: str
