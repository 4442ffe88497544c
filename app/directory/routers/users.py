from fastapi import APIRouter

from app.directory.schemas.users import UserResponse
from app.directory.services.users_fixture import load_users

router = APIRouter()


@router.get("/users", response_model=list[UserResponse])
async def list_users():
    return load_users()
