from clients.directory_sdk.config import SDKConfig
from clients.directory_sdk.errors import ApiError, FetchError, ValidationError
from clients.directory_sdk.http_client import HttpClient
from clients.directory_sdk.models import UserRecord, UserStatus
from clients.directory_sdk.normalizers import normalize_user, normalize_users
from clients.directory_sdk.users_client import UsersClient

__all__ = [
    "SDKConfig",
    "ApiError",
    "FetchError",
    "ValidationError",
    "HttpClient",
    "UserRecord",
    "UserStatus",
    "UsersClient",
    "normalize_user",
    "normalize_users",
]
