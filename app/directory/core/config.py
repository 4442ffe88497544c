from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USERS_FIXTURE = Path(__file__).resolve().parent.parent / "data" / "users.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "USER-DIRECTORY"
    USERS_FIXTURE_PATH: str = str(DEFAULT_USERS_FIXTURE)
    AVATAR_URL_TEMPLATE: str = "https://i.pravatar.cc/150?img={id}"
    CORS_ALLOWED_ORIGINS: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    CORS_ALLOWED_METHODS: list[str] = ["GET", "OPTIONS"]
    CORS_ALLOWED_HEADERS: list[str] = ["Content-Type"]
    CORS_ALLOW_CREDENTIALS: bool = True
    SERVER_HOST: str = "127.0.0.1"
    SERVER_PORT: int = 3001


settings = Settings()
