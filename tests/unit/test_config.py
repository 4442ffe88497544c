import pytest

from clients.directory_sdk.config import SDKConfig, parse_bool
from directory_console.config import ConsoleConfig

SDK_KEYS = [
    "DIRECTORY_BASE_URL",
    "DIRECTORY_TIMEOUT_SECONDS",
    "DIRECTORY_VERIFY_SSL",
    "DIRECTORY_RETRY_MAX_ATTEMPTS",
    "DIRECTORY_RETRY_BACKOFF_MS",
]


def test_sdk_config_defaults(monkeypatch) -> None:
    for key in SDK_KEYS:
        monkeypatch.delenv(key, raising=False)

    config = SDKConfig.from_env(".missing-env")

    assert config.base_url == "http://localhost:3001/"
    assert config.timeout_seconds == 30
    assert config.verify_ssl is True
    assert config.retry_max_attempts == 3
    assert config.retry_backoff_ms == 250


def test_sdk_config_reads_env_and_normalizes_base_url(monkeypatch) -> None:
    monkeypatch.setenv("DIRECTORY_BASE_URL", "http://api.local:9000")
    monkeypatch.setenv("DIRECTORY_VERIFY_SSL", "no")
    monkeypatch.setenv("DIRECTORY_RETRY_MAX_ATTEMPTS", "0")

    config = SDKConfig.from_env(".missing-env")

    assert config.base_url == "http://api.local:9000/"
    assert config.verify_ssl is False
    assert config.retry_max_attempts == 1


def test_dotenv_file_does_not_override_environment(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("DIRECTORY_BASE_URL=http://from-file/\nDIRECTORY_TIMEOUT_SECONDS=12\n", encoding="utf-8")
    monkeypatch.setenv("DIRECTORY_BASE_URL", "http://from-env/")
    monkeypatch.setenv("DIRECTORY_TIMEOUT_SECONDS", "1")
    monkeypatch.delenv("DIRECTORY_TIMEOUT_SECONDS")

    config = SDKConfig.from_env(str(env_file))

    assert config.base_url == "http://from-env/"
    assert config.timeout_seconds == 12


def test_parse_bool_falls_back_to_default() -> None:
    assert parse_bool("maybe", default=False) is False
    assert parse_bool("on") is True


def test_console_config_page_size(monkeypatch) -> None:
    monkeypatch.delenv("DIRECTORY_PAGE_SIZE", raising=False)
    assert ConsoleConfig.from_env(".missing-env").page_size == 10

    monkeypatch.setenv("DIRECTORY_PAGE_SIZE", "25")
    assert ConsoleConfig.from_env(".missing-env").page_size == 25


@pytest.mark.parametrize("value", ["0", "-1", "ten"])
def test_console_config_rejects_invalid_page_size(monkeypatch, value) -> None:
    monkeypatch.setenv("DIRECTORY_PAGE_SIZE", value)

    with pytest.raises(ValueError):
        ConsoleConfig.from_env(".missing-env")
