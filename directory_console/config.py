from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from directory_console.table import DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class ConsoleConfig:
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_env(cls, env_file: str = ".env") -> "ConsoleConfig":
        load_dotenv(env_file, override=False)
        raw_page_size = os.getenv("DIRECTORY_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
        try:
            page_size = int(raw_page_size)
        except ValueError as exc:
            raise ValueError(f"DIRECTORY_PAGE_SIZE must be an integer, got {raw_page_size!r}") from exc
        config = cls(page_size=page_size)
        config.validate()
        return config

    def validate(self) -> None:
        if self.page_size < 1:
            raise ValueError("DIRECTORY_PAGE_SIZE must be >= 1")
