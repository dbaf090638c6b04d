# Di dalam file: config.py

"""Runtime settings, read from environment variables."""

import logging
import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_DATABASE_URL = "sqlite:///./mirath.db"
DEFAULT_CORS_ORIGINS = "http://localhost,http://localhost:3000"  # alamat frontend


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: _split_origins(DEFAULT_CORS_ORIGINS))

    def validate(self) -> None:
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if not self.database_url:
            raise ValueError("database_url must not be empty")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings() -> Settings:
    settings = Settings(
        database_url=os.getenv("MIRATH_DATABASE_URL", DEFAULT_DATABASE_URL),
        log_level=os.getenv("MIRATH_LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.getenv("MIRATH_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)),
    )
    settings.validate()
    return settings
