"""Runtime configuration and logger factory for textfathom (Pydantic Settings v2).

Values come from, in order of precedence:
- process environment variables;
- `.env` / `.env.local` in the working directory.

`load_settings()` builds the object once per process. Tests that change the
environment call `load_settings.cache_clear()` afterwards.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class Settings(BaseSettings):
    """Analyser configuration.

    Attributes
    ----------
    environment : EnvName
        Deployment flag from `TEXTFATHOM_ENV`; `dev` enables API auto-reload.
    log_level : LogLevelName
        Level applied to every logger returned by `get_logger`; from `LOG_LEVEL`.
    file_encoding : str
        Encoding used when reading files for analysis; from
        `TEXTFATHOM_FILE_ENCODING`.
    sniff_bytes : int
        Length of the file prefix examined by the plain-text check; from
        `TEXTFATHOM_SNIFF_BYTES`.
    """

    environment: EnvName = Field(default="dev", alias="TEXTFATHOM_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    file_encoding: str = Field(default="utf-8", alias="TEXTFATHOM_FILE_ENCODING")
    sniff_bytes: int = Field(default=512, ge=1, alias="TEXTFATHOM_SNIFF_BYTES")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_dev(self) -> bool:
        return self.environment == "dev"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    def log_level_numeric(self) -> int:
        """Map `log_level` onto the `logging` module constant."""
        return int(getattr(logging, self.log_level, logging.INFO))


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Return the process-wide `Settings`, building it on first use."""
    os.environ.setdefault("TEXTFATHOM_ENV", "dev")
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "textfathom") -> logging.Logger:
    """Return logger ``name`` with one stderr handler at the configured level.

    Records do not propagate to the root logger, so embedding applications
    see textfathom output only through this handler.
    """
    log = logging.getLogger(name)
    if not log.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(stream)
    log.setLevel(load_settings().log_level_numeric())
    log.propagate = False
    return log
