"""scandisk configuration: Pydantic BaseSettings, overridable from the command line."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OUTPUT_MODES = ("text", "html")


class Settings(BaseSettings):
    """Defaults for a scan; every field can be set as SCANDISK_<FIELD>."""

    root: str = "/"
    output: str = "html"
    filename: str = "output"  # ".html" is appended when missing
    block_size: Optional[int] = None  # None: ask the filesystem
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SCANDISK_",
        extra="ignore",
    )

    @field_validator("output")
    @classmethod
    def _check_output(cls, value: str) -> str:
        value = value.lower()
        if value not in OUTPUT_MODES:
            raise ValueError(f"output must be one of {', '.join(OUTPUT_MODES)}")
        return value

    @field_validator("block_size")
    @classmethod
    def _check_block_size(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("block_size must be positive")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
