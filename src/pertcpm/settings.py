from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # exports
    output_dir: str = Field(default="outputs", alias="PERTCPM_OUTPUT_DIR")
    visualization_filename: str = Field(default="grafo.json", alias="PERTCPM_VISUALIZATION_FILENAME")
    export_sentinels: bool = Field(default=False, alias="PERTCPM_EXPORT_SENTINELS")
    sentinel_start: str = Field(default="start", alias="PERTCPM_SENTINEL_START")
    sentinel_end: str = Field(default="end", alias="PERTCPM_SENTINEL_END")

    # behavior
    log_level: str = Field(default="INFO", alias="PERTCPM_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {LOG_LEVELS}, got {v!r}")
        return level


def get_settings() -> Settings:
    return Settings()
