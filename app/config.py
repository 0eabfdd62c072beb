import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_LINE_BYTES = 64 * 1024
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    dataset_path: Path = Field(default=Path("data.gz"), alias="DATASET_PATH")
    autocomplete_path: Path = Field(default=Path("data.json"), alias="AUTOCOMPLETE_PATH")
    static_root: Path = Field(default=Path("static"), alias="STATIC_ROOT")
    max_line_bytes: int = Field(default=DEFAULT_MAX_LINE_BYTES, alias="MAX_LINE_BYTES")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @model_validator(mode="after")
    def validate_required_runtime(self) -> "Settings":
        if self.max_line_bytes < DEFAULT_MAX_LINE_BYTES:
            raise ValueError(f"MAX_LINE_BYTES must be >= {DEFAULT_MAX_LINE_BYTES}")
        if not (1 <= self.port <= 65535):
            raise ValueError("PORT must be between 1 and 65535")
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return self

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
