"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from styledna.svg.path_grammar import ParseMode


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Pipeline defaults
    default_precision: int = 1
    parse_mode: ParseMode = ParseMode.LENIENT
    max_batch_size: int = 200
    batch_workers: int | None = None

    model_config = SettingsConfigDict(env_prefix="STYLEDNA_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
