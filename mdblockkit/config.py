import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "WARNING"
    log_file: Path | None = None  # JSON-lines log, rotated; stderr only when unset

    json_indent: int = 2

    model_config = SettingsConfigDict(
        env_prefix="MDBLOCKKIT_",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
    )
