from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration"""

    # Storage Settings
    document_dir: Optional[Path] = None  # Falls back to ~/Documents
    default_format: str = "json"

    # JSON Settings
    json_indent: Optional[int] = None  # None = compact output

    model_config = SettingsConfigDict(
        env_prefix="TODO_CACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
