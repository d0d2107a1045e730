from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parents[2] / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Watermark Layout API"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    log_format: str = "[%(levelname)s] %(asctime)s | %(name)s | %(message)s"

    # Drawing defaults for the reportlab page drawer.
    font_name: str = "Helvetica-Bold"
    fill_opacity: float = Field(default=0.5, gt=0, le=1)

    max_upload_mb: int = Field(default=50, gt=0)

    allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


@lru_cache()
def get_settings() -> Settings:
    return Settings()
