# src/mg_app/core/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    App settings (12-factor). Override via env vars, e.g.
      MG_MEDIA_ROOT=/data/gallery  MG_PREVIEW_ROOT=/data/previews
    """

    # App
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Roots
    MEDIA_ROOT: Path = Field(default_factory=lambda: Path("./media").resolve())
    PREVIEW_ROOT: Path = Field(default_factory=lambda: Path("./previews").resolve())

    # Previews
    PREVIEW_SIZE: str = "600x400"
    PREVIEW_QUALITY: int = Field(85, ge=1, le=100)
    OVERWRITE: bool = False

    # Extra extension -> content type entries, e.g. MG_EXTRA_MIME_TYPES='{".jfif": "image/jpeg"}'
    EXTRA_MIME_TYPES: dict[str, str] = Field(default_factory=dict)

    DRY_RUN_DEFAULT: bool = True

    model_config = SettingsConfigDict(
        env_prefix="MG_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("MEDIA_ROOT", "PREVIEW_ROOT")
    @classmethod
    def _expand(cls, p: Path) -> Path:
        return Path(p).expanduser().resolve()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    FastAPI-friendly cached getter. Use Depends(get_settings) where needed.
    """
    return Settings()
