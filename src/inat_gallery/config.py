"""
Application settings.

Values come from ``INAT_GALLERY_*`` environment variables, e.g.
``INAT_GALLERY_DISPLAY_LIMIT=12`` or ``INAT_GALLERY_DEBUG=true``.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field

ENV_PREFIX = "INAT_GALLERY_"


class Settings(BaseModel):
    """Runtime configuration for the CLI, renderers and build flow."""

    model_config = {"str_strip_whitespace": True}

    app_name: str = "inat-gallery"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    display_limit: int = Field(default=24, ge=1, description="Photos shown in the gallery grid")
    site_dir: Path = Path("site")
    api_port: int = Field(default=8000, ge=1, le=65535)
    request_timeout: float | None = Field(
        default=None, gt=0, description="Seconds; unset keeps the HTTP client default"
    )

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Settings:
        """Build settings from prefixed environment variables."""
        environ = dict(os.environ) if environ is None else environ
        values = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        return cls.model_validate(values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read once from the environment."""
    return Settings.from_env()
