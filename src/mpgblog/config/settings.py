"""
Settings/secret loading helpers.
"""

from __future__ import annotations

import os
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv

DEFAULT_SITE_URL = "https://mpgcalculator.net"


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Environment-provided values used while building and publishing the site.

    Attributes:
        site_url: Public origin used for absolute share links, sitemap and robots.
        indexnow_key: Key for IndexNow submissions (optional).
    """
    site_url: Optional[str] = Field(default=None, alias="SITE_URL")
    indexnow_key: Optional[str] = Field(default=None, alias="INDEXNOW_KEY")

    model_config = {
        "populate_by_name": True,
    }

    @property
    def site_origin(self) -> str:
        """The configured origin without a trailing slash, or the default one."""
        origin = (self.site_url or "").strip() or DEFAULT_SITE_URL
        return origin.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.

    Returns:
        A Settings object populated from environment variables.
    """
    values = {field.alias: os.getenv(field.alias) for field in Settings.model_fields.values()}
    return Settings(**values)


def get_site_origin() -> str:
    return get_settings().site_origin
