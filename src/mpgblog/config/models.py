"""
Pydantic models for validating and hashing site configuration files.
"""

from __future__ import annotations

import json
import hashlib
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class CategoryConfig(BaseModel):
    """
    A blog hub such as "Road Trip Guides".

    Attributes:
        slug: URL segment under /blog/ (e.g., "road-trips").
        title: Display name.
        description: Teaser shown on the blog hub card.
        link_label: Call to action on the hub card.
    """
    slug: str
    title: str
    description: str = ""
    link_label: Optional[str] = None

    model_config = {"extra": "forbid"}

    @field_validator("slug")
    @classmethod
    def _slug_is_path_segment(cls, value: str) -> str:
        if not value or "/" in value or value != value.strip():
            raise ValueError("category slug must be a single non-empty path segment")
        return value


class ToolLink(BaseModel):
    """Entry in the "Our Tools" sidebar."""
    name: str
    href: str
    description: str = ""

    model_config = {"extra": "forbid"}


class AdminSection(BaseModel):
    """Card on the admin landing page."""
    slug: str
    title: str
    description: str = ""

    model_config = {"extra": "forbid"}


def _default_categories() -> List[CategoryConfig]:
    return [
        CategoryConfig(
            slug="road-trips",
            title="Road Trip Guides",
            description="Discover the best routes, cost estimates, and planning tips for your next road trip adventure.",
            link_label="Explore Road Trip Guides",
        ),
        CategoryConfig(
            slug="destinations",
            title="Destination Guides",
            description="In-depth guides to popular destinations with insider tips and hidden gems.",
            link_label="Explore Destinations",
        ),
        CategoryConfig(
            slug="accommodations",
            title="Accommodation Tips",
            description="Find the best places to stay on your travels, from budget options to luxury experiences.",
            link_label="Explore Accommodation Tips",
        ),
        CategoryConfig(
            slug="vehicles",
            title="Vehicle Guides",
            description="Expert advice on vehicle efficiency, maintenance, and choosing the right car for your needs.",
            link_label="Explore Vehicle Guides",
        ),
    ]


def _default_tools() -> List[ToolLink]:
    return [
        ToolLink(name="Road Trip Cost Calculator", href="/road-trip-cost-calculator", description="Plan your journey costs"),
        ToolLink(name="MPG Calculator", href="/", description="Calculate fuel efficiency"),
    ]


def _default_admin_sections() -> List[AdminSection]:
    return [
        AdminSection(
            slug="embed-analytics",
            title="Embed Analytics",
            description="View statistics about calculator embeds",
        )
    ]


class SiteConfig(BaseModel):
    """
    Top-level configuration for the blog generator.

    Attributes:
        site_name: Brand used in page titles.
        tagline: Subtitle shown on the blog hub banner.
        web_root: Directory where HTML output will be written.
        content_dir: Directory holding article Markdown files.
        admin_path: URL segment of the admin landing page (kept out of robots.txt crawls).
        related_limit: Number of related articles in the article sidebar.
        categories: Blog hubs.
        tools: "Our Tools" sidebar links.
        admin_sections: Cards shown on the admin landing page.
    """
    site_name: str = "MPGCalculator.net"
    tagline: str = "Travel guides, road trip planning, and vehicle advice"
    web_root: Optional[Path] = None
    content_dir: Optional[Path] = None
    admin_path: str = "bolingo"
    related_limit: int = Field(default=2, ge=0)
    categories: List[CategoryConfig] = Field(default_factory=_default_categories)
    tools: List[ToolLink] = Field(default_factory=_default_tools)
    admin_sections: List[AdminSection] = Field(default_factory=_default_admin_sections)

    model_config = {
        "arbitrary_types_allowed": True,
        "populate_by_name": True,
        "extra": "forbid",
    }

    @field_validator("admin_path")
    @classmethod
    def _strip_admin_path(cls, value: str) -> str:
        cleaned = value.strip().strip("/")
        if not cleaned:
            raise ValueError("admin_path must not be empty")
        return cleaned

    def category(self, slug: str) -> Optional[CategoryConfig]:
        for category in self.categories:
            if category.slug == slug:
                return category
        return None

    @property
    def hash(self) -> str:
        """
        Deterministic hash of the normalized config, used to detect changes.
        """
        payload = self.model_dump(mode="json", round_trip=True)
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()


def load_config(path: Path | str) -> SiteConfig:
    """
    Load and validate a TOML config file into a SiteConfig instance.

    Relative `web_root` and `content_dir` values are resolved against the
    directory containing the config file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated SiteConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    raw_data = _normalize_toml_schema(raw_data)
    for key in ("web_root", "content_dir"):
        value = raw_data.get(key)
        if isinstance(value, str) and value:
            candidate = Path(value).expanduser()
            if not candidate.is_absolute():
                candidate = config_path.parent / candidate
            raw_data[key] = candidate

    try:
        return SiteConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


_TABLE_ARRAYS = {
    "category": "categories",
    "tool": "tools",
    "admin_section": "admin_sections",
}


def _normalize_toml_schema(data: Any) -> Dict[str, Any]:
    """
    Map singular table arrays ([[category]], [[tool]], [[admin_section]]) onto
    the plural list fields of SiteConfig.

    Omitted arrays keep the built-in defaults.
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a TOML table/object.")

    normalized = dict(data)
    for singular, plural in _TABLE_ARRAYS.items():
        if plural in normalized:
            raise ConfigError(f"Use [[{singular}]] blocks (singular) instead of [[{plural}]].")
        if singular in normalized:
            normalized[plural] = _coerce_table_array(normalized.pop(singular), singular)
    return normalized


def _coerce_table_array(value: Any, label: str) -> list[dict]:
    if isinstance(value, dict):
        return [value]
    if isinstance(value, list):
        if not all(isinstance(item, dict) for item in value):
            raise ConfigError(f"Each [[{label}]] entry must be a table/object.")
        return value
    raise ConfigError(f"Invalid [{label}] block; expected a table or array of tables.")
