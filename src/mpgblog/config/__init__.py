"""
Configuration helpers for the blog generator.
"""

from .models import AdminSection, CategoryConfig, ConfigError, SiteConfig, ToolLink, load_config
from .settings import DEFAULT_SITE_URL, Settings, get_settings, get_site_origin

__all__ = [
    "AdminSection",
    "CategoryConfig",
    "ConfigError",
    "SiteConfig",
    "ToolLink",
    "load_config",
    "DEFAULT_SITE_URL",
    "Settings",
    "get_settings",
    "get_site_origin",
]
