"""
Web output helpers (site generation, sitemap, robots).
"""

from .scaffold import BuildReport, generate_site, resolve_content_dir, resolve_web_root
from .seo import SitemapEntry, build_robots, build_sitemap, sitemap_urls

__all__ = [
    "BuildReport",
    "generate_site",
    "resolve_content_dir",
    "resolve_web_root",
    "SitemapEntry",
    "build_robots",
    "build_sitemap",
    "sitemap_urls",
]
