"""
Build the complete static blog: hub, category listings, articles, admin and SEO files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from ..config import SiteConfig, get_settings
from ..content import ArticleLibrary
from ..render import ArticlePage, render_admin_page, render_article_page, render_blog_index, render_category_page
from ..util import utc_now, write_text_file
from .seo import SitemapEntry, build_robots, build_sitemap

logger = logging.getLogger(__name__)

DEFAULT_WEB_ROOT = Path("outputs/site")
DEFAULT_CONTENT_DIR = Path("content")
FEATURED_LIMIT = 3
FAVICON_FILENAME = "favicon.svg"
FAVICON_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64" viewBox="0 0 64 64" role="img" aria-label="MPG favicon">
  <rect x="4" y="4" width="56" height="56" rx="14" fill="#1d4ed8"/>
  <path d="M14 42 A18 18 0 0 1 50 42" fill="none" stroke="#bfdbfe" stroke-width="5" stroke-linecap="round"/>
  <line x1="32" y1="42" x2="43" y2="28" stroke="#ffffff" stroke-width="4" stroke-linecap="round"/>
  <circle cx="32" cy="42" r="4" fill="#ffffff"/>
  <text x="32" y="56" text-anchor="middle" font-family="ui-sans-serif, system-ui, Arial, sans-serif"
        font-size="10" font-weight="800" fill="#ffffff" letter-spacing="1">MPG</text>
</svg>
"""


@dataclass
class BuildReport:
    """
    Stores what was written when the site was built.

    Attributes:
        root: The root directory of the web output.
        pages_written: Every HTML page rendered.
        articles_written: Article pages only.
        skipped_articles: Articles left out (unknown category).
        sitemap_urls: Number of URLs in sitemap.xml.
    """
    root: Path
    pages_written: List[Path] = field(default_factory=list)
    articles_written: List[Path] = field(default_factory=list)
    skipped_articles: List[str] = field(default_factory=list)
    sitemap_urls: int = 0
    indexnow_key_file: Optional[Path] = None

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Pages written", str(len(self.pages_written)))
        yield ("Articles written", str(len(self.articles_written)))
        yield ("Articles skipped", str(len(self.skipped_articles)))
        yield ("Sitemap URLs", str(self.sitemap_urls))
        yield ("IndexNow key file", str(self.indexnow_key_file) if self.indexnow_key_file else "no")


def resolve_web_root(config: SiteConfig) -> Path:
    root = config.web_root or DEFAULT_WEB_ROOT
    return Path(root).expanduser().resolve()


def resolve_content_dir(config: SiteConfig) -> Path:
    root = config.content_dir or DEFAULT_CONTENT_DIR
    return Path(root).expanduser().resolve()


def write_favicon(root: Path, force: bool) -> None:
    """
    Write the default favicon to the web root unless it already exists.
    """
    target = root / FAVICON_FILENAME
    if target.exists() and not force:
        return
    write_text_file(target, FAVICON_SVG)


def generate_site(
    config: SiteConfig,
    *,
    library: Optional[ArticleLibrary] = None,
    origin: Optional[str] = None,
    force: bool = False,
) -> BuildReport:
    """
    Render every page of the blog under the configured web root.

    Args:
        config: The site configuration.
        library: Articles to publish; loaded from `content_dir` when omitted.
        origin: Public origin for share links and SEO files; defaults to the
            configured SITE_URL.
        force: If True, overwrite the favicon even if one exists.

    Returns:
        A BuildReport detailing the files written.
    """
    settings = get_settings()
    origin = (origin or settings.site_origin).rstrip("/")
    if library is None:
        library = ArticleLibrary.from_directory(resolve_content_dir(config))

    root = resolve_web_root(config)
    root.mkdir(parents=True, exist_ok=True)
    report = BuildReport(root=root)
    write_favicon(root, force)

    today = utc_now().date()
    sitemap_entries: List[SitemapEntry] = [
        SitemapEntry("/", today, "daily", 1.0),
        SitemapEntry("/blog", today, "daily", 0.9),
    ]

    published = []
    for article in library.all():
        if config.category(article.category) is None:
            logger.warning(
                "Article '%s' references category '%s' which is not configured; skipping.",
                article.title,
                article.category,
            )
            report.skipped_articles.append(article.url)
            continue
        published.append(article)

    blog_index = render_blog_index(
        root / "blog" / "index.html",
        site_name=config.site_name,
        tagline=config.tagline,
        categories=config.categories,
        featured=published[:FEATURED_LIMIT],
        tools=config.tools,
    )
    report.pages_written.append(blog_index)

    for category in config.categories:
        articles = [article for article in published if article.category == category.slug]
        page = render_category_page(
            root / "blog" / category.slug / "index.html",
            site_name=config.site_name,
            category=category,
            articles=articles,
            tools=config.tools,
        )
        report.pages_written.append(page)
        last_modified = max((a.last_updated for a in articles), default=today)
        sitemap_entries.append(SitemapEntry(f"/blog/{category.slug}", last_modified, "weekly", 0.8))

    for article in published:
        category = config.category(article.category)
        destination = root / "blog" / article.category / article.slug / "index.html"
        related = [
            candidate
            for candidate in library.related(article.slug, article.category, limit=config.related_limit)
            if candidate in published
        ]
        render_article_page(
            ArticlePage(
                destination=destination,
                article=article,
                site_name=config.site_name,
                category_title=category.title,
                related=related,
                tools=config.tools,
                origin=origin,
            )
        )
        logger.info("Rendered %s", article.url)
        report.pages_written.append(destination)
        report.articles_written.append(destination)
        sitemap_entries.append(SitemapEntry(article.url, article.last_updated, "monthly", 0.7))

    admin_page = render_admin_page(
        root / config.admin_path / "index.html",
        admin_path=config.admin_path,
        sections=config.admin_sections,
    )
    report.pages_written.append(admin_page)

    write_text_file(root / "sitemap.xml", build_sitemap(sitemap_entries, origin))
    report.sitemap_urls = len(sitemap_entries)
    write_text_file(root / "robots.txt", build_robots(origin, config.admin_path))

    if settings.indexnow_key:
        key_file = root / f"{settings.indexnow_key}.txt"
        write_text_file(key_file, settings.indexnow_key)
        report.indexnow_key_file = key_file

    return report
