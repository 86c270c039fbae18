"""
Article loading and lookup.

Articles are Markdown files that open with a TOML front-matter block:

    +++
    title = "Route 66 on a Budget"
    description = "..."
    category = "road-trips"
    published_at = 2025-06-01
    +++
    Body text...
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..util import slugify
from ..widgets import TocEntry
from .markdown import RenderedMarkdown, render_markdown

logger = logging.getLogger(__name__)

FRONT_MATTER_FENCE = "+++"


class ContentError(RuntimeError):
    """Raised when an article file cannot be read or its front matter is invalid."""


class TocItem(BaseModel):
    id: str
    title: str
    level: int = Field(default=1, ge=1)

    model_config = {"extra": "forbid"}


class ArticleMeta(BaseModel):
    """
    Validated front matter.

    Attributes:
        title: Headline.
        description: Meta description and share text.
        category: Slug of the blog hub the article lives in.
        published_at: First publication date.
        updated_at: Date shown as "Last Updated" (defaults to published_at).
        slug: URL segment; defaults to the file name.
        tags: Free-form labels shown in the article banner.
        featured_image: Optional image URL.
        key_takeaways: Bullet points shown before the table of contents.
        toc: Explicit table of contents; derived from headings when omitted.
        toc_title: Heading of the table of contents box.
        draft: Drafts are skipped when building.
    """
    title: str
    description: str = ""
    category: str
    published_at: date
    updated_at: Optional[date] = None
    slug: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    featured_image: Optional[str] = None
    key_takeaways: List[str] = Field(default_factory=list)
    toc: Optional[List[TocItem]] = None
    toc_title: str = "Table of Contents"
    draft: bool = False

    model_config = {"extra": "forbid"}


@dataclass
class Article:
    meta: ArticleMeta
    body: str
    source: Optional[Path] = None
    _rendered: Optional[RenderedMarkdown] = field(default=None, repr=False, compare=False)

    @property
    def slug(self) -> str:
        if self.meta.slug:
            return self.meta.slug
        if self.source is not None:
            return slugify(self.source.stem)
        return slugify(self.meta.title)

    @property
    def category(self) -> str:
        return self.meta.category

    @property
    def title(self) -> str:
        return self.meta.title

    @property
    def description(self) -> str:
        return self.meta.description

    @property
    def url(self) -> str:
        """Site-relative canonical URL."""
        return f"/blog/{self.category}/{self.slug}"

    @property
    def last_updated(self) -> date:
        return self.meta.updated_at or self.meta.published_at

    @property
    def rendered(self) -> RenderedMarkdown:
        if self._rendered is None:
            self._rendered = render_markdown(self.body)
        return self._rendered

    @property
    def toc_entries(self) -> List[TocEntry]:
        if self.meta.toc is not None:
            return [TocEntry(id=item.id, title=item.title, level=item.level) for item in self.meta.toc]
        return self.rendered.toc()


def split_front_matter(text: str) -> tuple[str, str]:
    """Return (front matter, body). Raises ContentError when the block is missing."""
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_FENCE:
        raise ContentError(f"Article must start with a '{FRONT_MATTER_FENCE}' front-matter block.")
    for index in range(1, len(lines)):
        if lines[index].strip() == FRONT_MATTER_FENCE:
            return "".join(lines[1:index]), "".join(lines[index + 1:])
    raise ContentError("Unterminated front-matter block.")


def parse_article(text: str, *, source: Optional[Path] = None) -> Article:
    label = str(source) if source else "<string>"
    try:
        raw_meta, body = split_front_matter(text)
    except ContentError as exc:
        raise ContentError(f"{label}: {exc}") from exc
    try:
        data = tomllib.loads(raw_meta)
    except tomllib.TOMLDecodeError as exc:
        raise ContentError(f"{label}: invalid TOML front matter: {exc}") from exc
    try:
        meta = ArticleMeta.model_validate(data)
    except ValidationError as exc:
        raise ContentError(f"{label}: {exc}") from exc
    return Article(meta=meta, body=body.strip("\n"), source=source)


def load_article(path: Path | str) -> Article:
    article_path = Path(path).expanduser().resolve()
    try:
        text = article_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ContentError(f"Unable to read article {article_path}: {exc}") from exc
    return parse_article(text, source=article_path)


def load_articles(content_dir: Path | str, *, include_drafts: bool = False) -> List[Article]:
    """
    Load every `*.md` file below content_dir, sorted by path.
    """
    root = Path(content_dir).expanduser().resolve()
    if not root.is_dir():
        raise ContentError(f"Content directory not found: {root}")
    articles: List[Article] = []
    for path in sorted(root.rglob("*.md")):
        article = load_article(path)
        if article.meta.draft and not include_drafts:
            logger.info("Skipping draft %s", path.name)
            continue
        articles.append(article)
    logger.debug("Loaded %d article(s) from %s", len(articles), root)
    return articles


class ArticleLibrary:
    """
    In-memory index of articles by (category, slug).
    """

    def __init__(self, articles: Iterable[Article] = ()) -> None:
        self._by_key: Dict[tuple[str, str], Article] = {}
        for article in articles:
            key = (article.category, article.slug)
            if key in self._by_key:
                raise ContentError(f"Duplicate article {article.url} ({article.source} and {self._by_key[key].source})")
            self._by_key[key] = article

    @classmethod
    def from_directory(cls, content_dir: Path | str, *, include_drafts: bool = False) -> "ArticleLibrary":
        return cls(load_articles(content_dir, include_drafts=include_drafts))

    def __len__(self) -> int:
        return len(self._by_key)

    def __iter__(self):
        return iter(self.all())

    def all(self) -> List[Article]:
        """Every article, newest first (ties broken by title)."""
        return sorted(self._by_key.values(), key=lambda a: (-a.meta.published_at.toordinal(), a.title))

    def get_by_slug(self, category: str, slug: str) -> Optional[Article]:
        return self._by_key.get((category, slug))

    def by_category(self, category: str) -> List[Article]:
        return [article for article in self.all() if article.category == category]

    def categories(self) -> List[str]:
        return sorted({article.category for article in self._by_key.values()})

    def related(self, current_slug: str, category: str, limit: int = 2) -> List[Article]:
        """Newest articles in the same category, excluding the current one."""
        if limit <= 0:
            return []
        candidates = [article for article in self.by_category(category) if article.slug != current_slug]
        return candidates[:limit]
