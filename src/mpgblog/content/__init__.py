"""
Article content: front matter, Markdown rendering and lookup.
"""

from .articles import (
    Article,
    ArticleLibrary,
    ArticleMeta,
    ContentError,
    load_article,
    load_articles,
    parse_article,
)
from .markdown import Heading, RenderedMarkdown, extract_toc, parse_headings, render_inline, render_markdown

__all__ = [
    "Article",
    "ArticleLibrary",
    "ArticleMeta",
    "ContentError",
    "load_article",
    "load_articles",
    "parse_article",
    "Heading",
    "RenderedMarkdown",
    "extract_toc",
    "parse_headings",
    "render_inline",
    "render_markdown",
]
