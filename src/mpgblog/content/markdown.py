"""
Minimal Markdown-to-HTML conversion for articles, with anchored headings.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import List

from ..util import is_external_link, slugify
from ..widgets import TocEntry

_HEADING_PATTERN = re.compile(r"^(#{2,4})\s+(.+?)(?:\s+\{#([A-Za-z0-9_-]+)\})?\s*$")
_BULLET_PATTERN = re.compile(r"^[*\-•]\s+(.*)")
_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)\s]+)\)")
_BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
_EM_PATTERN = re.compile(r"(?<![*\w])\*(?!\s)(.+?)(?<!\s)\*(?![*\w])")
_MARKUP_PATTERN = re.compile(r"[*_`]")


@dataclass(frozen=True)
class Heading:
    """
    A section heading.

    `level` is 1 for "##", 2 for "###" and 3 for "####" since the page title
    owns the <h1>.
    """
    level: int
    text: str
    id: str

    @property
    def tag(self) -> str:
        return f"h{self.level + 1}"


@dataclass
class RenderedMarkdown:
    html: str
    headings: List[Heading] = field(default_factory=list)

    def toc(self, max_level: int = 2) -> List[TocEntry]:
        return [TocEntry(id=h.id, title=h.text, level=h.level) for h in self.headings if h.level <= max_level]


def _plain(text: str) -> str:
    text = _LINK_PATTERN.sub(r"\1", text)
    return _MARKUP_PATTERN.sub("", text).strip()


def parse_headings(text: str) -> List[Heading]:
    """
    Collect headings in document order with unique anchor ids.

    An explicit `{#anchor}` suffix wins; otherwise the heading text is slugified.
    Repeated ids get "-2", "-3", ... appended.
    """
    headings: List[Heading] = []
    seen: dict[str, int] = {}
    for line in (text or "").splitlines():
        match = _HEADING_PATTERN.match(line.strip())
        if not match:
            continue
        marks, raw_title, explicit_id = match.groups()
        title = _plain(raw_title)
        anchor = explicit_id or slugify(title)
        count = seen.get(anchor, 0) + 1
        seen[anchor] = count
        if count > 1:
            anchor = f"{anchor}-{count}"
        headings.append(Heading(level=len(marks) - 1, text=title, id=anchor))
    return headings


def extract_toc(text: str, max_level: int = 2) -> List[TocEntry]:
    return render_markdown(text).toc(max_level)


def render_inline(text: str) -> str:
    """Escape text and apply links, bold and emphasis."""
    escaped = html.escape(text, quote=True)

    def _link(match: re.Match) -> str:
        label, href = match.group(1), match.group(2)
        if is_external_link(html.unescape(href)):
            return f'<a href="{href}" target="_blank" rel="noopener noreferrer">{label}</a>'
        return f'<a href="{href}">{label}</a>'

    escaped = _LINK_PATTERN.sub(_link, escaped)
    escaped = _BOLD_PATTERN.sub(r"<strong>\1</strong>", escaped)
    escaped = _EM_PATTERN.sub(r"<em>\1</em>", escaped)
    return escaped


def render_markdown(text: str) -> RenderedMarkdown:
    """
    Convert an article body to HTML.

    Supports "##"-"####" headings, paragraphs separated by blank lines, bullet
    lists, links, bold and emphasis. Raw HTML is escaped.
    """
    headings = iter(parse_headings(text))
    collected: List[Heading] = []
    blocks: List[str] = []
    paragraph: List[str] = []
    items: List[str] = []

    def flush_paragraph() -> None:
        if paragraph:
            blocks.append(f"<p>{render_inline(' '.join(paragraph))}</p>")
            paragraph.clear()

    def flush_list() -> None:
        if items:
            body = "\n".join(f"  <li>{render_inline(item)}</li>" for item in items)
            blocks.append(f"<ul>\n{body}\n</ul>")
            items.clear()

    for line in (text or "").splitlines():
        stripped = line.strip()
        if not stripped:
            flush_paragraph()
            flush_list()
            continue
        if _HEADING_PATTERN.match(stripped):
            flush_paragraph()
            flush_list()
            heading = next(headings)
            collected.append(heading)
            title_html = render_inline(_HEADING_PATTERN.match(stripped).group(2))
            blocks.append(f'<{heading.tag} id="{heading.id}">{title_html}</{heading.tag}>')
            continue
        bullet = _BULLET_PATTERN.match(stripped)
        if bullet:
            flush_paragraph()
            items.append(bullet.group(1).strip())
            continue
        flush_list()
        paragraph.append(stripped)

    flush_paragraph()
    flush_list()
    return RenderedMarkdown(html="\n".join(blocks), headings=collected)
