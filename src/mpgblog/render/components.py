"""
HTML fragments for the interactive blog widgets.

Markup hooks (ids, data attributes) here are what the page script binds to.
"""

from __future__ import annotations

import html
from typing import Iterable, Optional, Sequence

from ..widgets import DEFAULT_TOC_TITLE, SCROLL_THRESHOLD_PX, TocEntry, build_share_links, resolve_share_url

_SHARE_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewBox="0 0 24 24" fill="none" '
    'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
    '<circle cx="18" cy="5" r="3"></circle><circle cx="6" cy="12" r="3"></circle>'
    '<circle cx="18" cy="19" r="3"></circle>'
    '<line x1="8.59" y1="13.51" x2="15.42" y2="17.49"></line>'
    '<line x1="15.41" y1="6.51" x2="8.59" y2="10.49"></line></svg>'
)


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def render_toc(items: Sequence[TocEntry], title: str = DEFAULT_TOC_TITLE) -> str:
    """Table of contents box; expanded by default, nested levels indented."""
    if not items:
        return ""
    rows = []
    for item in items:
        indent = f' style="margin-left: {item.level - 1}em"' if item.level > 1 else ""
        rows.append(
            f'    <li class="toc-level-{item.level}"{indent}>'
            f'<a href="#{_attr(item.id)}" data-toc-target="{_attr(item.id)}">{html.escape(item.title)}</a></li>'
        )
    items_html = "\n".join(rows)
    return f"""<div class="toc" data-toc>
  <div class="toc-header" data-toc-toggle>
    <h3>{html.escape(title)}</h3>
    <button type="button" aria-expanded="true" aria-label="Collapse table of contents">&#9650;</button>
  </div>
  <nav class="toc-nav">
  <ul>
{items_html}
  </ul>
  </nav>
</div>"""


def render_share_buttons(url: str, title: str, description: str = "", *, origin: Optional[str] = None) -> str:
    """Share links plus the copy-link button."""
    full_url = resolve_share_url(url, origin)
    anchors = "\n".join(
        f'    <a href="{_attr(link.href)}" target="{link.target}" rel="{link.rel}" '
        f'aria-label="{_attr(link.aria_label)}" title="{_attr(link.aria_label)}" '
        f'class="share-button {link.key}">{html.escape(link.label)}</a>'
        for link in build_share_links(url, title, description, origin=origin)
    )
    return f"""<div class="share-buttons">
  <h3>Share this article</h3>
  <div class="share-row">
{anchors}
    <button type="button" class="share-button copy-link" data-copy-url="{_attr(full_url)}" aria-label="Copy link to clipboard" title="Copy link to clipboard">Copy link<span class="copy-tooltip" hidden>Copied!</span></button>
  </div>
</div>"""


def render_floating_share_button() -> str:
    return (
        f'<button type="button" id="floating-share" class="floating-share" data-threshold="{SCROLL_THRESHOLD_PX}" '
        f'aria-label="Share this article" title="Share this article" hidden>{_SHARE_ICON}</button>'
    )


def render_share_modal(url: str, title: str, description: str = "", *, origin: Optional[str] = None) -> str:
    buttons = render_share_buttons(url, title, description, origin=origin)
    return f"""<div id="share-modal" class="modal-backdrop" hidden>
  <div class="modal-panel" role="dialog" aria-modal="true" aria-labelledby="share-modal-title">
    <div class="modal-header">
      <h3 id="share-modal-title">Share this article</h3>
      <button type="button" class="modal-close" data-modal-close aria-label="Close">&times;</button>
    </div>
{buttons}
  </div>
</div>"""


def render_link_list(title: str, links: Iterable[tuple[str, str]], *, css_class: str = "sidebar-box") -> str:
    """Sidebar box with a heading and (href, label) links; empty when there are no links."""
    rows = "\n".join(f'    <li><a href="{_attr(href)}">{html.escape(label)}</a></li>' for href, label in links)
    if not rows:
        return ""
    return f'<div class="{css_class}">\n  <h3>{html.escape(title)}</h3>\n  <ul>\n{rows}\n  </ul>\n</div>'


def render_tools(tools: Iterable[tuple[str, str, str]]) -> str:
    """Sidebar listing the site tools from (name, href, description) triples."""
    rows = "\n".join(
        f'    <li><a href="{_attr(href)}"><span class="tool-name">{html.escape(name)}</span>'
        f'<span class="tool-description">{html.escape(description)}</span></a></li>'
        for name, href, description in tools
    )
    if not rows:
        return ""
    return f'<div class="sidebar-box tools">\n  <h3>Our Tools</h3>\n  <ul>\n{rows}\n  </ul>\n</div>'
