"""
Page-level HTML generation for the blog.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ..config import AdminSection, CategoryConfig, ToolLink
from ..content import Article
from ..util import format_month_year, write_text_file
from .components import (
    render_floating_share_button,
    render_link_list,
    render_share_buttons,
    render_share_modal,
    render_toc,
    render_tools,
)


@dataclass
class ArticlePage:
    destination: Path
    article: Article
    site_name: str
    category_title: str
    related: Sequence[Article] = field(default_factory=list)
    tools: Sequence[ToolLink] = field(default_factory=list)
    origin: Optional[str] = None


def render_article_page(page: ArticlePage) -> Path:
    """
    Render the supplied article page to disk.
    """
    article = page.article
    meta = article.meta
    title = html.escape(article.title, quote=True)
    category_href = f"/blog/{article.category}"
    tags = ", ".join(meta.tags) if meta.tags else page.category_title

    header = f"""<header class="article-banner">
  <a class="back-link" href="{category_href}">&larr; Back to {html.escape(page.category_title)}</a>
  <h1>{title}</h1>
  <div class="article-meta">
    <span>Last Updated: {format_month_year(article.last_updated)}</span>
    <span>{html.escape(tags)}</span>
  </div>
</header>"""

    intro_parts: List[str] = []
    if meta.featured_image:
        intro_parts.append(
            f'<img class="featured-image" src="{html.escape(meta.featured_image, quote=True)}" alt="{title}">'
        )
    if meta.description:
        intro_parts.append(f'<p class="lead">{html.escape(meta.description)}</p>')
    if meta.key_takeaways:
        takeaways = "\n".join(f"    <li>{html.escape(point)}</li>" for point in meta.key_takeaways)
        intro_parts.append(
            f'<div class="key-takeaways">\n  <h3>Key Takeaways</h3>\n  <ul>\n{takeaways}\n  </ul>\n</div>'
        )
    intro_parts.append(render_toc(article.toc_entries, meta.toc_title))
    share = render_share_buttons(article.url, article.title, article.description, origin=page.origin)
    intro_parts.append(share)

    main = f"""<main class="content">
<article class="blog-content">
<section class="article-intro">
{chr(10).join(part for part in intro_parts if part)}
</section>
{article.rendered.html}
<div class="share-footer">
{share}
</div>
</article>
</main>"""

    sidebar = _render_sidebar(
        render_link_list("Related Articles", [(a.url, a.title) for a in page.related]),
        render_tools((tool.name, tool.href, tool.description) for tool in page.tools),
    )

    body = "\n".join(
        [
            header,
            f'<div class="layout">\n{main}\n{sidebar}\n</div>',
            render_floating_share_button(),
            render_share_modal(article.url, article.title, article.description, origin=page.origin),
        ]
    )
    document = _html_document(f"{article.title} | {page.site_name}", article.description, body, with_script=True)
    write_text_file(page.destination, document)
    return page.destination


def render_blog_index(
    destination: Path,
    *,
    site_name: str,
    tagline: str,
    categories: Sequence[CategoryConfig],
    featured: Sequence[Article] = (),
    tools: Sequence[ToolLink] = (),
) -> Path:
    """Blog hub: featured articles and one card per category."""
    if featured:
        featured_html = "\n".join(_article_card(article) for article in featured)
    else:
        featured_html = '<div class="placeholder"><p>Featured content coming soon!</p></div>'
    cards = "\n".join(
        f"""<div class="card">
  <h3>{html.escape(category.title)}</h3>
  <p>{html.escape(category.description)}</p>
  <a href="/blog/{category.slug}">{html.escape(category.link_label or f"Explore {category.title}")} &rarr;</a>
</div>"""
        for category in categories
    )
    main = f"""<main class="content">
<h1>Travel Guides &amp; Resources</h1>
<h2>Featured Content</h2>
<div class="featured">
{featured_html}
</div>
<div class="card-grid">
{cards}
</div>
</main>"""
    sidebar = _render_sidebar(
        render_link_list("Explore Topics", [(f"/blog/{c.slug}", c.title) for c in categories]),
        render_tools((tool.name, tool.href, tool.description) for tool in tools),
    )
    banner = f"""<header class="article-banner">
  <h2>{html.escape(site_name)} Blog</h2>
  <p>{html.escape(tagline)}</p>
</header>"""
    body = f'{banner}\n<div class="layout">\n{main}\n{sidebar}\n</div>'
    document = _html_document(
        f"{site_name} Blog | Road Trip Guides & Travel Resources",
        "Road trip guides, destination tips, vehicle advice, and travel resources to plan your perfect journey.",
        body,
    )
    write_text_file(destination, document)
    return destination


def render_category_page(
    destination: Path,
    *,
    site_name: str,
    category: CategoryConfig,
    articles: Sequence[Article],
    tools: Sequence[ToolLink] = (),
) -> Path:
    if articles:
        listing = "\n".join(_article_card(article) for article in articles)
    else:
        listing = f'<div class="placeholder"><p>{html.escape(category.title)} coming soon!</p></div>'
    main = f"""<main class="content">
<a class="back-link" href="/blog">&larr; Back to Blog</a>
<h1>{html.escape(category.title)}</h1>
<p class="lead">{html.escape(category.description)}</p>
<div class="article-list">
{listing}
</div>
</main>"""
    sidebar = _render_sidebar(render_tools((tool.name, tool.href, tool.description) for tool in tools))
    body = f'<div class="layout">\n{main}\n{sidebar}\n</div>'
    document = _html_document(f"{category.title} | {site_name}", category.description, body)
    write_text_file(destination, document)
    return destination


def render_admin_page(destination: Path, *, admin_path: str, sections: Sequence[AdminSection]) -> Path:
    """Admin landing page: one card per admin section. Never indexed."""
    cards = "\n".join(
        f"""<a class="card" href="/{admin_path}/{section.slug}">
  <h2>{html.escape(section.title)}</h2>
  <p>{html.escape(section.description)}</p>
</a>"""
        for section in sections
    )
    body = f'<main class="content admin">\n<h1>Admin</h1>\n<div class="card-grid single">\n{cards}\n</div>\n</main>'
    document = _html_document("Admin", "", body, robots="noindex, nofollow")
    write_text_file(destination, document)
    return destination


def _article_card(article: Article) -> str:
    return f"""<div class="card">
  <h3><a href="{article.url}">{html.escape(article.title)}</a></h3>
  <p>{html.escape(article.description)}</p>
  <p class="card-meta">{format_month_year(article.last_updated)}</p>
</div>"""


def _render_sidebar(*boxes: str) -> str:
    content = "\n".join(box for box in boxes if box)
    return f'<aside class="sidebar">\n{content}\n</aside>'


def _html_document(
    title: str,
    description: str,
    body: str,
    *,
    with_script: bool = False,
    robots: Optional[str] = None,
) -> str:
    meta_lines = ['  <meta charset="utf-8">', '  <meta name="viewport" content="width=device-width, initial-scale=1.0">']
    if description:
        meta_lines.append(f'  <meta name="description" content="{html.escape(description, quote=True)}">')
    if robots:
        meta_lines.append(f'  <meta name="robots" content="{robots}">')
    script = f"\n{_SCRIPT_BLOCK}" if with_script else ""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
{chr(10).join(meta_lines)}
  <link rel="icon" href="/favicon.svg" type="image/svg+xml" sizes="any">
  <title>{html.escape(title)}</title>
  {_STYLE_BLOCK}
</head>
<body>
{body}{script}
</body>
</html>
"""


_STYLE_BLOCK = """<style>
body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; background: #f8f9fa; color: #212529; margin: 1em auto; padding: 0 1em; max-width: 1100px; line-height: 1.6; }
h1 { color: #1e3a8a; font-size: 2em; margin: 0.4em 0; }
h2 { color: #1e3a8a; font-size: 1.5em; margin-top: 1.5em; scroll-margin-top: 1em; }
h3 { color: #1e40af; font-size: 1.2em; margin-top: 1em; }
a { color: #0d6efd; text-decoration: none; font-weight: 500; }
a:hover { text-decoration: underline; color: #0a58ca; }
.article-banner { background: linear-gradient(90deg, #1d4ed8, #3730a3); color: #fff; border-radius: 12px; padding: 2em; margin-bottom: 2em; }
.article-banner h1, .article-banner h2 { color: #fff; }
.article-banner a { color: #bfdbfe; }
.article-meta { display: flex; gap: 1.5em; color: #dbeafe; font-size: 0.95em; }
.layout { display: flex; gap: 2em; }
.content { flex: 2; min-width: 0; }
.sidebar { flex: 1; }
.sidebar-box { background: #fff; border: 1px solid #e5e7eb; border-radius: 12px; padding: 1.2em 1.5em; margin-bottom: 1.5em; }
.sidebar-box ul { list-style: none; padding: 0; margin: 0; }
.sidebar-box li { margin: 0.6em 0; }
.tools .tool-name { display: block; font-weight: 600; }
.tools .tool-description { display: block; color: #6b7280; font-size: 0.9em; }
.lead { font-size: 1.2em; color: #374151; }
.featured-image { max-width: 100%; border-radius: 8px; }
.key-takeaways { background: #f0fdf4; border: 1px solid #dcfce7; border-radius: 8px; padding: 1em 1.5em; margin-bottom: 2em; }
.key-takeaways h3 { color: #166534; margin-top: 0; }
.toc { background: #eff6ff; border: 1px solid #dbeafe; border-radius: 8px; padding: 1em 1.5em; margin-bottom: 2em; }
.toc-header { display: flex; justify-content: space-between; align-items: center; cursor: pointer; user-select: none; }
.toc-header h3 { margin: 0; }
.toc-header button { background: none; border: 0; color: #1d4ed8; cursor: pointer; font-size: 1em; }
.toc ul { list-style: none; padding: 0; }
.toc li { margin: 0.4em 0; }
.toc a { color: #374151; font-weight: normal; }
.toc a.active { color: #1d4ed8; font-weight: 600; }
.toc.collapsed .toc-nav { display: none; }
.share-buttons h3 { margin-bottom: 0.5em; }
.share-row { display: flex; flex-wrap: wrap; gap: 0.5em; }
.share-button { display: inline-flex; align-items: center; padding: 0.4em 0.8em; border-radius: 6px; border: 1px solid #d1d5db; background: #fff; color: #111827; cursor: pointer; position: relative; font-size: 0.9em; }
.share-button.copy-link.success { border-color: #16a34a; color: #16a34a; }
.copy-tooltip { position: absolute; top: -2em; left: 50%; transform: translateX(-50%); background: #111827; color: #fff; border-radius: 4px; padding: 0.1em 0.5em; font-size: 0.8em; }
.share-footer { margin-top: 2em; }
.floating-share { position: fixed; bottom: 1.5em; right: 1.5em; z-index: 50; width: 3em; height: 3em; border-radius: 50%; border: 0; background: #2563eb; color: #fff; display: flex; align-items: center; justify-content: center; box-shadow: 0 4px 12px rgba(0,0,0,0.2); cursor: pointer; }
.floating-share[hidden], .modal-backdrop[hidden] { display: none; }
.modal-backdrop { position: fixed; inset: 0; background: rgba(0,0,0,0.5); z-index: 60; display: flex; align-items: center; justify-content: center; padding: 1em; }
.modal-panel { background: #fff; border-radius: 10px; box-shadow: 0 10px 30px rgba(0,0,0,0.3); max-width: 28em; width: 100%; padding: 1.5em; }
.modal-header { display: flex; justify-content: space-between; align-items: center; }
.modal-header h3 { margin: 0; }
.modal-close { background: none; border: 0; font-size: 1.6em; color: #6b7280; cursor: pointer; }
.card-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(18em, 1fr)); gap: 1.5em; }
.card-grid.single { grid-template-columns: 1fr; }
.card { display: block; background: #fff; border: 1px solid #e5e7eb; border-radius: 12px; padding: 1.5em; }
.card-meta { color: #6b7280; font-size: 0.85em; }
.placeholder { background: #eff6ff; border: 1px solid #dbeafe; border-radius: 8px; padding: 2em; text-align: center; color: #1e40af; }
@media (max-width: 900px) { .layout { flex-direction: column; } }
</style>"""


_SCRIPT_BLOCK = """<script>
(function () {
  var toc = document.querySelector('[data-toc]');
  if (toc) {
    var links = Array.prototype.slice.call(toc.querySelectorAll('[data-toc-target]'));
    var setActive = function (id) {
      links.forEach(function (link) {
        link.classList.toggle('active', link.getAttribute('data-toc-target') === id);
      });
    };
    var observer = new IntersectionObserver(function (entries) {
      entries.forEach(function (entry) {
        if (entry.isIntersecting) { setActive(entry.target.id); }
      });
    }, { rootMargin: '0px 0px -80% 0px', threshold: 0.1 });
    links.forEach(function (link) {
      var target = document.getElementById(link.getAttribute('data-toc-target'));
      if (target) { observer.observe(target); }
      link.addEventListener('click', function (event) {
        event.preventDefault();
        var id = link.getAttribute('data-toc-target');
        var element = document.getElementById(id);
        if (element) {
          element.scrollIntoView({ behavior: 'smooth' });
          setActive(id);
          window.history.pushState(null, '', '#' + id);
        }
      });
    });
    window.addEventListener('pagehide', function () { observer.disconnect(); });
    var toggle = toc.querySelector('[data-toc-toggle]');
    toggle.addEventListener('click', function () {
      var collapsed = toc.classList.toggle('collapsed');
      var button = toggle.querySelector('button');
      button.setAttribute('aria-expanded', collapsed ? 'false' : 'true');
      button.setAttribute('aria-label', collapsed ? 'Expand table of contents' : 'Collapse table of contents');
      button.innerHTML = collapsed ? '&#9660;' : '&#9650;';
    });
  }

  document.querySelectorAll('[data-copy-url]').forEach(function (button) {
    button.addEventListener('click', function () {
      var tooltip = button.querySelector('.copy-tooltip');
      Promise.resolve().then(function () {
        return navigator.clipboard.writeText(button.getAttribute('data-copy-url'));
      }).then(function () {
        button.classList.add('success');
        tooltip.hidden = false;
        setTimeout(function () {
          button.classList.remove('success');
          tooltip.hidden = true;
        }, 2000);
      }).catch(function (err) {
        console.error('Failed to copy: ', err);
      });
    });
  });

  var floating = document.getElementById('floating-share');
  var modal = document.getElementById('share-modal');
  if (floating && modal) {
    var threshold = parseInt(floating.getAttribute('data-threshold'), 10);
    var panel = modal.querySelector('.modal-panel');
    var onScroll = function () {
      var scrollY = window.scrollY || document.documentElement.scrollTop;
      floating.hidden = !(scrollY > threshold);
    };
    var onKey = function (event) { if (event.key === 'Escape') { closeModal(); } };
    var onMouseDown = function (event) { if (!panel.contains(event.target)) { closeModal(); } };
    var openModal = function () {
      modal.hidden = false;
      document.addEventListener('keydown', onKey);
      document.addEventListener('mousedown', onMouseDown);
      document.body.style.overflow = 'hidden';
    };
    var closeModal = function () {
      modal.hidden = true;
      document.removeEventListener('keydown', onKey);
      document.removeEventListener('mousedown', onMouseDown);
      document.body.style.overflow = '';
    };
    window.addEventListener('scroll', onScroll);
    floating.addEventListener('click', openModal);
    modal.querySelector('[data-modal-close]').addEventListener('click', closeModal);
    onScroll();
  }
})();
</script>"""
