"""
HTML rendering for blog pages and widgets.
"""

from .components import (
    render_floating_share_button,
    render_share_buttons,
    render_share_modal,
    render_toc,
)
from .pages import ArticlePage, render_admin_page, render_article_page, render_blog_index, render_category_page

__all__ = [
    "render_floating_share_button",
    "render_share_buttons",
    "render_share_modal",
    "render_toc",
    "ArticlePage",
    "render_admin_page",
    "render_article_page",
    "render_blog_index",
    "render_category_page",
]
