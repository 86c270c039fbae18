"""
Headless models of the blog's interactive widgets.
"""

from .dom import Document, Element, Event, EventTarget, ObservationEntry, Rect, ViewportObserver
from .floating import SCROLL_THRESHOLD_PX, FloatingShareButton
from .modal import BlogShareManager, ShareModal
from .share import (
    COPY_RESET_MS,
    SHARE_TARGETS,
    ClipboardError,
    CopyLinkButton,
    ShareLink,
    ShareTarget,
    build_share_links,
    encode_uri_component,
    resolve_share_url,
    share_links_by_key,
)
from .toc import DEFAULT_TOC_TITLE, TableOfContents, TocEntry

__all__ = [
    "Document",
    "Element",
    "Event",
    "EventTarget",
    "ObservationEntry",
    "Rect",
    "ViewportObserver",
    "SCROLL_THRESHOLD_PX",
    "FloatingShareButton",
    "BlogShareManager",
    "ShareModal",
    "COPY_RESET_MS",
    "SHARE_TARGETS",
    "ClipboardError",
    "CopyLinkButton",
    "ShareLink",
    "ShareTarget",
    "build_share_links",
    "encode_uri_component",
    "resolve_share_url",
    "share_links_by_key",
    "DEFAULT_TOC_TITLE",
    "TableOfContents",
    "TocEntry",
]
