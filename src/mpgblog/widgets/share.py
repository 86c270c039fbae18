"""
Share links, copy-link state and the share targets they are built from.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from urllib.parse import quote

from ..config import get_site_origin

logger = logging.getLogger(__name__)

COPY_RESET_MS = 2000


class ClipboardError(RuntimeError):
    """Raised by clipboard writers when the write is rejected."""


@dataclass(frozen=True)
class ShareTarget:
    """
    A sharing service and its URL template.

    The template accepts the placeholders {url}, {title}, {description},
    {title_and_url} and {description_and_url}; every value is percent-encoded
    before substitution.
    """
    key: str
    label: str
    template: str

    def build(self, full_url: str, title: str, description: str = "") -> str:
        values = {
            "url": full_url,
            "title": title,
            "description": description,
            "title_and_url": f"{title} {full_url}",
            "description_and_url": f"{description}\n\n{full_url}",
        }
        return self.template.format(**{name: encode_uri_component(value) for name, value in values.items()})


SHARE_TARGETS: tuple[ShareTarget, ...] = (
    ShareTarget("twitter", "X", "https://twitter.com/intent/tweet?text={title}&url={url}"),
    ShareTarget("facebook", "Facebook", "https://www.facebook.com/sharer/sharer.php?u={url}"),
    ShareTarget("linkedin", "LinkedIn", "https://www.linkedin.com/sharing/share-offsite/?url={url}"),
    ShareTarget("pinterest", "Pinterest", "https://pinterest.com/pin/create/button/?url={url}&media=&description={title}"),
    ShareTarget("reddit", "Reddit", "https://www.reddit.com/submit?url={url}&title={title}"),
    ShareTarget("whatsapp", "WhatsApp", "https://api.whatsapp.com/send?text={title_and_url}"),
    ShareTarget("email", "Email", "mailto:?subject={title}&body={description_and_url}"),
)


@dataclass(frozen=True)
class ShareLink:
    key: str
    label: str
    href: str
    target: str = "_blank"
    rel: str = "noopener noreferrer"

    @property
    def aria_label(self) -> str:
        if self.key == "email":
            return "Share via Email"
        return f"Share on {self.label}"


def encode_uri_component(value: str) -> str:
    """Percent-encode like JavaScript's encodeURIComponent."""
    return quote(value, safe="!~*'()")


def resolve_share_url(url: str, origin: Optional[str] = None) -> str:
    """
    Join a site-relative URL onto the public origin.

    Args:
        url: Canonical relative URL such as "/blog/road-trips/route-66".
        origin: Explicit origin; defaults to the configured site origin.
    """
    base = origin if origin is not None else get_site_origin()
    return f"{base.rstrip('/')}{url}"


def build_share_links(
    url: str,
    title: str,
    description: str = "",
    *,
    origin: Optional[str] = None,
) -> List[ShareLink]:
    """
    Build one outbound link per supported service, in display order.
    """
    full_url = resolve_share_url(url, origin)
    return [
        ShareLink(key=target.key, label=target.label, href=target.build(full_url, title, description))
        for target in SHARE_TARGETS
    ]


def share_links_by_key(url: str, title: str, description: str = "", *, origin: Optional[str] = None) -> Dict[str, str]:
    return {link.key: link.href for link in build_share_links(url, title, description, origin=origin)}


def _start_timer(delay_seconds: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay_seconds, callback)
    timer.daemon = True
    timer.start()
    return timer


class CopyLinkButton:
    """
    Copy-to-clipboard action for a page's absolute URL.

    `copied` turns True after a successful write and falls back to False
    COPY_RESET_MS later. A rejected write is logged and otherwise ignored.

    Args:
        url: Canonical relative URL of the page.
        origin: Explicit origin; defaults to the configured site origin.
        schedule: Callable taking (delay_seconds, callback); defaults to a daemon timer.
    """

    def __init__(
        self,
        url: str,
        *,
        origin: Optional[str] = None,
        schedule: Optional[Callable[[float, Callable[[], None]], object]] = None,
    ) -> None:
        self.full_url = resolve_share_url(url, origin)
        self.copied = False
        self._schedule = schedule or _start_timer

    def copy(self, clipboard: Callable[[str], object]) -> bool:
        """
        Write the URL with the supplied clipboard writer.

        Returns:
            True when the write succeeded.
        """
        try:
            clipboard(self.full_url)
        except Exception as exc:
            logger.error("Failed to copy: %s", exc)
            return False
        self.copied = True
        self._schedule(COPY_RESET_MS / 1000, self._reset)
        return True

    def _reset(self) -> None:
        self.copied = False
