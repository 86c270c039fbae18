"""
Share modal and the manager that ties it to the floating share button.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .dom import Document, Event, Rect
from .floating import FloatingShareButton
from .share import CopyLinkButton, ShareLink, build_share_links

logger = logging.getLogger(__name__)


class ShareModal:
    """
    Overlay panel holding the share links.

    While open it listens for Escape and for mouse presses outside `bounds`,
    and hides the body overflow so the page underneath cannot scroll. Closing
    removes both listeners and restores the overflow.
    """

    def __init__(
        self,
        url: str,
        title: str,
        description: str = "",
        *,
        on_close: Callable[[], None],
        bounds: Rect = Rect(0, 0, 448, 320),
        origin: Optional[str] = None,
    ) -> None:
        self.url = url
        self.title = title
        self.description = description
        self.on_close = on_close
        self.bounds = bounds
        self.origin = origin
        self.is_open = False
        self._document: Optional[Document] = None

    @property
    def links(self) -> list[ShareLink]:
        return build_share_links(self.url, self.title, self.description, origin=self.origin)

    def copy_button(self) -> CopyLinkButton:
        return CopyLinkButton(self.url, origin=self.origin)

    def attach(self, document: Document) -> None:
        self._document = document

    def set_open(self, is_open: bool) -> None:
        if is_open == self.is_open:
            return
        if self._document is None:
            raise RuntimeError("ShareModal must be attached to a document before opening.")
        self.is_open = is_open
        if is_open:
            self._document.add_event_listener("keydown", self._handle_escape)
            self._document.add_event_listener("mousedown", self._handle_click_outside)
            self._document.body_overflow = "hidden"
        else:
            self._release()

    def close_clicked(self) -> None:
        self.on_close()

    def detach(self) -> None:
        if self.is_open:
            self.is_open = False
            self._release()
        self._document = None

    def _release(self) -> None:
        if self._document is None:
            return
        self._document.remove_event_listener("keydown", self._handle_escape)
        self._document.remove_event_listener("mousedown", self._handle_click_outside)
        self._document.body_overflow = ""

    def _handle_escape(self, event: Event) -> None:
        if event.key == "Escape":
            self.on_close()

    def _handle_click_outside(self, event: Event) -> None:
        if not self.bounds.contains(event.x, event.y):
            self.on_close()


class BlogShareManager:
    """Floating share button plus the modal it opens."""

    def __init__(
        self,
        url: str,
        title: str,
        description: str = "",
        *,
        origin: Optional[str] = None,
        modal_bounds: Optional[Rect] = None,
    ) -> None:
        self.button = FloatingShareButton(self.open_modal)
        modal_kwargs = {"on_close": self.close_modal, "origin": origin}
        if modal_bounds is not None:
            modal_kwargs["bounds"] = modal_bounds
        self.modal = ShareModal(url, title, description, **modal_kwargs)

    @property
    def is_modal_open(self) -> bool:
        return self.modal.is_open

    def mount(self, document: Document) -> None:
        self.button.mount(document)
        self.modal.attach(document)

    def unmount(self) -> None:
        self.button.unmount()
        self.modal.detach()

    def open_modal(self) -> None:
        logger.debug("Opening share modal for %s", self.modal.url)
        self.modal.set_open(True)

    def close_modal(self) -> None:
        self.modal.set_open(False)
