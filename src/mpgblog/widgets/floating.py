"""
Scroll-triggered floating share button.
"""

from __future__ import annotations

from typing import Callable, Optional

from .dom import Document, Event

SCROLL_THRESHOLD_PX = 500


class FloatingShareButton:
    """Visible only while the page is scrolled further than `threshold` pixels."""

    def __init__(self, on_click: Callable[[], None], *, threshold: float = SCROLL_THRESHOLD_PX) -> None:
        self.on_click = on_click
        self.threshold = threshold
        self.visible = False
        self._document: Optional[Document] = None

    def mount(self, document: Document) -> None:
        self.unmount()
        self._document = document
        document.add_event_listener("scroll", self._handle_scroll)

    def unmount(self) -> None:
        if self._document is not None:
            self._document.remove_event_listener("scroll", self._handle_scroll)
        self._document = None

    def update(self, scroll_y: float) -> bool:
        self.visible = scroll_y > self.threshold
        return self.visible

    def click(self) -> None:
        if self.visible:
            self.on_click()

    def _handle_scroll(self, _event: Event) -> None:
        if self._document is not None:
            self.update(self._document.scroll_y)
