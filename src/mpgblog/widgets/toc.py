"""
In-page table of contents with an active-section tracker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .dom import Document, ObservationEntry, ViewportObserver

logger = logging.getLogger(__name__)

DEFAULT_TOC_TITLE = "Table of Contents"


@dataclass(frozen=True)
class TocEntry:
    """
    One navigable heading.

    Attributes:
        id: Anchor of the section element on the page.
        title: Text shown in the list.
        level: Nesting level, 1 for top-level sections.
    """
    id: str
    title: str
    level: int = 1

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError(f"TOC level must be >= 1, got {self.level} for '{self.id}'.")


class TableOfContents:
    """
    Tracks which section is being read and handles list interaction.

    `active_id` is None until a section first enters the top fifth of the
    viewport; afterwards it holds the id of the most recent section to enter it.
    """

    def __init__(self, items: Sequence[TocEntry], title: str = DEFAULT_TOC_TITLE) -> None:
        self.items: tuple[TocEntry, ...] = tuple(items)
        self.title = title
        self.active_id: Optional[str] = None
        self.expanded = True
        self._document: Optional[Document] = None
        self._observer: Optional[ViewportObserver] = None

    def mount(self, document: Document) -> List[str]:
        """
        Start observing every entry's section.

        Returns:
            The ids that were found on the page and are now observed.
        """
        if self._document is not None:
            self.unmount()
        self._document = document
        self._observer = ViewportObserver(document, self._on_visibility, bottom_margin=0.8, threshold=0.1)
        for item in self.items:
            element = document.get_element_by_id(item.id)
            if element is None:
                logger.debug("No section element for TOC entry '%s'; skipping", item.id)
                continue
            self._observer.observe(element)
        return self._observer.observed_ids

    def unmount(self) -> None:
        if self._observer is not None:
            self._observer.disconnect()
        self._observer = None
        self._document = None

    def click(self, entry_id: str) -> bool:
        """
        Smooth-scroll to a section and record its fragment without navigating.

        Returns:
            False when the section is not on the page (nothing happens).
        """
        if self._document is None:
            raise RuntimeError("TableOfContents must be mounted before handling clicks.")
        element = self._document.get_element_by_id(entry_id)
        if element is None:
            return False
        self._document.scroll_into_view(element, behavior="smooth")
        self.active_id = entry_id
        self._document.push_state(f"#{entry_id}")
        return True

    def toggle(self) -> bool:
        self.expanded = not self.expanded
        return self.expanded

    def _on_visibility(self, entries: List[ObservationEntry]) -> None:
        for entry in entries:
            if entry.is_intersecting:
                self.active_id = entry.target.id
