"""
Headless model of the browser surface the blog widgets attach to.

The rendered pages ship their behaviour as an embedded script; this module gives
the same widgets a Python-side document to run against so their state rules can
be exercised without a browser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

Listener = Callable[["Event"], None]


@dataclass
class Element:
    """
    A page element addressable by id.

    Attributes:
        id: Anchor identifier.
        top: Offset of the element's top edge from the top of the document, in px.
        height: Rendered height in px.
    """
    id: str
    top: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.left + self.width and self.top <= y <= self.top + self.height


@dataclass
class Event:
    """
    A dispatched UI event.

    Attributes:
        type: "scroll", "keydown", "mousedown" or "click".
        key: Key name for keyboard events (e.g., "Escape").
        x: Pointer x position for mouse events (viewport coordinates).
        y: Pointer y position for mouse events (viewport coordinates).
    """
    type: str
    key: Optional[str] = None
    x: float = 0.0
    y: float = 0.0


class EventTarget:
    """Listener registry with DOM semantics: one registration per (type, handler)."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def add_event_listener(self, event_type: str, handler: Listener) -> None:
        handlers = self._listeners.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)

    def remove_event_listener(self, event_type: str, handler: Listener) -> None:
        handlers = self._listeners.get(event_type)
        if not handlers:
            return
        if handler in handlers:
            handlers.remove(handler)
        if not handlers:
            del self._listeners[event_type]

    def listener_count(self, event_type: Optional[str] = None) -> int:
        if event_type is None:
            return sum(len(handlers) for handlers in self._listeners.values())
        return len(self._listeners.get(event_type, ()))

    def dispatch_event(self, event: Event) -> Event:
        # Handlers may unregister themselves while being called.
        for handler in list(self._listeners.get(event.type, ())):
            handler(event)
        return event


class Document(EventTarget):
    """
    A scrollable page with a fixed-height viewport.

    Attributes:
        scroll_y: Current vertical scroll offset in px.
        viewport_height: Height of the visible area in px.
        body_overflow: Inline overflow style of the body ("" or "hidden").
        location_hash: Current URL fragment including the leading "#".
        history: Entries pushed through `push_state`.
        last_scroll_behavior: Behaviour requested by the most recent `scroll_into_view`.
    """

    def __init__(self, elements: Iterable[Element] = (), *, viewport_height: float = 800.0) -> None:
        super().__init__()
        self._elements: Dict[str, Element] = {}
        for element in elements:
            self.add_element(element)
        self.scroll_y = 0.0
        self.viewport_height = viewport_height
        self.body_overflow = ""
        self.location_hash = ""
        self.history: List[str] = []
        self.last_scroll_behavior: Optional[str] = None

    def add_element(self, element: Element) -> Element:
        self._elements[element.id] = element
        return element

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)

    def scroll_to(self, y: float) -> bool:
        """
        User-initiated scroll. Ignored while the body overflow is hidden.

        Returns:
            True if the scroll was applied.
        """
        if self.body_overflow == "hidden":
            logger.debug("Scroll to %s suppressed (body overflow hidden)", y)
            return False
        self._set_scroll(y)
        return True

    def scroll_into_view(self, element: Element, *, behavior: str = "auto") -> None:
        self.last_scroll_behavior = behavior
        self._set_scroll(element.top)

    def push_state(self, url: str) -> None:
        """Record a history entry; a fragment-only URL updates the hash without navigating."""
        self.history.append(url)
        if url.startswith("#"):
            self.location_hash = url

    def press_key(self, key: str) -> Event:
        return self.dispatch_event(Event("keydown", key=key))

    def mouse_down(self, x: float, y: float) -> Event:
        return self.dispatch_event(Event("mousedown", x=x, y=y))

    def _set_scroll(self, y: float) -> None:
        self.scroll_y = max(0.0, float(y))
        self.dispatch_event(Event("scroll"))


@dataclass(frozen=True)
class ObservationEntry:
    target: Element
    is_intersecting: bool
    intersection_ratio: float


class ViewportObserver:
    """
    Reports when observed elements enter or leave a band at the top of the viewport.

    The band spans from the top of the viewport down to `1 - bottom_margin` of its
    height (a bottom margin of 0.8 keeps the top 20%). An element counts as
    intersecting once at least `threshold` of its height lies inside the band;
    zero-height elements intersect when their top edge is inside the band.

    Newly observed elements are reported immediately with their current state,
    after that only transitions are reported. Checks run on every document scroll
    while anything is observed.
    """

    def __init__(
        self,
        document: Document,
        callback: Callable[[List[ObservationEntry]], None],
        *,
        bottom_margin: float = 0.8,
        threshold: float = 0.1,
    ) -> None:
        if not 0.0 <= bottom_margin < 1.0:
            raise ValueError("bottom_margin must be within [0, 1).")
        self.document = document
        self.callback = callback
        self.bottom_margin = bottom_margin
        self.threshold = threshold
        self._targets: Dict[str, Element] = {}
        self._states: Dict[str, bool] = {}

    @property
    def observed_ids(self) -> List[str]:
        return list(self._targets)

    def observe(self, element: Element) -> None:
        if element.id in self._targets:
            return
        if not self._targets:
            self.document.add_event_listener("scroll", self._on_scroll)
        self._targets[element.id] = element
        entry = self._measure(element)
        self._states[element.id] = entry.is_intersecting
        self.callback([entry])

    def unobserve(self, element: Element) -> None:
        self._targets.pop(element.id, None)
        self._states.pop(element.id, None)
        if not self._targets:
            self.document.remove_event_listener("scroll", self._on_scroll)

    def disconnect(self) -> None:
        for element in list(self._targets.values()):
            self.unobserve(element)

    def check(self) -> List[ObservationEntry]:
        """Measure every target and notify the callback about transitions."""
        changed: List[ObservationEntry] = []
        for element_id, element in self._targets.items():
            entry = self._measure(element)
            if self._states.get(element_id) != entry.is_intersecting:
                self._states[element_id] = entry.is_intersecting
                changed.append(entry)
        if changed:
            self.callback(changed)
        return changed

    def band(self) -> tuple[float, float]:
        top = self.document.scroll_y
        return top, top + self.document.viewport_height * (1.0 - self.bottom_margin)

    def _measure(self, element: Element) -> ObservationEntry:
        band_top, band_bottom = self.band()
        if element.height <= 0:
            inside = band_top <= element.top <= band_bottom
            ratio = 1.0 if inside else 0.0
        else:
            overlap = min(element.top + element.height, band_bottom) - max(element.top, band_top)
            ratio = max(0.0, overlap) / element.height
        intersecting = ratio > 0 and ratio >= self.threshold
        return ObservationEntry(target=element, is_intersecting=intersecting, intersection_ratio=ratio)

    def _on_scroll(self, _event: Event) -> None:
        self.check()
