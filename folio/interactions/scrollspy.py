"""Scroll-spy: highlight the nav link of the section with the most visible height."""

import logging

from folio.dom import Node
from folio.page import IntersectionEntry, IntersectionObserver, Page

logger = logging.getLogger(__name__)


class NavHighlighter:
    """Ranks sections by their last reported visible pixel height.

    Ties go to the earliest section in document order; when every height is
    zero the current highlight is left alone.
    """

    def __init__(self, page: Page, sections: list[Node], links: list[Node]) -> None:
        self.page = page
        self.sections = sections
        self.links = links
        self.heights: dict[str, float] = {s.id: 0.0 for s in sections if s.id}
        self.active_id: str | None = None
        self._observer: IntersectionObserver | None = None

    def attach(self, thresholds: list[float]) -> "NavHighlighter":
        self._observer = self.page.observe_intersections(self._on_intersections, thresholds)
        self._observer.observe(*self.sections)
        return self

    def detach(self) -> None:
        if self._observer is not None:
            self._observer.disconnect()
            self._observer = None

    def _on_intersections(self, entries: list[IntersectionEntry]) -> None:
        self.update({e.target.id: e.intersection_height for e in entries if e.target.id})

    def update(self, heights: dict[str, float]) -> str | None:
        """Record visible heights, then re-highlight. Returns the active section id."""
        self.heights.update(heights)
        best_id = None
        best_height = 0.0
        for section_id, height in self.heights.items():
            if height > best_height:
                best_id, best_height = section_id, height
        if best_id is not None and best_id != self.active_id:
            logger.debug("Active section: %s (%.0fpx visible)", best_id, best_height)
        if best_id is not None:
            self.active_id = best_id
            self._highlight(best_id)
        return self.active_id

    def _highlight(self, section_id: str) -> None:
        target = f"#{section_id}"
        for link in self.links:
            link.toggle_class("active", link.get("href") == target)

    @property
    def active_links(self) -> list[Node]:
        return [link for link in self.links if link.has_class("active")]
