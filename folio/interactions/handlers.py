"""Small per-event handlers: read-more, back-to-top, scroll indicator, mobile menu,
contact form, message timestamp and reveal-on-scroll."""

import logging
from urllib.parse import quote

from folio.dom import Event, Node
from folio.page import IntersectionEntry, Page, debounce

logger = logging.getLogger(__name__)


class ReadMore:
    """Shows the "See More" toggle only under descriptions that overflow."""

    def __init__(self, page: Page, root: Node, delay_ms: int = 500, resize_debounce_ms: int = 150) -> None:
        self.page = page
        self.wrappers = root.select(".project-description-wrapper")
        self.delay_ms = delay_ms
        self.resize_debounce_ms = resize_debounce_ms

    def attach(self) -> "ReadMore":
        for wrapper in self.wrappers:
            button = wrapper.select_one(".read-more-btn")
            if button is not None:
                button.add_event_listener("click", lambda _e, w=wrapper: self.toggle(w))
        self.page.scheduler.call_later(self.delay_ms, self.measure)
        self.page.add_window_listener(
            "resize", debounce(self.page.scheduler, self.resize_debounce_ms, self.measure),
        )
        return self

    def measure(self) -> None:
        for wrapper in self.wrappers:
            description = wrapper.select_one(".project-description")
            button = wrapper.select_one(".read-more-btn")
            if description is None or button is None:
                continue
            if description.has_class("expanded"):
                continue
            scroll_height, client_height = self.page.measure(description)
            button.hidden = not scroll_height > client_height

    def toggle(self, wrapper: Node) -> bool:
        description = wrapper.select_one(".project-description")
        button = wrapper.select_one(".read-more-btn")
        if description is None or button is None:
            return False
        expanded = description.toggle_class("expanded")
        button.text = "See Less" if expanded else "See More"
        return expanded


class BackToTop:
    def __init__(self, page: Page, threshold: float = 500) -> None:
        self.page = page
        self.threshold = threshold
        self.button = Node("button", cls="back-to-top", attrs={"aria-label": "Back to top"})
        arrow = self.button.append(Node("svg", attrs={
            "viewBox": "0 0 24 24", "stroke": "currentColor", "stroke-width": "2", "fill": "none",
        }))
        arrow.append(Node("line", attrs={"x1": "12", "y1": "19", "x2": "12", "y2": "5"}))
        arrow.append(Node("polyline", attrs={"points": "5 12 12 5 19 12"}))

    def attach(self) -> "BackToTop":
        self.page.body.append(self.button)
        self.page.add_window_listener("scroll", self._on_scroll)
        self.button.add_event_listener("click", lambda _e: self.page.scroll_to(0, smooth=True))
        return self

    def _on_scroll(self, _event: Event) -> None:
        self.button.toggle_class("visible", self.page.scroll_y > self.threshold)


class ScrollIndicator:
    def __init__(self, page: Page, indicator: Node | None, threshold: float = 50) -> None:
        self.page = page
        self.indicator = indicator
        self.threshold = threshold

    def attach(self) -> "ScrollIndicator":
        self.page.add_window_listener("scroll", self._on_scroll)
        return self

    def _on_scroll(self, _event: Event) -> None:
        if self.indicator is not None:
            self.indicator.toggle_class("hidden", self.page.scroll_y > self.threshold)


class MobileMenu:
    def __init__(self, page: Page, hamburger: Node, overlay: Node) -> None:
        self.page = page
        self.hamburger = hamburger
        self.overlay = overlay

    @property
    def is_open(self) -> bool:
        return self.hamburger.has_class("is-active")

    def attach(self) -> "MobileMenu":
        self.hamburger.add_event_listener("click", lambda _e: self.set_open(not self.is_open))
        self.overlay.add_event_listener("click", self._on_overlay_click)
        return self

    def set_open(self, is_open: bool) -> None:
        self.hamburger.toggle_class("is-active", is_open)
        self.overlay.toggle_class("is-open", is_open)
        self.page.body.toggle_class("no-scroll", is_open)
        self.page.body.toggle_class("menu-is-open", is_open)

    def _on_overlay_click(self, event: Event) -> None:
        if event.target is self.overlay or event.target.tag == "a":
            self.set_open(False)


def mailto_url(recipient: str, subject: str, body: str) -> str:
    return f"mailto:{recipient}?subject={quote(subject)}&body={quote(body)}"


class ContactForm:
    """Turns a submitted message into a mail composition; no network call."""

    def __init__(self, page: Page, form: Node, recipient: str, subject: str) -> None:
        self.page = page
        self.form = form
        self.recipient = recipient
        self.subject = subject
        self.message = form.select_one("textarea")

    def attach(self) -> "ContactForm":
        self.form.add_event_listener("submit", self._on_submit)
        return self

    def _on_submit(self, event: Event) -> None:
        event.prevent_default()
        if self.message is None:
            return
        text = self.message.get("value") or ""
        if not text.strip():
            return
        self.page.navigate(mailto_url(self.recipient, self.subject, text))
        self.message.set("value", "")


def delivered_label(page: Page) -> str:
    now = page.now()
    hour = now.hour % 12 or 12
    suffix = "AM" if now.hour < 12 else "PM"
    return f"Delivered Today at {hour}:{now.minute:02d} {suffix}"


def display_current_time(page: Page, node: Node | None) -> None:
    if node is not None:
        node.text = delivered_label(page)


class RevealOnScroll:
    """Marks sections ``visible`` the first time enough of them is on screen."""

    def __init__(self, page: Page, sections: list[Node], threshold: float = 0.1) -> None:
        self.page = page
        self.sections = sections
        self.threshold = threshold

    def attach(self) -> "RevealOnScroll":
        observer = self.page.observe_intersections(self._on_intersections, [self.threshold])
        observer.observe(*self.sections)
        return self

    def _on_intersections(self, entries: list[IntersectionEntry]) -> None:
        for entry in entries:
            if entry.ratio >= self.threshold and entry.is_intersecting:
                entry.target.add_class("visible")
