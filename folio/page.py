"""Page model: the single-page runtime the view tree lives in.

Holds everything a browser document would provide to the interaction layer:
- A virtual-time timer queue (``Scheduler``), so animations and deferred work
  are deterministic
- Viewport size and scroll position, with window ``scroll``/``resize`` events
- Focus tracking (``active_element``)
- Block layout boxes and intersection observers over them
- Text measurement for collapsed descriptions
"""

import heapq
import itertools
import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

from folio.config import LayoutConfig
from folio.dom import Event, Node

logger = logging.getLogger(__name__)

SECTION_PADDING_PX = 96


# --- Timers ---


class TimerHandle:
    """A scheduled callback. ``cancel()`` prevents it from firing."""

    def __init__(self, due_ms: float, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """Virtual-time timer queue. Time only moves when ``advance`` is called."""

    def __init__(self) -> None:
        self.now_ms: float = 0
        self._queue: list[tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self.now_ms + max(0, delay_ms), callback)
        heapq.heappush(self._queue, (handle.due_ms, next(self._seq), handle))
        return handle

    def advance(self, ms: float) -> None:
        """Move time forward by ``ms``, firing due timers in order."""
        target = self.now_ms + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self.now_ms = due
            handle.callback()
        self.now_ms = target

    @property
    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)


def debounce(scheduler: Scheduler, delay_ms: float, fn: Callable[[], None]) -> Callable[..., None]:
    """Wrap ``fn`` so a burst of calls runs it once, ``delay_ms`` after the last call."""
    handle: TimerHandle | None = None

    def trigger(*_args: object) -> None:
        nonlocal handle
        if handle is not None:
            handle.cancel()
        handle = scheduler.call_later(delay_ms, fn)

    return trigger


# --- Geometry ---


@dataclass(frozen=True)
class Box:
    top: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass(frozen=True)
class IntersectionEntry:
    target: Node
    intersection_height: float
    ratio: float

    @property
    def is_intersecting(self) -> bool:
        return self.intersection_height > 0


class IntersectionObserver:
    """Reports targets whose visible ratio crossed one of ``thresholds``.

    ``observe`` reports the initial state of the new targets straight away,
    later reports come from page scroll, resize and layout changes.
    """

    def __init__(
        self,
        page: "Page",
        callback: Callable[[list[IntersectionEntry]], None],
        thresholds: Iterable[float] = (0.0,),
    ) -> None:
        self.page = page
        self.callback = callback
        self.thresholds = sorted(thresholds)
        self._buckets: dict[Node, int] = {}

    def observe(self, *targets: Node) -> None:
        entries = []
        for target in targets:
            entry = self.page.intersection_of(target)
            self._buckets[target] = self._bucket(entry.ratio)
            entries.append(entry)
        if entries:
            self.callback(entries)

    def disconnect(self) -> None:
        self._buckets.clear()
        if self in self.page._observers:
            self.page._observers.remove(self)

    def _bucket(self, ratio: float) -> int:
        return sum(1 for t in self.thresholds if (ratio > 0 if t == 0 else ratio >= t))

    def check(self) -> None:
        entries = []
        for target, previous in self._buckets.items():
            entry = self.page.intersection_of(target)
            bucket = self._bucket(entry.ratio)
            if bucket != previous:
                self._buckets[target] = bucket
                entries.append(entry)
        if entries:
            self.callback(entries)


# --- Page ---


class Page:
    """The document, window and platform services the view tree is attached to."""

    def __init__(
        self,
        layout: LayoutConfig | None = None,
        *,
        prefers_color_scheme: str = "light",
        fragment: str = "",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.layout_config = layout or LayoutConfig()
        self.document = Node("html", attrs={"lang": "en"})
        self.head = self.document.append(Node("head"))
        self.body = self.document.append(Node("body"))
        self.window = Node("window")
        self.title = ""
        self.scheduler = Scheduler()
        self.viewport_width: float = self.layout_config.viewport_width
        self.viewport_height: float = self.layout_config.viewport_height
        self.scroll_y: float = 0
        self.last_scroll_behavior = "auto"
        self.active_element: Node | None = None
        self.location: str | None = None
        self.fragment = fragment.lstrip("#")
        self.prefers_color_scheme = prefers_color_scheme
        self._clock = clock or datetime.now
        self._boxes: dict[Node, Box] = {}
        self._observers: list[IntersectionObserver] = []
        self._unload_callbacks: list[Callable[[], None]] = []

    def now(self) -> datetime:
        return self._clock()

    # --- Head ---

    def set_meta(self, name: str, content: str) -> Node:
        """Set a ``<meta name=...>`` entry, creating it if missing."""
        for meta in self.head.select("meta"):
            if meta.get("name") == name:
                meta.set("content", content)
                return meta
        return self.head.append(Node("meta", attrs={"name": name, "content": content}))

    def get_meta(self, name: str) -> str | None:
        for meta in self.head.select("meta"):
            if meta.get("name") == name:
                return meta.get("content")
        return None

    # --- User input ---

    def focus(self, node: Node | None) -> None:
        self.active_element = node

    def click(self, node: Node) -> bool:
        """Focus the nearest focusable node at or above ``node``, then dispatch ``click``."""
        focus_target = next((n for n in node.ancestors() if n.focusable), None)
        if focus_target is not None:
            self.focus(focus_target)
        return node.dispatch(Event("click", node))

    def press_key(self, key: str) -> bool:
        target = self.active_element
        if target is None or target.root is not self.document:
            target = self.body
        return target.dispatch(Event("keydown", target, key=key))

    def submit(self, form: Node) -> bool:
        return form.dispatch(Event("submit", form))

    def navigate(self, url: str) -> None:
        logger.info("Navigating to %s", url)
        self.location = url

    # --- Window ---

    def add_window_listener(self, event_type: str, listener: Callable[[Event], None]) -> None:
        self.window.add_event_listener(event_type, listener)

    def scroll_to(self, y: float, smooth: bool = False) -> None:
        self.scroll_y = max(0.0, min(float(y), self.max_scroll))
        self.last_scroll_behavior = "smooth" if smooth else "auto"
        self.window.dispatch(Event("scroll", self.window))
        self._check_observers()

    def resize(self, width: float, height: float) -> None:
        self.viewport_width = width
        self.viewport_height = height
        self.window.dispatch(Event("resize", self.window))
        self._check_observers()

    def scroll_into_view(self, node: Node) -> bool:
        box = self._boxes.get(node)
        if box is None:
            return False
        self.scroll_to(box.top)
        return True

    @property
    def scroll_locked(self) -> bool:
        return self.body.has_class("no-scroll")

    # --- Layout ---

    @property
    def content_height(self) -> float:
        return max((b.bottom for b in self._boxes.values()), default=0.0)

    @property
    def max_scroll(self) -> float:
        if not self._boxes:
            return math.inf
        return max(0.0, self.content_height - self.viewport_height)

    def set_box(self, node: Node, top: float, height: float) -> None:
        self._boxes[node] = Box(top, height)
        self._check_observers()

    def box_of(self, node: Node) -> Box | None:
        return self._boxes.get(node)

    def flow_layout(self, nodes: Iterable[Node], start: float = 0) -> float:
        """Stack ``nodes`` vertically from ``start`` using estimated heights. Returns the end."""
        top = start
        for node in nodes:
            height = self.estimate_height(node)
            self._boxes[node] = Box(top, height)
            top += height
        self._check_observers()
        return top

    def estimate_height(self, node: Node) -> float:
        cfg = self.layout_config
        chars_per_line = max(1, int(self.viewport_width // cfg.char_width_px))
        lines = sum(
            math.ceil(len(n.text) / chars_per_line)
            for n in node.iter() if n.text and not n.hidden
        )
        return max(lines, 1) * cfg.line_height_px + SECTION_PADDING_PX

    def measure(self, node: Node) -> tuple[float, float]:
        """(scroll_height, client_height) of a collapsible text block.

        Collapsed blocks show at most ``collapsed_lines``; ``.expanded`` shows all.
        """
        cfg = self.layout_config
        width = self.viewport_width * cfg.description_width_ratio
        chars_per_line = max(1, int(width // cfg.char_width_px))
        paragraphs = [c.text_content for c in node.children] or [node.text]
        lines = sum(max(1, math.ceil(len(p) / chars_per_line)) for p in paragraphs if p)
        scroll_height = float(lines * cfg.line_height_px)
        if node.has_class("expanded"):
            return scroll_height, scroll_height
        return scroll_height, min(scroll_height, float(cfg.collapsed_lines * cfg.line_height_px))

    def intersection_of(self, node: Node) -> IntersectionEntry:
        box = self._boxes.get(node)
        if box is None:
            return IntersectionEntry(node, 0.0, 0.0)
        view_top = self.scroll_y
        view_bottom = self.scroll_y + self.viewport_height
        visible = max(0.0, min(box.bottom, view_bottom) - max(box.top, view_top))
        ratio = visible / box.height if box.height > 0 else 0.0
        return IntersectionEntry(node, visible, ratio)

    def observe_intersections(
        self,
        callback: Callable[[list[IntersectionEntry]], None],
        thresholds: Iterable[float] = (0.0,),
    ) -> IntersectionObserver:
        observer = IntersectionObserver(self, callback, thresholds)
        self._observers.append(observer)
        return observer

    def _check_observers(self) -> None:
        for observer in list(self._observers):
            observer.check()

    # --- Lifetime ---

    def on_unload(self, callback: Callable[[], None]) -> None:
        self._unload_callbacks.append(callback)

    def unload(self) -> None:
        for callback in self._unload_callbacks:
            callback()
        self._unload_callbacks.clear()
        for observer in list(self._observers):
            observer.disconnect()
