"""Media carousels and the registry the fullscreen viewer reads them through."""

import logging
from dataclasses import dataclass

from folio.dom import Node
from folio.models import ContentGraph, MediaItem, MediaType
from folio.page import Page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaContext:
    """What the viewer needs from a carousel: the full media list and where it is."""
    media: tuple[MediaItem, ...]
    index: int


def pause(node: Node) -> None:
    if node.tag == "video":
        node.set("data-playing", False)


def play(node: Node) -> None:
    if node.tag == "video":
        node.set("data-playing", True)


def is_playing(node: Node) -> bool:
    return node.tag == "video" and bool(node.get("data-playing"))


def media_from_node(node: Node) -> MediaItem:
    """Rebuild a MediaItem from a rendered media element."""
    return MediaItem(
        type=MediaType.VIDEO if node.tag == "video" else MediaType.IMAGE,
        src=node.get("src") or "",
        alt=node.get("alt") or "",
    )


class MediaRegistry:
    """Maps carousel display nodes to the carousel that owns them."""

    def __init__(self) -> None:
        self._owners: dict[Node, "MediaCarousel"] = {}

    def register(self, node: Node, carousel: "MediaCarousel") -> None:
        self._owners[node] = carousel

    def carousel_for(self, node: Node) -> "MediaCarousel | None":
        for ancestor in node.ancestors():
            owner = self._owners.get(ancestor)
            if owner is not None:
                return owner
        return None

    def context_for(self, node: Node) -> MediaContext | None:
        carousel = self.carousel_for(node)
        return carousel.context if carousel is not None else None

    def __len__(self) -> int:
        return len(self._owners)


class MediaCarousel:
    """Circular index over the media items of one multi-item media container."""

    def __init__(self, page: Page, root: Node, content: ContentGraph | None = None) -> None:
        self.page = page
        self.root = root
        self.display = root.select_one(".media-carousel-display")
        self.items = root.select(".media-item")
        self.thumbs = root.select(".thumb-item")
        self.caption = root.select_one(".media-caption")
        self.current_index = 0
        self.media = self._resolve_media(content)

    def _resolve_media(self, content: ContentGraph | None) -> list[MediaItem]:
        first_src = self.items[0].get("src") if self.items else None
        if content is not None and first_src:
            media = content.find_media_list(first_src)
            if media is not None and len(media) == len(self.items):
                return media
            logger.debug("No content media list matches carousel starting at %s", first_src)
        return [media_from_node(n) for n in self.items]

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def context(self) -> MediaContext:
        return MediaContext(tuple(self.media), self.current_index)

    def attach(self, registry: MediaRegistry | None = None) -> "MediaCarousel":
        prev_btn = self.root.select_one(".prev")
        next_btn = self.root.select_one(".next")
        if prev_btn is not None:
            prev_btn.add_event_listener("click", lambda _e: self.prev())
        if next_btn is not None:
            next_btn.add_event_listener("click", lambda _e: self.next())
        for thumb in self.thumbs:
            thumb.add_event_listener(
                "click", lambda _e, i=int(thumb.get("data-index", "0")): self.select_thumbnail(i),
            )
        if registry is not None and self.display is not None:
            registry.register(self.display, self)
        self.show(0)
        return self

    def show(self, index: int) -> None:
        if not 0 <= index < self.count:
            return
        self.current_index = index
        for i, item in enumerate(self.items):
            pause(item)
            item.toggle_class("active", i == index)
        for i, thumb in enumerate(self.thumbs):
            thumb.toggle_class("active", i == index)

        active = self.items[index]
        meta = self.media[index]
        if self.display is not None:
            self.display.set("data-media-src", active.get("src"))
            self.display.set("data-media-type", "video" if active.tag == "video" else "image")
            self.display.set("data-full-caption", meta.caption or "")
        if self.caption is not None:
            self.caption.text = meta.caption if meta.has_caption else ""
            self.caption.hidden = not meta.has_caption

    def next(self) -> None:
        if self.count:
            self.show((self.current_index + 1) % self.count)

    def prev(self) -> None:
        if self.count:
            self.show((self.current_index - 1 + self.count) % self.count)

    def select_thumbnail(self, index: int) -> None:
        self.show(index)


def attach_carousels(
    page: Page,
    root: Node,
    content: ContentGraph | None,
    registry: MediaRegistry,
) -> list[MediaCarousel]:
    """Attach a carousel to every multi-item media container under ``root``."""
    carousels = []
    for node in root.select(".media-carousel"):
        carousel = MediaCarousel(page, node, content)
        if carousel.count == 0:
            continue
        carousels.append(carousel.attach(registry))
    logger.debug("Attached %d carousels", len(carousels))
    return carousels
