"""Fullscreen media viewer, the single global modal.

Invariants:
- At most one open viewer; opening while open replaces the contents
- Every open captures a return-focus target, every close restores it
- Navigation is circular and only active while open
"""

import logging
from dataclasses import dataclass

from folio.dom import Event, Node
from folio.interactions.carousel import MediaRegistry, is_playing, pause, play
from folio.models import MediaItem, MediaType
from folio.page import Page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewerState:
    media: tuple[MediaItem, ...]
    index: int
    return_focus: Node | None

    @property
    def item(self) -> MediaItem:
        return self.media[self.index]


class FullscreenViewer:
    def __init__(
        self,
        page: Page,
        modal: Node,
        registry: MediaRegistry | None = None,
        focus_delay_ms: int = 100,
    ) -> None:
        self.page = page
        self.modal = modal
        self.registry = registry or MediaRegistry()
        self.focus_delay_ms = focus_delay_ms
        self.wrapper = modal.select_one(".modal-media-wrapper")
        self.close_button = modal.select_one(".modal-close")
        self.prev_button = modal.select_one(".prev")
        self.next_button = modal.select_one(".next")
        self.state: ViewerState | None = None

    @property
    def is_open(self) -> bool:
        return self.state is not None

    @property
    def index(self) -> int | None:
        return self.state.index if self.state else None

    def attach(self) -> "FullscreenViewer":
        if self.close_button is not None:
            self.close_button.add_event_listener("click", lambda _e: self.close())
        if self.prev_button is not None:
            self.prev_button.add_event_listener("click", lambda _e: self.prev())
        if self.next_button is not None:
            self.next_button.add_event_listener("click", lambda _e: self.next())
        self.modal.add_event_listener("click", self._on_backdrop_click)
        self.page.document.add_event_listener("keydown", self._on_keydown)
        self.page.document.add_event_listener("click", self._on_document_click)
        return self

    # --- Transitions ---

    def open(self, media: list[MediaItem] | tuple[MediaItem, ...], index: int = 0) -> None:
        media = tuple(media)
        if not 0 <= index < len(media):
            return
        if self.state is not None:
            # Replacing: keep the first return target and stop the old playback.
            self._pause_video()
            return_focus = self.state.return_focus
        else:
            return_focus = self.page.active_element
        self.state = ViewerState(media, index, return_focus)
        self._render()

        multiple = len(media) > 1
        for button in (self.prev_button, self.next_button):
            if button is not None:
                button.hidden = not multiple
        self.modal.add_class("is-open")
        self.page.body.add_class("no-scroll")
        self.page.scheduler.call_later(self.focus_delay_ms, self._focus_close)
        logger.debug("Viewer opened at %d of %d", index, len(media))

    def close(self) -> None:
        if self.state is None:
            return
        self._pause_video()
        self.modal.remove_class("is-open")
        if self.wrapper is not None:
            self.wrapper.clear()
        self.page.body.remove_class("no-scroll")
        return_focus = self.state.return_focus
        self.state = None
        if return_focus is not None:
            self.page.focus(return_focus)

    def next(self) -> None:
        if self.state is None:
            return
        count = len(self.state.media)
        self._move((self.state.index + 1) % count)

    def prev(self) -> None:
        if self.state is None:
            return
        count = len(self.state.media)
        self._move((self.state.index - 1 + count) % count)

    def _move(self, index: int) -> None:
        if self.state is None:
            return
        self._pause_video()
        self.state = ViewerState(self.state.media, index, self.state.return_focus)
        self._render()

    # --- Rendering ---

    @property
    def video(self) -> Node | None:
        return self.wrapper.select_one("video") if self.wrapper is not None else None

    def _pause_video(self) -> None:
        video = self.video
        if video is not None and is_playing(video):
            pause(video)

    def _render(self) -> None:
        if self.wrapper is None or self.state is None:
            return
        item = self.state.item
        self.wrapper.clear()
        if item.type is MediaType.VIDEO:
            video = self.wrapper.append(Node("video", attrs={
                "src": item.src, "controls": True, "autoplay": True, "playsinline": True, "loop": True,
            }))
            play(video)
        else:
            self.wrapper.append(Node("img", attrs={"src": item.src, "alt": item.alt or "Fullscreen image"}))
        if item.caption:
            self.wrapper.append(Node("div", cls="modal-caption", text=item.caption))

    def _focus_close(self) -> None:
        if self.is_open and self.close_button is not None:
            self.page.focus(self.close_button)

    # --- Input ---

    def _on_backdrop_click(self, event: Event) -> None:
        if event.target is self.modal:
            self.close()

    def _on_keydown(self, event: Event) -> None:
        if self.state is None:
            return
        if event.key == "Escape":
            self.close()
            return
        if len(self.state.media) > 1:
            if event.key == "ArrowRight":
                self.next()
            elif event.key == "ArrowLeft":
                self.prev()

    def _on_document_click(self, event: Event) -> None:
        clickable = event.target.closest(".media-clickable")
        if clickable is None:
            return
        context = self.registry.context_for(clickable)
        if context is not None:
            self.open(context.media, context.index)
            return
        src = clickable.get("data-media-src")
        if src:
            image = clickable.select_one("img")
            item = MediaItem(
                type=MediaType(clickable.get("data-media-type") or "image"),
                src=src,
                caption=clickable.get("data-full-caption") or None,
                alt=image.get("alt", "") if image is not None else "",
            )
            self.open([item], 0)
