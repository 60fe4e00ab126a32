"""Tag filter for a projects grid (OR semantics: any active tag shows a card)."""

import json
import logging

from folio.dom import Event, Node
from folio.page import Page

logger = logging.getLogger(__name__)


def card_visible(active: set[str] | frozenset[str], card_tags: set[str] | frozenset[str]) -> bool:
    """A card shows when no tag is active or it shares at least one active tag."""
    return not active or bool(active & card_tags)


class TagFilter:
    """State machine over the set of active tags of one projects section."""

    def __init__(self, page: Page, container: Node, fade_in_ms: int = 500) -> None:
        self.page = page
        self.container = container
        self.fade_in_ms = fade_in_ms
        self.active: set[str] = set()

        self.all_button = container.select_one(".filter-all")
        self.toggle_button = container.select_one(".filter-toggle")
        self.tags_wrapper = container.select_one(".filter-tags-wrapper")
        self.tag_buttons: dict[str, Node] = {
            b.get("data-tag"): b for b in container.select(".filter-tag")
        }
        self.cards: list[tuple[Node, frozenset[str]]] = [
            (card, frozenset(json.loads(card.get("data-tags") or "[]")))
            for card in container.select(".project-card")
        ]

    def attach(self) -> "TagFilter":
        for tag, button in self.tag_buttons.items():
            button.add_event_listener("click", lambda _e, t=tag: self.toggle(t))
        if self.all_button is not None:
            self.all_button.add_event_listener("click", lambda _e: self.show_all())
        if self.toggle_button is not None:
            self.toggle_button.add_event_listener("click", self._toggle_panel)
        return self

    @property
    def visible_cards(self) -> list[Node]:
        return [card for card, _ in self.cards if not card.hidden]

    def toggle(self, tag: str) -> None:
        if tag in self.active:
            self.active.discard(tag)
        else:
            self.active.add(tag)
        button = self.tag_buttons.get(tag)
        if button is not None:
            button.toggle_class("active", tag in self.active)
        if self.all_button is not None:
            self.all_button.toggle_class("active", not self.active)
        logger.debug("Tag filter now %s", sorted(self.active))
        self._apply()

    def show_all(self) -> None:
        self.active.clear()
        for button in self.tag_buttons.values():
            button.remove_class("active")
        if self.all_button is not None:
            self.all_button.add_class("active")
        self._apply()

    def _toggle_panel(self, _event: Event) -> None:
        if self.tags_wrapper is None or self.toggle_button is None:
            return
        expanded = self.tags_wrapper.toggle_class("expanded")
        self.toggle_button.toggle_class("active", expanded)
        self.toggle_button.set("aria-expanded", "true" if expanded else "false")

    def _apply(self) -> None:
        for card, tags in self.cards:
            if card_visible(self.active, tags):
                card.hidden = False
                card.add_class("fade-in")
                self.page.scheduler.call_later(self.fade_in_ms, lambda c=card: c.remove_class("fade-in"))
            else:
                card.hidden = True
