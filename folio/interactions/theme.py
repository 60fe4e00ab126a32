"""Light/dark theme toggle backed by the preference store."""

import logging

from folio.dom import Node
from folio.models import Theme
from folio.page import Page
from folio.store import PreferenceStore

logger = logging.getLogger(__name__)

THEME_KEY = "theme"

SUN_ICON = Node("svg", cls="icon-sun", attrs={
    "viewBox": "0 0 24 24", "fill": "none", "stroke": "currentColor", "stroke-width": "2",
})
SUN_ICON.append(Node("circle", attrs={"cx": "12", "cy": "12", "r": "5"}))
for _x1, _y1, _x2, _y2 in [
    ("12", "1", "12", "3"), ("12", "21", "12", "23"),
    ("4.22", "4.22", "5.64", "5.64"), ("18.36", "18.36", "19.78", "19.78"),
    ("1", "12", "3", "12"), ("21", "12", "23", "12"),
    ("4.22", "19.78", "5.64", "18.36"), ("18.36", "5.64", "19.78", "4.22"),
]:
    SUN_ICON.append(Node("line", attrs={"x1": _x1, "y1": _y1, "x2": _x2, "y2": _y2}))

MOON_ICON = Node("svg", cls="icon-moon", attrs={
    "viewBox": "0 0 24 24", "fill": "none", "stroke": "currentColor", "stroke-width": "2",
})
MOON_ICON.append(Node("path", attrs={"d": "M21 12.79A9 9 0 1 1 11.21 3 7 7 0 0 0 21 12.79z"}))


def initial_theme(stored: str | None, prefers_color_scheme: str) -> Theme:
    """Stored preference if valid, else the platform's ambient preference."""
    for candidate in (stored, prefers_color_scheme):
        try:
            return Theme(candidate)
        except ValueError:
            continue
    return Theme.LIGHT


class ThemeToggle:
    def __init__(self, page: Page, toggle: Node, store: PreferenceStore) -> None:
        self.page = page
        self.toggle_button = toggle
        self.store = store
        self.theme = initial_theme(store.get(THEME_KEY), page.prefers_color_scheme)

    def attach(self) -> "ThemeToggle":
        self.toggle_button.add_event_listener("click", lambda _e: self.toggle())
        self.apply(self.theme)
        return self

    def apply(self, theme: Theme) -> None:
        """Set the document theme attribute and the toggle icon (sun while dark)."""
        self.theme = theme
        self.page.body.set("data-theme", theme.value)
        self.toggle_button.clear()
        icon = SUN_ICON if theme is Theme.DARK else MOON_ICON
        self.toggle_button.append(icon.clone(deep=True))

    def toggle(self) -> Theme:
        theme = self.theme.flipped
        self.store.set(THEME_KEY, theme.value)
        self.apply(theme)
        logger.info("Theme switched to %s", theme.value)
        return theme
