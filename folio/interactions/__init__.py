"""Interactive state machines attached to a synthesized view tree."""

from folio.interactions.carousel import MediaCarousel, MediaContext, MediaRegistry, attach_carousels
from folio.interactions.filters import TagFilter, card_visible
from folio.interactions.scrollspy import NavHighlighter
from folio.interactions.theme import ThemeToggle
from folio.interactions.title_rotation import TitleRotation
from folio.interactions.viewer import FullscreenViewer, ViewerState

__all__ = [
    "FullscreenViewer",
    "MediaCarousel",
    "MediaContext",
    "MediaRegistry",
    "NavHighlighter",
    "TagFilter",
    "ThemeToggle",
    "TitleRotation",
    "ViewerState",
    "attach_carousels",
    "card_visible",
]
