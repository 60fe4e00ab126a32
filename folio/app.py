"""Core entry point: synthesize the view, then attach every state machine to it."""

import logging
from dataclasses import dataclass, field

from folio.config import Config
from folio.interactions.carousel import MediaCarousel, MediaRegistry, attach_carousels
from folio.interactions.filters import TagFilter
from folio.interactions.handlers import (
    BackToTop,
    ContactForm,
    MobileMenu,
    ReadMore,
    RevealOnScroll,
    ScrollIndicator,
    display_current_time,
)
from folio.interactions.scrollspy import NavHighlighter
from folio.interactions.theme import ThemeToggle
from folio.interactions.title_rotation import TitleRotation
from folio.interactions.viewer import FullscreenViewer
from folio.models import ContentGraph
from folio.page import Page
from folio.renderers import View, synthesize
from folio.store import PreferenceStore

logger = logging.getLogger(__name__)


@dataclass
class Portfolio:
    """Handle on a live page: the view tree plus every attached state machine."""
    page: Page
    content: ContentGraph
    view: View
    theme: ThemeToggle
    nav: NavHighlighter
    viewer: FullscreenViewer
    registry: MediaRegistry
    title_rotation: TitleRotation
    mobile_menu: MobileMenu
    read_more: ReadMore
    back_to_top: BackToTop
    filters: list[TagFilter] = field(default_factory=list)
    carousels: list[MediaCarousel] = field(default_factory=list)
    contact_form: ContactForm | None = None

    def close(self) -> None:
        """Stop long-lived tasks and observers (page unload)."""
        self.page.unload()


def initialize_portfolio(
    content: ContentGraph,
    page: Page,
    store: PreferenceStore,
    config: Config | None = None,
) -> Portfolio:
    config = config or Config()
    interaction = config.interaction

    view = synthesize(content, page)
    section_nodes = list(view.sections.values())
    page.flow_layout([view.profile_header, *section_nodes, view.footer])

    theme = ThemeToggle(page, view.theme_toggle, store).attach()
    mobile_menu = MobileMenu(page, view.hamburger, view.mobile_overlay).attach()
    RevealOnScroll(page, section_nodes, interaction.reveal_threshold).attach()

    filters = [
        TagFilter(page, node, interaction.fade_in_ms).attach()
        for node in view.main.select(".projects-container")
    ]

    registry = MediaRegistry()
    carousels = attach_carousels(page, view.main, content, registry)
    nav = NavHighlighter(page, section_nodes, view.nav_links).attach(interaction.nav_thresholds)
    viewer = FullscreenViewer(page, view.modal, registry, interaction.modal_focus_delay_ms).attach()

    contact_form = None
    form = view.main.select_one(".contact-form")
    if form is not None:
        contact_form = ContactForm(page, form, content.personal_info.email, config.contact.mail_subject).attach()

    read_more = ReadMore(page, view.main, interaction.read_more_delay_ms, interaction.resize_debounce_ms).attach()
    back_to_top = BackToTop(page, interaction.back_to_top_threshold).attach()
    ScrollIndicator(
        page, view.profile_header.select_one(".scroll-down-indicator"), interaction.scroll_indicator_threshold,
    ).attach()
    display_current_time(page, view.main.get_by_id("message-timestamp"))

    rotation = TitleRotation(page.scheduler, view.animated_title, content.rotating_titles, config.animation)
    rotation.start()
    page.on_unload(rotation.stop)

    logger.info(
        "Portfolio ready: %d sections, %d filters, %d carousels",
        len(section_nodes), len(filters), len(carousels),
    )
    return Portfolio(
        page=page,
        content=content,
        view=view,
        theme=theme,
        nav=nav,
        viewer=viewer,
        registry=registry,
        title_rotation=rotation,
        mobile_menu=mobile_menu,
        read_more=read_more,
        back_to_top=back_to_top,
        filters=filters,
        carousels=carousels,
        contact_form=contact_form,
    )
