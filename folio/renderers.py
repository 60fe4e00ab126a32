"""View synthesis: build the page's view tree from a content graph.

One pass, no re-synthesis afterwards:
- Header: name link, main nav, cloned mobile nav, theme toggle, hamburger
- Profile header: image, name, static title, animated title slot, socials
- One <section> per content section, dispatched on its SectionType
- Footer: copyright, last-updated date, quick links, socials
- The fullscreen modal shell the viewer drives
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from folio.dom import Node
from folio.icons import get_icon_path
from folio.models import (
    BioSection,
    ContactSection,
    ContentGraph,
    EducationSection,
    MediaItem,
    MediaType,
    PersonalInfo,
    Project,
    ProjectsSection,
    Section,
    SectionType,
    SkillsSection,
    TimelineSection,
)
from folio.page import Page

logger = logging.getLogger(__name__)

FILTER_ICON_PATH = "M4 6h16M7 12h10M10 18h4"
SEND_ICON_PATH = "M2.01 21L23 12 2.01 3 2 10l15 2-15 2z"
PREV_POINTS = "15 18 9 12 15 6"
NEXT_POINTS = "9 18 15 12 9 6"


@dataclass
class View:
    """Addressable nodes of a synthesized page."""
    header: Node
    main_nav: Node
    mobile_nav: Node
    theme_toggle: Node
    hamburger: Node
    mobile_overlay: Node
    profile_header: Node
    animated_title: Node
    main: Node
    sections: dict[str, Node]
    footer: Node
    modal: Node

    @property
    def nav_links(self) -> list[Node]:
        return self.main_nav.select("a") + self.mobile_nav.select("a")


# --- Small builders ---


def _svg(path_d: str, **attrs: str) -> Node:
    svg = Node("svg", attrs={"viewBox": "0 0 24 24", **attrs})
    svg.append(Node("path", attrs={"d": path_d}))
    return svg


def _chevron(points: str) -> Node:
    svg = Node("svg", attrs={"viewBox": "0 0 24 24"})
    svg.append(Node("polyline", attrs={
        "points": points, "stroke": "currentColor", "stroke-width": "2", "fill": "none",
    }))
    return svg


def _paragraphs(texts: list[str]) -> list[Node]:
    return [Node("p", text=t) for t in texts]


def _bullets(items: list[str], cls: str) -> Node:
    return Node("ul", cls=cls, children=[Node("li", text=i) for i in items])


def _external_link(url: str, text: str = "", cls: str | None = None, label: str | None = None) -> Node:
    attrs = {"href": url, "target": "_blank", "rel": "noopener noreferrer"}
    if label:
        attrs["aria-label"] = label
    return Node("a", cls=cls, text=text, attrs=attrs)


def _social_links(personal_info: PersonalInfo, cls: str) -> Node:
    container = Node("div", cls=cls)
    for social in personal_info.socials:
        link = container.append(_external_link(social.url, cls="btn-icon", label=social.name))
        link.append(_svg(get_icon_path(social.icon_key)))
    return container


def _nav_link(section: Section) -> Node:
    return Node("a", text=section.title, attrs={"href": f"#{section.id}"})


def format_long_date(timestamp: str | None) -> str:
    """'2025-03-05T10:00:00Z' -> '5 March 2025'. Unparseable input gives ''."""
    if not timestamp:
        return ""
    try:
        dt = datetime.fromisoformat(timestamp)
    except ValueError:
        logger.debug("Unparseable lastUpdated value %r", timestamp)
        return ""
    return f"{dt.day} {dt.strftime('%B')} {dt.year}"


# --- Header and profile ---


def render_header(personal_info: PersonalInfo, sections: list[Section]) -> tuple[Node, Node, Node, Node, Node, Node]:
    """Returns (header, main_nav, mobile_nav, theme_toggle, hamburger, mobile_overlay)."""
    header = Node("header", cls="main-header")
    header.append(Node("a", id="header-name-link", cls="header-name", text=personal_info.name,
                       attrs={"href": "#home"}))
    main_nav = header.append(Node("nav", id="main-nav", cls="main-nav"))
    theme_toggle = header.append(Node("button", id="theme-toggle", cls="theme-toggle",
                                      attrs={"aria-label": "Toggle theme"}))
    hamburger = header.append(Node("button", cls="hamburger-menu", attrs={"aria-label": "Open menu"}))
    for _ in range(3):
        hamburger.append(Node("span", cls="bar"))

    overlay = Node("div", id="mobile-nav-overlay", cls="mobile-nav-overlay")
    mobile_nav = overlay.append(Node("nav", id="mobile-nav", cls="mobile-nav"))
    for section in sections:
        link = main_nav.append(_nav_link(section))
        mobile_nav.append(link.clone(deep=True))
    return header, main_nav, mobile_nav, theme_toggle, hamburger, overlay


def render_profile_header(personal_info: PersonalInfo, sections: list[Section]) -> tuple[Node, Node]:
    """Returns (profile_header, animated_title)."""
    profile = Node("header", id="home", cls="profile-header")
    profile.append(Node("img", cls="user-image", attrs={
        "src": personal_info.image_url,
        "alt": f"Profile picture of {personal_info.name}",
    }))
    profile.append(Node("h1", text=personal_info.name))
    profile.append(Node("p", cls="main-title-static", text=personal_info.title))
    animated = profile.append(Node("p", id="animated-title", cls="title"))
    profile.append(_social_links(personal_info, "social-links"))

    target = sections[0].id if sections else "home"
    indicator = profile.append(Node("a", cls="scroll-down-indicator", attrs={
        "href": f"#{target}", "aria-label": "Scroll down",
    }))
    mouse = indicator.append(Node("span", cls="mouse"))
    mouse.append(Node("span", cls="wheel"))
    indicator.append(Node("span", cls="arrow"))
    return profile, animated


# --- Media container ---


def _media_element(item: MediaItem, index: int | None, active: bool, single: bool = False) -> Node:
    attrs: dict[str, object] = {"src": item.src}
    if index is not None:
        attrs["data-index"] = str(index)
    if item.type is MediaType.VIDEO:
        attrs.update({"playsinline": True, "muted": True, "loop": True})
        if single:
            attrs["controls"] = True
        return Node("video", cls=["media-item"] + (["active"] if active else []), attrs=attrs)
    attrs.update({"alt": item.alt, "loading": "lazy"})
    return Node("img", cls=(["media-item"] if not single else []) + (["active"] if active else []), attrs=attrs)


def render_media_container(media: list[MediaItem]) -> Node:
    """One item: a clickable figure. Several: the carousel shell (state lives elsewhere)."""
    container = Node("div", cls="media-container")
    if len(media) == 1:
        item = media[0]
        figure = container.append(Node("div", cls="media-single media-clickable", attrs={
            "tabindex": "0",
            "role": "button",
            "data-media-type": item.type.value,
            "data-media-src": item.src,
            "data-full-caption": item.caption or "",
        }))
        figure.append(_media_element(item, None, active=item.type is MediaType.VIDEO, single=True))
        if item.has_caption:
            figure.append(Node("p", cls="media-caption", text=item.caption or ""))
        return container

    carousel = container.append(Node("div", cls="media-carousel"))
    display = carousel.append(Node("div", cls="media-carousel-display media-clickable", attrs={
        "tabindex": "0",
        "role": "button",
        "data-media-src": "",
        "data-full-caption": "",
    }))
    for i, item in enumerate(media):
        display.append(_media_element(item, i, active=i == 0))
    carousel.append(Node("p", cls="media-caption"))
    controls = carousel.append(Node("div", cls="media-controls"))
    prev_btn = controls.append(Node("button", cls="carousel-nav-btn prev", attrs={"aria-label": "Previous"}))
    prev_btn.append(_chevron(PREV_POINTS))
    thumbs = controls.append(Node("div", cls="media-thumbnails"))
    for i, item in enumerate(media):
        thumbs.append(Node("img", cls=["thumb-item"] + (["active"] if i == 0 else []), attrs={
            "src": item.thumb or item.src,
            "data-index": str(i),
            "alt": f"Thumbnail of {item.alt}",
            "loading": "lazy",
        }))
    next_btn = controls.append(Node("button", cls="carousel-nav-btn next", attrs={"aria-label": "Next"}))
    next_btn.append(_chevron(NEXT_POINTS))
    return container


# --- Section renderers ---


def render_bio(section: BioSection, personal_info: PersonalInfo) -> Node:
    card = Node("div", cls="card bio-card")
    card.append(Node("div", cls="bio-text", children=_paragraphs(section.content.text)))
    if section.content.media:
        card.add_class("has-media")
        card.append(render_media_container(section.content.media))
    return card


def render_timeline(section: TimelineSection, personal_info: PersonalInfo) -> Node:
    card = Node("div", cls="card")
    for entry in section.content:
        item = card.append(Node("div", cls="timeline-item"))
        item.append(Node("h3", text=entry.role))
        item.append(Node("div", cls="detail-subtitle", text=entry.company))
        item.append(Node("div", cls="period", text=entry.period))
        item.append(_bullets(entry.responsibilities, "detail-notes"))
    return card


def render_education(section: EducationSection, personal_info: PersonalInfo) -> Node:
    card = Node("div", cls="card")
    for entry in section.content.items:
        item = card.append(Node("div", cls="education-item"))
        item.append(Node("h3", text=entry.degree))
        item.append(Node("div", cls="detail-subtitle", text=f"{entry.university} | {entry.year}"))
        item.append(_bullets(entry.notes, "detail-notes"))
    return card


def unique_tags(projects: list[Project]) -> list[str]:
    """Every tag used by the projects, in first-seen order."""
    return list(dict.fromkeys(tag for p in projects for tag in p.tags))


def render_project_card(project: Project) -> Node:
    has_media = bool(project.media)
    card = Node("div", cls=["card", "project-card", "has-media" if has_media else "no-media"],
                attrs={"data-tags": json.dumps(project.tags)})
    details = card.append(Node("div", cls="project-details"))
    details.append(Node("h3", text=project.title))

    wrapper = details.append(Node("div", cls="project-description-wrapper"))
    wrapper.append(Node("div", cls="project-description", children=_paragraphs(project.description)))
    read_more = wrapper.append(Node("button", cls="read-more-btn", text="See More"))
    read_more.hidden = True

    meta = details.append(Node("div", cls="project-meta"))
    meta.append(Node("div", cls="tags", children=[
        Node("span", cls="tech-tag", text=t) for t in project.tags
    ]))
    meta.append(Node("div", cls="project-links", children=[
        _external_link(link.url, text=link.name, cls="link-underline") for link in project.links
    ]))

    if has_media:
        card.append(render_media_container(project.media))
    return card


def render_projects(section: ProjectsSection, personal_info: PersonalInfo) -> Node:
    container = Node("div", cls="projects-container")
    filters = container.append(Node("div", cls="project-filters"))

    controls = filters.append(Node("div", cls="filter-controls"))
    controls.append(Node("button", cls="filter-btn filter-all active", text="All"))
    toggle = controls.append(Node("button", cls="filter-btn filter-toggle",
                                  attrs={"aria-expanded": "false"}))
    toggle.append(Node("span", text="Filter"))
    toggle.append(_svg(FILTER_ICON_PATH, **{"stroke-linecap": "round", "stroke-linejoin": "round"}))

    tags_wrapper = filters.append(Node("div", cls="filter-tags-wrapper"))
    for tag in unique_tags(section.content):
        tags_wrapper.append(Node("button", cls="filter-btn filter-tag", text=tag, attrs={"data-tag": tag}))

    grid = container.append(Node("div", cls="projects-grid"))
    for project in section.content:
        grid.append(render_project_card(project))
    return container


def render_skills(section: SkillsSection, personal_info: PersonalInfo) -> Node:
    card = Node("div", cls="card")
    grid = card.append(Node("div", cls="skills-grid"))
    for category, skills in section.content.items():
        group = grid.append(Node("div", cls="skill-category"))
        group.append(Node("h3", text=category))
        group.append(Node("div", cls="skill-tags", children=[
            Node("span", cls="skill-tag", text=s) for s in skills
        ]))
    return card


def render_contact(section: ContactSection, personal_info: PersonalInfo) -> Node:
    card = Node("div", cls="card chat-window")
    header = card.append(Node("div", cls="chat-header"))
    header.append(Node("img", cls="chat-avatar", attrs={"src": personal_info.image_url, "alt": personal_info.name}))
    header.append(Node("span", cls="chat-name", text=personal_info.name))

    body = card.append(Node("div", cls="chat-body"))
    messages = body.append(Node("div", cls="message-container"))
    typing = messages.append(Node("div", cls="typing-indicator"))
    for _ in range(3):
        typing.append(Node("span"))
    messages.append(Node("p", cls="contact-intro", text=section.content))
    body.append(Node("span", id="message-timestamp", cls="message-timestamp"))

    form = card.append(Node("form", id="contact-form", cls="contact-form"))
    form.append(Node("textarea", id="message", cls="form-textarea", attrs={
        "name": "message", "placeholder": "Your message...", "required": True, "value": "",
    }))
    send = form.append(Node("button", cls="btn-icon contact-button",
                            attrs={"type": "submit", "aria-label": "Send Email"}))
    send.append(_svg(SEND_ICON_PATH))
    return card


SectionRenderer = Callable[..., Node]

SECTION_RENDERERS: dict[SectionType, SectionRenderer] = {
    SectionType.BIO: render_bio,
    SectionType.TIMELINE: render_timeline,
    SectionType.EDUCATION: render_education,
    SectionType.PROJECTS: render_projects,
    SectionType.SKILLS: render_skills,
    SectionType.CONTACT: render_contact,
}


def render_section(section: Section, personal_info: PersonalInfo) -> Node:
    """A <section> with its title, plus type-specific content when the type has a renderer."""
    node = Node("section", id=section.id, cls="content-section")
    node.append(Node("h2", cls="section-title", text=section.title))
    renderer = SECTION_RENDERERS.get(section.section_type) if section.section_type else None
    if renderer is None:
        logger.debug("No renderer for section %s (type %r); title only", section.id, section.type)
        return node
    node.append(renderer(section, personal_info))
    return node


# --- Footer and modal ---


def render_footer(content: ContentGraph, year: int) -> Node:
    info = content.personal_info
    footer = Node("footer", cls="main-footer")
    columns = footer.append(Node("div", cls="footer-columns"))

    about = columns.append(Node("div", cls="footer-col footer-info"))
    about.append(Node("h3", text=info.name))
    about.append(Node("p", text=f"© {year} All Rights Reserved."))
    about.append(Node("p", cls="last-updated",
                      text=f"Last updated: {format_long_date(content.metadata.last_updated)}"))

    links = columns.append(Node("div", cls="footer-col footer-links"))
    links.append(Node("h3", text="Quick Links"))
    links.append(Node("ul", children=[
        Node("li", children=[Node("a", cls="link-underline", text=s.title, attrs={"href": f"#{s.id}"})])
        for s in content.sections
    ]))

    socials = columns.append(Node("div", cls="footer-col footer-socials"))
    socials.append(Node("h3", text="Connect"))
    socials.append(_social_links(info, "social-links-footer"))
    return footer


def render_modal() -> Node:
    modal = Node("div", id="fullscreenModal", cls="fullscreen-modal", attrs={
        "role": "dialog", "aria-modal": "true", "aria-label": "Media viewer",
    })
    modal.append(Node("button", cls="modal-close", text="×", attrs={"aria-label": "Close"}))
    prev_btn = modal.append(Node("button", cls="modal-nav prev", attrs={"aria-label": "Previous"}))
    prev_btn.append(_chevron(PREV_POINTS))
    prev_btn.hidden = True
    content = modal.append(Node("div", cls="modal-content"))
    content.append(Node("div", cls="modal-media-wrapper"))
    next_btn = modal.append(Node("button", cls="modal-nav next", attrs={"aria-label": "Next"}))
    next_btn.append(_chevron(NEXT_POINTS))
    next_btn.hidden = True
    return modal


# --- Entry point ---


def synthesize(content: ContentGraph, page: Page) -> View:
    """Build the whole view tree into ``page`` and set its title and description."""
    info = content.personal_info
    page.title = content.metadata.site_name or f"Portfolio | {info.name}"
    if content.metadata.site_description:
        page.set_meta("description", content.metadata.site_description)

    page.body.clear()
    header, main_nav, mobile_nav, theme_toggle, hamburger, overlay = render_header(info, content.sections)
    page.body.append(header)
    page.body.append(overlay)

    shell = page.body.append(Node("div", id="js-enabled-content"))
    profile, animated = render_profile_header(info, content.sections)
    shell.append(profile)
    main = shell.append(Node("main", id="main-content", cls="main-content"))
    sections: dict[str, Node] = {}
    for section in content.sections:
        sections[section.id] = main.append(render_section(section, info))
    footer = shell.append(render_footer(content, page.now().year))

    modal = page.body.append(render_modal())
    logger.info("Synthesized %d sections for %s", len(sections), info.name)
    return View(
        header=header,
        main_nav=main_nav,
        mobile_nav=mobile_nav,
        theme_toggle=theme_toggle,
        hamburger=hamburger,
        mobile_overlay=overlay,
        profile_header=profile,
        animated_title=animated,
        main=main,
        sections=sections,
        footer=footer,
        modal=modal,
    )
