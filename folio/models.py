"""Pydantic models for the portfolio content graph."""

import logging
from enum import Enum
from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class SectionType(str, Enum):
    BIO = "bio"
    TIMELINE = "timeline"
    PROJECTS = "projects"
    SKILLS = "skills"
    EDUCATION = "education"
    CONTACT = "contact"


class MediaType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def flipped(self) -> "Theme":
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class ContentModel(BaseModel):
    """Base for content-graph nodes: immutable, accepts camelCase keys."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# --- Personal info ---


class SocialLink(ContentModel):
    name: str
    url: str
    icon_key: str = Field("", validation_alias=AliasChoices("icon", "iconKey", "icon_key"))


class PersonalInfo(ContentModel):
    name: str
    title: str = ""
    image_url: str = ""
    email: str = ""
    socials: list[SocialLink] = Field(default_factory=list)


class Metadata(ContentModel):
    site_name: str | None = None
    site_description: str | None = None
    last_updated: str | None = None  # ISO 8601


# --- Section content ---


class MediaItem(ContentModel):
    type: MediaType = MediaType.IMAGE
    src: str
    alt: str = ""
    caption: str | None = None
    thumb: str | None = None

    @property
    def has_caption(self) -> bool:
        return bool(self.caption and self.caption.strip())


class BioContent(ContentModel):
    text: list[str] = Field(default_factory=list)
    media: list[MediaItem] = Field(default_factory=list)


class ExperienceEntry(ContentModel):
    role: str
    company: str = ""
    period: str = ""
    responsibilities: list[str] = Field(default_factory=list)


class EducationEntry(ContentModel):
    degree: str
    university: str = ""
    year: str | int = ""
    notes: list[str] = Field(default_factory=list)


class EducationContent(ContentModel):
    items: list[EducationEntry] = Field(default_factory=list)


class ProjectLink(ContentModel):
    name: str
    url: str


class Project(ContentModel):
    title: str
    description: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    links: list[ProjectLink] = Field(default_factory=list)
    media: list[MediaItem] = Field(default_factory=list)

    @field_validator("description", mode="before")
    @classmethod
    def _wrap_single_paragraph(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


# --- Sections (closed variant keyed by SectionType) ---


class Section(ContentModel):
    id: str
    title: str
    type: str

    section_type: ClassVar[SectionType | None] = None


class BioSection(Section):
    section_type: ClassVar[SectionType | None] = SectionType.BIO
    content: BioContent = Field(default_factory=BioContent)


class TimelineSection(Section):
    section_type: ClassVar[SectionType | None] = SectionType.TIMELINE
    content: list[ExperienceEntry] = Field(default_factory=list)


class EducationSection(Section):
    section_type: ClassVar[SectionType | None] = SectionType.EDUCATION
    content: EducationContent = Field(default_factory=EducationContent)


class ProjectsSection(Section):
    section_type: ClassVar[SectionType | None] = SectionType.PROJECTS
    content: list[Project] = Field(default_factory=list)


class SkillsSection(Section):
    section_type: ClassVar[SectionType | None] = SectionType.SKILLS
    content: dict[str, list[str]] = Field(default_factory=dict)


class ContactSection(Section):
    section_type: ClassVar[SectionType | None] = SectionType.CONTACT
    content: str = ""


class UntypedSection(Section):
    """A section whose type has no renderer. Rendered as its title only."""
    content: Any = None


SECTION_MODELS: dict[SectionType, type[Section]] = {
    SectionType.BIO: BioSection,
    SectionType.TIMELINE: TimelineSection,
    SectionType.EDUCATION: EducationSection,
    SectionType.PROJECTS: ProjectsSection,
    SectionType.SKILLS: SkillsSection,
    SectionType.CONTACT: ContactSection,
}


def parse_section(raw: dict[str, Any]) -> Section:
    """Validate a raw section dict into its concrete variant."""
    try:
        model = SECTION_MODELS[SectionType(raw.get("type"))]
    except ValueError:
        logger.debug("Section %r has unknown type %r", raw.get("id"), raw.get("type"))
        model = UntypedSection
    return model.model_validate(raw)


# --- Content graph ---


class ContentGraph(ContentModel):
    personal_info: PersonalInfo
    sections: list[Section] = Field(default_factory=list)
    metadata: Metadata = Field(default_factory=Metadata)

    @field_validator("sections", mode="before")
    @classmethod
    def _dispatch_sections(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [parse_section(s) if isinstance(s, dict) else s for s in value]

    @field_validator("sections")
    @classmethod
    def _unique_ids(cls, value: list[Section]) -> list[Section]:
        seen: set[str] = set()
        for section in value:
            if section.id in seen:
                raise ValueError(f"Duplicate section id: {section.id}")
            seen.add(section.id)
        return value

    @property
    def section_ids(self) -> list[str]:
        return [s.id for s in self.sections]

    def first_of(self, section_type: SectionType) -> Section | None:
        for s in self.sections:
            if s.section_type is section_type:
                return s
        return None

    @property
    def rotating_titles(self) -> list[str]:
        """Skill names across all categories, in order, for the title animation."""
        skills = self.first_of(SectionType.SKILLS)
        if skills is None:
            return []
        return [skill for group in skills.content.values() for skill in group]

    def find_media_list(self, src: str) -> list[MediaItem] | None:
        """Return the project or bio media list containing an item with this src.

        Projects are searched before the bio section.
        """
        projects = self.first_of(SectionType.PROJECTS)
        if projects is not None:
            for project in projects.content:
                if any(m.src == src for m in project.media):
                    return list(project.media)
        bio = self.first_of(SectionType.BIO)
        if bio is not None and any(m.src == src for m in bio.content.media):
            return list(bio.content.media)
        return None
