"""Shared test fixtures for folio tests."""

from datetime import datetime

import pytest

from folio.app import initialize_portfolio
from folio.config import Config
from folio.models import ContentGraph
from folio.page import Page
from folio.store import PreferenceStore

FIXED_NOW = datetime(2026, 1, 15, 14, 5)

LONG_PARAGRAPH = (
    "Trained and evaluated image classifiers on a shared GPU cluster, wrote the data "
    "loaders, and cut the end-to-end experiment time from a day to under an hour."
)


def sample_content_dict() -> dict:
    return {
        "personalInfo": {
            "name": "Rin Rao",
            "title": "Software Engineer",
            "imageUrl": "img/me.jpg",
            "email": "rin@example.com",
            "socials": [
                {"name": "GitHub", "url": "https://github.com/rinrao", "icon": "github"},
                {"name": "LinkedIn", "url": "https://linkedin.com/in/rinrao", "icon": "linkedin"},
            ],
        },
        "sections": [
            {
                "id": "about",
                "title": "About Me",
                "type": "bio",
                "content": {
                    "text": ["I build things.", "Mostly with Python."],
                    "media": [
                        {"type": "image", "src": "img/a1.jpg", "alt": "Desk", "caption": "My desk"},
                        {"type": "video", "src": "vid/a2.mp4", "alt": "Talk", "caption": ""},
                    ],
                },
            },
            {
                "id": "experience",
                "title": "Experience",
                "type": "timeline",
                "content": [
                    {
                        "role": "Engineer",
                        "company": "Acme",
                        "period": "2022 - Present",
                        "responsibilities": ["Shipped the thing", "Kept it running"],
                    },
                ],
            },
            {
                "id": "projects",
                "title": "Projects",
                "type": "projects",
                "content": [
                    {
                        "title": "Vision Lab",
                        "description": [LONG_PARAGRAPH, LONG_PARAGRAPH, LONG_PARAGRAPH],
                        "tags": ["ml"],
                        "links": [{"name": "Code", "url": "https://example.com/vision"}],
                        "media": [
                            {"type": "image", "src": "img/p1.jpg", "alt": "Model", "caption": "Model output"},
                            {"type": "image", "src": "img/p2.jpg", "alt": "Chart", "thumb": "img/p2-thumb.jpg"},
                            {"type": "video", "src": "vid/p3.mp4", "alt": "Demo", "caption": "Live demo"},
                        ],
                    },
                    {
                        "title": "Personal Site",
                        "description": ["A small static site."],
                        "tags": ["web"],
                        "links": [],
                        "media": [
                            {"type": "image", "src": "img/s1.png", "alt": "Homepage", "caption": "Homepage"},
                        ],
                    },
                ],
            },
            {
                "id": "skills",
                "title": "Skills",
                "type": "skills",
                "content": {"Languages": ["Python", "Go"], "Tools": ["Docker"]},
            },
            {
                "id": "education",
                "title": "Education",
                "type": "education",
                "content": {
                    "items": [
                        {"degree": "BSc Computer Science", "university": "Uni", "year": 2021,
                         "notes": ["Thesis on parsers"]},
                    ],
                },
            },
            {"id": "contact", "title": "Contact", "type": "contact", "content": "Say hello!"},
        ],
        "metadata": {
            "siteName": "Rin Rao | Portfolio",
            "siteDescription": "Projects and writing by Rin Rao.",
            "lastUpdated": "2025-03-05T10:00:00Z",
        },
    }


@pytest.fixture()
def config(tmp_path):
    return Config(store_path=str(tmp_path / "prefs.db"), output_path=str(tmp_path / "site" / "index.html"))


@pytest.fixture()
def store(config):
    """A PreferenceStore backed by a temp file."""
    s = PreferenceStore(config)
    s.init_db()
    yield s
    s.close()


@pytest.fixture()
def content_dict():
    return sample_content_dict()


@pytest.fixture()
def content(content_dict):
    return ContentGraph.model_validate(content_dict)


@pytest.fixture()
def page(config):
    return Page(config.layout, prefers_color_scheme="light", clock=lambda: FIXED_NOW)


@pytest.fixture()
def portfolio(content, page, store, config):
    p = initialize_portfolio(content, page, store, config)
    yield p
    p.close()
