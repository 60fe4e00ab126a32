"""Tests for content loading and bootstrap."""

import json

import pytest
import yaml

from folio.loader import LOAD_ERROR_MESSAGE, bootstrap, load_content
from folio.page import Page


@pytest.fixture()
def content_file(tmp_path, content_dict):
    path = tmp_path / "portfolio.json"
    path.write_text(json.dumps(content_dict))
    return path


class TestLoadContent:
    def test_json(self, content_file):
        content = load_content(content_file)
        assert content.personal_info.name == "Rin Rao"
        assert len(content.sections) == 6

    def test_yaml(self, tmp_path, content_dict):
        path = tmp_path / "portfolio.yaml"
        path.write_text(yaml.safe_dump(content_dict))
        assert load_content(path).section_ids == [s["id"] for s in content_dict["sections"]]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_content(tmp_path / "nope.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_content(path)

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "broken.yml"
        path.write_text("personalInfo: [unclosed")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_content(path)

    def test_non_object_root(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[]")
        with pytest.raises(ValueError, match="must be an object"):
            load_content(path)

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"sections": []}))
        with pytest.raises(ValueError):
            load_content(path)


class TestBootstrap:
    def test_success(self, page, store, config, content_file):
        portfolio = bootstrap(page, store, config, content_file)
        try:
            assert portfolio is not None
            assert page.title == "Rin Rao | Portfolio"
        finally:
            portfolio.close()

    def test_missing_file_shows_error_page(self, page, store, config, tmp_path):
        assert bootstrap(page, store, config, tmp_path / "missing.json") is None
        assert [n.text for n in page.body.children] == [LOAD_ERROR_MESSAGE]

    def test_invalid_content_shows_error_page(self, page, store, config, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"personalInfo": {"name": "X"}, "sections": [{"id": "a"}]}))
        assert bootstrap(page, store, config, path) is None
        assert page.body.select_one(".load-error").text == LOAD_ERROR_MESSAGE

    def test_fragment_scroll(self, store, config, content_file):
        page = Page(config.layout, fragment="#contact")
        portfolio = bootstrap(page, store, config, content_file)
        try:
            contact = portfolio.view.sections["contact"]
            assert page.scroll_y == 0
            page.scheduler.advance(100)
            assert page.scroll_y == min(page.box_of(contact).top, page.max_scroll)
            assert page.scroll_y > 0
        finally:
            portfolio.close()

    def test_unknown_fragment_ignored(self, store, config, content_file):
        page = Page(config.layout, fragment="nowhere")
        portfolio = bootstrap(page, store, config, content_file)
        try:
            page.scheduler.advance(100)
            assert page.scroll_y == 0
        finally:
            portfolio.close()
