"""Tests for the active navigation link (scroll-spy)."""

import pytest

from folio.dom import Node
from folio.interactions.scrollspy import NavHighlighter


@pytest.fixture()
def spy(page):
    sections = [Node("section", id=s) for s in ("A", "B", "C")]
    links = [Node("a", text=s, attrs={"href": f"#{s}"}) for s in ("A", "B", "C")]
    return NavHighlighter(page, sections, links)


class TestUpdate:
    def test_most_visible_wins(self, spy):
        assert spy.update({"A": 120, "B": 300, "C": 0}) == "B"
        assert [l.text for l in spy.active_links] == ["B"]

    def test_partial_reports_merge(self, spy):
        spy.update({"A": 120, "B": 300, "C": 0})
        assert spy.update({"C": 200}) == "B"
        assert spy.update({"B": 100}) == "C"

    def test_tie_goes_to_earliest(self, spy):
        assert spy.update({"A": 200, "B": 200, "C": 200}) == "A"
        assert spy.update({"A": 100}) == "B"

    def test_all_zero_keeps_highlight(self, spy):
        spy.update({"B": 300})
        assert spy.update({"A": 0, "B": 0, "C": 0}) == "B"
        assert [l.text for l in spy.active_links] == ["B"]

    def test_nothing_visible_yet(self, spy):
        assert spy.update({}) is None
        assert spy.active_links == []

    def test_exactly_one_section_highlighted(self, spy):
        for heights in ({"A": 10}, {"B": 50}, {"C": 80}, {"A": 90}):
            spy.update(heights)
            assert len(spy.active_links) == 1


class TestScrolling:
    def _stack(self, portfolio, page):
        sections = list(portfolio.view.sections.values())
        for i, node in enumerate(sections):
            page.set_box(node, 1000 * (i + 1), 1000)
        return sections

    def test_scroll_highlights_section(self, portfolio, page):
        self._stack(portfolio, page)
        page.scroll_to(3200)
        assert portfolio.nav.active_id == "projects"
        hrefs = [l.get("href") for l in portfolio.nav.active_links]
        assert hrefs == ["#projects", "#projects"]

    def test_scroll_between_sections(self, portfolio, page):
        self._stack(portfolio, page)
        page.scroll_to(3200)
        page.scroll_to(3600)
        assert portfolio.nav.active_id == "projects"
        page.scroll_to(3700)
        assert portfolio.nav.active_id == "skills"

    def test_detach_stops_updates(self, portfolio, page):
        self._stack(portfolio, page)
        page.scroll_to(3200)
        portfolio.nav.detach()
        page.scroll_to(5200)
        assert portfolio.nav.active_id == "projects"
