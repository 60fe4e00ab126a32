"""Tests for the page model: timers, viewport, focus and intersection observers."""

import pytest

from folio.dom import Event, Node
from folio.page import Page, Scheduler, debounce


class TestScheduler:
    def test_fires_in_due_order(self):
        s = Scheduler()
        fired = []
        s.call_later(50, lambda: fired.append("late"))
        s.call_later(10, lambda: fired.append("early"))
        s.call_later(10, lambda: fired.append("early-2"))
        s.advance(100)
        assert fired == ["early", "early-2", "late"]
        assert s.now_ms == 100

    def test_partial_advance(self):
        s = Scheduler()
        fired = []
        s.call_later(50, lambda: fired.append(s.now_ms))
        s.advance(49)
        assert fired == []
        s.advance(1)
        assert fired == [50]

    def test_cancel(self):
        s = Scheduler()
        fired = []
        handle = s.call_later(10, lambda: fired.append(1))
        assert s.pending == 1
        handle.cancel()
        assert s.pending == 0
        s.advance(20)
        assert fired == []

    def test_callbacks_can_schedule_more(self):
        s = Scheduler()
        fired = []

        def first():
            fired.append(s.now_ms)
            s.call_later(10, lambda: fired.append(s.now_ms))

        s.call_later(10, first)
        s.advance(30)
        assert fired == [10, 20]

    def test_debounce_coalesces_burst(self):
        s = Scheduler()
        calls = []
        trigger = debounce(s, 150, lambda: calls.append(s.now_ms))
        trigger()
        s.advance(100)
        trigger()
        s.advance(100)
        assert calls == []
        s.advance(50)
        assert calls == [250]


class TestViewport:
    def test_scroll_without_layout_is_unbounded(self, page):
        page.scroll_to(12345)
        assert page.scroll_y == 12345
        page.scroll_to(-5)
        assert page.scroll_y == 0

    def test_scroll_clamped_to_content(self, page):
        page.set_box(Node("div"), 0, 1000)
        page.scroll_to(5000)
        assert page.scroll_y == 200

    def test_scroll_event_dispatched(self, page):
        seen = []
        page.add_window_listener("scroll", lambda e: seen.append(page.scroll_y))
        page.scroll_to(10)
        assert seen == [10]

    def test_scroll_into_view(self, page):
        target = Node("section")
        page.set_box(Node("div"), 0, 4000)
        page.set_box(target, 1500, 300)
        assert page.scroll_into_view(target)
        assert page.scroll_y == 1500
        assert not page.scroll_into_view(Node("section"))

    def test_flow_layout_stacks(self, page):
        a, b = Node("div", text="a"), Node("div", text="b")
        end = page.flow_layout([a, b], start=10)
        assert page.box_of(a).top == 10
        assert page.box_of(b).top == page.box_of(a).bottom
        assert end == page.box_of(b).bottom


class TestMeasure:
    def test_collapsed_and_expanded(self, page):
        desc = Node("div", children=[Node("p", text="x" * 500)])
        scroll_height, client_height = page.measure(desc)
        assert scroll_height > client_height
        assert client_height == 4 * 24
        desc.add_class("expanded")
        scroll_height, client_height = page.measure(desc)
        assert scroll_height == client_height

    def test_short_text_fits(self, page):
        desc = Node("div", children=[Node("p", text="short")])
        scroll_height, client_height = page.measure(desc)
        assert scroll_height == client_height == 24


class TestFocusAndInput:
    def test_click_focuses_focusable(self, page):
        button = page.body.append(Node("button"))
        page.click(button)
        assert page.active_element is button

    def test_click_does_not_focus_plain_div(self, page):
        button = page.body.append(Node("button"))
        page.focus(button)
        page.click(page.body.append(Node("div")))
        assert page.active_element is button

    def test_key_goes_to_body_when_focus_detached(self, page):
        keys = []
        page.document.add_event_listener("keydown", lambda e: keys.append((e.key, e.target)))
        page.focus(Node("button"))
        page.press_key("Escape")
        assert keys == [("Escape", page.body)]

    def test_submit_reports_prevented(self, page):
        form = page.body.append(Node("form"))
        assert page.submit(form) is True
        form.add_event_listener("submit", Event.prevent_default)
        assert page.submit(form) is False


class TestMeta:
    def test_set_and_update(self, page):
        page.set_meta("description", "a")
        page.set_meta("description", "b")
        assert page.get_meta("description") == "b"
        assert len(page.head.select("meta")) == 1
        assert page.get_meta("keywords") is None


class TestIntersectionObserver:
    def test_initial_and_threshold_crossings(self, page):
        page.set_box(Node("div"), 0, 5000)
        target = Node("section")
        page.set_box(target, 0, 400)
        reports = []
        observer = page.observe_intersections(
            lambda entries: reports.extend((e.intersection_height, e.ratio) for e in entries),
            [0.0, 0.5, 1.0],
        )
        observer.observe(target)
        assert reports == [(400, 1.0)]

        page.scroll_to(200)
        assert reports[-1] == (200, 0.5)
        page.scroll_to(300)
        assert reports[-1] == (100, 0.25)
        page.scroll_to(350)
        assert len(reports) == 3
        page.scroll_to(500)
        assert reports[-1] == (0, 0.0)

    def test_unload_disconnects(self, page):
        target = Node("section")
        page.set_box(Node("div"), 0, 5000)
        page.set_box(target, 0, 400)
        reports = []
        page.observe_intersections(reports.extend).observe(target)
        stopped = []
        page.on_unload(lambda: stopped.append(True))
        page.unload()
        page.scroll_to(1000)
        assert len(reports) == 1
        assert stopped == [True]


class TestDom:
    def test_bubbling_and_stop(self):
        root = Node("div")
        child = root.append(Node("button"))
        seen = []
        root.add_event_listener("click", lambda e: seen.append(("root", e.current_target)))
        child.add_event_listener("click", lambda e: seen.append(("child", e.current_target)))
        child.dispatch(Event("click", child))
        assert seen == [("child", child), ("root", root)]

        seen.clear()
        child.add_event_listener("click", Event.stop_propagation)
        child.dispatch(Event("click", child))
        assert seen == [("child", child)]

    def test_selectors(self):
        root = Node("div", children=[
            Node("a", id="x", cls="nav active", attrs={"href": "#x"}),
            Node("button", cls="nav"),
        ])
        assert [n.tag for n in root.select(".nav")] == ["a", "button"]
        assert root.select_one("a.active[href]").id == "x"
        assert root.select_one("#x") is root.get_by_id("x")
        assert root.children[1].closest("div") is root
        with pytest.raises(ValueError):
            root.select("div > a")

    def test_clone_drops_listeners(self):
        node = Node("a", cls="link", text="Home")
        node.add_event_listener("click", lambda e: None)
        copy = node.clone()
        assert copy.classes == ["link"] and copy.text == "Home"
        assert copy.listener_count("click") == 0

    def test_toggle_class_force(self):
        node = Node("div")
        assert node.toggle_class("on") is True
        assert node.toggle_class("on", True) is True
        assert node.toggle_class("on") is False
        assert node.classes == []


def test_page_clock_injected(page):
    assert page.now().hour == 14
    assert Page().now() is not None
