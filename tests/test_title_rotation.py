"""Tests for the rotating profile title."""

from folio.dom import Node
from folio.interactions.title_rotation import TitleRotation
from folio.page import Scheduler


class TestTitleRotation:
    def test_types_holds_deletes_and_moves_on(self):
        scheduler = Scheduler()
        node = Node("p")
        TitleRotation(scheduler, node, ["Go", "Py"]).start()
        assert node.text == "G"
        scheduler.advance(80)
        assert node.text == "Go"
        scheduler.advance(2000)
        assert node.text == "Go"
        scheduler.advance(80)
        assert node.text == "G"
        scheduler.advance(40)
        assert node.text == ""
        scheduler.advance(540)
        assert node.text == "P"

    def test_cycles_back_to_first(self):
        scheduler = Scheduler()
        node = Node("p")
        rotation = TitleRotation(scheduler, node, ["A", "B"]).start()
        # one title: type 80 + hold 2000 + delete 40 + pause 500
        scheduler.advance(2620 * 2)
        assert rotation.title_index == 0
        assert node.text == "A"

    def test_stop_cancels_pending_step(self):
        scheduler = Scheduler()
        node = Node("p")
        rotation = TitleRotation(scheduler, node, ["Python"]).start()
        assert rotation.running
        rotation.stop()
        assert not rotation.running
        assert scheduler.pending == 0
        scheduler.advance(10_000)
        assert node.text == ""

    def test_restart_after_stop_mid_title(self):
        scheduler = Scheduler()
        node = Node("p")
        rotation = TitleRotation(scheduler, node, ["Python"]).start()
        scheduler.advance(200)
        assert node.text == "Pyt"
        rotation.stop()
        assert node.text == ""

        rotation.start()
        assert node.text == "P"
        scheduler.advance(480)
        assert node.text == "Python"
        # hold 2000 + delete 6 * 40 + pause 500, minus the last millisecond
        scheduler.advance(2739)
        assert node.text == ""
        scheduler.advance(1)
        assert node.text == "P"

    def test_no_titles_never_starts(self):
        scheduler = Scheduler()
        rotation = TitleRotation(scheduler, Node("p"), []).start()
        assert not rotation.running
        assert scheduler.pending == 0

    def test_start_twice_is_single_task(self):
        scheduler = Scheduler()
        rotation = TitleRotation(scheduler, Node("p"), ["Go"])
        rotation.start()
        rotation.start()
        assert scheduler.pending == 1

    def test_portfolio_close_stops_rotation(self, portfolio, page):
        assert portfolio.title_rotation.running
        assert portfolio.view.animated_title.text == "P"
        portfolio.close()
        assert not portfolio.title_rotation.running
        text = portfolio.view.animated_title.text
        page.scheduler.advance(10_000)
        assert portfolio.view.animated_title.text == text
