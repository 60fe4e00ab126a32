"""Typewriter rotation of the profile sub-title through the skill names."""

import logging
from collections.abc import Iterator

from folio.config import AnimationConfig
from folio.dom import Node
from folio.page import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class TitleRotation:
    """Types each title a character at a time, holds, deletes it, moves on.

    Runs until ``stop()``; each step is a timer on the page scheduler.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        node: Node,
        titles: list[str],
        timing: AnimationConfig | None = None,
    ) -> None:
        self.scheduler = scheduler
        self.node = node
        self.titles = [t for t in titles if t]
        self.timing = timing or AnimationConfig()
        self.title_index = 0
        self._steps: Iterator[float] | None = None
        self._handle: TimerHandle | None = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> "TitleRotation":
        if self.running or not self.titles:
            return self
        self._steps = self._run()
        self._tick()
        return self

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._steps = None
        self.node.text = ""

    def _tick(self) -> None:
        if self._steps is None:
            return
        delay = next(self._steps)
        self._handle = self.scheduler.call_later(delay, self._tick)

    def _run(self) -> Iterator[float]:
        t = self.timing
        while True:
            title = self.titles[self.title_index]
            for ch in title:
                self.node.text += ch
                yield t.type_delay_ms
            yield t.hold_ms
            for _ in title:
                self.node.text = self.node.text[:-1]
                yield t.delete_delay_ms
            yield t.cycle_pause_ms
            self.title_index = (self.title_index + 1) % len(self.titles)
