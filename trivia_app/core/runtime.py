"""Event-loop capabilities the quiz controller depends on."""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

T = TypeVar("T")


class TaskRunner(Protocol):
    """Runs blocking work and reports back on the event loop thread."""

    def run(
        self,
        task: Callable[[], T],
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None],
    ) -> None: ...


class Scheduler(Protocol):
    """One-shot timers on the event loop."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None: ...
