"""Qt implementations of the controller's runner and scheduler capabilities."""

from __future__ import annotations

import logging
from threading import Thread
from typing import Callable, TypeVar

from PySide6.QtCore import QObject, QTimer, Signal, Slot

T = TypeVar("T")

logger = logging.getLogger(__name__)


class QtTaskRunner(QObject):
    """Runs blocking work on a daemon thread and calls back on the GUI thread.

    The worker emits a signal owned by this object; Qt queues the delivery to
    the thread this object lives in, so callbacks never run concurrently with
    other event handlers.
    """

    _completed = Signal(object, object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._completed.connect(self._deliver)

    def run(
        self,
        task: Callable[[], T],
        on_success: Callable[[T], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        def work() -> None:
            try:
                result = task()
            except Exception as exc:  # delivered to on_error on the GUI thread
                logger.debug("Background task failed: %s", exc)
                self._completed.emit(on_error, exc)
                return
            self._completed.emit(on_success, result)

        thread = Thread(target=work, name="TriviaRequest", daemon=True)
        thread.start()

    @Slot(object, object)
    def _deliver(self, callback: Callable[[object], None], value: object) -> None:
        callback(value)


class QtScheduler:
    """One-shot timers on the Qt event loop."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        QTimer.singleShot(delay_ms, callback)
