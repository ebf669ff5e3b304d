"""Qt-backed repeating timer that drives the question countdown."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QObject, QTimer

from quiz_challenge.constants.quiz_constants import TICK_INTERVAL_MS


class CountdownTimer:
    """Wraps a ``QTimer`` so the controller can start and stop ticks explicitly."""

    def __init__(self, parent: QObject | None = None, interval_ms: int = TICK_INTERVAL_MS) -> None:
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._handle_timeout)
        self._callback: Callable[[], None] | None = None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        # QTimer.start() restarts an active timer, so the first tick is a full interval away.
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def is_active(self) -> bool:
        return self._timer.isActive()

    def interval_ms(self) -> int:
        return self._timer.interval()

    def _handle_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
