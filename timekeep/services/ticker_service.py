"""
Ticker Service - Live elapsed time for the task being tracked.

Architecture Decision: Observer Pattern (Qt Signals)
The service emits signals when state changes, keeping it decoupled from UI.
It only renders time; starting and stopping entries is the backend's job.
"""

import datetime
import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from timekeep.domain.datetime_utils import duration
from timekeep.domain.models import TrackedTaskDetails
from timekeep.i18n import tr

logger = logging.getLogger(__name__)


class ElapsedTicker(QObject):
    """
    Re-renders the elapsed time of the tracked entry once per interval.

    Elapsed time is always recomputed from the entry start, so a delayed
    timer never drifts the display.
    """

    # Signals
    tick = Signal(str, int)  # (formatted_time, total_seconds)
    started = Signal(int)  # task_id
    stopped = Signal(int)  # task_id

    def __init__(self, interval_ms: int = 1000,
                 clock: Optional[Callable[[], datetime.datetime]] = None,
                 parent: Optional[QObject] = None):
        super().__init__(parent)
        self.details: Optional[TrackedTaskDetails] = None
        self.clock = clock or datetime.datetime.now

        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self._on_tick)

    def start(self, details: TrackedTaskDetails):
        """Start ticking for a newly tracked task, replacing any previous one."""
        if self.details is not None:
            self.stop()

        self.details = details
        self.timer.start()
        logger.debug("Ticker started for task %s", details.task.id)
        self.started.emit(details.task.id or 0)
        self._on_tick()

    def stop(self):
        if self.details is None:
            return

        self.timer.stop()
        task_id = self.details.task.id or 0
        self.details = None
        logger.debug("Ticker stopped for task %s", task_id)
        self.stopped.emit(task_id)

    def is_running(self) -> bool:
        return self.details is not None

    def _on_tick(self):
        """Called by the timer to publish the current elapsed time"""
        if self.details is None:
            return

        elapsed = duration(self.details.entry.start, self.clock())
        text = tr("tracker.tick", task=self.details.task.name, elapsed=elapsed.clock())
        self.tick.emit(text, elapsed.total_seconds)
