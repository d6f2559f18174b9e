"""
Summary Service - Per-task totals for a set of time entries.

Used by the dashboard to show "today" and "this week" breakdowns.
"""

import logging
from typing import Dict, Iterable, Mapping

from timekeep.domain.datetime_utils import Duration, to_epoch_ms
from timekeep.domain.models import TaskSummary, TimeEntry, TimeEntrySummary

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised when an entry references a task that is not known."""

    def __init__(self, task_id: int, entry_id=None):
        self.task_id = task_id
        self.entry_id = entry_id
        super().__init__(f"unable to locate task ID '{task_id}' in entry ID '{entry_id}'")


class SummaryService:
    """
    Aggregates finished time entries per task.

    Running entries (no end) are skipped. Each entry is rounded to the
    nearest whole second before it is added to its task's total.
    """

    def summarize(self, entries: Iterable[TimeEntry],
                  task_names: Mapping[int, str]) -> TimeEntrySummary:
        """
        Build a summary of the given entries.

        Args:
            entries: Time entries to aggregate
            task_names: Task name per task id

        Returns:
            Summary with one line per task, largest total first.

        Raises:
            TaskNotFoundError: An entry's task id is missing from task_names
        """
        totals: Dict[int, int] = {}
        grand_total = 0

        for entry in entries:
            if entry.end is None:
                continue
            if entry.task_id not in task_names:
                raise TaskNotFoundError(entry.task_id, entry.id)

            seconds = self._rounded_seconds(entry)
            totals[entry.task_id] = totals.get(entry.task_id, 0) + seconds
            grand_total += seconds

        # sorted() is stable, so equal totals keep first-seen order
        ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        lines = [
            TaskSummary(name=task_names[task_id], duration=Duration.from_seconds(seconds).human())
            for task_id, seconds in ordered
        ]

        logger.debug("Summarized %d tasks, %d seconds in total", len(lines), grand_total)
        return TimeEntrySummary(lines=lines, total=Duration.from_seconds(grand_total).human())

    @staticmethod
    def _rounded_seconds(entry: TimeEntry) -> int:
        elapsed_ms = to_epoch_ms(entry.end) - to_epoch_ms(entry.start)
        if elapsed_ms <= 0:
            return 0
        return (elapsed_ms + 500) // 1000
