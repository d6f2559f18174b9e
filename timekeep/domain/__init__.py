"""Domain layer - Data records and pure date/duration logic"""

from .datetime_utils import (
    Duration,
    coerce_date,
    duration,
    duration_clock,
    duration_human,
    format_clock_time,
    to_epoch_ms,
    weekday,
    weekday_semantic,
)
from .models import DisplayPreferences, LogEvent, Note, Task, TaskSummary, TimeEntry, TimeEntrySummary, TrackedTaskDetails

__all__ = [
    "Duration",
    "coerce_date",
    "duration",
    "duration_clock",
    "duration_human",
    "format_clock_time",
    "to_epoch_ms",
    "weekday",
    "weekday_semantic",
    "DisplayPreferences",
    "LogEvent",
    "Note",
    "Task",
    "TaskSummary",
    "TimeEntry",
    "TimeEntrySummary",
    "TrackedTaskDetails",
]
