"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
These records mirror what the backend sends over the bridge. Pydantic
validates the payloads and lets timestamp fields accept every shape the
backend produces (datetime, ISO string, epoch milliseconds string).
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .datetime_utils import Duration, coerce_date, duration, duration_human


class _Record(BaseModel):
    """Common config: build from ORM-like objects and accept backend aliases."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class Task(_Record):
    """
    A trackable task.

    Examples: "Write report", "Code review"
    """
    id: Optional[int] = None
    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    done: bool = False
    priority: int = 0
    favorite: bool = False
    inactivated: bool = False


class TimeEntry(_Record):
    """
    A single tracking session for a task.

    `end` is None while the session is still running.
    """
    id: Optional[int] = None
    task_id: int = Field(..., alias="taskID")
    start: datetime
    end: Optional[datetime] = None
    synced: bool = False

    @field_validator("start", mode="before")
    @classmethod
    def _coerce_start(cls, value: Any) -> datetime:
        return coerce_date(value)

    @field_validator("end", mode="before")
    @classmethod
    def _coerce_end(cls, value: Any) -> Optional[datetime]:
        if not value:
            return None
        return coerce_date(value)

    @property
    def is_running(self) -> bool:
        return self.end is None

    def duration(self) -> Duration:
        """Elapsed time of the entry; zero while it is still running."""
        return duration(self.start, self.end)


class Note(_Record):
    id: Optional[int] = None
    task_id: Optional[int] = Field(default=None, alias="taskID")
    text: str = ""
    created: datetime = Field(default_factory=datetime.now)
    updated: datetime = Field(default_factory=datetime.now)

    @field_validator("created", "updated", mode="before")
    @classmethod
    def _coerce_timestamps(cls, value: Any) -> datetime:
        return coerce_date(value)

    def age(self, now: Optional[datetime] = None) -> str:
        """Time since the note was last updated, e.g. '2h5m'."""
        return duration_human(self.updated, now or datetime.now())


class TaskSummary(_Record):
    """One line of a summary: task name and its total in human notation."""
    name: str
    duration: str = "0s"


class TimeEntrySummary(_Record):
    lines: List[TaskSummary] = Field(default_factory=list)
    total: str = "0s"


class TrackedTaskDetails(_Record):
    """The task currently being tracked together with its open entry."""
    task: Task
    entry: TimeEntry


class LogEvent(_Record):
    """A leveled log message as relayed to the backend log."""
    time: datetime = Field(default_factory=datetime.now)
    level: str
    message: str
    values: Dict[str, str] = Field(default_factory=dict)


class DisplayPreferences(BaseModel):
    """
    User preferences for how time is shown and logged.

    Loaded from settings.yaml; every field has a usable default.
    """
    model_config = ConfigDict(from_attributes=True)

    language: str = Field(default="auto", description="UI language: 'en', 'de', or 'auto' (detect from system)")
    debug_logging: bool = Field(default=False, description="Forward debug events to the backend log")
    log_level: str = Field(default="INFO", description="Root logging level")
    tick_interval_ms: int = Field(default=1000, ge=100, le=60000, description="Refresh rate of the live timer")
