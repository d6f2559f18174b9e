"""
Tests for the data records mirrored from the backend.
"""

import datetime

import pytest
from pydantic import ValidationError

from timekeep.domain.datetime_utils import Duration, to_epoch_ms
from timekeep.domain.models import Note, Task, TimeEntry, TimeEntrySummary, TrackedTaskDetails


class TestTimeEntry:

    def test_backend_payload(self):
        """Payloads use the backend's camelCase keys and string timestamps"""
        entry = TimeEntry.model_validate({
            "id": 7,
            "taskID": 3,
            "start": "2023-01-03T10:00:00Z",
            "end": "2023-01-03T11:01:59Z",
            "synced": True,
        })

        assert entry.task_id == 3
        assert entry.synced is True
        assert not entry.is_running
        assert entry.duration() == Duration(hours=1, minutes=1, seconds=59)

    def test_running_entry(self):
        entry = TimeEntry.model_validate({"taskID": 1, "start": "1672740000000", "end": ""})
        assert entry.end is None
        assert entry.is_running
        assert entry.duration().human() == "0s"

    def test_populate_by_field_name(self):
        start = datetime.datetime(2023, 1, 3, 9, 0)
        entry = TimeEntry(task_id=1, start=start, end=start + datetime.timedelta(minutes=5))
        assert entry.start is not None
        assert entry.duration().human() == "5m"

    def test_malformed_timestamp_becomes_epoch(self):
        entry = TimeEntry.model_validate({"taskID": 1, "start": "not a timestamp"})
        assert to_epoch_ms(entry.start) == 0

    def test_task_id_is_required(self):
        with pytest.raises(ValidationError):
            TimeEntry.model_validate({"start": "2023-01-03T10:00:00Z"})


class TestTask:

    def test_defaults(self):
        task = Task(name="Write report")
        assert task.id is None
        assert task.done is False
        assert task.priority == 0

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Task(name="")


class TestNote:

    def test_timestamps_are_coerced(self):
        note = Note.model_validate({
            "id": 1,
            "taskID": 2,
            "text": "Call back",
            "created": "1672740000000",
            "updated": "2023-01-03T10:30:00Z",
        })
        assert note.task_id == 2
        assert to_epoch_ms(note.created) == 1_672_740_000_000

    def test_age(self):
        updated = datetime.datetime(2023, 1, 3, 10, 0)
        note = Note(text="x", created=updated, updated=updated)
        assert note.age(now=updated + datetime.timedelta(hours=2, minutes=5)) == "2h5m"


class TestComposites:

    def test_empty_summary(self):
        summary = TimeEntrySummary()
        assert summary.lines == []
        assert summary.total == "0s"

    def test_tracked_task_details(self):
        details = TrackedTaskDetails.model_validate({
            "task": {"id": 1, "name": "Review"},
            "entry": {"taskID": 1, "start": "1672740000000"},
        })
        assert details.task.name == "Review"
        assert details.entry.is_running
