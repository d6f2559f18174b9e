"""
Date and duration helpers used by every view that shows tracked time.

Architecture Decision: Degrade, don't fail
Timestamps arrive from the backend as datetimes, ISO strings or epoch
millisecond strings. Anything unreadable is treated as the Unix epoch so the
UI can always render something; none of these functions raise.
"""

import datetime
import math
import re
from email.utils import parsedate_to_datetime
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from timekeep.i18n import tr


EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
ONE_MS = datetime.timedelta(milliseconds=1)
DAY_MS = 24 * 60 * 60 * 1000

_INT_FULL_RE = re.compile(r"^\s*[+-]?\d+\s*$")
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")

WEEKDAY_KEYS = {
    0: "weekday.sunday",
    1: "weekday.monday",
    2: "weekday.tuesday",
    3: "weekday.wednesday",
    4: "weekday.thursday",
    5: "weekday.friday",
    6: "weekday.saturday",
}

NowSource = Union[datetime.datetime, Callable[[], Any], None]


class Duration(BaseModel):
    """
    Elapsed time split into clock units.

    Hours are unbounded; a long session is never folded into days.
    """
    model_config = ConfigDict(frozen=True)

    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0, le=59)
    seconds: int = Field(default=0, ge=0, le=59)

    @classmethod
    def from_seconds(cls, total_seconds: int) -> "Duration":
        total_seconds = max(int(total_seconds), 0)
        hours, remainder = divmod(total_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        return cls(hours=hours, minutes=minutes, seconds=seconds)

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def clock(self) -> str:
        """Render as zero-padded HH:MM:SS."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}"

    def human(self) -> str:
        """Render as e.g. '1h1m59s', leaving out zero units ('0s' if empty)."""
        text = ""
        if self.hours > 0:
            text += f"{self.hours}h"
        if self.minutes > 0:
            text += f"{self.minutes}m"
        if self.seconds > 0:
            text += f"{self.seconds}s"
        return text or "0s"


def _datetime_to_ms(value: datetime.datetime) -> int:
    # Naive datetimes are local wall-clock time
    try:
        if value.tzinfo is None:
            value = value.astimezone()
        return (value - EPOCH) // ONE_MS
    except (OverflowError, OSError, ValueError):
        return 0


def _parse_calendar(text: str) -> Optional[datetime.datetime]:
    """Parse ISO-8601 or RFC 2822 text, returning None if neither matches."""
    candidate = text.strip()
    if not candidate:
        return None
    try:
        return datetime.datetime.fromisoformat(candidate)
    except ValueError:
        pass
    try:
        return parsedate_to_datetime(candidate)
    except (TypeError, ValueError, IndexError):
        return None


def to_epoch_ms(value: Any) -> int:
    """
    Normalize a date-like value to milliseconds since the Unix epoch.

    Accepted inputs:
    - datetime (naive values are local time), date (local midnight)
    - int/float, taken as epoch milliseconds
    - text: ISO-8601 or RFC 2822 date strings (date-only or offset-less
      ISO strings are local time), or integer epoch milliseconds

    Args:
        value: Any date-like value

    Returns:
        Epoch milliseconds, or 0 if the value could not be interpreted.
    """
    if isinstance(value, datetime.datetime):
        return _datetime_to_ms(value)
    if isinstance(value, datetime.date):
        return _datetime_to_ms(datetime.datetime.combine(value, datetime.time()))
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if not isinstance(value, str):
        value = str(value)

    # A bare integer is an epoch timestamp, never a compact ISO date
    if _INT_FULL_RE.match(value):
        return int(value)

    parsed = _parse_calendar(value)
    if parsed is not None:
        return _datetime_to_ms(parsed)

    match = _INT_PREFIX_RE.match(value)
    if match:
        return int(match.group(1))
    return 0


def coerce_date(value: Any) -> datetime.datetime:
    """
    Normalize a date-like value to a datetime.

    Datetimes pass through unchanged. Everything else is converted through
    to_epoch_ms() and returned as a naive local datetime.
    """
    if isinstance(value, datetime.datetime):
        return value
    ms = to_epoch_ms(value)
    try:
        return (EPOCH + ms * ONE_MS).astimezone().replace(tzinfo=None)
    except (OverflowError, OSError, ValueError):
        return EPOCH.astimezone().replace(tzinfo=None)


def _local(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def duration(start: Any, end: Any) -> Duration:
    """
    Compute the elapsed time between two date-like values.

    A missing end (None, 0, "") means the entry is still running and
    yields a zero duration. Sub-second remainders are floored away.
    """
    if not end:
        return Duration()
    elapsed_ms = to_epoch_ms(end) - to_epoch_ms(start)
    return Duration.from_seconds(elapsed_ms // 1000)


def duration_clock(start: Any, end: Any) -> str:
    """Elapsed time as HH:MM:SS, e.g. '01:01:59'."""
    return duration(start, end).clock()


def duration_human(start: Any, end: Any) -> str:
    """Elapsed time in compact notation, e.g. '1h1m59s' or '5m'."""
    return duration(start, end).human()


def weekday(date: Any) -> str:
    """
    Name of the local day of the week, e.g. 'Tuesday'.

    The name is in the current UI language (see timekeep.i18n.set_language).
    """
    local = _local(coerce_date(date))
    # datetime.weekday() is Monday-based; labels are Sunday-based
    return tr(WEEKDAY_KEYS[(local.weekday() + 1) % 7])


def _resolve_now(now: NowSource) -> datetime.datetime:
    if now is None:
        return datetime.datetime.now()
    if callable(now):
        now = now()
    return _local(coerce_date(now))


def _same_day(base: datetime.datetime, other: datetime.datetime) -> bool:
    return (base.year, base.month, base.day) == (other.year, other.month, other.day)


def weekday_semantic(date: Any, now: NowSource = None) -> str:
    """
    Describe a date relative to now.

    Labels are in the current UI language (see timekeep.i18n.set_language).

    Args:
        date: Any date-like value
        now: Reference instant, or a zero-argument callable returning one.
            Defaults to the current wall-clock time.

    Returns:
        'Yesterday', 'Today' or 'Tomorrow' when the date falls on the same
        calendar day as now-24h, now or now+24h; otherwise the weekday name.
    """
    local = _local(coerce_date(date))
    today = _resolve_now(now)
    yesterday = _local(coerce_date(_datetime_to_ms(today) - DAY_MS))
    tomorrow = _local(coerce_date(_datetime_to_ms(today) + DAY_MS))

    if _same_day(yesterday, local):
        return tr("day.yesterday")
    if _same_day(today, local):
        return tr("day.today")
    if _same_day(tomorrow, local):
        return tr("day.tomorrow")
    return weekday(local)


def format_clock_time(date: Any) -> str:
    """Local time of day as HH:MM:SS; fractions of a second are dropped."""
    local = _local(coerce_date(date))
    return f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
