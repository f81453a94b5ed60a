"""Capture the current time from the system clock as a DateTime."""

from datetime import datetime, timezone

from dateutil.tz import tzlocal

from abstime.core import DateTime


def _from_clock(now: datetime) -> DateTime:
    # Clock fields are already in range; keep millisecond precision only
    return DateTime(
        year=now.year,
        month=now.month,
        day=now.day,
        hours=now.hour,
        minutes=now.minute,
        seconds=now.second + (now.microsecond // 1000) / 1000,
    )


def now_utc() -> DateTime:
    """Return the current date and time in UTC."""
    return _from_clock(datetime.now(timezone.utc))


def now_device_local() -> DateTime:
    """Return the current date and time in the device's local timezone."""
    return _from_clock(datetime.now(tzlocal()))
