"""Pre-flight checks of booking parameters against carrier rules.

Every validator is total: it returns ``Ok`` with its input unchanged, or
``Err`` with a :class:`~gopeople_client.exceptions.ValidationError`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import UTC, date, datetime

from gopeople_client.exceptions import (
    EmptyTimeError,
    HoursTooShortError,
    ShiftOutOfWindowError,
    TimeFormatError,
    TimeOutOfRangeError,
    UnparsableShiftError,
)
from gopeople_client.result import Err, Ok, Result, traverse

SHIFT_WINDOW_DAYS = 30
MIN_SHIFT_HOURS = 3

_SHIFT_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_SHIFT_TIME = re.compile(r"(\d{1,2}):(\d{2})(:00)? (AM|PM)", re.ASCII)


def _utc_today() -> date:
    return datetime.now(tz=UTC).date()


def validate_shift(shift: str, *, today: date | None = None) -> Result[str]:
    """Check that ``shift`` (``yyyy-MM-dd``) falls within the next 30 days.

    Today (UTC calendar day) and the 30th day after it are both accepted.
    """
    match = _SHIFT_DATE.fullmatch(shift)
    if match is None:
        return Err(UnparsableShiftError("unparsable"))
    try:
        day = date(*(int(part) for part in match.groups()))
    except ValueError:
        return Err(UnparsableShiftError("unit out of range"))

    interval = (day - (today or _utc_today())).days
    if 0 <= interval <= SHIFT_WINDOW_DAYS:
        return Ok(shift)
    return Err(
        ShiftOutOfWindowError(
            "Given date is after 30 days later; or is before now."
        )
    )


def validate_shifts(
    shifts: Iterable[str], *, today: date | None = None
) -> Result[list[str]]:
    """Validate every shift date; the first failure is returned."""
    reference = today or _utc_today()
    return traverse(shifts, lambda s: validate_shift(s, today=reference))


def validate_time(time: str) -> Result[str]:
    """Check a 12-hour start time such as ``10:00 AM``."""
    if time == "":
        return Err(EmptyTimeError("Time cannot be an empty string"))

    match = _SHIFT_TIME.fullmatch(time)
    if match is None:
        return Err(
            TimeFormatError(
                "Invalid time string format; should be '00:00 AM/PM'"
            )
        )

    hour, minute = int(match.group(1)), int(match.group(2))
    meridiem = match.group(4)
    if (
        (meridiem == "AM" and not 0 <= hour <= 11)
        or (meridiem == "PM" and not 1 <= hour <= 12)
        or minute > 59
    ):
        return Err(
            TimeOutOfRangeError(
                "[Malformation] please check the hours and minutes"
            )
        )
    return Ok(time)


def validate_hours(hours: int) -> Result[int]:
    if hours < MIN_SHIFT_HOURS:
        return Err(HoursTooShortError("Hours must > 3"))
    return Ok(hours)
