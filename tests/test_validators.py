"""Tests for booking parameter validators."""

from datetime import date, timedelta

import pytest

from gopeople_client.exceptions import (
    EmptyTimeError,
    HoursTooShortError,
    ShiftOutOfWindowError,
    TimeFormatError,
    TimeOutOfRangeError,
    UnparsableShiftError,
)
from gopeople_client.result import Err, Ok
from gopeople_client.validators import (
    validate_hours,
    validate_shift,
    validate_shifts,
    validate_time,
)

from conftest import days_from_today

TODAY = date(2026, 2, 10)
OUT_OF_WINDOW = "Given date is after 30 days later; or is before now."


@pytest.mark.parametrize("offset", [0, 1, 15, 29, 30])
def test_shift_within_window_is_returned_unchanged(offset):
    """Dates from today up to 30 days ahead are accepted."""
    shift = (TODAY + timedelta(days=offset)).isoformat()
    assert validate_shift(shift, today=TODAY) == Ok(shift)


@pytest.mark.parametrize("offset", [-1, -365, 31, 45])
def test_shift_outside_window_is_rejected(offset):
    shift = (TODAY + timedelta(days=offset)).isoformat()
    result = validate_shift(shift, today=TODAY)
    assert isinstance(result, Err)
    assert isinstance(result.error, ShiftOutOfWindowError)
    assert str(result.error) == OUT_OF_WINDOW


def test_shift_defaults_to_utc_today():
    """Without an explicit reference day, today in UTC is used."""
    today = days_from_today(0)
    assert validate_shift(today) == Ok(today)
    assert isinstance(validate_shift(days_from_today(31)), Err)


@pytest.mark.parametrize(
    "shift",
    [
        "baddate",
        "",
        "2026/02/10",
        "2026-2-10",
        "２０２６-０２-１０",
    ],
)
def test_unparsable_shift(shift):
    result = validate_shift(shift, today=TODAY)
    assert isinstance(result.error, UnparsableShiftError)
    assert str(result.error) == "unparsable"


def test_shift_with_impossible_day():
    """Well-shaped but non-existent dates are unparsable too."""
    result = validate_shift("2026-02-30", today=TODAY)
    assert isinstance(result.error, UnparsableShiftError)
    assert str(result.error) == "unit out of range"


def test_validate_shifts_returns_all_dates():
    shifts = ["2026-02-10", "2026-02-11", "2026-03-12"]
    assert validate_shifts(shifts, today=TODAY) == Ok(shifts)


def test_validate_shifts_stops_at_first_failure():
    """The first failing date decides the error."""
    shifts = ["2026-02-10", "bad", "2026-12-01"]
    result = validate_shifts(shifts, today=TODAY)
    assert isinstance(result.error, UnparsableShiftError)


@pytest.mark.parametrize(
    "time", ["00:00 AM", "11:40 PM", "12:00 PM", "9:05 AM"]
)
def test_valid_times(time):
    assert validate_time(time) == Ok(time)


def test_time_with_seconds():
    assert validate_time("10:30:00 AM") == Ok("10:30:00 AM")


def test_empty_time():
    result = validate_time("")
    assert isinstance(result.error, EmptyTimeError)
    assert str(result.error) == "Time cannot be an empty string"


@pytest.mark.parametrize("time", ["13:30 AM", "02:60 PM", "00:15 PM"])
def test_time_out_of_range(time):
    result = validate_time(time)
    assert isinstance(result.error, TimeOutOfRangeError)
    assert (
        str(result.error)
        == "[Malformation] please check the hours and minutes"
    )


@pytest.mark.parametrize(
    "time",
    ["01:15", "02:45 pm", "10:00AM", "1:5 AM", "١٠:٣٠ AM"],
)
def test_time_bad_format(time):
    result = validate_time(time)
    assert isinstance(result.error, TimeFormatError)
    assert (
        str(result.error)
        == "Invalid time string format; should be '00:00 AM/PM'"
    )


def test_hours_below_minimum():
    result = validate_hours(2)
    assert isinstance(result.error, HoursTooShortError)
    assert str(result.error) == "Hours must > 3"


@pytest.mark.parametrize("hours", [3, 4, 8])
def test_hours_accepted(hours):
    """Three hours is the shortest bookable shift."""
    assert validate_hours(hours) == Ok(hours)
