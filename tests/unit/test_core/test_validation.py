"""Tests for candidate log validation."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from playlog.core.db.models import Game, LogEntryInput, LogEntryUpdate, LogStatus
from playlog.core.db.validation import (
    minutes_from_time_played,
    normalize_log_date,
    validate_log_input,
    validate_log_update,
)
from playlog.exceptions import LogValidationError

TODAY = date(2024, 6, 15)


def _input(**overrides) -> LogEntryInput:
    values = {
        "date": "2024-06-01",
        "rating": 7,
        "notes": "",
        "status": "playing",
        "minutes_played": 30,
        "game": Game(id=1, title="Tunic", cover_id="x"),
    }
    values.update(overrides)
    return LogEntryInput(**values)


class TestValidateLogInput:
    """Tests for validate_log_input()."""

    def test_valid_input_has_no_errors(self) -> None:
        """A well-formed log passes."""
        assert validate_log_input(_input(), today=TODAY) == {}

    def test_today_is_allowed(self) -> None:
        """The reference day itself is not in the future."""
        assert validate_log_input(_input(date=TODAY), today=TODAY) == {}

    def test_timestamp_dates_are_accepted(self) -> None:
        """ISO timestamps are judged by their date part."""
        assert validate_log_input(_input(date="2024-06-01T18:30:00.000Z"), today=TODAY) == {}

    def test_timestamp_with_offset(self) -> None:
        """Offsets and space-separated times are accepted."""
        assert validate_log_input(_input(date="2024-06-01 08:15:00+02:00"), today=TODAY) == {}

    def test_future_date(self) -> None:
        """Dates after today are rejected."""
        errors = validate_log_input(_input(date=TODAY + timedelta(days=1)), today=TODAY)

        assert errors == {"date": "Date cannot be in the future"}

    def test_future_date_against_real_today(self) -> None:
        """Without a reference day the current date is used."""
        errors = validate_log_input(_input(date=date.today() + timedelta(days=30)))

        assert "date" in errors

    @pytest.mark.parametrize(
        "bad_date",
        ["", "06/01/2024", "2024-13-01", "soon", "2024-01-15not-a-date", "20240115", "2024-01-15T25:00"],
    )
    def test_malformed_date(self, bad_date: str) -> None:
        """Non-ISO dates are rejected."""
        assert "date" in validate_log_input(_input(date=bad_date), today=TODAY)

    @pytest.mark.parametrize("rating", [-1, 11, True, "5"])
    def test_rating_out_of_range(self, rating) -> None:
        """Ratings must be integers from 0 to 10."""
        errors = validate_log_input(_input(rating=rating), today=TODAY)

        assert errors == {"rating": "Rating must be between 0 and 10"}

    @pytest.mark.parametrize("rating", [0, 10])
    def test_rating_bounds(self, rating: int) -> None:
        """Both rating bounds are valid."""
        assert validate_log_input(_input(rating=rating), today=TODAY) == {}

    def test_negative_minutes(self) -> None:
        """Minutes played cannot be negative."""
        assert "minutes_played" in validate_log_input(_input(minutes_played=-1), today=TODAY)

    def test_blank_title(self) -> None:
        """The embedded game needs a title."""
        errors = validate_log_input(_input(game=Game(id=1, title="   ")), today=TODAY)

        assert errors == {"title": "Title cannot be empty"}

    def test_unknown_status(self) -> None:
        """Statuses outside the domain are listed in the message."""
        errors = validate_log_input(_input(status="finished"), today=TODAY)

        assert "completed" in errors["status"]

    def test_enum_status(self) -> None:
        """LogStatus members are valid statuses."""
        assert validate_log_input(_input(status=LogStatus.ABANDONED), today=TODAY) == {}


class TestValidateLogUpdate:
    """Tests for validate_log_update()."""

    def test_valid_update(self) -> None:
        """Update shapes skip the title check."""
        update = LogEntryUpdate(id=1, date="2024-06-01", rating=4, status="backlog", minutes_played=0)

        assert validate_log_update(update, today=TODAY) == {}

    def test_collects_all_errors(self) -> None:
        """Every failing field is reported at once."""
        update = LogEntryUpdate(id=1, date="2099-01-01", rating=42, status="", minutes_played=-3)

        assert set(validate_log_update(update, today=TODAY)) == {"date", "rating", "status", "minutes_played"}


class TestMinutesFromTimePlayed:
    """Tests for minutes_from_time_played()."""

    def test_conversion(self) -> None:
        """Hours and minutes add up."""
        assert minutes_from_time_played(2, 15) == 135

    def test_zero(self) -> None:
        """Zero time is fine."""
        assert minutes_from_time_played(0, 0) == 0

    def test_minutes_over_59(self) -> None:
        """Minutes must stay below an hour."""
        with pytest.raises(LogValidationError) as exc_info:
            minutes_from_time_played(1, 60)

        assert exc_info.value.errors == {"time_played": "Minutes cannot be greater than 59"}

    @pytest.mark.parametrize(("hours", "minutes"), [(-1, 0), (0, -5)])
    def test_negative(self, hours: int, minutes: int) -> None:
        """Negative time is rejected."""
        with pytest.raises(LogValidationError):
            minutes_from_time_played(hours, minutes)


class TestNormalizeLogDate:
    """Tests for normalize_log_date()."""

    @pytest.mark.parametrize(
        "value",
        [
            "2024-01-31",
            " 2024-01-31 ",
            "2024-01-31T18:00:00.000Z",
            "2024-01-31T23:59",
            date(2024, 1, 31),
            datetime(2024, 1, 31, 9),
        ],
    )
    def test_reduces_to_day(self, value) -> None:
        """Every accepted form is stored as YYYY-MM-DD."""
        assert normalize_log_date(value) == "2024-01-31"

    def test_garbage_suffix_raises(self) -> None:
        """A valid prefix does not make the value a date."""
        with pytest.raises(LogValidationError) as exc_info:
            normalize_log_date("2024-01-15not-a-date")

        assert set(exc_info.value.errors) == {"date"}
