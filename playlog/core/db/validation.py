# playlog/core/db/validation.py

"""Field validation for candidate logs.

Checks run before a log is written so the host can show per-field
messages. Returned messages come from the validation catalogue and
follow the active locale.
"""

from __future__ import annotations

from datetime import date, datetime

from playlog.core.db.models import LogEntryInput, LogEntryUpdate, LogStatus, status_param
from playlog.exceptions import LogValidationError
from playlog.utils.i18n import t

__all__ = [
    "RATING_MAX",
    "RATING_MIN",
    "minutes_from_time_played",
    "normalize_log_date",
    "parse_log_date",
    "raise_for_errors",
    "validate_log_input",
    "validate_log_update",
]

RATING_MIN = 0
RATING_MAX = 10


def parse_log_date(value: str | date) -> date | None:
    """Read the calendar day of a log date.

    Accepts an ISO date ("2024-01-31"), an ISO timestamp
    ("2024-01-31T18:00:00.000Z") or a date/datetime instance.

    Returns:
        The day, or None if the value is not a full ISO date or timestamp.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if len(text) < 10 or text[4] != "-" or text[7] != "-":
        return None
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        if text[10] not in "T ":
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        # Day as written, no timezone conversion
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def normalize_log_date(value: str | date) -> str:
    """Return the YYYY-MM-DD form stored in logs.date.

    Raises:
        LogValidationError: If the value is not a full ISO date or timestamp.
    """
    parsed = parse_log_date(value)
    if parsed is None:
        raise LogValidationError({"date": t("validation.date_invalid")})
    return parsed.isoformat()


def _validate_fields(
    log_date: str | date,
    rating: int,
    minutes_played: int,
    status: str | LogStatus,
    today: date | None,
) -> dict[str, str]:
    errors: dict[str, str] = {}

    parsed = parse_log_date(log_date)
    if parsed is None:
        errors["date"] = t("validation.date_invalid")
    elif parsed > (today or date.today()):
        errors["date"] = t("validation.date_future")

    if isinstance(rating, bool) or not isinstance(rating, int) or not RATING_MIN <= rating <= RATING_MAX:
        errors["rating"] = t("validation.rating_range", min=RATING_MIN, max=RATING_MAX)

    if isinstance(minutes_played, bool) or not isinstance(minutes_played, int) or minutes_played < 0:
        errors["minutes_played"] = t("validation.time_negative")

    if status_param(status) not in LogStatus.values():
        errors["status"] = t("validation.status_invalid", allowed=", ".join(LogStatus.values()))

    return errors


def validate_log_input(log_input: LogEntryInput, today: date | None = None) -> dict[str, str]:
    """Validate a log before it is created.

    Args:
        log_input: Candidate log with its embedded game.
        today: Reference day for the future-date check, defaults to today.

    Returns:
        Mapping of field name to message; empty when the log is valid.
    """
    errors: dict[str, str] = {}
    if not log_input.game.title or not log_input.game.title.strip():
        errors["title"] = t("validation.title_empty")

    errors.update(
        _validate_fields(log_input.date, log_input.rating, log_input.minutes_played, log_input.status, today)
    )
    return errors


def validate_log_update(update: LogEntryUpdate, today: date | None = None) -> dict[str, str]:
    """Validate the editable fields of an existing log.

    Args:
        update: New field values.
        today: Reference day for the future-date check, defaults to today.

    Returns:
        Mapping of field name to message; empty when the update is valid.
    """
    return _validate_fields(update.date, update.rating, update.minutes_played, update.status, today)


def raise_for_errors(errors: dict[str, str]) -> None:
    """Raise LogValidationError if any field failed."""
    if errors:
        raise LogValidationError(errors)


def minutes_from_time_played(hours: int, minutes: int) -> int:
    """Convert the hours/minutes pair entered by the user to minutes.

    Args:
        hours: Whole hours played.
        minutes: Remaining minutes, 0-59.

    Returns:
        Total minutes played.

    Raises:
        LogValidationError: If either value is negative or minutes exceed 59.
    """
    if hours < 0 or minutes < 0:
        raise LogValidationError({"time_played": t("validation.time_negative")})
    if minutes > 59:
        raise LogValidationError({"time_played": t("validation.minutes_overflow")})
    return hours * 60 + minutes
