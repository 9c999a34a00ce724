"""SQL assembly for log reads.

Sort columns and directions cannot be bound as SQLite parameters, so
they are checked against fixed allow-lists before being placed in the
statement text. Status filter values are checked against LogStatus and
then bound as parameters.
"""

from __future__ import annotations

from collections.abc import Iterable

from playlog.core.db.models import LogStatus, status_param
from playlog.exceptions import InvalidQueryError

__all__ = [
    "ALL_SORT_DIRECTIONS",
    "LOG_SELECT_COLUMNS",
    "SORTABLE_COLUMNS",
    "build_log_select",
    "build_order_by",
    "build_status_filter",
]

# Public sort keys mapped to qualified identifiers
SORTABLE_COLUMNS: dict[str, str] = {
    "id": "logs.id",
    "date": "logs.date",
    "rating": "logs.rating",
    "status": "logs.status",
    "minutes_played": "logs.minutes_played",
    "created_at": "logs.created_at",
    "updated_at": "logs.updated_at",
    "title": "logged_games.title",
}

ALL_SORT_DIRECTIONS: frozenset[str] = frozenset({"ASC", "DESC"})

# Game columns are aliased so they never collide with logs.id
LOG_SELECT_COLUMNS = """
    logs.id, logs.created_at, logs.updated_at, logs.date, logs.rating,
    logs.notes, logs.status, logs.minutes_played, logs.game_id,
    logged_games.id AS game_ref, logged_games.title AS game_title,
    logged_games.cover_id AS game_cover_id
"""


def build_status_filter(statuses: Iterable[str | LogStatus] | None) -> tuple[str, list[str]]:
    """Build the status restriction for a log query.

    Args:
        statuses: Allowed status values. Empty or None means unrestricted.

    Returns:
        Tuple of (clause, params). The clause is empty when unrestricted.

    Raises:
        InvalidQueryError: If a value is not a known LogStatus.
    """
    if statuses is None:
        return "", []
    if isinstance(statuses, (str, LogStatus)):
        statuses = [statuses]

    allowed = LogStatus.values()
    params: list[str] = []
    for raw in statuses:
        value = status_param(raw)
        if not isinstance(value, str) or value not in allowed:
            raise InvalidQueryError(f"Unknown status filter value {value!r}; expected one of {', '.join(allowed)}")
        if value not in params:
            params.append(value)

    if not params:
        return "", []

    placeholders = ", ".join("?" for _ in params)
    return f"logs.status IN ({placeholders})", params


def build_order_by(sort_column: str, sort_direction: str) -> str:
    """Build a validated ORDER BY clause.

    Ties are broken by log id in the same direction so results are stable.

    Args:
        sort_column: One of SORTABLE_COLUMNS.
        sort_direction: "ASC" or "DESC", case-insensitive.

    Returns:
        The ORDER BY clause text.

    Raises:
        InvalidQueryError: If the column or direction is not allowed.
    """
    column = SORTABLE_COLUMNS.get(sort_column) if isinstance(sort_column, str) else None
    if column is None:
        raise InvalidQueryError(
            f"Cannot sort by {sort_column!r}; expected one of {', '.join(sorted(SORTABLE_COLUMNS))}"
        )

    direction = sort_direction.strip().upper() if isinstance(sort_direction, str) else None
    if direction not in ALL_SORT_DIRECTIONS:
        raise InvalidQueryError(f"Invalid sort direction {sort_direction!r}; expected ASC or DESC")

    if column == "logs.id":
        return f"ORDER BY logs.id {direction}"
    return f"ORDER BY {column} {direction}, logs.id {direction}"


def build_log_select(where: str = "", order_by: str = "", limit: bool = False) -> str:
    """Assemble the joined log SELECT.

    A LEFT JOIN is used so a log whose game row is missing still comes
    back and can be reported instead of silently disappearing.

    Args:
        where: Optional condition without the WHERE keyword.
        order_by: Optional clause from build_order_by().
        limit: Append a ``LIMIT ?`` placeholder.

    Returns:
        The statement text.
    """
    query = f"SELECT {LOG_SELECT_COLUMNS} FROM logs LEFT JOIN logged_games ON logged_games.id = logs.game_id"
    if where:
        query += f" WHERE {where}"
    if order_by:
        query += f" {order_by}"
    if limit:
        query += " LIMIT ?"
    return query
