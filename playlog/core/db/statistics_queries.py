"""Dashboard aggregates over a date range."""

from __future__ import annotations

from datetime import date

from playlog.core.db.models import DashboardStatistics, LogStatus, date_param

__all__ = ["StatisticsMixin"]


class StatisticsMixin:
    """Mixin providing dashboard statistics.

    Requires ConnectionBase: _cursor().
    """

    def get_dashboard_statistics(self, start_date: str | date, end_date: str | date) -> DashboardStatistics:
        """Aggregate logs dated within [start_date, end_date].

        Wishlist logs are excluded from minutes and games played. Completed
        logs are counted in games played and again in games completed.
        Dates compare as text, so both bounds must use the stored ISO form.

        Args:
            start_date: First day of the range (inclusive).
            end_date: Last day of the range (inclusive).

        Returns:
            Statistics for the range; all zero when no logs fall inside it.
        """
        with self._cursor() as cur:
            row = cur.execute(
                """
                SELECT
                    COALESCE(SUM(CASE WHEN status != ? THEN minutes_played END), 0),
                    COALESCE(SUM(CASE WHEN status != ? THEN 1 ELSE 0 END), 0),
                    COALESCE(SUM(CASE WHEN status = ? THEN 1 ELSE 0 END), 0)
                FROM logs
                WHERE date BETWEEN ? AND ?
                """,
                (
                    LogStatus.WISHLIST.value,
                    LogStatus.WISHLIST.value,
                    LogStatus.COMPLETED.value,
                    date_param(start_date),
                    date_param(end_date),
                ),
            ).fetchone()

        return DashboardStatistics(
            total_minutes_played=int(row[0]),
            total_games_played=int(row[1]),
            total_games_completed=int(row[2]),
        )
