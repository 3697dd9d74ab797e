"""Read-only views derived from a profile's activity logs."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from .profile import ActivityLog


def xp_on_date(logs: Iterable[ActivityLog], day: date) -> int:
    """Total XP earned by logs dated *day*."""
    return sum(log.xp_earned for log in logs if log.date == day)


def minutes_for_activity(logs: Iterable[ActivityLog], activity: str) -> int:
    return sum(log.duration_minutes for log in logs if log.activity == activity)


def minutes_by_activity(logs: Iterable[ActivityLog]) -> dict[str, int]:
    totals: dict[str, int] = {}
    for log in logs:
        totals[log.activity] = totals.get(log.activity, 0) + log.duration_minutes
    return totals


def daily_xp_history(
    logs: Iterable[ActivityLog], today: date, days: int = 35,
) -> list[tuple[date, int]]:
    """``(date, xp)`` for the last *days* days, oldest first, today last."""
    per_day: dict[date, int] = {}
    for log in logs:
        per_day[log.date] = per_day.get(log.date, 0) + log.xp_earned
    result: list[tuple[date, int]] = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        result.append((day, per_day.get(day, 0)))
    return result
