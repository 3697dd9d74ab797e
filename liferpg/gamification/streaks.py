"""Day-granularity activity streaks.

Rules
-----
- Second log on the same calendar day: no change.
- Log on the day after the last one: ``streak + 1``.
- Any longer gap (or no previous log): back to 1.
- Each time the new streak lands on a multiple of 7: +100 XP, once.

On session start, a stored ``last_login_date`` older than yesterday
forces the streak to 0 before anything is logged (see ``reconcile_streak``).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from .rewards import RewardEvent, RewardType


STREAK_MILESTONE = 7
STREAK_BONUS_XP = 100


@dataclass(frozen=True)
class StreakUpdate:
    streak: int
    event: RewardEvent | None = None

    @property
    def bonus_xp(self) -> int:
        return self.event.xp if self.event is not None else 0


def advance_streak(streak: int, last_date: date | None, today: date) -> StreakUpdate:
    """Streak after logging something on *today*."""
    if last_date == today:
        return StreakUpdate(streak)

    if last_date == today - timedelta(days=1):
        new_streak = streak + 1
    else:
        new_streak = 1

    if new_streak > 0 and new_streak % STREAK_MILESTONE == 0:
        return StreakUpdate(new_streak, RewardEvent(
            RewardType.BONUS,
            f"{new_streak} Day Streak Bonus!",
            xp=STREAK_BONUS_XP,
        ))
    return StreakUpdate(new_streak)


def reconcile_streak(streak: int, last_date: date | None, today: date) -> int:
    """Streak to show at session start, before any new log."""
    if last_date is not None and last_date < today - timedelta(days=1):
        return 0
    return streak
