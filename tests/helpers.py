"""Shared test helpers for LifeRPG."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta

from liferpg.gamification.profile import ActivityLog, Profile


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class ScriptedRandom:
    """Deterministic stand-in for :mod:`random`.

    ``rolls`` feed ``random()``, ``ints`` feed ``randint()`` and
    ``picks`` are indexes used by ``choice()``.  Once a script runs out,
    ``random()`` returns 0.99 (no reward).
    """

    def __init__(self, rolls=(), ints=(), picks=()):
        self.rolls = list(rolls)
        self.ints = list(ints)
        self.picks = list(picks)
        self.randint_calls: list[tuple[int, int]] = []

    def random(self) -> float:
        return self.rolls.pop(0) if self.rolls else 0.99

    def randint(self, a: int, b: int) -> int:
        self.randint_calls.append((a, b))
        return self.ints.pop(0) if self.ints else a

    def choice(self, seq):
        return seq[self.picks.pop(0) if self.picks else 0]


def make_log(
    activity: str = "Workout",
    minutes: int = 30,
    xp: int = 40,
    when: datetime | None = None,
    critical: bool = False,
) -> ActivityLog:
    when = when or datetime(2024, 3, 14, 12, 0)
    return ActivityLog(
        id=f"{activity}-{when.isoformat()}",
        activity=activity,
        duration_minutes=minutes,
        xp_earned=xp,
        timestamp=when,
        date=when.date(),
        critical=critical,
    )


def with_history(profile: Profile, *logs: ActivityLog) -> Profile:
    """Prepend *logs* (newest first) to *profile*."""
    return replace(profile, logs=tuple(logs) + profile.logs)


def days_before(day: date, n: int) -> date:
    return day - timedelta(days=n)
