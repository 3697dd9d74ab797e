"""Reward events and the per-log reward roll.

Roll Table
----------
One uniform draw ``r`` in ``[0, 1)`` per logged activity:

    r < 0.10          Critical   XP doubled
    0.10 <= r < 0.25  Bonus      +10..29 XP
    0.25 <= r < 0.30  Loot       one item from ``LOOT_TABLE``
    r >= 0.30         nothing

The random source is injectable (anything with ``random``, ``randint``
and ``choice``) so tests can script the outcome.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class RewardType(Enum):
    CRITICAL = "critical"
    BONUS = "bonus"
    LOOT = "loot"
    LEVEL_UP = "level_up"
    QUEST_COMPLETE = "quest_complete"


@dataclass(frozen=True)
class RewardEvent:
    kind: RewardType
    message: str
    xp: int | None = None
    item: str | None = None
    achievement_id: str | None = None


class RandomSource(Protocol):
    def random(self) -> float: ...
    def randint(self, a: int, b: int) -> int: ...
    def choice(self, seq): ...


# ── roll constants (easy to tweak) ───────────────────────────────────────

CRITICAL_CHANCE = 0.10
BONUS_CHANCE = 0.25        # cumulative
LOOT_CHANCE = 0.30         # cumulative
BONUS_XP_MIN = 10
BONUS_XP_MAX = 29

LOOT_TABLE: list[str] = [
    "Potion of Focus",
    "Scroll of Wisdom",
    "Dumbbell of Giants",
    "Coin of Discipline",
    "Timekeeper's Hourglass",
    "Meditative Gem",
]


@dataclass(frozen=True)
class RollOutcome:
    xp: int                       # base XP after the roll
    critical: bool = False
    event: RewardEvent | None = None


def roll_reward(base_xp: int, rng: RandomSource | None = None) -> RollOutcome:
    """Apply at most one random bonus to *base_xp*."""
    if rng is None:
        rng = random
    r = rng.random()

    if r < CRITICAL_CHANCE:
        xp = base_xp * 2
        return RollOutcome(xp, True, RewardEvent(
            RewardType.CRITICAL, "Critical Success! XP Doubled!", xp=xp,
        ))
    if r < BONUS_CHANCE:
        bonus = rng.randint(BONUS_XP_MIN, BONUS_XP_MAX)
        return RollOutcome(base_xp + bonus, False, RewardEvent(
            RewardType.BONUS, "Bonus Focus!", xp=bonus,
        ))
    if r < LOOT_CHANCE:
        item = rng.choice(LOOT_TABLE)
        return RollOutcome(base_xp, False, RewardEvent(
            RewardType.LOOT, "You found an item!", item=item,
        ))
    return RollOutcome(base_xp)
