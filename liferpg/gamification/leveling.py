"""Leveling math for LifeRPG.

Leveling Curve
--------------
``xp_threshold(L)`` is the cumulative XP needed to *finish* level ``L``::

    xp_threshold(L) = floor(100 * L ** 1.5)

so a fresh profile (0 XP) is level 1 and reaches level 2 at 100 XP,
level 3 at 282 XP, level 4 at 519 XP, and so on.  The threshold is
computed with integer square roots so that ``level_for_xp`` is an exact
inverse at every boundary (no float drift).

Rank Titles
-----------
    1-2   Novice
    3-4   Beginner
    5-6   Focused
    7-9   Disciplined
   10-14  Unstoppable
   15-19  Elite
   20+    Ascended

Stat Levels
-----------
Each attribute levels independently: ``floor(sqrt(value / 50)) + 1``.
"""

from __future__ import annotations

from math import isqrt


# ── leveling constants (easy to adjust) ──────────────────────────────────

LEVEL_BASE = 100        # XP to finish level 1
LEVEL_EXPONENT = 1.5    # xp_threshold assumes 1.5 (integer square root)

STAT_LEVEL_BASE = 50


# ── level math ───────────────────────────────────────────────────────────


def xp_threshold(level: int) -> int:
    """Cumulative XP required to complete *level*.

    ``xp_threshold(0)`` is 0, which is the floor of level 1.
    """
    if level <= 0:
        return 0
    # floor(100 * L^1.5) == isqrt(100^2 * L^3)
    return isqrt(LEVEL_BASE * LEVEL_BASE * level ** 3)


def level_for_xp(total_xp: int) -> int:
    """Return the level a player is at given their total XP."""
    if total_xp <= 0:
        return 1
    # Closed-form estimate, then walk to the exact boundary.
    level = int((total_xp / LEVEL_BASE) ** (1 / LEVEL_EXPONENT)) + 1
    while xp_threshold(level) <= total_xp:
        level += 1
    while level > 1 and xp_threshold(level - 1) > total_xp:
        level -= 1
    return level


def level_progress(total_xp: int) -> tuple[int, int]:
    """Return ``(progress, required)`` for the progress bar of the current level."""
    level = level_for_xp(total_xp)
    floor = xp_threshold(level - 1)
    ceiling = xp_threshold(level)
    return total_xp - floor, ceiling - floor


def xp_to_next_level(total_xp: int) -> int:
    """XP still needed to reach the next level."""
    return xp_threshold(level_for_xp(total_xp)) - total_xp


# ── rank titles ──────────────────────────────────────────────────────────

# Ordered descending so the first match wins.
RANK_TITLES: list[tuple[int, str]] = [
    (20, "Ascended"),
    (15, "Elite"),
    (10, "Unstoppable"),
    (7,  "Disciplined"),
    (5,  "Focused"),
    (3,  "Beginner"),
    (1,  "Novice"),
]


def title_for_level(level: int) -> str:
    """Return the rank title for *level*."""
    for threshold, title in RANK_TITLES:
        if level >= threshold:
            return title
    return "Novice"


# ── stat levels ──────────────────────────────────────────────────────────


def stat_level(value: int) -> int:
    """Level of a single attribute with *value* accumulated points."""
    if value <= 0:
        return 1
    return isqrt(value // STAT_LEVEL_BASE) + 1


def stat_progress(value: int) -> tuple[int, int]:
    """Return ``(earned_in_level, needed_for_level)`` for an attribute."""
    level = stat_level(value)
    floor = STAT_LEVEL_BASE * (level - 1) ** 2
    ceiling = STAT_LEVEL_BASE * level ** 2
    return value - floor, ceiling - floor
