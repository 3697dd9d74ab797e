"""Achievements for LifeRPG.

Achievement Catalog
-------------------
    first_step    First Step    Log your first activity.
    streak_7      On Fire       Reach a 7-day streak.
    reader        Bookworm      Log 30 hours of reading.
    daily_grind   Daily Grind   Earn 100 XP in a single day.
    early_riser   Early Riser   Log an activity before 8 AM.

Every log re-checks the catalog in declared order.  Once an id is in
``Profile.unlocked_achievements`` its condition is never evaluated
again, so achievements cannot be lost.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from .history import minutes_for_activity, xp_on_date
from .profile import ActivityLog, Profile
from .rewards import RewardEvent, RewardType


Condition = Callable[[Profile, Optional[ActivityLog]], bool]

READER_MINUTES = 30 * 60
DAILY_GRIND_XP = 100
EARLY_RISER_HOURS = range(4, 8)


# ── conditions ───────────────────────────────────────────────────────────


def _first_step(profile: Profile, new_log: ActivityLog | None) -> bool:
    return len(profile.logs) >= 1


def _streak_7(profile: Profile, new_log: ActivityLog | None) -> bool:
    return profile.streak >= 7


def _reader(profile: Profile, new_log: ActivityLog | None) -> bool:
    return minutes_for_activity(profile.logs, "Reading") >= READER_MINUTES


def _daily_grind(profile: Profile, new_log: ActivityLog | None) -> bool:
    if new_log is None:
        return False
    return xp_on_date(profile.logs, new_log.date) >= DAILY_GRIND_XP


def _early_riser(profile: Profile, new_log: ActivityLog | None) -> bool:
    if new_log is None:
        return False
    return new_log.timestamp.hour in EARLY_RISER_HOURS


# ── catalog ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class AchievementDef:
    key: str
    title: str
    description: str
    icon_key: str
    condition: Condition = field(repr=False, compare=False)


ACHIEVEMENTS: list[AchievementDef] = [
    AchievementDef("first_step",  "First Step",  "Log your first activity.",    "Activity",   _first_step),
    AchievementDef("streak_7",    "On Fire",     "Reach a 7-day streak.",       "Flame",      _streak_7),
    AchievementDef("reader",      "Bookworm",    "Log 30 hours of reading.",    "BookOpen",   _reader),
    AchievementDef("daily_grind", "Daily Grind", "Earn 100 XP in a single day.", "TrendingUp", _daily_grind),
    AchievementDef("early_riser", "Early Riser", "Log an activity before 8 AM.", "Clock",     _early_riser),
]

_ACHIEVEMENT_MAP: dict[str, AchievementDef] = {a.key: a for a in ACHIEVEMENTS}


def get_achievement(key: str) -> AchievementDef | None:
    return _ACHIEVEMENT_MAP.get(key)


# ── evaluator ────────────────────────────────────────────────────────────


def evaluate_achievements(
    profile: Profile, new_log: ActivityLog | None = None,
) -> tuple[list[str], list[RewardEvent]]:
    """Return ``(new_ids, events)`` for everything *profile* newly earns.

    *profile* is the tentative post-log state, already containing
    *new_log*.  Ids come back in catalog order.
    """
    unlocked = set(profile.unlocked_achievements)
    new_ids: list[str] = []
    events: list[RewardEvent] = []
    for ach in ACHIEVEMENTS:
        if ach.key in unlocked:
            continue
        if ach.condition(profile, new_log):
            new_ids.append(ach.key)
            events.append(RewardEvent(
                RewardType.BONUS,
                f"Achievement: {ach.title}",
                achievement_id=ach.key,
            ))
    return new_ids, events
