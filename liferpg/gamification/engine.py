"""Progression engine for LifeRPG — one log in, one new profile out.

Transition Order
----------------
``apply_activity_log`` runs these steps in a fixed order; the order of
the returned reward events follows it:

 1. resolve the activity (``UnknownActivity`` otherwise)
 2. base XP = base_xp * minutes / base_duration, rounded half up
 3. reward roll (critical / bonus / loot)
 4. streak update (+100 XP on every 7th consecutive day)
 5. new immutable ``ActivityLog``
 6. daily quests (+80 XP when all four are done, once per day)
 7. stats: ``stat += base XP`` and ``Discipline += 5``
 8. total XP and level (level-up event, no XP)
 9. achievements, in catalog order
10. first loot item (if any) goes to the inventory
11. ``last_login_date = today``

The log entry's ``xp_earned`` is the final amount for the transition,
including streak and quest bonuses.  Nothing is mutated: invalid input
raises before any state is built, and success returns a fresh
``Profile``.

Session Start
-------------
``start_session`` is run once when a profile is loaded, before any log:
it zeroes a lapsed streak and replaces a stale quest checklist.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import NamedTuple

from ..errors import InvalidDuration, UnknownActivity
from .achievements import evaluate_achievements
from .catalog import ActivityCatalog, ActivityDef, StatType
from .leveling import level_for_xp
from .profile import ActivityLog, Profile
from .quests import record_quest, roll_over
from .rewards import RandomSource, RewardEvent, RewardType, roll_reward
from .streaks import advance_streak, reconcile_streak

logger = logging.getLogger(__name__)


DISCIPLINE_PER_LOG = 5


class Transition(NamedTuple):
    profile: Profile
    rewards: list[RewardEvent]


# ── helpers ──────────────────────────────────────────────────────────────


def catalog_for(profile: Profile) -> ActivityCatalog:
    return ActivityCatalog(profile.custom_activities)


def compute_base_xp(definition: ActivityDef, duration_minutes: int) -> int:
    """Duration-scaled XP, rounded half up (``12.5 -> 13``)."""
    # floor(x + 1/2) in integer arithmetic, exact for any duration
    numerator = 2 * definition.base_xp * duration_minutes + definition.base_duration
    return numerator // (2 * definition.base_duration)


def _check_duration(duration_minutes: object) -> int:
    if (
        isinstance(duration_minutes, bool)
        or not isinstance(duration_minutes, int)
        or duration_minutes <= 0
    ):
        raise InvalidDuration(duration_minutes)
    return duration_minutes


# ── main entry points ────────────────────────────────────────────────────


def apply_activity_log(
    profile: Profile,
    activity: str,
    duration_minutes: int,
    now: datetime,
    *,
    rng: RandomSource | None = None,
) -> Transition:
    """Log *duration_minutes* of *activity* at *now* (local time).

    Returns ``(new_profile, rewards)``.  Raises ``UnknownActivity`` or
    ``InvalidDuration`` without touching anything.
    """
    duration_minutes = _check_duration(duration_minutes)

    # ── 1. resolve ───────────────────────────────────────────────────
    definition = catalog_for(profile).get(activity)
    if definition is None:
        raise UnknownActivity(activity)

    today: date = now.date()
    rewards: list[RewardEvent] = []

    # ── 2. base XP by duration ───────────────────────────────────────
    base_xp = compute_base_xp(definition, duration_minutes)

    # ── 3. reward roll ───────────────────────────────────────────────
    roll = roll_reward(base_xp, rng)
    earned = roll.xp
    if roll.event is not None:
        rewards.append(roll.event)

    # ── 4. streak ────────────────────────────────────────────────────
    streak = advance_streak(profile.streak, profile.last_login_date, today)
    earned += streak.bonus_xp
    if streak.event is not None:
        rewards.append(streak.event)

    # ── 5/6. daily quests, then the log entry with the final XP ──────
    quests = record_quest(profile.daily_quests, activity, today)
    earned += quests.bonus_xp
    if quests.event is not None:
        rewards.append(quests.event)

    new_log = ActivityLog(
        id=uuid.uuid4().hex,
        activity=activity,
        duration_minutes=duration_minutes,
        xp_earned=earned,
        timestamp=now,
        date=today,
        critical=roll.critical,
    )

    # ── 7. stats ─────────────────────────────────────────────────────
    stats = dict(profile.stats)
    stats[definition.stat.value] = stats.get(definition.stat.value, 0) + base_xp
    discipline = StatType.DISCIPLINE.value
    stats[discipline] = stats.get(discipline, 0) + DISCIPLINE_PER_LOG

    # ── 8. XP and level ──────────────────────────────────────────────
    total_xp = profile.total_xp + earned
    level = level_for_xp(total_xp)
    if level > profile.level:
        rewards.append(RewardEvent(RewardType.LEVEL_UP, f"Level {level} Reached!"))

    tentative = replace(
        profile,
        level=level,
        current_xp=profile.current_xp + earned,
        total_xp=total_xp,
        stats=stats,
        logs=(new_log,) + profile.logs,
        streak=streak.streak,
        daily_quests=quests.state,
    )

    # ── 9. achievements ──────────────────────────────────────────────
    new_ids, achievement_events = evaluate_achievements(tentative, new_log)
    rewards.extend(achievement_events)

    # ── 10. loot (only the first item per log) ───────────────────────
    inventory = profile.inventory
    item = next((r.item for r in rewards if r.item), None)
    if item is not None:
        inventory = inventory + (item,)

    # ── 11. finish ───────────────────────────────────────────────────
    new_profile = replace(
        tentative,
        unlocked_achievements=profile.unlocked_achievements + tuple(new_ids),
        inventory=inventory,
        last_login_date=today,
    )

    logger.info(
        "Logged %s for %d min: +%d XP (total %d, level %d, streak %d, %d rewards)",
        activity, duration_minutes, earned, total_xp, level,
        streak.streak, len(rewards),
    )
    return Transition(new_profile, rewards)


def add_custom_activity(profile: Profile, definition: ActivityDef) -> Profile:
    """Append *definition* to the profile's custom activities.

    Raises ``DuplicateActivity`` if the key is taken and
    ``InvalidActivity`` if the definition is malformed.
    """
    catalog_for(profile).check_can_add(definition)
    logger.info("Added custom activity %r (%s)", definition.key, definition.stat.value)
    return replace(
        profile,
        stats=dict(profile.stats),
        custom_activities=profile.custom_activities + (definition,),
    )


def start_session(profile: Profile, today: date) -> Profile:
    """Reconcile a freshly loaded profile with *today*.

    Runs before any log in the session, never between logs.
    """
    streak = reconcile_streak(profile.streak, profile.last_login_date, today)
    quests = roll_over(profile.daily_quests, today)
    if streak != profile.streak:
        logger.info(
            "Streak lapsed (last activity %s); resetting %d -> 0",
            profile.last_login_date, profile.streak,
        )
    if streak == profile.streak and quests is profile.daily_quests:
        return profile
    return replace(
        profile, stats=dict(profile.stats), streak=streak, daily_quests=quests,
    )
