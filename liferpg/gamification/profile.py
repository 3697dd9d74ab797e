"""Immutable profile values for LifeRPG.

The ``Profile`` is the single aggregate the engine reads and produces.
It is never mutated in place: every transition returns a new instance
(``dataclasses.replace``) and the caller swaps it in.

Snapshot Format
---------------
``profile_to_dict`` / ``profile_from_dict`` convert to plain JSON-safe
dicts.  Decoding is additive: fields missing from an older snapshot are
filled with their empty defaults, unknown keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from ..errors import ProgressionError
from .catalog import STAT_NAMES, ActivityCatalog, ActivityDef


SCHEMA_VERSION = 1


@dataclass(frozen=True)
class ActivityLog:
    """One completed, logged activity.  Fixed forever once created."""

    id: str
    activity: str
    duration_minutes: int
    xp_earned: int
    timestamp: datetime
    date: date
    critical: bool = False


@dataclass(frozen=True)
class DailyQuestState:
    date: date | None = None
    completed: tuple[str, ...] = ()
    bonus_claimed: bool = False


def _empty_stats() -> dict[str, int]:
    return {name: 0 for name in STAT_NAMES}


@dataclass(frozen=True)
class Profile:
    level: int = 1
    current_xp: int = 0
    total_xp: int = 0
    stats: dict[str, int] = field(default_factory=_empty_stats)
    logs: tuple[ActivityLog, ...] = ()             # newest first
    streak: int = 0
    last_login_date: date | None = None
    unlocked_achievements: tuple[str, ...] = ()
    daily_quests: DailyQuestState = field(default_factory=DailyQuestState)
    inventory: tuple[str, ...] = ()
    custom_activities: tuple[ActivityDef, ...] = ()


def initial_profile(today: date) -> Profile:
    """The profile a brand-new (or unreadable) save starts from."""
    return Profile(daily_quests=DailyQuestState(date=today))


# ── serialisation ────────────────────────────────────────────────────────


def _date_or_none(value: str | None) -> date | None:
    return date.fromisoformat(value) if value else None


def _custom_from_list(items) -> tuple[ActivityDef, ...]:
    customs: list[ActivityDef] = []
    for raw in items:
        definition = ActivityDef.from_dict(raw)
        try:
            ActivityCatalog(customs).check_can_add(definition)
        except ProgressionError as exc:
            raise ValueError(f"Bad custom activity in snapshot: {exc}") from exc
        customs.append(definition)
    return tuple(customs)


def log_to_dict(log: ActivityLog) -> dict:
    return {
        "id": log.id,
        "activity": log.activity,
        "duration_minutes": log.duration_minutes,
        "xp_earned": log.xp_earned,
        "timestamp": log.timestamp.isoformat(),
        "date": log.date.isoformat(),
        "critical": log.critical,
    }


def log_from_dict(data: dict) -> ActivityLog:
    return ActivityLog(
        id=str(data["id"]),
        activity=str(data["activity"]),
        duration_minutes=int(data["duration_minutes"]),
        xp_earned=int(data["xp_earned"]),
        timestamp=datetime.fromisoformat(data["timestamp"]),
        date=date.fromisoformat(data["date"]),
        critical=bool(data.get("critical", False)),
    )


def profile_to_dict(profile: Profile) -> dict:
    quests = profile.daily_quests
    return {
        "schema_version": SCHEMA_VERSION,
        "level": profile.level,
        "current_xp": profile.current_xp,
        "total_xp": profile.total_xp,
        "stats": dict(profile.stats),
        "logs": [log_to_dict(log) for log in profile.logs],
        "streak": profile.streak,
        "last_login_date": (
            profile.last_login_date.isoformat() if profile.last_login_date else None
        ),
        "unlocked_achievements": list(profile.unlocked_achievements),
        "daily_quests": {
            "date": quests.date.isoformat() if quests.date else None,
            "completed": list(quests.completed),
            "bonus_claimed": quests.bonus_claimed,
        },
        "inventory": list(profile.inventory),
        "custom_activities": [a.to_dict() for a in profile.custom_activities],
    }


def profile_from_dict(data: dict) -> Profile:
    """Decode a snapshot, defaulting any optional field that is missing.

    Raises ``KeyError``, ``TypeError``, ``ValueError`` or ``AttributeError`` on a
    snapshot that is not salvageable.  A custom activity that could not have
    been added through the catalog (bad values, or a key that is already
    taken) counts as unsalvageable and raises ``ValueError``.
    """
    if not isinstance(data, dict):
        raise TypeError(f"Profile snapshot must be an object, got {type(data).__name__}")

    stats = _empty_stats()
    for name, value in (data.get("stats") or {}).items():
        if name in stats:
            stats[name] = int(value)

    quests_raw = data.get("daily_quests") or {}
    quests = DailyQuestState(
        date=_date_or_none(quests_raw.get("date")),
        completed=tuple(quests_raw.get("completed") or ()),
        bonus_claimed=bool(quests_raw.get("bonus_claimed", False)),
    )

    total_xp = int(data["total_xp"])
    return Profile(
        level=int(data.get("level", 1)),
        current_xp=int(data.get("current_xp", total_xp)),
        total_xp=total_xp,
        stats=stats,
        logs=tuple(log_from_dict(d) for d in data.get("logs") or ()),
        streak=int(data.get("streak", 0)),
        last_login_date=_date_or_none(data.get("last_login_date")),
        unlocked_achievements=tuple(data.get("unlocked_achievements") or ()),
        daily_quests=quests,
        inventory=tuple(data.get("inventory") or ()),
        custom_activities=_custom_from_list(data.get("custom_activities") or ()),
    )
