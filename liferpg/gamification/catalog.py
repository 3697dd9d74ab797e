"""Activity catalog for LifeRPG.

Built-in Activities
-------------------
    Workout         Strength    40 XP / 30 min
    Reading         Knowledge   25 XP / 30 min
    Work/Study      Wealth      50 XP / 60 min
    Meditation      Mind        20 XP / 15 min
    Skill Learning  Knowledge   45 XP / 30 min

XP scales linearly with the logged duration against the reference
duration, so 60 minutes of Workout is worth 80 XP.

Custom Activities
-----------------
Users can add their own activities.  They are appended after the
built-ins; an identifier can never shadow another one.  The icon and
color keys are display hints only — the engine just carries them along.

Daily Quests
------------
Four of the built-ins double as daily quests (see ``DAILY_QUESTS``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ..errors import DuplicateActivity, InvalidActivity


# ── stats ────────────────────────────────────────────────────────────────


class StatType(Enum):
    STRENGTH = "Strength"
    KNOWLEDGE = "Knowledge"
    WEALTH = "Wealth"
    MIND = "Mind"
    DISCIPLINE = "Discipline"


STAT_NAMES: tuple[str, ...] = tuple(s.value for s in StatType)


# ── definitions ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ActivityDef:
    key: str                  # unique; doubles as the display name
    stat: StatType
    base_xp: int
    base_duration: int        # minutes
    icon_key: str = "Star"
    color: str = "text-slate-400"

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "stat": self.stat.value,
            "base_xp": self.base_xp,
            "base_duration": self.base_duration,
            "icon_key": self.icon_key,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ActivityDef":
        return cls(
            key=str(data["key"]),
            stat=StatType(data["stat"]),
            base_xp=int(data["base_xp"]),
            base_duration=int(data["base_duration"]),
            icon_key=str(data.get("icon_key", "Star")),
            color=str(data.get("color", "text-slate-400")),
        )


BUILTIN_ACTIVITIES: list[ActivityDef] = [
    ActivityDef("Workout",        StatType.STRENGTH,  40, 30, "Dumbbell",  "text-red-500"),
    ActivityDef("Reading",        StatType.KNOWLEDGE, 25, 30, "BookOpen",  "text-blue-500"),
    ActivityDef("Work/Study",     StatType.WEALTH,    50, 60, "Briefcase", "text-yellow-500"),
    ActivityDef("Meditation",     StatType.MIND,      20, 15, "Brain",     "text-purple-500"),
    ActivityDef("Skill Learning", StatType.KNOWLEDGE, 45, 30, "Zap",       "text-cyan-500"),
]

# Defaults offered to the user when creating a custom activity.
CUSTOM_BASE_XP = 30
CUSTOM_BASE_DURATION = 30


# ── daily quests ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class QuestDef:
    activity: str
    label: str


DAILY_QUESTS: list[QuestDef] = [
    QuestDef("Workout",    "Body Quest"),
    QuestDef("Reading",    "Knowledge Quest"),
    QuestDef("Work/Study", "Work Quest"),
    QuestDef("Meditation", "Mind Quest"),
]

DAILY_QUEST_TYPES: frozenset[str] = frozenset(q.activity for q in DAILY_QUESTS)


# ── display palettes (round-tripped, never interpreted) ─────────────────

ICON_KEYS: tuple[str, ...] = (
    "Dumbbell", "BookOpen", "Briefcase", "Brain", "Zap",
    "Music", "Palette", "Code", "Gamepad2", "Bike",
    "Utensils", "Leaf", "Shield", "Heart", "Star", "Sword",
)

COLOR_PALETTE: list[tuple[str, str]] = [
    ("Red", "text-red-500"),
    ("Orange", "text-orange-500"),
    ("Amber", "text-amber-500"),
    ("Yellow", "text-yellow-500"),
    ("Lime", "text-lime-500"),
    ("Green", "text-green-500"),
    ("Emerald", "text-emerald-500"),
    ("Teal", "text-teal-500"),
    ("Cyan", "text-cyan-500"),
    ("Sky", "text-sky-500"),
    ("Blue", "text-blue-500"),
    ("Indigo", "text-indigo-500"),
    ("Violet", "text-violet-500"),
    ("Purple", "text-purple-500"),
    ("Fuchsia", "text-fuchsia-500"),
    ("Pink", "text-pink-500"),
    ("Rose", "text-rose-500"),
]


# ── catalog ──────────────────────────────────────────────────────────────


def validate_custom(definition: ActivityDef) -> None:
    """Raise :class:`InvalidActivity` if *definition* cannot be logged."""
    if not definition.key.strip():
        raise InvalidActivity("Activity name must not be empty")
    if not isinstance(definition.stat, StatType):
        raise InvalidActivity(f"Unknown stat: {definition.stat!r}")
    for name in ("base_xp", "base_duration"):
        value = getattr(definition, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidActivity(f"{name} must be a positive integer, got {value!r}")


class ActivityCatalog:
    """Built-ins followed by a profile's custom activities.

    Look-ups return the first match in that order.
    """

    def __init__(self, custom: Iterable[ActivityDef] = ()) -> None:
        self._items: list[ActivityDef] = list(BUILTIN_ACTIVITIES) + list(custom)

    # ── queries ─────────────────────────────────────────────────────

    def all_items(self) -> list[ActivityDef]:
        return list(self._items)

    def keys(self) -> list[str]:
        return [a.key for a in self._items]

    def get(self, key: str) -> ActivityDef | None:
        for item in self._items:
            if item.key == key:
                return item
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def by_stat(self, stat: StatType) -> list[ActivityDef]:
        return [a for a in self._items if a.stat is stat]

    # ── mutation helpers ────────────────────────────────────────────

    def check_can_add(self, definition: ActivityDef) -> None:
        """Validate *definition* and make sure its key is free."""
        validate_custom(definition)
        if definition.key in self:
            raise DuplicateActivity(definition.key)
