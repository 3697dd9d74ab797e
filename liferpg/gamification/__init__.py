"""Gamification package."""

from .leveling import (
    xp_threshold,
    level_for_xp,
    level_progress,
    xp_to_next_level,
    title_for_level,
    stat_level,
    stat_progress,
    RANK_TITLES,
)
from .catalog import (
    ActivityCatalog,
    ActivityDef,
    StatType,
    STAT_NAMES,
    BUILTIN_ACTIVITIES,
    DAILY_QUESTS,
    DAILY_QUEST_TYPES,
    CUSTOM_BASE_XP,
    CUSTOM_BASE_DURATION,
    ICON_KEYS,
    COLOR_PALETTE,
)
from .rewards import RewardEvent, RewardType, LOOT_TABLE, roll_reward
from .profile import (
    Profile,
    ActivityLog,
    DailyQuestState,
    initial_profile,
    profile_to_dict,
    profile_from_dict,
)
from .achievements import ACHIEVEMENTS, AchievementDef, evaluate_achievements
from .engine import (
    Transition,
    apply_activity_log,
    add_custom_activity,
    start_session,
    compute_base_xp,
)

__all__ = [
    "xp_threshold",
    "level_for_xp",
    "level_progress",
    "xp_to_next_level",
    "title_for_level",
    "stat_level",
    "stat_progress",
    "RANK_TITLES",
    "ActivityCatalog",
    "ActivityDef",
    "StatType",
    "STAT_NAMES",
    "BUILTIN_ACTIVITIES",
    "DAILY_QUESTS",
    "DAILY_QUEST_TYPES",
    "CUSTOM_BASE_XP",
    "CUSTOM_BASE_DURATION",
    "ICON_KEYS",
    "COLOR_PALETTE",
    "RewardEvent",
    "RewardType",
    "LOOT_TABLE",
    "roll_reward",
    "Profile",
    "ActivityLog",
    "DailyQuestState",
    "initial_profile",
    "profile_to_dict",
    "profile_from_dict",
    "ACHIEVEMENTS",
    "AchievementDef",
    "evaluate_achievements",
    "Transition",
    "apply_activity_log",
    "add_custom_activity",
    "start_session",
    "compute_base_xp",
]
