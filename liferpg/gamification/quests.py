"""Daily quest checklist.

Logging each of the four quest activities (``DAILY_QUEST_TYPES``) on one
calendar day pays a one-time +80 XP bonus.  A new day replaces the
checklist outright; nothing carries over.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .catalog import DAILY_QUEST_TYPES
from .profile import DailyQuestState
from .rewards import RewardEvent, RewardType


QUEST_BONUS_XP = 80


@dataclass(frozen=True)
class QuestUpdate:
    state: DailyQuestState
    event: RewardEvent | None = None

    @property
    def bonus_xp(self) -> int:
        return self.event.xp if self.event is not None else 0


def roll_over(state: DailyQuestState, today: date) -> DailyQuestState:
    """Return *state* if it is for *today*, otherwise a fresh checklist."""
    if state.date == today:
        return state
    return DailyQuestState(date=today)


def record_quest(state: DailyQuestState, activity: str, today: date) -> QuestUpdate:
    """Tick *activity* off today's checklist and pay the bonus if it is full."""
    state = roll_over(state, today)
    if activity not in DAILY_QUEST_TYPES or activity in state.completed:
        return QuestUpdate(state)

    completed = state.completed + (activity,)
    if len(completed) == len(DAILY_QUEST_TYPES) and not state.bonus_claimed:
        return QuestUpdate(
            DailyQuestState(date=today, completed=completed, bonus_claimed=True),
            RewardEvent(
                RewardType.QUEST_COMPLETE, "Daily Quests Completed!",
                xp=QUEST_BONUS_XP,
            ),
        )
    return QuestUpdate(DailyQuestState(
        date=today, completed=completed, bonus_claimed=state.bonus_claimed,
    ))
