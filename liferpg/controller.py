"""Qt-facing controller that owns the held profile.

The engine is pure; this object is the collaborator that calls it.  It
loads the profile, reconciles it once per session, replaces it after
each log, saves it, and feeds reward events to the UI one at a time.

Signals
-------
profile_changed(profile: Profile)
    Emitted after the held profile is replaced (start, log, custom add).
reward_ready(event: RewardEvent)
    Emitted when a reward should be shown.  The next one only follows
    after ``acknowledge_reward()``.
rewards_drained()
    Emitted when the last pending reward is acknowledged.
error(message: str)
    Emitted when the engine rejects an operation; nothing changed.
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime

from PyQt6.QtCore import QObject, pyqtSignal

from .database.store import ProfileStore
from .errors import InvalidActivity, ProgressionError
from .gamification.catalog import ActivityCatalog, ActivityDef, StatType
from .gamification.engine import (
    add_custom_activity,
    apply_activity_log,
    catalog_for,
    start_session,
)
from .gamification.profile import Profile
from .gamification.rewards import RandomSource, RewardEvent
from .settings import Settings

logger = logging.getLogger(__name__)


class ProgressionController(QObject):
    """Holds one profile and serialises every change to it."""

    profile_changed = pyqtSignal(object)
    reward_ready = pyqtSignal(object)
    rewards_drained = pyqtSignal()
    error = pyqtSignal(str)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        store: ProfileStore | None = None,
        settings: Settings | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store if store is not None else ProfileStore()
        self._settings = settings if settings is not None else Settings()
        self._rng = rng
        self._profile: Profile | None = None
        self._pending: deque[RewardEvent] = deque()
        self._current: RewardEvent | None = None

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def profile(self) -> Profile:
        if self._profile is None:
            self.start()
        return self._profile

    @property
    def current_reward(self) -> RewardEvent | None:
        return self._current

    @property
    def pending_rewards(self) -> list[RewardEvent]:
        return list(self._pending)

    def catalog(self) -> ActivityCatalog:
        return catalog_for(self.profile)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC API
    # ══════════════════════════════════════════════════════════════════

    def start(self, now: datetime | None = None) -> Profile:
        """Load (or create) the profile and reconcile it with today."""
        if now is None:
            now = datetime.now()
        loaded = self._store.load_or_initial(now.date())
        self._replace(start_session(loaded, now.date()))
        return self._profile

    def log_activity(
        self, activity: str, duration_minutes: int, now: datetime | None = None,
    ) -> list[RewardEvent] | None:
        """Log an activity.  Returns the rewards, or ``None`` if rejected."""
        if now is None:
            now = datetime.now()
        try:
            profile, rewards = apply_activity_log(
                self.profile, activity, duration_minutes, now, rng=self._rng,
            )
        except ProgressionError as exc:
            logger.info("Rejected log of %r: %s", activity, exc)
            self.error.emit(str(exc))
            return None

        self._replace(profile)
        self._enqueue(rewards)
        return rewards

    def add_custom_activity(
        self,
        name: str,
        stat: StatType | str,
        *,
        base_xp: int | None = None,
        base_duration: int | None = None,
        icon_key: str = "Star",
        color: str = "text-slate-400",
    ) -> bool:
        """Create a custom activity with the configured defaults."""
        try:
            if not isinstance(stat, StatType):
                try:
                    stat = StatType(stat)
                except ValueError:
                    raise InvalidActivity(f"Unknown stat: {stat!r}") from None
            definition = ActivityDef(
                key=name.strip(),
                stat=stat,
                base_xp=base_xp if base_xp is not None else self._settings.custom_base_xp,
                base_duration=(
                    base_duration if base_duration is not None
                    else self._settings.custom_base_duration
                ),
                icon_key=icon_key,
                color=color,
            )
            profile = add_custom_activity(self.profile, definition)
        except ProgressionError as exc:
            logger.info("Rejected custom activity %r: %s", name, exc)
            self.error.emit(str(exc))
            return False

        self._replace(profile)
        return True

    def acknowledge_reward(self) -> None:
        """Dismiss the reward on screen and show the next one, if any."""
        if self._current is None:
            return
        self._current = None
        self._show_next()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _replace(self, profile: Profile) -> None:
        self._profile = profile
        self._store.save(profile)
        self.profile_changed.emit(profile)

    def _enqueue(self, rewards: list[RewardEvent]) -> None:
        self._pending.extend(rewards)
        if self._current is None and self._pending:
            self._show_next()

    def _show_next(self) -> None:
        if self._pending:
            self._current = self._pending.popleft()
            self.reward_ready.emit(self._current)
        else:
            self.rewards_drained.emit()
