"""Profile store — load and save the one profile snapshot.

The store is the only place that knows about persistence errors.  A
missing, corrupt or undecodable snapshot is reported as ``None`` and the
caller starts over from ``initial_profile``.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime

from ..gamification.profile import (
    SCHEMA_VERSION,
    Profile,
    initial_profile,
    profile_from_dict,
    profile_to_dict,
)
from .db import get_session
from .models import ProfileSnapshot

logger = logging.getLogger(__name__)


class ProfileStore:
    """Reads and writes the single ``ProfileSnapshot`` row."""

    def load(self) -> Profile | None:
        with get_session() as db:
            row: ProfileSnapshot | None = (
                db.query(ProfileSnapshot).order_by(ProfileSnapshot.id).first()
            )
            if row is None:
                return None
            payload = row.payload

        try:
            return profile_from_dict(json.loads(payload))
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.warning("Discarding unreadable profile snapshot: %s", exc)
            return None

    def load_or_initial(self, today: date) -> Profile:
        profile = self.load()
        if profile is None:
            logger.info("No saved profile; starting fresh")
            return initial_profile(today)
        return profile

    def save(self, profile: Profile) -> None:
        payload = json.dumps(profile_to_dict(profile))
        with get_session() as db:
            row: ProfileSnapshot | None = (
                db.query(ProfileSnapshot).order_by(ProfileSnapshot.id).first()
            )
            if row is None:
                row = ProfileSnapshot()
                db.add(row)
            row.payload = payload
            row.schema_version = SCHEMA_VERSION
            row.saved_at = datetime.now()
        logger.debug("Saved profile (level %d, %d XP)", profile.level, profile.total_xp)
