"""Tests for the profile store, snapshot decoding, schema setup and settings."""

import json
import logging
from dataclasses import replace
from datetime import date, timedelta

import pytest
from sqlalchemy import inspect

from liferpg.database import db as db_module
from liferpg.database.db import get_session, init_db
from liferpg.database.models import ProfileSnapshot
from liferpg.gamification.catalog import ActivityDef, StatType
from liferpg.gamification.engine import add_custom_activity, apply_activity_log
from liferpg.gamification.profile import (
    SCHEMA_VERSION,
    DailyQuestState,
    initial_profile,
    profile_from_dict,
    profile_to_dict,
)
from liferpg.settings import Settings, load_settings, save_settings

from helpers import ScriptedRandom


def _write_payload(payload: str) -> None:
    with get_session() as db:
        db.add(ProfileSnapshot(payload=payload, schema_version=SCHEMA_VERSION))


# ═══════════════════════════════════════════════════════════════════════════
#  PROFILE STORE
# ═══════════════════════════════════════════════════════════════════════════


class TestProfileStore:

    def test_empty_database_loads_nothing(self, store):
        assert store.load() is None

    def test_load_or_initial_on_empty(self, store, now):
        profile = store.load_or_initial(now.date())
        assert profile == initial_profile(now.date())
        assert profile.level == 1
        assert profile.daily_quests == DailyQuestState(date=now.date())

    def test_round_trip(self, store, fresh, now):
        guitar = ActivityDef("Guitar", StatType.MIND, 35, 20, "Music", "text-pink-500")
        profile = add_custom_activity(fresh, guitar)
        profile, _ = apply_activity_log(
            profile, "Workout", 30, now, rng=ScriptedRandom(rolls=[0.27], picks=[3]),
        )
        profile, _ = apply_activity_log(
            profile, "Guitar", 40, now + timedelta(hours=1), rng=ScriptedRandom(rolls=[0.01]),
        )
        store.save(profile)
        assert store.load() == profile

    def test_save_keeps_single_row(self, store, fresh):
        store.save(fresh)
        store.save(replace(fresh, total_xp=10, current_xp=10))
        with get_session() as db:
            assert db.query(ProfileSnapshot).count() == 1
        assert store.load().total_xp == 10

    def test_corrupt_json_falls_back(self, store, now, caplog):
        _write_payload("{not json")
        with caplog.at_level(logging.WARNING):
            assert store.load() is None
        assert "unreadable" in caplog.text
        assert store.load_or_initial(now.date()) == initial_profile(now.date())

    def test_wrong_shape_falls_back(self, store):
        _write_payload(json.dumps(["a", "list"]))
        assert store.load() is None

    def test_missing_required_field_falls_back(self, store):
        _write_payload(json.dumps({"level": 3}))
        assert store.load() is None

    def _snapshot_with_custom(self, *customs):
        data = profile_to_dict(initial_profile(date(2024, 3, 14)))
        data["custom_activities"] = list(customs)
        return json.dumps(data)

    def test_zero_duration_custom_falls_back(self, store, now):
        _write_payload(self._snapshot_with_custom(
            {"key": "Nap", "stat": "Mind", "base_xp": 30, "base_duration": 0},
        ))
        assert store.load() is None
        assert store.load_or_initial(now.date()) == initial_profile(now.date())

    def test_custom_named_like_builtin_falls_back(self, store):
        _write_payload(self._snapshot_with_custom(
            {"key": "Workout", "stat": "Mind", "base_xp": 30, "base_duration": 30},
        ))
        assert store.load() is None

    def test_repeated_custom_key_falls_back(self, store):
        guitar = {"key": "Guitar", "stat": "Mind", "base_xp": 30, "base_duration": 30}
        _write_payload(self._snapshot_with_custom(guitar, dict(guitar, stat="Wealth")))
        assert store.load() is None


# ═══════════════════════════════════════════════════════════════════════════
#  SNAPSHOT DECODING
# ═══════════════════════════════════════════════════════════════════════════


class TestSnapshotMigration:

    def test_old_snapshot_without_custom_activities(self):
        profile = profile_from_dict({
            "level": 2, "total_xp": 150, "streak": 3,
            "last_login_date": "2024-03-13",
            "stats": {"Strength": 40, "Discipline": 5},
            "inventory": ["Potion of Focus"],
        })
        assert profile.custom_activities == ()
        assert profile.current_xp == 150
        assert profile.stats["Wealth"] == 0
        assert profile.stats["Strength"] == 40
        assert profile.last_login_date == date(2024, 3, 13)
        assert profile.daily_quests == DailyQuestState()

    def test_unknown_keys_ignored(self):
        data = profile_to_dict(initial_profile(date(2024, 3, 14)))
        data["theme"] = "dark"
        data["stats"]["Charisma"] = 99
        profile = profile_from_dict(data)
        assert "Charisma" not in profile.stats

    def test_custom_with_bad_values_raises_value_error(self):
        data = profile_to_dict(initial_profile(date(2024, 3, 14)))
        data["custom_activities"] = [
            {"key": "Nap", "stat": "Mind", "base_xp": 30, "base_duration": 0},
        ]
        with pytest.raises(ValueError):
            profile_from_dict(data)

    def test_snapshot_is_versioned(self):
        assert profile_to_dict(initial_profile(date(2024, 3, 14)))["schema_version"] == SCHEMA_VERSION


class TestSchema:

    def test_creates_snapshot_table(self):
        columns = {c["name"] for c in inspect(db_module._get_engine()).get_columns("profile_snapshots")}
        assert {"id", "schema_version", "payload", "saved_at"} <= columns

    def test_init_db_is_idempotent(self):
        init_db()
        init_db()


# ═══════════════════════════════════════════════════════════════════════════
#  SETTINGS
# ═══════════════════════════════════════════════════════════════════════════


class TestSettings:

    def test_defaults_when_missing(self, tmp_path):
        settings = load_settings(tmp_path / "settings.json")
        assert settings == Settings()
        assert settings.custom_base_xp == 30
        assert settings.custom_base_duration == 30

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        save_settings(Settings(log_level="DEBUG", custom_base_xp=45), path)
        loaded = load_settings(path)
        assert loaded.log_level == "DEBUG"
        assert loaded.custom_base_xp == 45

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"log_level": "WARNING", "volume": 70}))
        assert load_settings(path).log_level == "WARNING"

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{{{")
        assert load_settings(path) == Settings()
