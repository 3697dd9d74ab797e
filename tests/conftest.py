"""Shared pytest fixtures for LifeRPG tests."""

import sys
from datetime import datetime

import pytest

from PyQt6.QtCore import QCoreApplication

from liferpg.database.db import configure_engine, init_db
from liferpg.database.store import ProfileStore
from liferpg.gamification.profile import initial_profile

from helpers import ScriptedRandom

NOW = datetime(2024, 3, 14, 12, 30)


@pytest.fixture(scope="session")
def qapp():
    """A single QCoreApplication instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def test_db():
    """Point every test at a fresh in-memory SQLite database."""
    configure_engine("sqlite:///:memory:")
    init_db()
    yield


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fresh(now):
    """A brand-new profile whose quest checklist is for today."""
    return initial_profile(now.date())


@pytest.fixture
def no_roll():
    """Random source that never rolls a reward."""
    return ScriptedRandom(rolls=[0.99] * 100)


@pytest.fixture
def store():
    return ProfileStore()
