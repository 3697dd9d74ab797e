"""Database package."""

from .db import get_session, init_db, configure_engine
from .models import ProfileSnapshot
from .store import ProfileStore

__all__ = ["get_session", "init_db", "configure_engine", "ProfileSnapshot", "ProfileStore"]
