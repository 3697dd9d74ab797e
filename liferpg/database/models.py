"""SQLAlchemy ORM models for LifeRPG."""

from datetime import datetime
from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class ProfileSnapshot(Base):
    """Single-row table holding the serialised profile."""

    __tablename__ = "profile_snapshots"

    id = Column(Integer, primary_key=True, autoincrement=True)
    schema_version = Column(Integer, nullable=False, default=1)
    payload = Column(Text, nullable=False)       # JSON, see profile_to_dict
    saved_at = Column(DateTime, nullable=False, default=datetime.now)

    def __repr__(self) -> str:
        return (
            f"<ProfileSnapshot id={self.id} v={self.schema_version} "
            f"saved_at={self.saved_at}>"
        )
