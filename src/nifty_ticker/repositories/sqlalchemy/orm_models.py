"""SQLAlchemy ORM model definitions."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from nifty_ticker.repositories.sqlalchemy.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class KeyValueORM(Base):
    """SQLAlchemy model for a single key-value slot."""

    __tablename__ = "kv_store"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)
