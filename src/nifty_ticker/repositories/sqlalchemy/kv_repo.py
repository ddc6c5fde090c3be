"""SQLAlchemy implementation of KeyValueRepository."""

from typing import Optional

from sqlalchemy.orm import sessionmaker

from nifty_ticker.repositories.sqlalchemy.orm_models import KeyValueORM


class SqlAlchemyKeyValueRepository:
    """
    SQLAlchemy-backed key-value store.

    Opens a short-lived session per call so the repository can be shared
    between the scheduler thread and the UI thread.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        with self._session_factory() as db:
            orm_kv = db.get(KeyValueORM, key)
            return orm_kv.value if orm_kv else None

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the value for a key."""
        with self._session_factory() as db:
            orm_kv = db.get(KeyValueORM, key)
            if orm_kv:
                orm_kv.value = value
            else:
                db.add(KeyValueORM(key=key, value=value))
            db.commit()
