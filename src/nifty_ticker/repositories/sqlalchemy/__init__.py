"""SQLAlchemy repository implementations."""

from nifty_ticker.repositories.sqlalchemy.database import (
    Base,
    create_db_engine,
    create_session_factory,
    init_db,
)
from nifty_ticker.repositories.sqlalchemy.kv_repo import SqlAlchemyKeyValueRepository

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "SqlAlchemyKeyValueRepository",
]
