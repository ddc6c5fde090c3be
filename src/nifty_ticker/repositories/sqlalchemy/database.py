"""Database connection and session management."""

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the given URL."""
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},  # SQLite-specific
        echo=False,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    from nifty_ticker.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
