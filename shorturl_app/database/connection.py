"""
Engine, connection pool and session factory for the SQLite store.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

MEMORY_DATABASE = ":memory:"


def create_db_engine(
    database_path: str,
    pool_size: int = 5,
    pool_timeout: float = 30.0,
    max_overflow: int = 10,
) -> Engine:
    """
    Create an engine for a SQLite database file.

    File databases get a bounded QueuePool (SQLAlchemy's default for them).
    An in-memory database only exists for the lifetime of its connection,
    so every session shares a single one through StaticPool.

    Sessions are used from threadpool workers, hence check_same_thread=False.
    """
    connect_args = {"check_same_thread": False}

    if database_path == MEMORY_DATABASE:
        return create_engine(
            "sqlite://",
            connect_args=connect_args,
            poolclass=StaticPool,
        )

    return create_engine(
        f"sqlite:///{database_path}",
        connect_args=connect_args,
        pool_size=pool_size,
        pool_timeout=pool_timeout,
        max_overflow=max_overflow,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
