"""
Database Core

SQLAlchemy engine, session management, and database utilities for library-site.

Features:
- Engine configured from settings (QueuePool for server databases,
  StaticPool for in-memory sqlite)
- Session context manager with rollback on error
- Schema provisioning and connection checks for operational scripts
"""

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Generator

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import (
    DatabaseError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from library_site.core.config import settings
from library_site.core.error_codes import DatabaseErrorCode
from library_site.core.exceptions import DatabaseException
from library_site.core.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PoolStatus:
    """Immutable connection pool status information."""

    size: int
    checked_out: int
    overflow: int


# Global SQLAlchemy base
Base = declarative_base()


def _engine_options(database_url: str) -> Dict[str, Any]:
    """Pool options for the configured backend."""
    if database_url.startswith("sqlite"):
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # A memory database only lives as long as its single connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_pre_ping": settings.database__pool_pre_ping,
        "pool_size": settings.database__pool_size,
        "max_overflow": settings.database__max_overflow,
        "pool_timeout": settings.database__pool_timeout,
        "pool_recycle": settings.database__pool_recycle,
        "poolclass": QueuePool,
    }


def _create_database_engine() -> Engine:
    """Create and configure the database engine."""
    database_url = str(settings.database__url)
    try:
        return create_engine(
            database_url,
            echo=settings.database__echo,
            **_engine_options(database_url),
        )

    except Exception as e:
        logger.error("Failed to create database engine: %s", str(e))

        if "@" in database_url:
            host = database_url.rsplit("@", maxsplit=1)[-1].split("/")[0]
        else:
            host = "local"

        raise DatabaseException(
            f"Database engine creation failed: {str(e)}",
            DatabaseErrorCode.CONNECTION_FAILED,
            details={"database_url_host": host},
        ) from e


# Global engine and session factory
engine = _create_database_engine()

# expire_on_commit=True: stores refresh objects they hand back after a commit
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    future=True,
    expire_on_commit=True,
)


def get_pool_status() -> PoolStatus:
    """
    Get current connection pool status.

    Pools without sizing (StaticPool) report zeros.
    """
    pool = engine.pool
    return PoolStatus(
        size=getattr(pool, "size", lambda: 0)(),
        checked_out=getattr(pool, "checkedout", lambda: 0)(),
        overflow=getattr(pool, "overflow", lambda: 0)(),
    )


def _create_db_session() -> Generator[Session, None, None]:
    """
    Session lifecycle behind database_session().

    Yields:
        Session: SQLAlchemy database session

    Raises:
        DatabaseException: If the session fails while in use
    """
    db_session = SessionLocal()
    logger.debug("Database session created")
    try:
        yield db_session

    except SQLAlchemyError as e:
        logger.error("Database session error: %s", str(e))
        try:
            db_session.rollback()
        except SQLAlchemyError as rollback_error:
            logger.error("Failed to rollback session: %s", str(rollback_error))
        raise DatabaseException(
            f"Database session error: {str(e)}", DatabaseErrorCode.QUERY_FAILED
        ) from e

    finally:
        db_session.close()
        logger.debug("Database session closed")


@contextmanager
def database_session() -> Generator[Session, None, None]:
    """
    Context manager for database session.

    Used by the stores and by operational scripts.

    Example:
        with database_session() as db:
            slide = db.get(HeroSlide, slide_id)
            slide.is_active = False
            db.commit()
    """
    yield from _create_db_session()


def create_tables() -> None:
    """Create every table registered on Base that does not exist yet."""
    # Importing the models registers them with Base.metadata
    import library_site.models  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created: %s", ", ".join(Base.metadata.tables))
    except SQLAlchemyError as e:
        logger.error("Failed to create database tables: %s", str(e))
        raise DatabaseException(
            f"Table creation failed: {str(e)}", DatabaseErrorCode.QUERY_FAILED
        ) from e


def dispose_engine() -> None:
    """
    Dispose database engine and close all connections.

    Called from the application lifespan on shutdown.
    """
    try:
        engine.dispose()
        logger.info("Database engine disposed successfully")
    except SQLAlchemyError as e:
        logger.error("Failed to dispose database engine: %s", str(e))


def test_connection() -> Dict[str, Any]:
    """
    Test database connection and return status information.

    Returns:
        Dict[str, Any]: Connection test results and pool status

    Raises:
        DatabaseException: If connection test fails
    """
    try:
        with engine.connect() as conn:
            test_value = conn.execute(text("SELECT 1 as test_value")).scalar()

        pool_status = get_pool_status()
        logger.info(
            "Database connection test - Pool status: Size=%d, Checked out=%d, "
            "Overflow=%d",
            pool_status.size,
            pool_status.checked_out,
            pool_status.overflow,
        )

        return {
            "connection_test": "passed",
            "test_query_result": test_value,
            "pool_status": {
                "size": pool_status.size,
                "checked_out": pool_status.checked_out,
                "overflow": pool_status.overflow,
            },
            "engine_url": engine.url.render_as_string(hide_password=True),
        }

    except (OperationalError, DatabaseError, InterfaceError) as e:
        logger.error("Database connection test failed: %s", str(e))
        raise DatabaseException(
            f"Database connection test failed: {str(e)}",
            DatabaseErrorCode.CONNECTION_FAILED,
            details={"error_type": type(e).__name__},
        ) from e


# Not a pytest test despite the name
test_connection.__test__ = False  # type: ignore[attr-defined]
