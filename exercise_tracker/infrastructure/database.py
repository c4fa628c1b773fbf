"""Database Session Manager: async engine, per-request sessions, schema bootstrap.

Invariants:
    - One engine (and pool) per manager; one session per request
    - Every session rolls back on exception (no partial commits leak)
    - Store failures inside services surface as DatabaseError (core/errors.py)
    - The manager lives on app.state, never in a module global

Design Decisions:
    - Injected via create_app()/lifespan and read back by get_db(): handlers get
      sessions through Depends, tests inject an in-memory SQLite manager
    - Pool sizing only for server databases; SQLite pools reject pool_size
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager, contextmanager
from typing import AsyncGenerator, Iterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from exercise_tracker.core.errors import DatabaseError, ExerciseTrackerError
from exercise_tracker.db.base import Base
import exercise_tracker.models  # noqa: F401

logger = logging.getLogger(__name__)


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    if make_url(database_url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with rollback on failure."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        **engine_kwargs,
    ):
        options = _engine_options(database_url, pool_size, max_overflow)
        options.update(engine_kwargs)
        self.engine = create_async_engine(database_url, **options)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit")
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute")
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query")
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown")
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create the users and exercises tables if they do not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Log any store failure with traceback and re-raise it as DatabaseError."""
    try:
        yield
    except ExerciseTrackerError:
        raise
    except Exception as e:
        logger.error(f"Database {operation} failed: {e}", exc_info=True)
        raise DatabaseError(str(e), operation) from e


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    db_manager: DatabaseSessionManager | None = getattr(
        request.app.state, "db_manager", None,
    )
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
