"""
Connection manager - pooled async engine with a startup liveness probe.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker

from salesagency.config import settings
from salesagency.core.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Handle around the shared connection pool.
    Sessions are checked out per unit of work and returned on exit.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self._session_factory = sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False
        )

    @classmethod
    async def initialize(
        cls,
        url: Optional[str] = None,
        max_open: Optional[int] = None,
        max_idle: Optional[int] = None,
        max_lifetime: Optional[int] = None,
        connect_timeout: Optional[float] = None,
        echo: Optional[bool] = None,
    ) -> "Database":
        """
        Open the pool and verify the database answers.

        Raises DatabaseConnectionError when the probe is rejected or
        does not finish within `connect_timeout` seconds. There is no
        retry; callers treat this as fatal.
        """
        url = make_url(url or settings.DATABASE_URL)
        max_open = max_open if max_open is not None else settings.DB_MAX_OPEN_CONNS
        max_idle = max_idle if max_idle is not None else settings.DB_MAX_IDLE_CONNS
        max_lifetime = max_lifetime if max_lifetime is not None else settings.DB_CONN_MAX_LIFETIME
        connect_timeout = connect_timeout if connect_timeout is not None else settings.DB_CONNECT_TIMEOUT

        engine_kwargs = {
            "echo": settings.DB_ECHO if echo is None else echo,
            "future": True,
            "pool_pre_ping": True,
        }
        is_sqlite = url.get_backend_name() == "sqlite"
        if not is_sqlite:
            engine_kwargs.update(
                pool_size=max_idle,
                max_overflow=max(max_open - max_idle, 0),
                pool_recycle=max_lifetime,
            )

        safe_url = url.set(password="***") if url.password else url
        logger.info(
            "Connecting to %s (max_open=%s, max_idle=%s, max_lifetime=%ss)",
            safe_url, max_open, max_idle, max_lifetime
        )

        engine = create_async_engine(url, **engine_kwargs)
        if is_sqlite:
            event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        db = cls(engine)
        try:
            await asyncio.wait_for(db.ping(), timeout=connect_timeout)
        except asyncio.TimeoutError as exc:
            await engine.dispose()
            logger.error("Database ping timed out after %ss", connect_timeout)
            raise DatabaseConnectionError(
                f"failed to ping database: timed out after {connect_timeout}s"
            ) from exc
        except (SQLAlchemyError, OSError) as exc:
            await engine.dispose()
            logger.error(f"Database ping failed: {exc}")
            raise DatabaseConnectionError(f"failed to ping database: {exc}") from exc

        logger.info("Database connection established")
        return db

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_factory() as session:
            yield session

    async def create_schema(self) -> None:
        """Create missing tables. Not a migration tool."""
        import salesagency.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables created/verified")

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database pool closed")
