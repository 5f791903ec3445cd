from typing import Optional
import logging

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY clauses (and ON DELETE CASCADE) unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Handle on the engine and its connection pool.

    Nothing connects until the engine is first used; ``dispose()`` closes the
    pool. One instance lives on ``app.state.db`` between startup and shutdown.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self._engine = create_async_engine(
                self.url,
                echo=self.echo,
                pool_pre_ping=True,
            )
            if self._engine.dialect.name == "sqlite":
                event.listen(self._engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
            logger.info(
                f"Database engine configured for: {make_url(self.url).render_as_string(hide_password=True)}"
            )
        return self._engine

    @property
    def sessionmaker(self) -> async_sessionmaker:
        if self._sessionmaker is None:
            self._sessionmaker = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._sessionmaker

    def session(self) -> AsyncSession:
        return self.sessionmaker()

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database connection pool closed.")
        self._engine = None
        self._sessionmaker = None
