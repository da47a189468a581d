import asyncio
import logging
from collections import defaultdict

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from automobile.config import Settings

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def _get_database_url(url: str) -> str:
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Base(DeclarativeBase):
    pass


class InvalidationTracker:
    """Fans out table change notifications to live queries.

    Each observer owns an :class:`asyncio.Event` that is set whenever one of
    its tables is written. Several writes before the observer wakes up collapse
    into a single wake-up.
    """

    def __init__(self) -> None:
        self._observers: dict[str, set[asyncio.Event]] = defaultdict(set)

    def subscribe(self, table: str) -> asyncio.Event:
        changed = asyncio.Event()
        self._observers[table].add(changed)
        return changed

    def unsubscribe(self, table: str, changed: asyncio.Event) -> None:
        self._observers[table].discard(changed)

    def notify(self, *tables: str) -> None:
        for table in tables:
            for changed in self._observers[table]:
                changed.set()

    def observer_count(self, table: str) -> int:
        return len(self._observers[table])


class Database:
    """Process-wide store handle: engine, session factory and change tracker."""

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = _get_database_url(url)

        engine_kwargs: dict = {"echo": echo}
        if not self.is_sqlite:
            engine_kwargs.update(pool_size=5, max_overflow=10, pool_pre_ping=True)

        self.engine = create_async_engine(self.url, **engine_kwargs)
        self.session = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)
        self.tracker = InvalidationTracker()

        if self.is_sqlite:
            event.listen(self.engine.sync_engine, "connect", _set_sqlite_pragma)

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            from automobile import models  # noqa: F401
            await conn.run_sync(Base.metadata.create_all)
            if self.is_sqlite:
                await conn.exec_driver_sql(f"PRAGMA user_version = {SCHEMA_VERSION}")
        logger.info("Database schema ready (version %d)", SCHEMA_VERSION)

    async def dispose(self) -> None:
        await self.engine.dispose()


def create_database(settings: Settings) -> Database:
    return Database(settings.database_url, echo=settings.echo_sql)
