from typing import Any, AsyncGenerator, Dict

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from ..models.base import SupplierServiceBase
from ..utils.logging import setup_supplier_logging as setup_logging
from .setting import get_settings

# Setup structured logging for database operations
logger = setup_logging("supplier_service.database", log_level=get_settings().LOG_LEVEL)


def _mask_url(database_url: str) -> str:
    if "@" not in database_url:
        return database_url
    return database_url.split("@")[0].rsplit(":", 1)[0] + ":***@***"


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores ON DELETE CASCADE unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SupplierDatabaseManager:
    """Database manager for Supplier Service: engine, sessions and schema."""

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 10,
        max_overflow: int = 20,
    ) -> None:
        self.database_url = database_url
        self.is_sqlite = database_url.startswith("sqlite")

        logger.info(
            "Initializing Supplier Service database manager",
            extra={
                "operation": "database_manager_init",
                "database_url": _mask_url(database_url),
                "echo": echo,
            },
        )

        engine_kwargs: Dict[str, Any] = {"echo": echo}

        if self.is_sqlite:
            # aiosqlite connections are bound to the loop that opened them
            engine_kwargs["poolclass"] = NullPool
            engine_kwargs["connect_args"] = {
                "timeout": 60,
                "check_same_thread": False,
            }
        else:
            engine_kwargs.update(
                {
                    "pool_size": pool_size,
                    "max_overflow": max_overflow,
                    "pool_timeout": 30,
                    "pool_recycle": 3600,
                    "pool_pre_ping": True,
                }
            )

        self.async_engine = create_async_engine(database_url, **engine_kwargs)
        if self.is_sqlite:
            event.listen(
                self.async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys
            )

        self.async_session_maker = async_sessionmaker(
            bind=self.async_engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        logger.info(
            "Supplier Service database manager initialized",
            extra={
                "operation": "database_manager_init_complete",
                "database_type": "sqlite" if self.is_sqlite else "postgresql",
            },
        )

    async def create_tables(self) -> None:
        """Create the categories and products tables if they are missing."""
        async with self.async_engine.begin() as conn:
            await conn.run_sync(SupplierServiceBase.metadata.create_all, checkfirst=True)
        logger.info(
            "Database tables created successfully",
            extra={"operation": "create_tables"},
        )

    async def get_async_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get async database session for Supplier Service."""
        async with self.async_session_maker() as session:
            yield session

    async def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        await self.async_engine.dispose()
        logger.info(
            "Supplier Service database connections closed",
            extra={"operation": "database_close"},
        )


settings = get_settings()
if not settings.SUPPLIER_DATABASE_URL:
    raise ValueError("SUPPLIER_DATABASE_URL is required for Supplier Service")

database_manager = SupplierDatabaseManager(
    database_url=settings.SUPPLIER_DATABASE_URL,
    echo=settings.DEBUG,
    pool_size=settings.DATABASE_POOL_SIZE,
    max_overflow=settings.DATABASE_MAX_OVERFLOW,
)


# Dependency injection function for FastAPI
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session for dependency injection."""
    async for session in database_manager.get_async_session():
        yield session
