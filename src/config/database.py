import contextlib
import logging
from collections.abc import AsyncIterator

from alembic import command, config
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from src.config.settings import settings

logger = logging.getLogger(__name__)


def create_engine(url: str) -> AsyncEngine:
    url = str(url)
    engine_options = {"echo": settings.LOG_DB}
    if "sqlite" in url:
        engine_options["connect_args"] = {"timeout": 15}
    else:
        # Drop connections the server closed while idle
        engine_options["pool_pre_ping"] = True
    return create_async_engine(url, **engine_options)


engine = create_engine(settings.database_url)


def run_upgrade(connection, cfg: config.Config) -> None:
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, "head")


async def init_db() -> None:
    """Apply alembic migrations up to head over the application engine."""
    async with engine.begin() as conn:
        await conn.run_sync(run_upgrade, config.Config("alembic.ini"))
    logger.info("Database migrations applied")


async def dispose_engine() -> None:
    await engine.dispose()


async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


@contextlib.asynccontextmanager
async def async_session_manager(
    auto_commit=True, session_overwrite: AsyncSession | None = None
) -> AsyncIterator[AsyncSession]:
    """Yield a session that commits on success and rolls back on error.

    With ``session_overwrite`` the given session is yielded untouched; the
    caller owns its transaction. Tests use this to share one session.
    """
    if session_overwrite:
        yield session_overwrite
    else:
        async with async_session_maker() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                raise e
            else:
                if auto_commit:
                    await session.commit()
