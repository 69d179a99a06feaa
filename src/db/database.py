"""Async SQLAlchemy database engine and session management."""

from collections.abc import AsyncGenerator

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.config import settings

logger = structlog.get_logger()


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {"pool_pre_ping": True, "pool_size": 10, "max_overflow": 20}


engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url),
)

async_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db() -> None:
    """Create the transactions table (and any other mapped tables) if missing."""
    from src.db.models import Base

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(
        "database_initialized",
        url=engine.url.render_as_string(hide_password=True),
        tables=sorted(Base.metadata.tables),
    )


async def check_db() -> bool:
    """Check that the transactions table can be queried."""
    from src.db.models import TransactionRecord

    try:
        async with engine.connect() as conn:
            await conn.execute(select(TransactionRecord.id).limit(1))
        return True
    except (SQLAlchemyError, OSError):
        logger.warning(
            "transactions_table_unreachable",
            table=TransactionRecord.__tablename__,
            exc_info=True,
        )
        return False
