import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from config import get_settings

logger = logging.getLogger(__name__)


def make_engine(url: str) -> AsyncEngine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_async_engine(url, connect_args=connect_args)


engine = make_engine(get_settings().database_url)
AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
Base = declarative_base()


async def get_db():
    # one session (and so one connection) per request, always closed
    async with AsyncSessionLocal() as session:
        yield session


async def init_db(bind: AsyncEngine = engine):
    import models  # noqa: F401  registers the tables on Base.metadata

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready on %s", bind.url.render_as_string(hide_password=True))
