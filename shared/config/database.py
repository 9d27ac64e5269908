from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from .settings import get_settings

settings = get_settings()

DATABASE_URL = settings.database_url

# SQLite is a single-writer embedded store; a fresh connection per session
# keeps the aiosqlite worker threads tied to the loop that opened them.
_engine_kwargs = {"poolclass": NullPool} if settings.is_sqlite else {}

engine = create_async_engine(DATABASE_URL, echo=settings.db_echo, **_engine_kwargs)

AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


async def dispose_engine() -> None:
    await engine.dispose()
