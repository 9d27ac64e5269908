import asyncio
import os
import tempfile

# Point the app at a throwaway database before anything reads the settings.
_DB_DIR = tempfile.mkdtemp(prefix="inventory-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'inventory.db')}"
os.environ["SEED_SAMPLE_DATA"] = "true"
os.environ.pop("OTLP_ENDPOINT", None)

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from shared.config.database import Base, engine
from services.product_service.repository import ProductRepository
from main import app


async def _drop_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def client():
    """App client over a freshly seeded store."""
    asyncio.run(_drop_tables())
    with TestClient(app) as c:
        yield c


@pytest.fixture
def valid_payload():
    return {
        "name": "Standing Desk",
        "description": "Electric height-adjustable desk",
        "price": 349.5,
        "quantity": 7,
        "category": "Office",
        "image_url": "https://example.com/desk.png",
    }


@pytest_asyncio.fixture
async def bare_db(tmp_path):
    """A session on an empty database file with no tables at all."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'store.db'}", poolclass=NullPool
    )
    session_factory = async_sessionmaker(test_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await test_engine.dispose()


@pytest_asyncio.fixture
async def db(bare_db):
    """A session on an initialized, empty products table."""
    await ProductRepository.initialize(bare_db, seed=False)
    return bare_db
