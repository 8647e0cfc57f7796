# tests/conftest.py
import os
import sys
import logging

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Point the application at a throwaway database before any app module is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ.setdefault("LOG_LEVEL", "DEBUG")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from topic_accuracy.models.question import Base
from topic_accuracy.seed import seed_demo_data
from topic_accuracy.utils.db import build_engine, build_session_factory

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# --- TestClient Fixture ---
@pytest.fixture
def client():
    """
    Creates a TestClient with a fresh in-memory database.
    The app's lifespan creates the tables on entry and disposes the engine on exit,
    which drops the in-memory database between tests.
    """
    from topic_accuracy.main import app
    with TestClient(app) as c:
        yield c


# --- Direct database fixtures for service-level tests ---
@pytest_asyncio.fixture
async def engine():
    test_engine = build_engine(TEST_DATABASE_URL)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def demo_user_id(session):
    """Seeds questions {1: Algebra, 2: Calculus, 3: Algebra} and four attempts."""
    user_id = await seed_demo_data(session)
    logger.info(f"Seeded demo data for user {user_id}")
    return user_id
