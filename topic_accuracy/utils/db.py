# topic_accuracy/utils/db.py
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from topic_accuracy.utils.config import settings


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Creates an async engine for the given URL.
    In-memory SQLite databases share a single connection so every session
    sees the same tables.
    """
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        return create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(database_url, echo=echo)


def build_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = build_engine(settings.database_url, echo=settings.database_echo)

# Create a session factory
AsyncSessionLocal = build_session_factory(engine)

async def get_db() -> AsyncSession:
    """
    Dependency to get a database session.
    Ensures the session is closed after the request.
    """
    async with AsyncSessionLocal() as session:
        yield session
