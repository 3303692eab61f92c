"""Root conftest: async SQLite database, DAO instances and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Foreign keys are enforced (PRAGMA foreign_keys=ON) so cascades and
      FK violations behave like PostgreSQL
    - get_db dependency overridden to use the test database
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from qa_api.db.base import Base  # noqa: E402
from qa_api.infrastructure.database import get_db  # noqa: E402
from qa_api.main import app  # noqa: E402
import qa_api.models  # noqa: E402, F401
from qa_api.persistence.answer_dao import SqlAnswerDao  # noqa: E402
from qa_api.persistence.question_dao import SqlQuestionDao  # noqa: E402


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def broken_db(test_engine, test_db):
    """A session whose tables are gone - every query fails with OperationalError."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    return test_db


@pytest.fixture
def question_dao(test_db):
    return SqlQuestionDao(test_db)


@pytest.fixture
def answer_dao(test_db):
    return SqlAnswerDao(test_db)


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
