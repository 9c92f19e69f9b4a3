import json
import os

# Настройки читаются при импорте wastehunt, поэтому окружение задаём первым делом
os.environ.setdefault("DB", json.dumps({
    "DB_HOST": "localhost",
    "DB_NAME": "wastehunt_test",
    "DB_USER": "test",
    "DB_PASSWORD": "test",
    "DB_URL": "sqlite+aiosqlite:///:memory:",
}))
os.environ.setdefault("SECURITY", json.dumps({"JWT_SECRET_KEY": "test-secret-key"}))
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from wastehunt.core.database import db_helper
from wastehunt.core.security import create_access_token, get_password_hash
from wastehunt.main import app
from wastehunt.models import Base, UserRole
from wastehunt.repositories.user_repository import UserRepository

TEST_PASSWORD = "hunter2024"


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'wastehunt.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def password_hash():
    # bcrypt медленный, считаем один раз на тест
    return get_password_hash(TEST_PASSWORD)


@pytest.fixture
def make_user(session, password_hash):
    async def _make_user(username: str, role: str = UserRole.USER.value):
        return await UserRepository(session).create(username, password_hash, role)
    return _make_user


@pytest.fixture
async def client(session_factory):
    async def override_session_getter():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[db_helper.session_getter] = override_session_getter
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _auth_headers(user) -> dict:
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
