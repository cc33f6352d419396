"""Shared fixtures: the real app wired to SQLite (aiosqlite) and fakeredis."""
import base64
from unittest.mock import Mock

import fakeredis
import pytest
from fakeredis import aioredis
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

import models  # noqa: F401
from config.celery_config import make_celery
from config.context import AppContext
from config.database import Base, create_session_factory
from config.settings import Settings
from main import app

TEST_EMAIL = "a@b.com"
TEST_PASSWORD = "pw"


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        FOLDER_PATH=str(tmp_path / "files_manager"),
        DATABASE_URI="sqlite+aiosqlite://",
    )


@pytest.fixture
async def redis():
    client = aioredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
def celery(settings):
    app = make_celery(settings)
    # Брокер в тестах не нужен: проверяем только публикацию задач
    app.send_task = Mock()
    return app


@pytest.fixture
async def context(settings, redis, celery):
    engine = create_async_engine(
        settings.DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield AppContext(
        settings=settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        redis=redis,
        celery=celery,
    )
    await engine.dispose()


@pytest.fixture
async def client(context):
    app.state.context = context
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    del app.state.context


async def register(client, email=TEST_EMAIL, password=TEST_PASSWORD):
    res = await client.post("/users", json={"email": email, "password": password})
    assert res.status_code == 201
    return res.json()


async def login(client, email=TEST_EMAIL, password=TEST_PASSWORD) -> str:
    res = await client.get("/connect", auth=(email, password))
    assert res.status_code == 200
    return res.json()["token"]


@pytest.fixture
async def user(client):
    return await register(client)


@pytest.fixture
async def headers(client, user):
    return {"X-Token": await login(client)}


@pytest.fixture
async def other_headers(client):
    await register(client, email="bob@b.com", password="secret")
    return {"X-Token": await login(client, email="bob@b.com", password="secret")}
