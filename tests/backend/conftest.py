import os

# Must be set before storefront.core.db reads the environment
MEMORY_DB = "sqlite://:memory:?cache=shared"
os.environ["DATABASE_URL"] = MEMORY_DB
os.environ.pop("ADMIN_PASSWORD", None)

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from storefront.config import Settings
from storefront.core import db as db_module
from storefront.core.security import hash_password
from storefront.main import create_app

db_module.DB_URL = MEMORY_DB
db_module.TORTOISE_ORM["connections"]["default"] = MEMORY_DB

SEED_SECRET = "seed-data-2024"


async def _reset_store() -> None:
    # Dropping the last connection discards the shared in-memory database
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest.fixture
def settings():
    return Settings(auth_store="memory", seed_secret=SEED_SECRET, mount_faq=True, mount_seed=True)


@pytest.fixture
def app(settings):
    """New app per test; the in-memory user registry goes with it."""
    return create_app(settings)


@pytest_asyncio.fixture
async def db():
    """Empty record store for tests that call services directly."""
    await _reset_store()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(app):
    """
    httpx client talking to ``app`` in-process over an empty record store.

    ASGITransport does not send lifespan events, so startup hooks do not run.
    """
    await _reset_store()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http:
        yield http
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def create_admin(app):
    """Returns ``make(email, password) -> (UserRecord, password)`` registering an admin."""

    async def make(email: str = "admin@example.com", password: str = "AdminPass!23"):
        admin = await app.state.user_repository.add(
            email=email, password_hash=hash_password(password), name="Admin", role="admin"
        )
        return admin, password

    return make


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """Returns ``headers_for(email, password)``; logs in and builds a Bearer header."""

    async def headers_for(email: str, password: str) -> dict[str, str]:
        resp = await client.post("/api/auth/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": "Bearer " + resp.json()["token"]}

    return headers_for


@pytest_asyncio.fixture
async def seeded(client):
    """Counts returned by one accepted seed run."""
    resp = await client.post("/api/seed/run", json={"secret": SEED_SECRET})
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]
