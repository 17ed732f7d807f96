"""API test wiring: in-memory SQLite, fake object store and identity provider."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blockboard.config import Settings
from blockboard.infrastructure.container import AppContainer
from blockboard.infrastructure.database import build_engine, build_session_factory
from blockboard.infrastructure.security.jwt_token_issuer import JwtTokenIssuer
from blockboard.main import create_app

TEST_JWT_SECRET = "integration-test-secret-0123456789abcdef"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        app_env="test",
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret=TEST_JWT_SECRET,
        default_page_size=5,
    )


@pytest_asyncio.fixture
async def container(settings, object_storage, identity_provider):
    engine = build_engine(settings)
    container = AppContainer(
        settings=settings,
        engine=engine,
        session_factory=build_session_factory(engine),
        object_storage=object_storage,
        identity_provider=identity_provider,
        token_issuer=JwtTokenIssuer(secret=settings.jwt_secret),
    )
    await container.create_tables()
    yield container
    await engine.dispose()


@pytest_asyncio.fixture
async def client(container):
    # ASGITransport skips the lifespan; tables were created by the container fixture
    app = create_app(container=container)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http


async def _login(client: AsyncClient, code: str) -> tuple[dict, dict[str, str]]:
    response = await client.post("/api/login", json={"js_code": code})
    assert response.status_code == 200, response.text
    data = response.json()["data"]
    return data["user"], {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
def login(client):
    """Log in with a code; returns the user payload and bearer headers."""

    async def _do(code: str) -> tuple[dict, dict[str, str]]:
        return await _login(client, code)

    return _do


@pytest_asyncio.fixture
async def alice(login) -> tuple[dict, dict[str, str]]:
    return await login("alice")
