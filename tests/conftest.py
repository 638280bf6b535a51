"""
Pytest fixtures for archive tests.
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from museum_archive.config import Settings
from museum_archive.kernel.identity.auth_service import AuthService
from museum_archive.kernel.identity.jwt import JWTManager
from museum_archive.kernel.identity.password import PasswordHasher
from museum_archive.kernel.identity.registry import IdentityRegistry
from museum_archive.kernel.identity.storage import InMemorySessionStorage
from museum_archive.kernel.store.archive_store import ArchiveStore
from museum_archive.kernel.store.seed import build_seeded_store
from museum_archive.main import create_app


# Every seeded staff account starts with this password
TEST_PASSWORD = "password123"

# Fixed "now" for everything time-dependent: inside the open district
# essay competition, after the closed photography one
FIXED_NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def fixed_clock() -> datetime:
    return FIXED_NOW


@pytest.fixture
def store() -> ArchiveStore:
    """Seeded archive store on a fixed clock."""
    return build_seeded_store(clock=fixed_clock)


@pytest.fixture
def empty_store() -> ArchiveStore:
    return ArchiveStore(clock=fixed_clock)


@pytest.fixture(scope="session")
def registry() -> IdentityRegistry:
    """Seeded staff registry (cheap bcrypt rounds for speed)."""
    return IdentityRegistry.from_seed(TEST_PASSWORD, PasswordHasher(rounds=4))


@pytest.fixture
def jwt_manager() -> JWTManager:
    """Create a JWT manager for tests."""
    return JWTManager(
        secret_key="test-secret-key-for-testing-only",
        algorithm="HS256",
        access_token_expire_minutes=30,
    )


@pytest.fixture
def session_storage() -> InMemorySessionStorage:
    return InMemorySessionStorage()


@pytest_asyncio.fixture
async def auth(
    registry: IdentityRegistry,
    session_storage: InMemorySessionStorage,
    jwt_manager: JWTManager,
) -> AuthService:
    """Restored, anonymous auth service with no login delay."""
    service = AuthService(
        registry,
        session_storage,
        jwt_manager=jwt_manager,
        login_delay=0,
    )
    await service.restore()
    return service


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        login_delay_seconds=0,
        secret_key="test-secret-key-for-testing-only",
        seed_data=True,
        debug=False,
    )


@pytest_asyncio.fixture
async def client(
    test_settings: Settings,
    store: ArchiveStore,
    auth: AuthService,
) -> AsyncGenerator[AsyncClient, None]:
    """Async client against an app wired to the test store and auth service."""
    app = create_app(settings=test_settings, store=store, auth=auth)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def test_password() -> str:
    return TEST_PASSWORD


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def login_as(client: AsyncClient):
    """Log in through the API; returns bearer headers for the new session."""

    async def _login(email: str, password: str = TEST_PASSWORD) -> dict:
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
