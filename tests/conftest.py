"""Global test configuration and fixtures for the rank relay."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.core.constants import GAME_AUTH_HEADER
from src.main import create_app
from src.utils.settings import AppSettings, AuthSettings, CloudSettings, Settings
from tests.utils.constants import TEST_API_KEY, TEST_GAME_SECRET
from tests.utils.fake_cloud import CLOUD_PREFIX, FakeCloud


@pytest.fixture
def fake_cloud() -> FakeCloud:
    return FakeCloud()


@pytest_asyncio.fixture
async def cloud_server(fake_cloud: FakeCloud) -> AsyncGenerator[TestServer, None]:
    """Serve the fake Open Cloud API on a local port."""
    async with TestServer(fake_cloud.build_app()) as server:
        yield server


@pytest.fixture
def cloud_settings(cloud_server: TestServer) -> CloudSettings:
    return CloudSettings(
        ROBLOX_API_KEY=TEST_API_KEY,
        CLOUD_BASE_URL=str(cloud_server.make_url(CLOUD_PREFIX)),
        CLOUD_TIMEOUT_SECONDS=5,
    )


@pytest.fixture
def settings(cloud_settings: CloudSettings) -> Settings:
    return Settings(
        app=AppSettings(ENVIRONMENT="TEST"),
        cloud=cloud_settings,
        auth=AuthSettings(GAME_SHARED_SECRET=TEST_GAME_SECRET),
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """Create FastAPI application with lifespan manager for testing."""
    application = create_app(settings)
    async with LifespanManager(application):
        yield application


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client without the game secret."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test-rank-relay",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def game_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client that sends the shared game secret."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test-rank-relay",
        headers={GAME_AUTH_HEADER: TEST_GAME_SECRET},
    ) as client:
        yield client
