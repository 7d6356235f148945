"""Pytest configuration and fixtures."""

import sys
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

# Add src and tests to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from fakes import FakePinataServer, FakeTelegramServer
from infrastructure.memory.profile_repo import InMemoryProfileRepository


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    """A fresh, empty profile store."""
    return InMemoryProfileRepository()


@pytest.fixture
def pinata_server() -> FakePinataServer:
    return FakePinataServer()


@pytest.fixture
def telegram_server() -> FakeTelegramServer:
    return FakeTelegramServer()


@pytest.fixture
async def client(
    profile_repository: InMemoryProfileRepository,
    pinata_server: FakePinataServer,
    telegram_server: FakeTelegramServer,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client wired to fakes.

    This client:
    - Uses a fresh in-memory profile store per test
    - Sends Pinata traffic to FakePinataServer
    - Sends Telegram traffic to FakeTelegramServer
    """
    from api.dependencies.services import (
        get_blob_storage,
        get_chat_directory,
        get_profile_repository,
    )
    from main import create_app

    app = create_app()
    pinata = pinata_server.client()
    telegram = telegram_server.client()

    app.dependency_overrides[get_profile_repository] = lambda: profile_repository
    app.dependency_overrides[get_blob_storage] = lambda: pinata
    app.dependency_overrides[get_chat_directory] = lambda: telegram

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
    await pinata.close()
    await telegram.close()
