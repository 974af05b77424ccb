"""
Component Test Fixtures for Album Service

Real AlbumService over a real in-memory AlbumRepository; HTTP tests use
FastAPI's TestClient, which runs the app lifespan so every client starts
from a freshly seeded store.
"""
from typing import Iterator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from core.config import ServiceConfig
from microservices.album_service import main as album_main
from microservices.album_service.album_repository import AlbumRepository, SEED_ALBUMS
from microservices.album_service.album_service import AlbumService
from microservices.album_service.client import AlbumServiceClient


@pytest.fixture
def album_repo() -> AlbumRepository:
    """Repository holding the two seed albums (ids 10 and 11)"""
    return AlbumRepository(seed=SEED_ALBUMS)


@pytest.fixture
def empty_repo() -> AlbumRepository:
    """Repository with no albums"""
    return AlbumRepository()


@pytest.fixture
def album_service(album_repo) -> AlbumService:
    """Service over the seeded repository"""
    return AlbumService(repository=album_repo)


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient running the real app lifespan"""
    with TestClient(album_main.app) as test_client:
        yield test_client


@pytest.fixture
def strict_client() -> Iterator[TestClient]:
    """TestClient configured to answer validation failures with 422"""
    album_main.app.dependency_overrides[album_main.get_service_config] = (
        lambda: ServiceConfig(validation_status_code=422)
    )
    try:
        with TestClient(album_main.app) as test_client:
            yield test_client
    finally:
        album_main.app.dependency_overrides.pop(album_main.get_service_config, None)


@pytest_asyncio.fixture
async def album_client(album_service):
    """AlbumServiceClient talking to the app in-process over ASGI"""
    album_main.app.dependency_overrides[album_main.get_album_service] = lambda: album_service
    transport = httpx.ASGITransport(app=album_main.app)
    http_client = httpx.AsyncClient(transport=transport, base_url="http://albums.test")
    try:
        async with AlbumServiceClient(base_url="http://albums.test", http_client=http_client) as c:
            yield c
    finally:
        album_main.app.dependency_overrides.pop(album_main.get_album_service, None)
