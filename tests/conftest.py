from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from album_api.app.core.store import SEED_ALBUMS, AlbumStore
from album_api.app.main import create_app
from album_api.app.services.album_service import AlbumService

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fastapi import FastAPI

BLUE_TRAIN_ID = "550e8400-e29b-41d4-a716-446655440001"
JERU_ID = "550e8400-e29b-41d4-a716-446655440002"
SARAH_VAUGHAN_ID = "550e8400-e29b-41d4-a716-446655440003"


@pytest.fixture
def store() -> AlbumStore:
    return AlbumStore(SEED_ALBUMS)


@pytest.fixture
def service(store: AlbumStore) -> AlbumService:
    return AlbumService(store)


@pytest.fixture
def app(store: AlbumStore) -> FastAPI:
    return create_app(store)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def kind_of_blue() -> dict[str, object]:
    return {"title": "Kind of Blue", "artist": "Miles Davis", "price": 49.99}
