import asyncio
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from tubely.api.server import APIServer
from tubely.core.config import Config
from tubely.thumbnails.domain.models import VideoRecord
from tubely.thumbnails.infrastructure.identity import JWTIdentityVerifier
from tubely.thumbnails.infrastructure.metadata_store import SQLiteVideoMetadataStore
from tubely.thumbnails.integration import ThumbnailModule

TEST_SECRET = "test-secret-with-enough-length-for-hs256"
TEST_PORT = 8091
CREATED_AT = datetime(2026, 10, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_video(video_id: str = "v1", user_id: str = "u1", **overrides) -> VideoRecord:
    fields = dict(
        id=video_id,
        title="Boots in the snow",
        description="First test upload",
        created_at=CREATED_AT,
        updated_at=CREATED_AT,
        user_id=user_id,
    )
    fields.update(overrides)
    return VideoRecord(**fields)


@pytest.fixture()
def config(tmp_path, monkeypatch) -> Config:
    monkeypatch.delenv("TUBELY_JWT_SECRET", raising=False)
    cfg = Config(str(tmp_path / "config.json"))
    cfg.auth.jwt_secret = TEST_SECRET
    cfg.server.api_port = TEST_PORT
    cfg.database.path = str(tmp_path / "tubely.db")
    cfg.system.log_file = None
    return cfg


@pytest.fixture()
def metadata_store(config) -> SQLiteVideoMetadataStore:
    store = SQLiteVideoMetadataStore(config.database.path)
    store.initialize()
    asyncio.run(store.create(make_video("v1", "u1")))
    asyncio.run(store.create(make_video("v2", "u2", title="Someone else's video")))
    return store


@pytest.fixture()
def verifier() -> JWTIdentityVerifier:
    return JWTIdentityVerifier(secret=TEST_SECRET)


@pytest.fixture()
def module(config, metadata_store, verifier) -> ThumbnailModule:
    return ThumbnailModule(config, metadata_store=metadata_store, identity_verifier=verifier)


@pytest.fixture()
def client(config, module):
    server = APIServer(config, module)
    with TestClient(server.app) as test_client:
        yield test_client


@pytest.fixture()
def auth_header(verifier):
    def _header(user_id: str = "u1") -> dict:
        return {"Authorization": f"Bearer {verifier.issue(user_id)}"}

    return _header
