import asyncio
from typing import Dict, Optional

import pytest

from tubely.thumbnails.application.thumbnail_service import ThumbnailService
from tubely.thumbnails.domain.errors import (
    BadRequestError,
    ForbiddenError,
    MetadataStoreError,
    MetadataUpdateError,
    NotFoundError,
    UnauthenticatedError,
)
from tubely.thumbnails.domain.interfaces import IdentityVerifier, VideoMetadataStore
from tubely.thumbnails.domain.models import MAX_THUMBNAIL_UPLOAD_BYTES, ThumbnailUpload, VideoRecord
from tubely.thumbnails.infrastructure.thumbnail_store import InMemoryThumbnailStore

from conftest import make_video


class FakeMetadataStore(VideoMetadataStore):
    def __init__(self, *records: VideoRecord, fail_updates: bool = False):
        self.records: Dict[str, VideoRecord] = {record.id: record for record in records}
        self.fail_updates = fail_updates
        self.updates = []

    async def get_by_id(self, video_id: str) -> Optional[VideoRecord]:
        return self.records.get(video_id)

    async def update(self, record: VideoRecord) -> None:
        if self.fail_updates:
            raise MetadataStoreError("database is locked")
        self.updates.append(record)
        self.records[record.id] = record


class TokenIsUserVerifier(IdentityVerifier):
    """Treats the credential itself as the user ID"""

    def __init__(self):
        self.calls = 0

    def verify(self, credential: Optional[str]) -> str:
        self.calls += 1
        if not credential:
            raise UnauthenticatedError("Missing access token")
        return credential


def make_upload(data: bytes = b"\x89PNG" + b"\x00" * 2044, media_type: str = "image/png",
                size: Optional[int] = -1) -> ThumbnailUpload:
    async def read() -> bytes:
        return data

    return ThumbnailUpload(filename="thumb.png", media_type=media_type, size=len(data) if size == -1 else size, read=read)


def loader(upload: Optional[ThumbnailUpload]):
    async def load():
        return upload

    return load


@pytest.fixture()
def store():
    return InMemoryThumbnailStore()


@pytest.fixture()
def metadata():
    return FakeMetadataStore(make_video("v1", "u1"))


@pytest.fixture()
def service(store, metadata):
    return ThumbnailService(store, metadata, TokenIsUserVerifier(), public_host="localhost", public_port=8091)


def upload(service, video_id, credential, thumbnail_upload):
    return asyncio.run(service.upload_thumbnail(video_id, credential, loader(thumbnail_upload)))


def test_owner_upload_stores_bytes_and_updates_record(service, store, metadata):
    thumbnail_upload = make_upload()

    record = upload(service, "v1", "u1", thumbnail_upload)

    assert record.thumbnail_url == "http://localhost:8091/api/thumbnails/v1"
    assert record.user_id == "u1"
    assert record.title == "Boots in the snow"
    assert record.created_at == make_video().created_at
    assert metadata.records["v1"].thumbnail_url == record.thumbnail_url

    stored = asyncio.run(store.get("v1"))
    assert stored.data == b"\x89PNG" + b"\x00" * 2044
    assert stored.media_type == "image/png"


def test_missing_video_id_is_bad_request_before_auth(service):
    verifier = service.identity_verifier
    with pytest.raises(BadRequestError):
        upload(service, "", None, make_upload())
    assert verifier.calls == 0


def test_unauthenticated_is_propagated(service, store):
    with pytest.raises(UnauthenticatedError):
        upload(service, "v1", None, make_upload())
    assert asyncio.run(store.count()) == 0


def test_body_is_not_parsed_before_authentication(service):
    parsed = []

    async def load():
        parsed.append(True)
        return make_upload()

    with pytest.raises(UnauthenticatedError):
        asyncio.run(service.upload_thumbnail("v1", None, load))
    assert parsed == []


def test_missing_file_part_is_bad_request(service):
    with pytest.raises(BadRequestError, match="Invalid thumbnail file"):
        upload(service, "v1", "u1", None)


def test_oversized_declared_size_is_rejected(service, store):
    thumbnail_upload = make_upload(data=b"x", size=MAX_THUMBNAIL_UPLOAD_BYTES + 1)

    with pytest.raises(BadRequestError, match="too large"):
        upload(service, "v1", "u1", thumbnail_upload)
    assert asyncio.run(store.get("v1")) is None


def test_oversized_content_is_rejected_when_size_unknown(service, store):
    thumbnail_upload = make_upload(data=b"x" * (MAX_THUMBNAIL_UPLOAD_BYTES + 1), size=None)

    with pytest.raises(BadRequestError, match="too large"):
        upload(service, "v1", "u1", thumbnail_upload)
    assert asyncio.run(store.get("v1")) is None


def test_exactly_at_limit_is_accepted(service, store):
    thumbnail_upload = make_upload(data=b"x" * MAX_THUMBNAIL_UPLOAD_BYTES)

    upload(service, "v1", "u1", thumbnail_upload)
    assert asyncio.run(store.get("v1")).size_bytes == MAX_THUMBNAIL_UPLOAD_BYTES


def test_unknown_video_is_not_found(service, store):
    with pytest.raises(NotFoundError):
        upload(service, "missing", "u1", make_upload())
    assert asyncio.run(store.count()) == 0


def test_non_owner_is_forbidden_and_store_unchanged(service, store):
    asyncio.run(store.put("v1", b"original", "image/jpeg"))

    with pytest.raises(ForbiddenError):
        upload(service, "v1", "u2", make_upload())

    stored = asyncio.run(store.get("v1"))
    assert (stored.data, stored.media_type) == (b"original", "image/jpeg")


def test_metadata_update_failure_is_reported_but_bytes_stay(store):
    metadata = FakeMetadataStore(make_video("v1", "u1"), fail_updates=True)
    service = ThumbnailService(store, metadata, TokenIsUserVerifier(), public_host="localhost", public_port=8091)

    with pytest.raises(MetadataUpdateError):
        upload(service, "v1", "u1", make_upload(data=b"new-bytes"))

    assert asyncio.run(store.get("v1")).data == b"new-bytes"
    assert metadata.records["v1"].thumbnail_url is None


def test_reupload_is_idempotent_in_shape(service, store):
    first = upload(service, "v1", "u1", make_upload())
    stored_first = asyncio.run(store.get("v1"))
    second = upload(service, "v1", "u1", make_upload())
    stored_second = asyncio.run(store.get("v1"))

    assert first.thumbnail_url == second.thumbnail_url
    assert stored_first == stored_second


def test_media_type_is_stored_verbatim(service, store):
    upload(service, "v1", "u1", make_upload(data=b"not really an image", media_type="image/webp"))
    assert asyncio.run(store.get("v1")).media_type == "image/webp"


def test_get_thumbnail_returns_latest(service, store):
    asyncio.run(store.put("v1", b"a", "image/png"))
    asyncio.run(store.put("v1", b"b", "image/gif"))

    thumbnail = asyncio.run(service.get_thumbnail("v1"))
    assert (thumbnail.data, thumbnail.media_type) == (b"b", "image/gif")


def test_get_thumbnail_for_unknown_video(service):
    with pytest.raises(NotFoundError, match="Couldn't find video"):
        asyncio.run(service.get_thumbnail("missing"))


def test_get_thumbnail_for_video_without_upload(service):
    with pytest.raises(NotFoundError, match="Thumbnail not found"):
        asyncio.run(service.get_thumbnail("v1"))


def test_get_thumbnail_requires_video_id(service):
    with pytest.raises(BadRequestError):
        asyncio.run(service.get_thumbnail(""))


def test_thumbnail_url_shape():
    service = ThumbnailService(InMemoryThumbnailStore(), FakeMetadataStore(), TokenIsUserVerifier(), public_host="media.example", public_port=9000)
    assert service.get_thumbnail_url("abc") == "http://media.example:9000/api/thumbnails/abc"
