"""
Thumbnail Application Service.

Orchestrates the upload and retrieval use cases: validation, ownership checks,
storage, and propagation of the derived thumbnail URL to the video record.
"""

import logging
from typing import Awaitable, Callable, Optional

from ..domain.errors import (
    BadRequestError,
    ForbiddenError,
    MetadataStoreError,
    MetadataUpdateError,
    NotFoundError,
)
from ..domain.interfaces import IdentityVerifier, ThumbnailStore, VideoMetadataStore
from ..domain.models import (
    MAX_THUMBNAIL_UPLOAD_BYTES,
    Thumbnail,
    ThumbnailUpload,
    VideoRecord,
    build_thumbnail_url,
)
from ...core.timezone_utils import now_utc


UploadLoader = Callable[[], Awaitable[Optional[ThumbnailUpload]]]


class ThumbnailService:
    """Application service for thumbnail upload and retrieval"""

    def __init__(
        self,
        thumbnail_store: ThumbnailStore,
        metadata_store: VideoMetadataStore,
        identity_verifier: IdentityVerifier,
        public_host: str,
        public_port: int
    ):
        self.thumbnail_store = thumbnail_store
        self.metadata_store = metadata_store
        self.identity_verifier = identity_verifier
        self.public_host = public_host
        self.public_port = public_port
        self.logger = logging.getLogger(__name__)

    async def upload_thumbnail(
        self,
        video_id: Optional[str],
        credential: Optional[str],
        load_upload: UploadLoader
    ) -> VideoRecord:
        """
        Store a new thumbnail for a video owned by the caller.

        ``load_upload`` parses the request body and returns the ``thumbnail``
        file part, or None when it is missing or not a file. It is awaited only
        after the caller is authenticated.

        The thumbnail is stored before the video record is updated. If that
        update fails the new bytes stay in the store and MetadataUpdateError
        is raised.
        """
        if not video_id:
            raise BadRequestError("Invalid video ID")

        user_id = self.identity_verifier.verify(credential)
        self.logger.info(f"Uploading thumbnail for video {video_id} by user {user_id}")

        upload = await load_upload()
        if upload is None:
            raise BadRequestError("Invalid thumbnail file")

        if upload.exceeds_limit:
            raise BadRequestError("Thumbnail file is too large")

        video = await self._get_video(video_id)
        if video is None:
            raise NotFoundError("Couldn't find video")

        if not video.is_owned_by(user_id):
            self.logger.warning(f"User {user_id} tried to upload a thumbnail for video {video_id} owned by {video.user_id}")
            raise ForbiddenError("You are not authorized to upload a thumbnail for this video")

        data = await upload.read()
        # Declared size may be absent or wrong
        if len(data) > MAX_THUMBNAIL_UPLOAD_BYTES:
            raise BadRequestError("Thumbnail file is too large")

        await self.thumbnail_store.put(video_id, data, upload.media_type)

        updated = self._build_updated_record(video, user_id, self.get_thumbnail_url(video_id))
        try:
            await self.metadata_store.update(updated)
        except MetadataStoreError as e:
            self.logger.error(f"Thumbnail for {video_id} stored but video record not updated: {e}")
            raise MetadataUpdateError("Thumbnail stored but the video could not be updated") from e

        self.logger.info(f"Thumbnail for video {video_id} updated ({len(data)} bytes, {upload.media_type})")
        return updated

    async def get_thumbnail(self, video_id: Optional[str]) -> Thumbnail:
        """Get the stored thumbnail for an existing video"""
        if not video_id:
            raise BadRequestError("Invalid video ID")

        video = await self._get_video(video_id)
        if video is None:
            raise NotFoundError("Couldn't find video")

        thumbnail = await self.thumbnail_store.get(video_id)
        if thumbnail is None:
            raise NotFoundError("Thumbnail not found")

        return thumbnail

    def get_thumbnail_url(self, video_id: str) -> str:
        return build_thumbnail_url(self.public_host, self.public_port, video_id)

    async def _get_video(self, video_id: str) -> Optional[VideoRecord]:
        return await self.metadata_store.get_by_id(video_id)

    def _build_updated_record(self, video: VideoRecord, user_id: str, thumbnail_url: str) -> VideoRecord:
        """Copy of the record pointing at the new thumbnail"""
        now = now_utc()
        return VideoRecord(
            id=video.id,
            title=video.title or "",
            description=video.description or "",
            created_at=video.created_at or now,
            updated_at=video.updated_at or now,
            user_id=user_id,
            thumbnail_url=thumbnail_url,
            video_url=video.video_url,
        )
