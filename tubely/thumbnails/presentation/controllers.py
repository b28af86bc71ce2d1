"""
Thumbnail HTTP Controllers.

Handle HTTP requests and responses for thumbnail operations.
"""

import logging
from typing import Optional

from fastapi import Request, Response
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from ..application.thumbnail_service import ThumbnailService
from ..domain.models import ThumbnailUpload, VideoRecord
from ..infrastructure.identity import get_bearer_token
from .schemas import VideoRecordResponse


THUMBNAIL_FORM_FIELD = "thumbnail"
DEFAULT_MEDIA_TYPE = "application/octet-stream"


class ThumbnailController:
    """Controller for thumbnail upload and retrieval"""

    def __init__(self, thumbnail_service: ThumbnailService):
        self.thumbnail_service = thumbnail_service
        self.logger = logging.getLogger(__name__)

    async def upload_thumbnail(self, video_id: str, request: Request) -> VideoRecordResponse:
        """Accept a multipart upload and return the updated video record"""
        credential = get_bearer_token(request.headers)
        forms = []

        async def load_upload() -> Optional[ThumbnailUpload]:
            try:
                form = await request.form()
            except (MultiPartException, StarletteHTTPException) as e:
                # Starlette reports a malformed body as a 400 HTTPException when an app is in scope
                self.logger.debug(f"Malformed multipart body for {video_id}: {e}")
                return None
            forms.append(form)
            return self._extract_thumbnail_part(form)

        try:
            record = await self.thumbnail_service.upload_thumbnail(video_id, credential, load_upload)
        finally:
            for form in forms:
                await form.close()

        return self._convert_to_response(record)

    async def get_thumbnail(self, video_id: str) -> Response:
        """Serve stored thumbnail bytes"""
        thumbnail = await self.thumbnail_service.get_thumbnail(video_id)

        return Response(content=thumbnail.data, media_type=thumbnail.media_type, headers={"Cache-Control": "no-store"})

    def _extract_thumbnail_part(self, form: FormData) -> Optional[ThumbnailUpload]:
        part = form.get(THUMBNAIL_FORM_FIELD)
        if not isinstance(part, UploadFile):
            return None

        return ThumbnailUpload(
            filename=part.filename,
            media_type=part.content_type or DEFAULT_MEDIA_TYPE,
            size=part.size,
            read=part.read,
        )

    def _convert_to_response(self, record: VideoRecord) -> VideoRecordResponse:
        """Convert domain model to response model"""
        return VideoRecordResponse(
            id=record.id,
            title=record.title,
            description=record.description,
            created_at=record.created_at,
            updated_at=record.updated_at,
            user_id=record.user_id,
            thumbnail_url=record.thumbnail_url,
            video_url=record.video_url,
        )
