"""
Thumbnail API Routes.

FastAPI route definitions for thumbnail upload and retrieval.
"""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from .controllers import ThumbnailController
from .schemas import VideoRecordResponse


def create_thumbnail_routes(thumbnail_controller: ThumbnailController) -> APIRouter:
    """Create thumbnail API routes with dependency injection"""

    router = APIRouter(prefix="/api", tags=["thumbnails"])

    @router.post("/thumbnail_upload/{video_id}", response_model=VideoRecordResponse)
    async def upload_thumbnail(video_id: str, request: Request):
        """
        Upload or replace the thumbnail of a video.

        - **video_id**: Video identifier
        - **thumbnail**: Image file part of the multipart form (max 10 MiB)

        Requires `Authorization: Bearer <token>` for the video's owner.
        Returns the updated video record.
        """
        return await thumbnail_controller.upload_thumbnail(video_id, request)

    @router.get("/thumbnails/{video_id}", response_class=Response)
    async def get_thumbnail(video_id: str):
        """
        Return the stored thumbnail image.

        The response carries the media type given at upload and is never cached.
        """
        return await thumbnail_controller.get_thumbnail(video_id)

    return router
