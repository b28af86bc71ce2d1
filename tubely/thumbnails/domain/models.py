"""
Thumbnail Domain Models.

Pure business entities and value objects for thumbnail operations.
These models contain no external dependencies and represent core business concepts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Optional


# Hard protocol limit for a single thumbnail upload (10 MiB)
MAX_THUMBNAIL_UPLOAD_BYTES = 10 * 1024 * 1024

THUMBNAIL_ROUTE_PREFIX = "/api/thumbnails"


@dataclass(frozen=True)
class Thumbnail:
    """Stored thumbnail value object"""
    video_id: str
    data: bytes
    media_type: str

    def __post_init__(self):
        if not self.video_id:
            raise ValueError("Video ID cannot be empty")
        if not isinstance(self.data, bytes):
            raise TypeError("Thumbnail data must be bytes")

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass
class VideoRecord:
    """Video metadata entity, owned by the metadata store"""
    id: str
    title: str
    description: str
    created_at: datetime
    updated_at: datetime
    user_id: str
    thumbnail_url: Optional[str] = None
    video_url: Optional[str] = None

    def is_owned_by(self, user_id: str) -> bool:
        return bool(self.user_id) and self.user_id == user_id


@dataclass(frozen=True)
class ThumbnailUpload:
    """
    A file part submitted under the ``thumbnail`` form field.

    ``size`` is what the transport reported before the body was read and may be
    None when unknown. ``read`` returns the full content.
    """
    filename: Optional[str]
    media_type: str
    size: Optional[int]
    read: Callable[[], Awaitable[bytes]]

    @property
    def exceeds_limit(self) -> bool:
        return self.size is not None and self.size > MAX_THUMBNAIL_UPLOAD_BYTES


def build_thumbnail_url(host: str, port: int, video_id: str) -> str:
    """Public URL clients use to fetch a video's thumbnail"""
    return f"http://{host}:{port}{THUMBNAIL_ROUTE_PREFIX}/{video_id}"
