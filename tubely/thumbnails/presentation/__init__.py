"""
Thumbnail Presentation Layer.

Contains HTTP controllers, response models, and API route definitions.
"""

from .controllers import ThumbnailController
from .schemas import VideoRecordResponse
from .routes import create_thumbnail_routes

__all__ = [
    "ThumbnailController",
    "VideoRecordResponse",
    "create_thumbnail_routes",
]
