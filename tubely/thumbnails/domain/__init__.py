"""
Thumbnail Domain Layer.

Contains pure business logic and domain models for thumbnail operations.
No external dependencies - only Python standard library and domain concepts.
"""

from .models import Thumbnail, VideoRecord, ThumbnailUpload, MAX_THUMBNAIL_UPLOAD_BYTES, build_thumbnail_url
from .interfaces import ThumbnailStore, VideoMetadataStore, IdentityVerifier
from .errors import (
    ThumbnailError,
    BadRequestError,
    UnauthenticatedError,
    ForbiddenError,
    NotFoundError,
    MetadataUpdateError,
    MetadataStoreError,
)

__all__ = [
    "Thumbnail",
    "VideoRecord",
    "ThumbnailUpload",
    "MAX_THUMBNAIL_UPLOAD_BYTES",
    "build_thumbnail_url",
    "ThumbnailStore",
    "VideoMetadataStore",
    "IdentityVerifier",
    "ThumbnailError",
    "BadRequestError",
    "UnauthenticatedError",
    "ForbiddenError",
    "NotFoundError",
    "MetadataUpdateError",
    "MetadataStoreError",
]
