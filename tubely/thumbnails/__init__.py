"""
Thumbnail Module for the Tubely service.

Stores one uploaded thumbnail per video in process memory, lets only the
video's owner replace it, and serves it back over HTTP.
"""

from .domain.models import Thumbnail, VideoRecord, MAX_THUMBNAIL_UPLOAD_BYTES
from .application.thumbnail_service import ThumbnailService
from .integration import ThumbnailModule, create_thumbnail_module

__all__ = ["Thumbnail", "VideoRecord", "MAX_THUMBNAIL_UPLOAD_BYTES", "ThumbnailService", "ThumbnailModule", "create_thumbnail_module"]
