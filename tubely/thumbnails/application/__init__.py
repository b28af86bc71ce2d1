"""
Thumbnail Application Layer.

Contains use cases and application services that orchestrate domain logic
and coordinate between domain and infrastructure layers.
"""

from .thumbnail_service import ThumbnailService

__all__ = [
    "ThumbnailService",
]
