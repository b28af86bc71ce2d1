"""
Thumbnail Store Implementations.

Process-memory storage for uploaded thumbnails. Nothing survives a restart.
"""

import logging
from typing import Dict, Optional

from ..domain.interfaces import ThumbnailStore
from ..domain.models import Thumbnail


class InMemoryThumbnailStore(ThumbnailStore):
    """
    In-memory store keyed by video ID.

    Records are immutable and fully built before they are published with a
    single dict assignment, so a concurrent ``get`` sees either the old or the
    new thumbnail for a key and never a mix of the two. No lock spans keys;
    racing uploads for one video resolve as last-writer-wins.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._thumbnails: Dict[str, Thumbnail] = {}

    async def get(self, video_id: str) -> Optional[Thumbnail]:
        """Get the current thumbnail for a video"""
        return self._thumbnails.get(video_id)

    async def put(self, video_id: str, data: bytes, media_type: str) -> Thumbnail:
        """Store a thumbnail, replacing any previous one"""
        thumbnail = Thumbnail(video_id=video_id, data=bytes(data), media_type=media_type)
        previous = self._thumbnails.get(video_id)
        self._thumbnails[video_id] = thumbnail

        if previous is not None:
            self.logger.debug(f"Replaced thumbnail for {video_id} ({previous.size_bytes} -> {thumbnail.size_bytes} bytes)")
        else:
            self.logger.debug(f"Stored thumbnail for {video_id} ({thumbnail.size_bytes} bytes, {media_type})")

        return thumbnail

    async def count(self) -> int:
        return len(self._thumbnails)

    def total_bytes(self) -> int:
        """Total size of all stored thumbnails"""
        return sum(thumbnail.size_bytes for thumbnail in list(self._thumbnails.values()))

    async def get_store_stats(self) -> dict:
        """Get store statistics"""
        total = self.total_bytes()
        return {
            "entries": await self.count(),
            "size_bytes": total,
            "size_mb": total / (1024 * 1024),
        }
