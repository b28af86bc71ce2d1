"""
Thumbnail Domain Interfaces.

Abstract interfaces that define contracts for thumbnail operations.
These interfaces allow dependency inversion - domain logic doesn't depend on infrastructure.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Thumbnail, VideoRecord


class ThumbnailStore(ABC):
    """Process-wide store holding the current thumbnail per video"""

    @abstractmethod
    async def get(self, video_id: str) -> Optional[Thumbnail]:
        """Get the current thumbnail, or None if none was uploaded"""
        pass

    @abstractmethod
    async def put(self, video_id: str, data: bytes, media_type: str) -> Thumbnail:
        """Store a thumbnail, replacing any previous one"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Number of videos with a stored thumbnail"""
        pass

    @abstractmethod
    async def get_store_stats(self) -> dict:
        """Entry count and total stored bytes"""
        pass


class VideoMetadataStore(ABC):
    """Access to video records owned by the metadata backend"""

    @abstractmethod
    async def get_by_id(self, video_id: str) -> Optional[VideoRecord]:
        """Get video record by ID"""
        pass

    @abstractmethod
    async def update(self, record: VideoRecord) -> None:
        """Persist a record by its ID"""
        pass


class IdentityVerifier(ABC):
    """Turns a caller-supplied credential into a user identifier"""

    @abstractmethod
    def verify(self, credential: Optional[str]) -> str:
        """Return the user ID, or raise UnauthenticatedError"""
        pass
