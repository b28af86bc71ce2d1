"""
Thumbnail API Request/Response Schemas.

Pydantic models for API serialization. Field aliases keep the JSON names
clients already use for video records.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class VideoRecordResponse(BaseModel):
    """Video record returned after a successful thumbnail upload"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "0f3c9b9e-8d52-4b7e-a7f5-2c1b3f4d5e6a",
                "title": "Boots in the snow",
                "description": "First test upload",
                "createdAt": "2026-10-18T14:30:22+00:00",
                "updatedAt": "2026-10-18T14:30:22+00:00",
                "userID": "9a1d2c3b-4e5f-4a6b-8c7d-0e1f2a3b4c5d",
                "thumbnailURL": "http://localhost:8091/api/thumbnails/0f3c9b9e-8d52-4b7e-a7f5-2c1b3f4d5e6a",
                "videoURL": None
            }
        },
    )

    id: str = Field(..., description="Video identifier")
    title: str = Field(..., description="Video title")
    description: str = Field("", description="Video description")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="Last update timestamp")
    user_id: str = Field(..., alias="userID", description="Owning user")
    thumbnail_url: Optional[str] = Field(None, alias="thumbnailURL", description="URL of the current thumbnail")
    video_url: Optional[str] = Field(None, alias="videoURL", description="URL of the video file")
