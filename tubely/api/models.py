"""
Data models for the Tubely API.

This module defines Pydantic models for responses shared across routes.
"""

from typing import Dict, Optional, Any
from pydantic import BaseModel, Field

from ..core.timezone_utils import now_utc


class ErrorResponse(BaseModel):
    """Error response model"""

    error: str
    details: Optional[str] = None
    timestamp: str = Field(default_factory=lambda: now_utc().isoformat())


class SuccessResponse(BaseModel):
    """Success response model"""

    success: bool = True
    message: str
    data: Optional[Dict[str, Any]] = None
    timestamp: str = Field(default_factory=lambda: now_utc().isoformat())


class SystemStatusResponse(BaseModel):
    """System status response model"""

    running: bool
    uptime_seconds: Optional[float] = None
    thumbnails: Dict[str, Any]
