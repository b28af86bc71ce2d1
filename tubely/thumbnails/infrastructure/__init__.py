"""
Thumbnail Infrastructure Layer.

Contains implementations of domain interfaces using external dependencies
like SQLite and PyJWT.
"""

from .thumbnail_store import InMemoryThumbnailStore
from .metadata_store import SQLiteVideoMetadataStore
from .identity import JWTIdentityVerifier, get_bearer_token

__all__ = [
    "InMemoryThumbnailStore",
    "SQLiteVideoMetadataStore",
    "JWTIdentityVerifier",
    "get_bearer_token",
]
