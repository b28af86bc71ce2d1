"""
Thumbnail Module Integration.

Wires the thumbnail domain, infrastructure, application and presentation
layers together. This module handles dependency injection and service composition.
"""

import logging
from typing import Optional

from ..core.config import Config

# Domain interfaces
from .domain.interfaces import ThumbnailStore, VideoMetadataStore, IdentityVerifier

# Infrastructure implementations
from .infrastructure.thumbnail_store import InMemoryThumbnailStore
from .infrastructure.metadata_store import SQLiteVideoMetadataStore
from .infrastructure.identity import JWTIdentityVerifier

# Application services
from .application.thumbnail_service import ThumbnailService

# Presentation layer
from .presentation.controllers import ThumbnailController
from .presentation.routes import create_thumbnail_routes


class ThumbnailModule:
    """
    Composition root for thumbnail functionality.

    Collaborators not passed in are built from the configuration: an in-memory
    thumbnail store, a SQLite metadata store and a JWT identity verifier.
    """

    def __init__(
        self,
        config: Config,
        metadata_store: Optional[VideoMetadataStore] = None,
        identity_verifier: Optional[IdentityVerifier] = None,
        thumbnail_store: Optional[ThumbnailStore] = None
    ):
        self.config = config
        self.logger = logging.getLogger(__name__)

        self.thumbnail_store = thumbnail_store or InMemoryThumbnailStore()
        self.metadata_store = metadata_store or self._create_metadata_store()
        self.identity_verifier = identity_verifier or self._create_identity_verifier()

        # Application layer
        self.thumbnail_service = ThumbnailService(
            thumbnail_store=self.thumbnail_store,
            metadata_store=self.metadata_store,
            identity_verifier=self.identity_verifier,
            public_host=self.config.server.public_host,
            public_port=self.config.server.api_port
        )

        # Presentation layer
        self.thumbnail_controller = ThumbnailController(self.thumbnail_service)

        self.logger.info("Thumbnail module initialized successfully")

    def _create_metadata_store(self) -> VideoMetadataStore:
        store = SQLiteVideoMetadataStore(self.config.database.path)
        store.initialize()
        return store

    def _create_identity_verifier(self) -> IdentityVerifier:
        auth = self.config.auth
        return JWTIdentityVerifier(secret=auth.jwt_secret, issuer=auth.jwt_issuer, algorithm=auth.jwt_algorithm)

    def get_api_routes(self):
        """Get FastAPI routes for thumbnail functionality"""
        return create_thumbnail_routes(thumbnail_controller=self.thumbnail_controller)

    async def get_module_status(self) -> dict:
        """Get status information about the thumbnail module"""
        return {
            "thumbnail_store": type(self.thumbnail_store).__name__,
            "metadata_store": type(self.metadata_store).__name__,
            "identity_verifier": type(self.identity_verifier).__name__,
            "store": await self.thumbnail_store.get_store_stats(),
        }


def create_thumbnail_module(config: Config) -> ThumbnailModule:
    """Factory function to create a thumbnail module from configuration"""
    return ThumbnailModule(config=config)
