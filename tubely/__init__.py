"""
Tubely Thumbnail Service

Upload, store and serve video thumbnails for the Tubely video-hosting backend.
"""

__version__ = "1.0.0"
__author__ = "Tubely Team"

from .main import TubelyService

__all__ = ["TubelyService"]
