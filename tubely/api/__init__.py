"""
API module for the Tubely thumbnail service.

This module provides the FastAPI application that serves thumbnail uploads and downloads.
"""

from .server import APIServer

__all__ = ["APIServer"]
