"""
Tubely - Core Module

Configuration, logging setup, and time handling shared by the rest of the service.
"""

from .config import Config
from .logging_config import setup_logging, get_error_tracker

__all__ = ["Config", "setup_logging", "get_error_tracker"]
