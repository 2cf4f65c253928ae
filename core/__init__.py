"""
Core Layer - Configuration, logging, constants and dependency wiring.
"""

from .config import Settings, get_settings
from .logger import logger

__all__ = [
    "Settings",
    "get_settings",
    "logger",
]
