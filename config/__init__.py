"""
Config Package - Application settings and logging setup.
"""

from config.settings import Settings, get_settings
from config.logging_config import setup_logging

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "setup_logging",
]
