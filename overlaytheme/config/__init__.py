"""
Host environment configuration for OverlayTheme.

This module provides the directories themes are read from and saved to,
and the session key-value store shared between components.
"""

from .paths import HostPaths
from .temp_storage import TempStorage

__all__ = ["HostPaths", "TempStorage"]
