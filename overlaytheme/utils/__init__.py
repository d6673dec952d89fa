"""
Utility functions for OverlayTheme.
"""

from .logger import setup_logging
from .platform import Platform, detect_platform, platform_scale

__all__ = ["setup_logging", "Platform", "detect_platform", "platform_scale"]
