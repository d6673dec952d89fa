"""
Platform capability detection for OverlayTheme.

Detection runs once at startup; the result is passed explicitly to
everything that needs platform-specific behaviour.
"""

import enum
import logging
import os
import sys

logger = logging.getLogger(__name__)


class Platform(enum.Enum):
    """Capability class of the host environment."""
    DESKTOP = "desktop"
    RESTRICTED = "restricted"  # mobile / touch-only hosts


# Fixed per-platform multiplier applied on top of the stored ui scale
PLATFORM_SCALE = {
    Platform.DESKTOP: 1.0,
    Platform.RESTRICTED: 0.85,
}

PLATFORM_ENV_VAR = "OVERLAYTHEME_PLATFORM"


def detect_platform() -> Platform:
    """
    Determine the platform capability of the running process.

    ``OVERLAYTHEME_PLATFORM`` (``desktop`` or ``restricted``) wins when set.

    Returns:
        Detected Platform
    """
    override = os.environ.get(PLATFORM_ENV_VAR, "").strip().lower()
    if override:
        try:
            return Platform(override)
        except ValueError:
            logger.warning(f"Ignoring unknown {PLATFORM_ENV_VAR} value: {override}")

    if sys.platform in ("android", "ios") or "ANDROID_ROOT" in os.environ:
        return Platform.RESTRICTED
    return Platform.DESKTOP


def platform_scale(platform: Platform) -> float:
    """Return the fixed scale constant for a platform."""
    return PLATFORM_SCALE[platform]
