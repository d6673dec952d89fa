"""
OverlayTheme - persistence, discovery and live application of overlay themes.
"""

__version__ = "0.9.0"
