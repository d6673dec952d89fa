"""Dialog windows for OverlayTheme."""

from .theme_dialog import ThemeDialog

__all__ = ["ThemeDialog"]
