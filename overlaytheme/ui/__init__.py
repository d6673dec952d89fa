"""Qt integration for OverlayTheme."""

from .fonts import QtFontProvider
from .qt_engine import QtRenderEngine, create_theme_palette
from .dialogs import ThemeDialog

__all__ = ["QtFontProvider", "QtRenderEngine", "create_theme_palette", "ThemeDialog"]
