"""
Theme model, persistence, discovery and live management.
"""

from .color import Color
from .enums import RendererType, LayoutMode, ComponentTheme
from .model import Theme, ThemeMeta
from .defaults import resolve_defaults
from .exceptions import (
    ThemeError, ThemeNotFoundError, ThemeParseError, FieldWarning, ParseReport,
)
from .serializer import ThemeSerializer
from .discovery import ThemeScanner, select_default_theme
from .engine import FontInfo, FontProvider, RenderEngine
from .manager import ThemeManager

__all__ = [
    "Color",
    "RendererType",
    "LayoutMode",
    "ComponentTheme",
    "Theme",
    "ThemeMeta",
    "resolve_defaults",
    "ThemeError",
    "ThemeNotFoundError",
    "ThemeParseError",
    "FieldWarning",
    "ParseReport",
    "ThemeSerializer",
    "ThemeScanner",
    "select_default_theme",
    "FontInfo",
    "FontProvider",
    "RenderEngine",
    "ThemeManager",
]
