"""
Native-widget rendering engine for OverlayTheme.

Applies live theme changes to a running QApplication and re-emits them as
signals for widgets that lay themselves out per renderer or layout mode.
"""

import logging
import math
from typing import Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication, QStyleFactory

from ..theming.color import Color
from ..theming.enums import ComponentTheme, LayoutMode, RendererType
from ..theming.model import Theme

logger = logging.getLogger(__name__)

# Qt widget style used for each component theme
COMPONENT_STYLES = {
    ComponentTheme.CLASSIC: "Windows",
    ComponentTheme.MEGA_OVERLAY: "Fusion",
    ComponentTheme.GLASS: "Fusion",
    ComponentTheme.MINIMAL: "Fusion",
}


def to_qcolor(color: Color) -> QColor:
    return QColor.fromRgbF(color.r, color.g, color.b, color.a)


def create_theme_palette(theme: Theme) -> QPalette:
    """Create a QPalette from a theme's color slots."""
    palette = QPalette()
    role = QPalette.ColorRole

    # Base colors
    palette.setColor(role.Window, to_qcolor(theme.background_color))
    palette.setColor(role.WindowText, to_qcolor(theme.foreground_color))
    palette.setColor(role.Base, to_qcolor(theme.frame_background))
    palette.setColor(role.AlternateBase, to_qcolor(theme.checkbox_background_color))
    palette.setColor(role.ToolTipBase, to_qcolor(theme.title_background_color))
    palette.setColor(role.ToolTipText, to_qcolor(theme.title_foreground_color))
    palette.setColor(role.Text, to_qcolor(theme.foreground_color))

    # Button colors
    palette.setColor(role.Button, to_qcolor(theme.button_background_color))
    palette.setColor(role.ButtonText, to_qcolor(theme.button_foreground_color))

    # Selection colors
    palette.setColor(role.Highlight, to_qcolor(theme.button_activated_color))
    palette.setColor(role.HighlightedText, to_qcolor(theme.button_active_foreground))
    palette.setColor(role.Link, to_qcolor(theme.title_background_color))

    # Disabled states
    disabled = QPalette.ColorGroup.Disabled
    palette.setColor(disabled, role.WindowText, to_qcolor(theme.disabled_color))
    palette.setColor(disabled, role.Text, to_qcolor(theme.disabled_color))
    palette.setColor(disabled, role.Button, to_qcolor(theme.button_disabled_color))
    palette.setColor(disabled, role.ButtonText, to_qcolor(theme.button_disabled_foreground))

    return palette


class QtRenderEngine(QObject):
    """
    Rendering engine backed by the Qt widget toolkit.

    Active while a QApplication exists and has not started quitting.
    """

    renderer_changed = Signal(int)
    layout_mode_changed = Signal(int)
    component_theme_changed = Signal(int)
    font_changed = Signal(str)

    def __init__(self, app: Optional[QApplication] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._app = app or QApplication.instance()
        self._shutting_down = False
        self.renderer = RendererType.NATIVE_WIDGET
        self.layout_mode = LayoutMode.PANEL

        if self._app is not None:
            self._app.aboutToQuit.connect(self._on_about_to_quit)

    def is_active(self) -> bool:
        return not self._shutting_down and QApplication.instance() is not None

    def set_renderer(self, renderer: RendererType):
        self.renderer = renderer
        self.renderer_changed.emit(int(renderer))

    def set_layout_mode(self, mode: LayoutMode):
        self.layout_mode = mode
        self.layout_mode_changed.emit(int(mode))

    def set_component_theme(self, theme: ComponentTheme):
        style_name = COMPONENT_STYLES.get(theme, "Fusion")
        available = [key.lower() for key in QStyleFactory.keys()]
        if style_name.lower() in available:
            QApplication.setStyle(style_name)
        else:
            logger.warning(f"Qt style '{style_name}' not available, keeping current style")
        self.component_theme_changed.emit(int(theme))

    def set_font(self, name: str):
        font = QApplication.font()
        font.setFamily(name)
        QApplication.setFont(font)
        self.font_changed.emit(name)

    def set_font_size(self, size: float):
        if not math.isfinite(size) or size <= 0:
            logger.warning(f"Ignoring invalid font size: {size}")
            return
        font = QApplication.font()
        font.setPointSizeF(size)
        QApplication.setFont(font)

    def apply_palette(self, theme: Theme):
        """Apply every color slot of a theme to the application."""
        if not self.is_active():
            return
        QApplication.setPalette(create_theme_palette(theme))

    def _on_about_to_quit(self):
        self._shutting_down = True
