"""
Theme management for OverlayTheme.

Owns the live theme, loads and saves it, and pushes presentation changes
into the rendering engine while it is running.
"""

import logging
import math
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .defaults import resolve_defaults
from .discovery import ThemeScanner, ThemeSortKey, select_default_theme
from .engine import FontProvider, RenderEngine
from .enums import ComponentTheme, LayoutMode, RendererType
from .exceptions import ParseReport, ThemeNotFoundError, ThemeParseError
from .model import Theme
from .serializer import ThemeSerializer
from ..config import HostPaths, TempStorage
from ..utils.platform import Platform, platform_scale

logger = logging.getLogger(__name__)

# Session override multiplied into the global scale
SESSION_SCALE_KEY = "ui.scale"


class ThemeManager:
    """
    Owner of the single live theme.

    The theme is resolved lazily on first access: the saved theme, then the
    preferred discovered theme, then built-in defaults. Initialization runs
    at most once and is guarded by a lock; everything else must be called
    from the UI thread.

    Only renderer, layout mode, component theme, font and font size are
    pushed to the engine live. Colors, blur and the remaining numeric style
    fields are read by the renderer on its next full apply.
    """

    def __init__(
        self,
        paths: HostPaths,
        platform: Platform = Platform.DESKTOP,
        engine: Optional[RenderEngine] = None,
        fonts: Optional[FontProvider] = None,
        temp_storage: Optional[TempStorage] = None,
        scanner: Optional[ThemeScanner] = None,
        theme_sort_key: Optional[ThemeSortKey] = None,
    ):
        """
        Initialize theme manager.

        Args:
            paths: Host directories
            platform: Capability class used for defaults and scaling
            engine: Rendering engine receiving live changes
            fonts: Runtime font list
            temp_storage: Session store shared with other components
            scanner: Theme discovery, defaults to scanning ``paths``
            theme_sort_key: Preference order among discovered themes
        """
        self.paths = paths
        self.platform = platform
        self.engine = engine
        self.fonts = fonts
        self.temp_storage = temp_storage if temp_storage is not None else TempStorage()
        self.scanner = scanner or ThemeScanner(paths.resources_dir, paths.themes_dir)
        self.theme_sort_key = theme_sort_key
        self.last_report: Optional[ParseReport] = None

        self._theme: Optional[Theme] = None
        self._init_lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._theme is not None

    def get_theme(self) -> Theme:
        """Return the live theme, initializing it on first access."""
        if self._theme is None:
            self.initialize()
        return self._theme

    def initialize(self):
        """Resolve the live theme. Subsequent calls do nothing."""
        with self._init_lock:
            if self._theme is not None:
                return

            if not self.load_theme(self.paths.save_file):
                # No saved theme, fall back to a discovered one
                candidate = select_default_theme(
                    self.scanner.list_available_themes(), self.theme_sort_key
                )
                if candidate is None or not self.load_theme(candidate.path):
                    logger.info("No usable theme found, using defaults")
                    self._theme = resolve_defaults(self.platform)
                    self.last_report = None

            # Share values with other components
            self.apply_values(self.temp_storage, flatten=True)

    def load_theme(self, path: Union[str, Path]) -> bool:
        """
        Replace the live theme with the contents of a file.

        Missing or invalid fields keep their defaults; see ``last_report``.
        If the file cannot be read or parsed the live theme is untouched.

        Args:
            path: Theme file

        Returns:
            True if the theme was loaded
        """
        try:
            theme, report = ThemeSerializer.load(path, self.platform)
        except ThemeNotFoundError as e:
            logger.info(f"{e}")
            return False
        except ThemeParseError as e:
            logger.error(f"Failed to load theme {path}: {e}")
            return False

        if report.warnings:
            logger.warning(
                f"Theme {path}: kept defaults for {len(report.warnings)} field(s): "
                f"{', '.join(report.keys())}"
            )

        self._theme = theme
        self.last_report = report
        self._push_presentation(theme)

        logger.info(f"Loaded theme '{theme.name}' from {path}")
        return True

    def save_theme(self, path: Optional[Union[str, Path]] = None):
        """
        Write the live theme to disk.

        Failures are logged only; callers needing confirmation must re-read.

        Args:
            path: Destination, defaults to the user's saved theme file
        """
        path = Path(path) if path else self.paths.save_file
        try:
            text = ThemeSerializer.dumps(self.get_theme())
        except ValueError as e:
            logger.error(f"Refusing to save theme with invalid values: {e}")
            return

        try:
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
        except OSError as e:
            logger.error(f"Failed to save theme: {e}")
            return

        logger.info(f"Saved theme to {path}")

    def apply_values(self, target: Union[Dict[str, Any], TempStorage], flatten: bool = False):
        """
        Write the serialized live theme into a dict or session store.

        Args:
            target: Mapping-like object with an ``update`` method
            flatten: Write a single level instead of the four groups
        """
        target.update(ThemeSerializer.serialize(self.get_theme(), flatten=flatten))

    def get_global_scale(self) -> float:
        """Effective scale: stored ui scale x session override x platform constant."""
        session_scale = float(self.temp_storage.get(SESSION_SCALE_KEY, 1.0))
        return self.get_theme().ui_scale * session_scale * platform_scale(self.platform)

    def get_font_names(self) -> List[str]:
        """Names of the fonts available at runtime."""
        if self.fonts is None:
            return []
        return [font.name for font in self.fonts.fetch_available_fonts()]

    # ------------------------------------------------------------------
    # Live mutators
    # ------------------------------------------------------------------

    def set_renderer(self, renderer: RendererType):
        renderer = RendererType(renderer)
        if self._engine_active():
            self.engine.set_renderer(renderer)
        self.get_theme().renderer = renderer

    def set_layout_mode(self, mode: LayoutMode):
        mode = LayoutMode(mode)
        if self._engine_active():
            logger.debug(f"Setting new layout: {mode.name}")
            self.engine.set_layout_mode(mode)
        self.get_theme().layout_mode = mode

    def set_component_theme(self, theme: ComponentTheme):
        theme = ComponentTheme(theme)
        if self._engine_active():
            self.engine.set_component_theme(theme)
        self.get_theme().component_theme = theme

    def set_selected_font(self, font: Union[str, int]):
        """
        Select a font by name or by index into ``get_font_names()``.

        An out-of-range index is ignored.
        """
        if isinstance(font, int) and not isinstance(font, bool):
            names = self.get_font_names()
            if font < 0 or font >= len(names):
                return
            font = names[font]

        if self._engine_active():
            self.engine.set_font(font)
        self.get_theme().selected_font = font

    def set_font_size(self, size: float):
        """
        Set the font size and push it to the engine.

        Raises:
            ValueError: If size is not a positive finite number
        """
        size = float(size)
        if not math.isfinite(size) or size <= 0:
            raise ValueError(f"Invalid font size: {size}")
        if self._engine_active():
            self.engine.set_font_size(size)
        self.get_theme().font_size = size

    def _engine_active(self) -> bool:
        return self.engine is not None and self.engine.is_active()

    def _push_presentation(self, theme: Theme):
        """Send every live-propagated field of a freshly loaded theme."""
        if not self._engine_active():
            return
        self.engine.set_renderer(theme.renderer)
        self.engine.set_layout_mode(theme.layout_mode)
        self.engine.set_component_theme(theme.component_theme)
        self.engine.set_font(theme.selected_font)
        self.engine.set_font_size(theme.font_size)
