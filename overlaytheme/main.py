"""
OverlayTheme - GUI entry point.

Resolves the user's theme and opens the theme preferences dialog.
"""

import logging
import sys

from PySide6.QtWidgets import QApplication

from . import __version__
from .config import HostPaths, TempStorage
from .theming import ThemeManager
from .ui import QtFontProvider, QtRenderEngine, ThemeDialog
from .utils import detect_platform, setup_logging


def main():
    """Main entry point for OverlayTheme."""
    setup_logging(log_file=True)
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info(f"OverlayTheme v{__version__} starting...")
    logger.info("=" * 60)

    app = QApplication(sys.argv)
    app.setApplicationName("OverlayTheme")
    app.setOrganizationName("OverlayTheme")

    platform = detect_platform()
    engine = QtRenderEngine(app)
    manager = ThemeManager(
        HostPaths.from_environment(),
        platform=platform,
        engine=engine,
        fonts=QtFontProvider(),
        temp_storage=TempStorage(),
    )

    theme = manager.get_theme()
    engine.apply_palette(theme)
    logger.info(f"Active theme: '{theme.name or '<defaults>'}' (scale {manager.get_global_scale():.2f})")

    dialog = ThemeDialog(manager, engine=engine)
    dialog.exec()

    logger.info("OverlayTheme exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
