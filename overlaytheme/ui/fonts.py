"""
Runtime font list backed by the Qt font database.
"""

from typing import List

from PySide6.QtGui import QFontDatabase

from ..theming.engine import FontInfo


class QtFontProvider:
    """Lists the font families Qt can render."""

    def fetch_available_fonts(self) -> List[FontInfo]:
        return [FontInfo(name=family) for family in QFontDatabase.families()]
