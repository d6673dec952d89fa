"""
Theme discovery.

Finds candidate theme files in the bundled resources directory and the
user themes directory, reading only the theme name from each.
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Union

from .exceptions import ThemeError
from .model import ThemeMeta
from .serializer import ThemeSerializer

logger = logging.getLogger(__name__)

ThemeSortKey = Callable[[ThemeMeta], Any]


def default_sort_key(meta: ThemeMeta) -> Any:
    """Order candidates by case-insensitive name, then by path."""
    return (meta.name.casefold(), str(meta.path))


def select_default_theme(
    themes: Sequence[ThemeMeta],
    key: Optional[ThemeSortKey] = None,
) -> Optional[ThemeMeta]:
    """
    Pick the theme to load when no saved theme exists.

    Args:
        themes: Discovered candidates
        key: Sort key; the smallest candidate wins

    Returns:
        Chosen ThemeMeta, or None if there are no candidates
    """
    if not themes:
        return None
    return min(themes, key=key or default_sort_key)


class ThemeScanner:
    """
    Enumerate theme files without fully loading them.

    Scans two directories, non-recursively:
    - the bundled resources directory
    - the user themes directory (created if missing)
    """

    def __init__(
        self,
        resources_dir: Union[str, Path],
        themes_dir: Union[str, Path],
        extension: str = ".json",
    ):
        self.resources_dir = Path(resources_dir)
        self.themes_dir = Path(themes_dir)
        self.extension = extension

    @staticmethod
    def check_theme(path: Union[str, Path]) -> Optional[ThemeMeta]:
        """
        Read just enough of a file to list it as a theme.

        Args:
            path: Candidate theme file

        Returns:
            ThemeMeta with the theme name, or None if the file is missing,
            unreadable, not a JSON object or has no ``details.name`` string
        """
        path = Path(path)
        try:
            document = ThemeSerializer.parse_document(ThemeSerializer.read_file(path))
        except ThemeError as e:
            logger.debug(f"Skipping theme candidate {path}: {e}")
            return None

        details = document.get("details")
        name = details.get("name") if isinstance(details, dict) else None
        if not isinstance(name, str):
            logger.debug(f"Skipping theme candidate {path}: no name")
            return None

        return ThemeMeta(name=name, path=path)

    def list_available_themes(self) -> List[ThemeMeta]:
        """
        List every valid theme in the scanned directories.

        Results keep directory enumeration order; duplicate names are kept.
        """
        themes: List[ThemeMeta] = []
        for directory in (self.resources_dir, self.themes_dir):
            themes.extend(self._scan_directory(directory))

        logger.info(f"Found {len(themes)} available theme(s)")
        return themes

    def _scan_directory(self, directory: Path) -> List[ThemeMeta]:
        themes = []
        try:
            directory.mkdir(parents=True, exist_ok=True)
            entries = list(directory.iterdir())
        except OSError as e:
            logger.warning(f"Cannot scan theme directory {directory}: {e}")
            return themes

        for entry in entries:
            if entry.suffix != self.extension:
                continue
            meta = self.check_theme(entry)
            if meta:
                themes.append(meta)

        return themes
