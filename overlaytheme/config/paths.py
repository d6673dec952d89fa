"""
Host directories used by OverlayTheme.
"""

import os
from dataclasses import dataclass
from pathlib import Path

APP_DIR_NAME = "overlaytheme"
SAVE_FILENAME = "theme.json"
THEMES_DIRNAME = "themes"

# Built-in themes shipped inside the package
BUNDLED_RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"


@dataclass
class HostPaths:
    """
    Locations the theme manager reads from and writes to.

    Attributes:
        save_dir: Directory holding the user's saved theme
        resources_dir: Directory of bundled, read-only themes
        themes_dir: User-writable directory of installed themes
    """
    save_dir: Path
    resources_dir: Path
    themes_dir: Path

    @property
    def save_file(self) -> Path:
        """Path of the user's saved theme."""
        return self.save_dir / SAVE_FILENAME

    @classmethod
    def from_environment(cls) -> "HostPaths":
        """
        Build paths from the platform-specific configuration directory.

        Path:
            Linux/macOS: ~/.config/overlaytheme/
            Windows: %APPDATA%\\overlaytheme\\

        The save directory is created if it doesn't exist; the themes
        directory is created on demand by the scanner.
        """
        config_dir = cls._get_config_dir()
        config_dir.mkdir(parents=True, exist_ok=True)
        return cls(
            save_dir=config_dir,
            resources_dir=BUNDLED_RESOURCES_DIR,
            themes_dir=config_dir / THEMES_DIRNAME,
        )

    @staticmethod
    def _get_config_dir() -> Path:
        if os.name == 'nt':  # Windows
            base = os.environ.get('APPDATA', os.path.expanduser('~'))
        else:  # Linux/macOS
            base = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(base) / APP_DIR_NAME
