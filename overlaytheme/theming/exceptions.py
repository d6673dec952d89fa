"""
Errors raised while loading themes.
"""

from dataclasses import dataclass, field
from typing import List


class ThemeError(Exception):
    """Base class for theme loading failures."""
    pass


class ThemeNotFoundError(ThemeError):
    """Raised when a theme file does not exist or cannot be opened."""
    pass


class ThemeParseError(ThemeError):
    """Raised when a theme file is not a well-formed JSON object."""
    pass


@dataclass
class FieldWarning:
    """A single field that was missing or invalid and kept its default."""
    group: str
    key: str
    reason: str

    def __str__(self) -> str:
        return f"{self.group}.{self.key}: {self.reason}"


@dataclass
class ParseReport:
    """Non-fatal problems collected while reading a theme document."""
    warnings: List[FieldWarning] = field(default_factory=list)

    def add(self, group: str, key: str, reason: str):
        self.warnings.append(FieldWarning(group, key, reason))

    @property
    def ok(self) -> bool:
        """True when every field was read from the document."""
        return not self.warnings

    def keys(self) -> List[str]:
        """Dotted ``group.key`` names of every field that fell back."""
        return [f"{w.group}.{w.key}" for w in self.warnings]
