"""
RGBA color value used by theme palettes.
"""

import re
from dataclasses import dataclass
from typing import Any, List

_HEX_COLOR_RE = re.compile(r'^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')


@dataclass(frozen=True)
class Color:
    """
    RGBA color with float channels in the range [0, 1].

    Stored in theme files as a ``[r, g, b, a]`` array.
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b, self.a):
            if isinstance(channel, bool) or not isinstance(channel, (int, float)):
                raise ValueError(f"Color channel must be a number, got {channel!r}")
            if not 0.0 <= channel <= 1.0:
                raise ValueError(f"Color channel out of range [0, 1]: {channel}")

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """Build a color from 0-255 channel values."""
        return cls(r / 255, g / 255, b / 255, a / 255)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """
        Parse ``#RRGGBB`` or ``#RRGGBBAA``.

        Raises:
            ValueError: If the string is not a hex color
        """
        match = _HEX_COLOR_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {value!r}")
        digits = match.group(1)
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        return cls.from_rgba8(*channels)

    @classmethod
    def from_value(cls, value: Any) -> "Color":
        """
        Convert a deserialized JSON value into a Color.

        Accepts a 3 or 4 element number array, or a hex string.

        Raises:
            ValueError: If the value cannot be interpreted as a color
        """
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, list) and len(value) in (3, 4):
            return cls(*value)
        raise ValueError(f"Expected a color array or hex string, got {value!r}")

    def to_list(self) -> List[float]:
        return [float(self.r), float(self.g), float(self.b), float(self.a)]

    def to_hex(self) -> str:
        """Format as ``#RRGGBBAA``."""
        return "#" + "".join(f"{round(c * 255):02x}" for c in self.to_list())
