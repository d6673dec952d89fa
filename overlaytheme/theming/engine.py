"""
Interfaces the theme manager expects from the rendering side.

The manager never owns an engine; it only asks whether one is active and
pushes values into it.
"""

from dataclasses import dataclass
from typing import Protocol, Sequence

from .enums import ComponentTheme, LayoutMode, RendererType


@dataclass(frozen=True)
class FontInfo:
    """A font available at runtime."""
    name: str


class RenderEngine(Protocol):
    """Rendering engine that receives live theme changes."""

    def is_active(self) -> bool: ...

    def set_renderer(self, renderer: RendererType) -> None: ...

    def set_layout_mode(self, mode: LayoutMode) -> None: ...

    def set_component_theme(self, theme: ComponentTheme) -> None: ...

    def set_font(self, name: str) -> None: ...

    def set_font_size(self, size: float) -> None: ...


class FontProvider(Protocol):
    """Source of the runtime font list."""

    def fetch_available_fonts(self) -> Sequence[FontInfo]: ...
