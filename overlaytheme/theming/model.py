"""
Theme data model.

A Theme is the complete set of presentation properties for the overlay.
Every field always holds a value; instances are produced by
``resolve_defaults`` and then overridden field by field.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import List, NamedTuple

from .color import Color
from .enums import ComponentTheme, LayoutMode, RendererType


@dataclass
class Theme:
    """Live, mutable theme state."""

    # Identity
    name: str
    description: str
    author: str

    # Presentation mode
    renderer: RendererType
    layout_mode: LayoutMode
    component_theme: ComponentTheme

    # Numeric style
    ui_scale: float
    border_size: float
    window_rounding: float
    frame_rounding: float
    window_margin: float
    frame_padding: float
    font_size: float

    # Font name, resolved against the runtime font list when applied
    selected_font: str

    # Blur
    enable_blur: bool
    blur_speed: float
    blur_radius: float

    # Palette
    background_color: Color
    foreground_color: Color
    frame_background: Color
    disabled_color: Color
    border_color: Color
    title_background_color: Color
    title_foreground_color: Color
    checkbox_background_color: Color
    checkbox_checkmark_color: Color
    checkbox_foreground_color: Color
    button_background_color: Color
    button_foreground_color: Color
    button_disabled_color: Color
    button_disabled_foreground: Color
    button_hovered_color: Color
    button_hovered_foreground: Color
    button_activated_color: Color
    button_active_foreground: Color

    def copy(self) -> "Theme":
        """Return a shallow copy (all field values are immutable)."""
        return Theme(**{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass(frozen=True)
class ThemeMeta:
    """Minimal discovery record for a candidate theme file."""
    name: str
    path: Path


class FieldSpec(NamedTuple):
    """Where a Theme attribute lives in the persisted document."""
    group: str  # "details", "blur", "other" or "colors"
    key: str    # JSON key inside the group
    attr: str   # Theme attribute name
    kind: type  # str, float, bool, Color or an IntEnum subclass


GROUPS = ("details", "blur", "other", "colors")

THEME_FIELDS: List[FieldSpec] = [
    FieldSpec("details", "name", "name", str),
    FieldSpec("details", "description", "description", str),
    FieldSpec("details", "author", "author", str),
    FieldSpec("details", "renderer", "renderer", RendererType),
    FieldSpec("details", "layout", "layout_mode", LayoutMode),
    FieldSpec("details", "style", "component_theme", ComponentTheme),

    FieldSpec("blur", "blurEnabled", "enable_blur", bool),
    FieldSpec("blur", "blurSpeed", "blur_speed", float),
    FieldSpec("blur", "blurRadius", "blur_radius", float),

    FieldSpec("other", "uiScale", "ui_scale", float),
    FieldSpec("other", "font", "selected_font", str),
    FieldSpec("other", "fontSize", "font_size", float),
    FieldSpec("other", "framePadding", "frame_padding", float),
    FieldSpec("other", "windowMargin", "window_margin", float),
    FieldSpec("other", "windowRounding", "window_rounding", float),
    FieldSpec("other", "frameRounding", "frame_rounding", float),
    FieldSpec("other", "borderSize", "border_size", float),

    FieldSpec("colors", "backgroundColor", "background_color", Color),
    FieldSpec("colors", "foregroundColor", "foreground_color", Color),
    FieldSpec("colors", "frameBackground", "frame_background", Color),
    FieldSpec("colors", "disabledColor", "disabled_color", Color),
    FieldSpec("colors", "borderColor", "border_color", Color),
    FieldSpec("colors", "titleBackgroundColor", "title_background_color", Color),
    FieldSpec("colors", "titleForegroundColor", "title_foreground_color", Color),
    FieldSpec("colors", "checkboxBackgroundColor", "checkbox_background_color", Color),
    FieldSpec("colors", "checkboxCheckmarkColor", "checkbox_checkmark_color", Color),
    FieldSpec("colors", "checkboxForegroundColor", "checkbox_foreground_color", Color),
    FieldSpec("colors", "buttonBackgroundColor", "button_background_color", Color),
    FieldSpec("colors", "buttonForegroundColor", "button_foreground_color", Color),
    FieldSpec("colors", "buttonDisabledColor", "button_disabled_color", Color),
    FieldSpec("colors", "buttonDisabledForeground", "button_disabled_foreground", Color),
    FieldSpec("colors", "buttonHoveredColor", "button_hovered_color", Color),
    FieldSpec("colors", "buttonHoveredForeground", "button_hovered_foreground", Color),
    FieldSpec("colors", "buttonActivatedColor", "button_activated_color", Color),
    FieldSpec("colors", "buttonActiveForeground", "button_active_foreground", Color),
]
