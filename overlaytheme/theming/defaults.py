"""
Default theme values for OverlayTheme.

These are the baseline values every theme starts from before any file
value is applied.
"""

from .color import Color
from .enums import ComponentTheme, LayoutMode, RendererType
from .model import Theme
from ..utils.platform import Platform

DEFAULT_FONT = "Rubik"

# Presentation mode per platform: (renderer, layout)
PLATFORM_MODES = {
    Platform.DESKTOP: (RendererType.IMMEDIATE_MODE, LayoutMode.TABBED),
    Platform.RESTRICTED: (RendererType.NATIVE_WIDGET, LayoutMode.PANEL),
}

# Touch hosts get a larger font
PLATFORM_FONT_SIZE = {
    Platform.DESKTOP: 18.0,
    Platform.RESTRICTED: 20.0,
}

DEFAULT_STYLE = {
    "component_theme": ComponentTheme.MEGA_OVERLAY,
    "ui_scale": 1.0,
    "border_size": 1.0,
    "window_rounding": 0.0,
    "frame_rounding": 4.0,
    "window_margin": 4.0,
    "frame_padding": 4.0,
    "selected_font": DEFAULT_FONT,
    "enable_blur": True,
    "blur_speed": 0.3,
    "blur_radius": 1.0,
}

DEFAULT_PALETTE = {
    "background_color": Color.from_hex("#1a1a1fff"),
    "foreground_color": Color.from_hex("#e6e6ebff"),
    "frame_background": Color.from_hex("#26262eff"),
    "disabled_color": Color.from_hex("#6b6b75ff"),
    "border_color": Color.from_hex("#3a3a45ff"),
    "title_background_color": Color.from_hex("#5c3fd1ff"),
    "title_foreground_color": Color.from_hex("#ffffffff"),
    "checkbox_background_color": Color.from_hex("#2e2e38ff"),
    "checkbox_checkmark_color": Color.from_hex("#ffffffff"),
    "checkbox_foreground_color": Color.from_hex("#e6e6ebff"),
    "button_background_color": Color.from_hex("#33333dff"),
    "button_foreground_color": Color.from_hex("#e6e6ebff"),
    "button_disabled_color": Color.from_hex("#2a2a30ff"),
    "button_disabled_foreground": Color.from_hex("#6b6b75ff"),
    "button_hovered_color": Color.from_hex("#44444fff"),
    "button_hovered_foreground": Color.from_hex("#ffffffff"),
    "button_activated_color": Color.from_hex("#5c3fd1ff"),
    "button_active_foreground": Color.from_hex("#ffffffff"),
}


def resolve_defaults(platform: Platform = Platform.DESKTOP) -> Theme:
    """
    Build a complete baseline theme for a platform.

    Pure function: no I/O, never fails.

    Args:
        platform: Capability class of the host

    Returns:
        New Theme with every field set
    """
    renderer, layout_mode = PLATFORM_MODES[platform]
    return Theme(
        name="",
        description="",
        author="",
        renderer=renderer,
        layout_mode=layout_mode,
        font_size=PLATFORM_FONT_SIZE[platform],
        **DEFAULT_STYLE,
        **DEFAULT_PALETTE,
    )
