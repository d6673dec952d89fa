"""
Enumerations persisted in theme files.

Ordinals are part of the file format and must never be renumbered.
"""

import enum


class RendererType(enum.IntEnum):
    """Rendering technology that draws the overlay."""
    NONE = 0
    IMMEDIATE_MODE = 1
    NATIVE_WIDGET = 2


class LayoutMode(enum.IntEnum):
    """Macro arrangement of the overlay panels."""
    TABBED = 0
    PANEL = 1


class ComponentTheme(enum.IntEnum):
    """Built-in widget style packs."""
    CLASSIC = 0
    MEGA_OVERLAY = 1
    GLASS = 2
    MINIMAL = 3
