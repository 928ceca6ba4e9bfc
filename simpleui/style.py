"""
Style System

Colors and the process-wide theme consumed by every widget constructor.

Design principles:
- Colors are plain float tuples (0.0-1.0), no color objects
- Theme is a flat dataclass, no cascading or selectors
- One DEFAULT_THEME shared by the process; a library may carry its own
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Optional
import numpy as np


# =============================================================================
# Color
# =============================================================================

# Color can be:
# - Tuple of 3-4 floats (RGB or RGBA, 0.0-1.0)
# - None (transparent)
Color = Optional[Tuple[float, ...]]


def rgb(r: int, g: int, b: int) -> Color:
    """Color from 0-255 channel values."""
    return (r / 255, g / 255, b / 255, 1.0)


def color_rgba(c: Color) -> Tuple[float, float, float, float]:
    """Normalize color to RGBA tuple."""
    if c is None:
        return (0.0, 0.0, 0.0, 0.0)
    if len(c) == 3:
        return (c[0], c[1], c[2], 1.0)
    return (c[0], c[1], c[2], c[3])


def color_to_array(c: Color) -> np.ndarray:
    """Convert color to numpy array."""
    return np.array(color_rgba(c), dtype=np.float32)


def with_transparency(c: Color, transparency: float) -> Tuple[float, float, float, float]:
    """Fold a 0 (opaque) - 1 (invisible) transparency into the alpha channel."""
    r, g, b, a = color_rgba(c)
    t = min(1.0, max(0.0, transparency))
    return (r, g, b, a * (1.0 - t))


def hex_to_color(hex_str: str) -> Color:
    """Convert hex string to color. Supports #RGB, #RRGGBB, #RRGGBBAA."""
    h = hex_str.lstrip('#')
    if len(h) == 3:
        r, g, b = int(h[0], 16) / 15, int(h[1], 16) / 15, int(h[2], 16) / 15
        return (r, g, b, 1.0)
    elif len(h) == 6:
        r, g, b = int(h[0:2], 16) / 255, int(h[2:4], 16) / 255, int(h[4:6], 16) / 255
        return (r, g, b, 1.0)
    elif len(h) == 8:
        r, g, b, a = int(h[0:2], 16) / 255, int(h[2:4], 16) / 255, int(h[4:6], 16) / 255, int(h[6:8], 16) / 255
        return (r, g, b, a)
    raise ValueError(f"Invalid hex color: {hex_str}")


# =============================================================================
# Theme
# =============================================================================

@dataclass(frozen=True)
class Theme:
    """
    Constant colors and metrics for window chrome and widgets.
    Not a cascade - every constructor reads the fields it needs.
    """

    # Colors
    accent: Color = rgb(58, 110, 255)
    background: Color = rgb(28, 28, 30)
    panel: Color = rgb(34, 34, 36)
    text: Color = rgb(235, 235, 240)
    secondary_text: Color = rgb(170, 170, 175)
    on_accent: Color = (1.0, 1.0, 1.0, 1.0)

    minimize_button: Color = rgb(120, 120, 120)
    toggle_box: Color = rgb(80, 80, 80)
    slider_track: Color = rgb(70, 70, 70)
    input_background: Color = rgb(255, 255, 255)
    dropdown_button: Color = rgb(50, 50, 50)
    dropdown_panel: Color = rgb(48, 48, 50)

    # Corner radius
    corner_radius: float = 8.0
    control_radius: float = 6.0

    # Font sizes
    font_title: float = 16.0
    font_control: float = 14.0
    font_small: float = 13.0

    # Window metrics
    titlebar_height: float = 36.0
    collapsed_height: float = 44.0
    body_padding: float = 8.0
    content_padding: float = 6.0

    # Row heights
    button_height: float = 36.0
    option_height: float = 28.0


# Default dark theme
DEFAULT_THEME = Theme()
