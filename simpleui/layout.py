"""
Layout Primitives

Geometry types and the vertical stack used by every container.

Implements:
- Rect / Vec2 geometry
- Dim2: size/position as parent fraction plus pixel offset
- Vertical stack: children top to bottom with fixed padding

Not implemented (to keep it simple):
- horizontal stacks
- wrapping
- alignment other than left/top
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple, Sequence


# =============================================================================
# Rect / Vec2
# =============================================================================

@dataclass(frozen=True)
class Vec2:
    """2D point or size in pixels."""
    x: float = 0.0
    y: float = 0.0

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)


@dataclass
class Rect:
    """Rectangle with position and size."""
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < (self.x + self.w) and self.y <= py < (self.y + self.h)

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def origin(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def size(self) -> Vec2:
        return Vec2(self.w, self.h)

    def intersect(self, other: Rect) -> Rect:
        """Intersection of two rectangles (zero-sized when disjoint)."""
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        r = min(self.right, other.right)
        b = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, r - x), max(0, b - y))


# =============================================================================
# Dim2
# =============================================================================

@dataclass(frozen=True)
class Dim2:
    """
    Two-axis dimension: a fraction of the parent plus a pixel offset.

    Dim2(1, -20, 0, 36) is "parent width minus 20, 36 pixels tall".
    """
    x_scale: float = 0.0
    x_offset: float = 0.0
    y_scale: float = 0.0
    y_offset: float = 0.0

    @staticmethod
    def offset(x: float, y: float) -> Dim2:
        """Pixel-only dimension."""
        return Dim2(0.0, x, 0.0, y)

    @staticmethod
    def scale(x: float, y: float) -> Dim2:
        """Parent-fraction-only dimension."""
        return Dim2(x, 0.0, y, 0.0)

    def resolve(self, parent_w: float, parent_h: float) -> Tuple[float, float]:
        """Resolve to pixels against a parent size."""
        return (
            self.x_scale * parent_w + self.x_offset,
            self.y_scale * parent_h + self.y_offset,
        )

    def with_height(self, y_scale: float, y_offset: float) -> Dim2:
        """Same horizontal dimension, new vertical one."""
        return Dim2(self.x_scale, self.x_offset, y_scale, y_offset)

    def lerp(self, other: Dim2, t: float) -> Dim2:
        """Linear interpolation, used by tweens."""
        return Dim2(
            self.x_scale + (other.x_scale - self.x_scale) * t,
            self.x_offset + (other.x_offset - self.x_offset) * t,
            self.y_scale + (other.y_scale - self.y_scale) * t,
            self.y_offset + (other.y_offset - self.y_offset) * t,
        )


# =============================================================================
# Stack Layout
# =============================================================================

def stack_offsets(heights: Sequence[float], padding: float) -> List[float]:
    """
    Vertical offsets for a top-to-bottom stack.

    Each child starts where the previous one ended plus padding.
    """
    offsets: List[float] = []
    y = 0.0
    for h in heights:
        offsets.append(y)
        y += h + padding
    return offsets


def stack_extent(heights: Sequence[float], padding: float) -> float:
    """Total height of a stack (no trailing padding)."""
    if not heights:
        return 0.0
    return sum(heights) + padding * (len(heights) - 1)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value to [lo, hi]; lo wins when the range is inverted."""
    return max(lo, min(hi, value))
