"""
Draw Context

Turns a node tree into batched draw commands for a GPU renderer.

Design:
- paint() walks visible nodes through the DisplayHost interface
- DrawContext collects quads/text with a clip stack
- DrawBatch sorts by z-order and packs numpy vertex arrays

Primitives:
- Filled rectangles (with optional corner radius)
- Text (collected, drawn by renderers that have a font atlas)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple
import numpy as np

from simpleui.host import DisplayHost
from simpleui.layout import Rect
from simpleui.nodes import CORNER, GUI_OBJECT_KINDS, TEXT_KINDS, SCREEN_GUI
from simpleui.style import Color, color_rgba, with_transparency

# Vertex layouts:
#   quad: pos(2f) + uv(2f) + color(4f) + size(2f) + radius(1f)
#   line: pos(2f) + color(4f)
QUAD_VERTEX_FLOATS = 11
LINE_VERTEX_FLOATS = 6


# =============================================================================
# Draw Commands
# =============================================================================

@dataclass
class DrawQuad:
    """A single quad to draw."""
    x: float
    y: float
    w: float
    h: float
    color: Tuple[float, float, float, float]
    radius: float = 0.0
    uv: Tuple[float, float, float, float] = (0, 0, 1, 1)
    z_index: int = 0


@dataclass
class DrawLine:
    """A line segment."""
    x0: float
    y0: float
    x1: float
    y1: float
    color: Tuple[float, float, float, float]
    width: float = 1.0
    z_index: int = 0


@dataclass
class DrawText:
    """Text to draw."""
    text: str
    x: float
    y: float
    color: Tuple[float, float, float, float]
    font_size: float = 14.0
    align: str = "left"
    z_index: int = 0


# =============================================================================
# Draw Batch
# =============================================================================

@dataclass
class DrawBatch:
    """Draw commands of one frame."""
    quads: List[DrawQuad] = field(default_factory=list)
    lines: List[DrawLine] = field(default_factory=list)
    texts: List[DrawText] = field(default_factory=list)

    def finalize(self):
        """Sort commands by z-index."""
        self.quads.sort(key=lambda q: q.z_index)
        self.lines.sort(key=lambda l: l.z_index)
        self.texts.sort(key=lambda t: t.z_index)

    def clear(self):
        self.quads.clear()
        self.lines.clear()
        self.texts.clear()

    def quad_vertices(self) -> np.ndarray:
        """Two triangles per quad: (n*6, 11) float32."""
        vertices = np.zeros((len(self.quads) * 6, QUAD_VERTEX_FLOATS), dtype=np.float32)

        for i, q in enumerate(self.quads):
            x0, y0 = q.x, q.y
            x1, y1 = q.x + q.w, q.y + q.h
            u0, v0, u1, v1 = q.uv
            c = q.color
            r = min(q.radius, q.w / 2, q.h / 2)
            extra = (q.w, q.h, r)

            base = i * 6
            # Triangle 1
            vertices[base + 0] = [x0, y0, u0, v0, *c, *extra]
            vertices[base + 1] = [x1, y0, u1, v0, *c, *extra]
            vertices[base + 2] = [x1, y1, u1, v1, *c, *extra]
            # Triangle 2
            vertices[base + 3] = [x0, y0, u0, v0, *c, *extra]
            vertices[base + 4] = [x1, y1, u1, v1, *c, *extra]
            vertices[base + 5] = [x0, y1, u0, v1, *c, *extra]

        return vertices

    def line_vertices(self) -> np.ndarray:
        """Two vertices per line: (n*2, 6) float32."""
        vertices = np.zeros((len(self.lines) * 2, LINE_VERTEX_FLOATS), dtype=np.float32)
        for i, ln in enumerate(self.lines):
            vertices[i * 2 + 0] = [ln.x0, ln.y0, *ln.color]
            vertices[i * 2 + 1] = [ln.x1, ln.y1, *ln.color]
        return vertices


# =============================================================================
# Draw Context
# =============================================================================

class DrawContext:
    """
    Collects draw commands for one frame.

    Coordinates are absolute screen pixels; nested clipping nodes push
    their rects on the clip stack.
    """

    def __init__(self, window_width: int, window_height: int):
        self.window_width = window_width
        self.window_height = window_height
        self.batch = DrawBatch()
        self._z_index = 0
        self._clip_stack: List[Optional[Rect]] = []
        self._current_clip: Optional[Rect] = None

    # -------------------------------------------------------------------------
    # Clipping
    # -------------------------------------------------------------------------

    def push_clip(self, rect: Rect):
        clip = rect
        if self._current_clip:
            clip = self._current_clip.intersect(rect)
        self._clip_stack.append(self._current_clip)
        self._current_clip = clip

    def pop_clip(self):
        if self._clip_stack:
            self._current_clip = self._clip_stack.pop()

    def _clipped(self, rect: Rect) -> Optional[Rect]:
        """Rect cut to the current clip, or None when nothing is left."""
        if self._current_clip is None:
            return rect
        cut = self._current_clip.intersect(rect)
        if cut.w <= 0 or cut.h <= 0:
            return None
        return cut

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    def draw_rect(self, rect: Rect, color: Color, radius: float = 0.0):
        visible = self._clipped(rect)
        if visible is None:
            return
        self.batch.quads.append(DrawQuad(
            x=visible.x,
            y=visible.y,
            w=visible.w,
            h=visible.h,
            color=color_rgba(color),
            radius=radius,
            z_index=self._z_index,
        ))
        self._z_index += 1

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, color: Color, width: float = 1.0):
        self.batch.lines.append(DrawLine(
            x0=x0, y0=y0,
            x1=x1, y1=y1,
            color=color_rgba(color),
            width=width,
            z_index=self._z_index,
        ))
        self._z_index += 1

    def draw_text_in_rect(
        self,
        text: str,
        rect: Rect,
        color: Color,
        font_size: float = 14.0,
        align: str = "left",
    ):
        """Draw text vertically centered in a rect."""
        if self._clipped(rect) is None:
            return
        x = rect.x
        if align == "center":
            x = rect.x + rect.w / 2
        elif align == "right":
            x = rect.x + rect.w
        y = rect.y + rect.h / 2 - font_size / 2

        self.batch.texts.append(DrawText(
            text=text,
            x=x,
            y=y,
            color=color_rgba(color),
            font_size=font_size,
            align=align,
            z_index=self._z_index,
        ))
        self._z_index += 1

    def finalize(self) -> DrawBatch:
        self.batch.finalize()
        return self.batch

    def clear(self):
        self.batch.clear()
        self._z_index = 0
        self._clip_stack.clear()
        self._current_clip = None


# =============================================================================
# Tree painting
# =============================================================================

def paint(host: DisplayHost, root: Any, ctx: DrawContext):
    """Emit draw commands for every visible node under root, back to front."""
    kind = host.kind_of(root)
    if not host.get_property(root, "visible", True) or not host.get_property(root, "enabled", True):
        return

    clipping = False
    if kind in GUI_OBJECT_KINDS:
        pos = host.get_property(root, "absolute_position")
        size = host.get_property(root, "absolute_size")
        rect = Rect(pos.x, pos.y, size.x, size.y)

        transparency = host.get_property(root, "background_transparency", 0.0)
        if transparency < 1:
            corner = host.find_child_of_kind(root, CORNER)
            radius = host.get_property(corner, "corner_radius", 0.0) if corner is not None else 0.0
            color = with_transparency(host.get_property(root, "background_color"), transparency)
            ctx.draw_rect(rect, color, radius=radius)

        if kind in TEXT_KINDS:
            text = host.get_property(root, "text", "")
            color = host.get_property(root, "text_color")
            if not text:
                # Empty inputs show their placeholder dimmed
                text = host.get_property(root, "placeholder_text", "") or ""
                color = with_transparency(color, 0.5)
            if text:
                ctx.draw_text_in_rect(
                    text,
                    rect,
                    color,
                    font_size=host.get_property(root, "text_size", 14.0),
                    align=host.get_property(root, "text_x_alignment", "center"),
                )

        if host.get_property(root, "clips_descendants"):
            ctx.push_clip(rect)
            clipping = True

    try:
        for child in host.children(root):
            paint(host, child, ctx)
    finally:
        if clipping:
            ctx.pop_clip()


def paint_roots(host: DisplayHost, roots: List[Any], width: int, height: int) -> DrawBatch:
    """Paint several display roots into one finalized batch."""
    ctx = DrawContext(width, height)
    for root in roots:
        if host.kind_of(root) == SCREEN_GUI or host.kind_of(root) in GUI_OBJECT_KINDS:
            paint(host, root, ctx)
        else:
            for child in host.children(root):
                paint(host, child, ctx)
    return ctx.finalize()
