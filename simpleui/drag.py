"""
Drag Controllers

Pointer-drag state machines shared by window moves and slider drags.

Each window and slider owns its own controller, so dragging one never
moves another. Controllers are pure state + math; bind_drag() wires one
to a host: press on the handle begins, release anywhere ends, global
pointer movement updates while dragging.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Any, Callable, List, Optional
import math
import logging

from simpleui.host import DisplayHost, InputEvent
from simpleui.layout import Rect, Vec2, clamp
from simpleui.signal import (
    Connection,
    SIGNAL_INPUT_BEGAN, SIGNAL_INPUT_ENDED, SIGNAL_INPUT_CHANGED,
)

logger = logging.getLogger(__name__)


def snap_to_integer(n: float) -> int:
    """Round half up to a whole pixel."""
    return math.floor(n + 0.5)


class DragState(Enum):
    IDLE = auto()
    DRAGGING = auto()


class DragController:
    """Base state machine: IDLE -> DRAGGING on press, back on release."""

    def __init__(self):
        self.state = DragState.IDLE

    @property
    def dragging(self) -> bool:
        return self.state == DragState.DRAGGING

    def _start(self):
        self.state = DragState.DRAGGING

    def end(self):
        self.state = DragState.IDLE


# =============================================================================
# Window Drag
# =============================================================================

class WindowDrag(DragController):
    """Moves a window by its titlebar, pixel-snapped and kept on screen."""

    def __init__(self):
        super().__init__()
        self.offset = Vec2()

    def begin(self, pointer: Vec2, origin: Vec2):
        """Capture the pointer offset from the window's on-screen origin."""
        self.offset = pointer - origin
        self._start()

    def move(self, pointer: Vec2, window_size: Vec2, viewport: Vec2) -> Optional[Vec2]:
        """New window origin, or None while idle."""
        if not self.dragging:
            return None
        x = snap_to_integer(pointer.x - self.offset.x)
        y = snap_to_integer(pointer.y - self.offset.y)
        x = clamp(x, 0, viewport.x - window_size.x)
        y = clamp(y, 0, viewport.y - window_size.y)
        return Vec2(x, y)

    def end(self):
        super().end()
        self.offset = Vec2()


# =============================================================================
# Slider Drag
# =============================================================================

def range_fraction(value: float, minimum: float, maximum: float) -> float:
    """Where value sits in [minimum, maximum], clamped; 0 for an empty range."""
    if maximum == minimum:
        return 0.0
    return clamp((value - minimum) / (maximum - minimum), 0.0, 1.0)


class SliderDrag(DragController):
    """Maps pointer x over a track to a fraction and a value."""

    def __init__(self, minimum: float, maximum: float):
        super().__init__()
        self.minimum = minimum
        self.maximum = maximum

    @property
    def degenerate(self) -> bool:
        return self.maximum == self.minimum

    def fraction_at(self, pointer_x: float, track: Rect) -> float:
        if self.degenerate or track.w <= 0:
            return 0.0
        return clamp((pointer_x - track.x) / track.w, 0.0, 1.0)

    def value_at(self, fraction: float) -> float:
        return self.minimum + fraction * (self.maximum - self.minimum)

    def begin(self, pointer: Vec2, track: Rect) -> float:
        """Start dragging; returns the fraction under the pointer."""
        self._start()
        return self.fraction_at(pointer.x, track)

    def move(self, pointer: Vec2, track: Rect) -> Optional[float]:
        """Fraction under the pointer, or None while idle."""
        if not self.dragging:
            return None
        return self.fraction_at(pointer.x, track)


# =============================================================================
# Host binding
# =============================================================================

def bind_drag(
    host: DisplayHost,
    handle: Any,
    controller: DragController,
    on_begin: Callable[[InputEvent], None],
    on_move: Callable[[InputEvent], None],
) -> List[Connection]:
    """
    Wire a controller to a host.

    on_begin runs for a primary press on the handle and must call the
    controller's begin(). on_move runs for pointer movement while the
    controller is dragging. Returns the connections; the owner
    disconnects them when it is destroyed.
    """

    def began(event: InputEvent):
        if event.is_primary_press:
            on_begin(event)
            logger.debug(f"Drag begin on {host.full_name(handle)}")

    def ended(event: InputEvent):
        if event.is_primary_press and controller.dragging:
            controller.end()
            logger.debug("Drag end")

    def changed(event: InputEvent):
        if controller.dragging and event.is_movement:
            on_move(event)

    return [
        host.subscribe(handle, SIGNAL_INPUT_BEGAN, began),
        host.subscribe(handle, SIGNAL_INPUT_ENDED, ended),
        host.subscribe(None, SIGNAL_INPUT_CHANGED, changed),
    ]
