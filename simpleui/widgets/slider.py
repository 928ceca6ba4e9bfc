"""
Slider Widget

Labeled track with a fill bar. Press on the track jumps to the pointer;
dragging updates the value and calls on_change on every pointer sample.
"""

from __future__ import annotations
from typing import Any, Callable, Optional

from simpleui.drag import SliderDrag, bind_drag, range_fraction
from simpleui.host import InputEvent
from simpleui.layout import Dim2, Rect, clamp
from simpleui.nodes import FRAME, TEXT_LABEL
from simpleui.widgets.base import Control, UIContext, safe_call


class Slider(Control):

    def __init__(
        self,
        ui: UIContext,
        parent: Any,
        label: str = "Slider",
        minimum: float = 0,
        maximum: float = 100,
        initial: Optional[float] = None,
        on_change: Callable[[float], None] = None,
    ):
        theme = ui.theme
        frame = ui.create(FRAME, {
            "name": "Slider",
            "size": Dim2(1, 0, 0, 32),
            "background_transparency": 1,
        }, parent=parent)
        self.label = ui.create(TEXT_LABEL, {
            "name": "Label",
            "text": label,
            "background_transparency": 1,
            "size": Dim2(1, -12, 0, 14),
            "text_color": theme.text,
            "text_size": theme.font_small,
            "text_x_alignment": "left",
        }, parent=frame)
        self.track = ui.create(FRAME, {
            "name": "Track",
            "size": Dim2(1, 0, 0, 12),
            "position": Dim2.offset(0, 18),
            "background_color": theme.slider_track,
            "border_size": 0,
        }, parent=frame)
        ui.round_corners(self.track)

        self.minimum = minimum
        self.maximum = maximum
        self._drag = SliderDrag(minimum, maximum)

        if initial is None:
            initial = minimum
        self.fraction = range_fraction(initial, minimum, maximum)
        if self._drag.degenerate:
            self.value = minimum
        else:
            lo, hi = sorted((minimum, maximum))
            self.value = clamp(initial, lo, hi)

        self.fill = ui.create(FRAME, {
            "name": "Fill",
            "size": Dim2(self.fraction, 0, 1, 0),
            "background_color": theme.accent,
            "border_size": 0,
        }, parent=self.track)
        ui.round_corners(self.fill)

        super().__init__(ui, frame)
        self._on_change = on_change
        self._adopt(bind_drag(ui.host, self.track, self._drag, self._on_press, self._on_drag))

    @property
    def dragging(self) -> bool:
        return self._drag.dragging

    def _track_rect(self) -> Rect:
        pos = self.host.get_property(self.track, "absolute_position")
        size = self.host.get_property(self.track, "absolute_size")
        return Rect(pos.x, pos.y, size.x, size.y)

    def _on_press(self, event: InputEvent):
        self._apply(self._drag.begin(event.position, self._track_rect()))

    def _on_drag(self, event: InputEvent):
        fraction = self._drag.move(event.position, self._track_rect())
        if fraction is not None:
            self._apply(fraction)

    def _apply(self, fraction: float):
        self.fraction = fraction
        self.value = self._drag.value_at(fraction)
        self.host.set_property(self.fill, "size", Dim2(fraction, 0, 1, 0))
        safe_call(self._on_change, self.value)
