"""
Button Widgets

Full-width push button and labeled on/off toggle.
"""

from __future__ import annotations
from typing import Any, Callable

from simpleui.layout import Dim2
from simpleui.nodes import FRAME, TEXT_LABEL, TEXT_BUTTON
from simpleui.signal import SIGNAL_ACTIVATED
from simpleui.widgets.base import Control, UIContext, safe_call


class Button(Control):
    """
    Clickable full-width button.

    on_click() runs on every activation; if it raises, the error is
    contained and the button keeps working.
    """

    def __init__(
        self,
        ui: UIContext,
        parent: Any,
        label: str = "Button",
        on_click: Callable[[], None] = None,
    ):
        theme = ui.theme
        node = ui.create(TEXT_BUTTON, {
            "name": "Button",
            "size": Dim2(1, 0, 0, theme.button_height),
            "background_color": theme.accent,
            "border_size": 0,
            "text": label,
            "text_color": theme.on_accent,
            "font_weight": "bold",
            "text_size": theme.font_control,
        }, parent=parent)
        ui.round_corners(node)

        super().__init__(ui, node)
        self._on_click = on_click
        self._connect(node, SIGNAL_ACTIVATED, self.activate)

    @property
    def text(self) -> str:
        return self.host.get_property(self.node, "text")

    def activate(self):
        safe_call(self._on_click)


class Toggle(Control):
    """
    Label with an ON/OFF box.

    The boolean state is the source of truth; the box text is redrawn from
    it after every flip, then on_change(state) runs.
    """

    def __init__(
        self,
        ui: UIContext,
        parent: Any,
        label: str = "Toggle",
        initial: bool = False,
        on_change: Callable[[bool], None] = None,
    ):
        theme = ui.theme
        row = ui.create(FRAME, {
            "name": "Toggle",
            "size": Dim2(1, 0, 0, 28),
            "background_transparency": 1,
        }, parent=parent)
        self.label = ui.create(TEXT_LABEL, {
            "name": "Label",
            "text": label,
            "background_transparency": 1,
            "size": Dim2(1, -48, 1, 0),
            "text_color": theme.text,
            "text_size": theme.font_control,
            "text_x_alignment": "left",
        }, parent=row)
        self.box = ui.create(TEXT_BUTTON, {
            "name": "Box",
            "size": Dim2.offset(36, 20),
            "position": Dim2(1, -40, 0, 4),
            "background_color": theme.toggle_box,
            "text_color": theme.text,
        }, parent=row)
        ui.round_corners(self.box)

        super().__init__(ui, row)
        self._state = bool(initial)
        self._on_change = on_change
        self._render()
        self._connect(self.box, SIGNAL_ACTIVATED, self.activate)

    @property
    def state(self) -> bool:
        return self._state

    def get_state(self) -> bool:
        return self._state

    def activate(self):
        self._state = not self._state
        self._render()
        safe_call(self._on_change, self._state)

    def _render(self):
        self.host.set_property(self.box, "text", "ON" if self._state else "OFF")
