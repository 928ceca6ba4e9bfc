"""
Textbox Widget

Labeled single-line input. Submits only when editing ends with Enter.
"""

from __future__ import annotations
from typing import Any, Callable

from simpleui.layout import Dim2
from simpleui.nodes import FRAME, TEXT_LABEL, TEXT_BOX
from simpleui.signal import SIGNAL_FOCUS_LOST
from simpleui.widgets.base import Control, UIContext, safe_call


class Textbox(Control):

    def __init__(
        self,
        ui: UIContext,
        parent: Any,
        label: str = "Text",
        placeholder: str = "...",
        on_submit: Callable[[str], None] = None,
    ):
        theme = ui.theme
        frame = ui.create(FRAME, {
            "name": "Textbox",
            "size": Dim2(1, 0, 0, 36),
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
        self.box = ui.create(TEXT_BOX, {
            "name": "Input",
            "size": Dim2(1, 0, 0, 18),
            "position": Dim2.offset(0, 18),
            "text": "",
            "placeholder_text": placeholder,
            "background_color": theme.input_background,
            "background_transparency": 0.95,
            "text_color": theme.text,
            "text_size": theme.font_small,
        }, parent=frame)

        super().__init__(ui, frame)
        self._on_submit = on_submit
        self._connect(self.box, SIGNAL_FOCUS_LOST, self._on_focus_lost)

    @property
    def text(self) -> str:
        return self.host.get_property(self.box, "text")

    @property
    def placeholder(self) -> str:
        return self.host.get_property(self.box, "placeholder_text")

    def _on_focus_lost(self, enter_pressed: bool):
        if enter_pressed:
            safe_call(self._on_submit, self.text)
