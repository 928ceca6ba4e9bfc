"""
Label Widget

Read-only text row.
"""

from __future__ import annotations
from typing import Any

from simpleui.layout import Dim2
from simpleui.nodes import TEXT_LABEL
from simpleui.widgets.base import Control, UIContext


class Label(Control):

    def __init__(self, ui: UIContext, parent: Any, text: str = "Label"):
        node = ui.create(TEXT_LABEL, {
            "name": "Label",
            "text": text,
            "size": Dim2(1, 0, 0, 20),
            "background_transparency": 1,
            "text_color": ui.theme.secondary_text,
            "text_size": ui.theme.font_small,
            "text_x_alignment": "left",
        }, parent=parent)
        super().__init__(ui, node)

    @property
    def text(self) -> str:
        return self.host.get_property(self.node, "text")

    @text.setter
    def text(self, value: str):
        self.host.set_property(self.node, "text", value)
