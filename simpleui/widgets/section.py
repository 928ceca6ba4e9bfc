"""
Section

Titled group inside a window body. Widgets are stacked in its content
frame in the order they are added; the section grows to fit them.
"""

from __future__ import annotations
from typing import Any, Callable, List, Optional, Sequence, Tuple

from simpleui.layout import Dim2, stack_extent
from simpleui.nodes import FRAME, TEXT_LABEL, LIST_LAYOUT
from simpleui.widgets.base import Control, UIContext
from simpleui.widgets.button import Button, Toggle
from simpleui.widgets.dropdown import Dropdown
from simpleui.widgets.label import Label
from simpleui.widgets.slider import Slider
from simpleui.widgets.textbox import Textbox

MIN_HEIGHT = 80.0
# Title strip above the content frame plus the margin below it
CHROME_HEIGHT = 36.0


class Section(Control):
    """
    Usage:
        section = window.add_section("Audio")
        section.add_slider("Volume", 0, 100, 50, on_change=set_volume)
        toggle, muted = section.add_toggle("Mute")
    """

    def __init__(self, ui: UIContext, parent: Any, name: str = "Section"):
        theme = ui.theme
        frame = ui.create(FRAME, {
            "name": name,
            "size": Dim2(1, 0, 0, MIN_HEIGHT),
            "background_color": theme.background,
            "border_size": 0,
        }, parent=parent)
        ui.round_corners(frame, theme.corner_radius)
        self.title = ui.create(TEXT_LABEL, {
            "name": "Title",
            "text": name,
            "background_transparency": 1,
            "size": Dim2(1, -12, 0, 24),
            "position": Dim2.offset(6, 6),
            "text_color": theme.text,
            "text_size": theme.font_control,
            "font_weight": "medium",
            "text_x_alignment": "left",
        }, parent=frame)
        self.content = ui.create(FRAME, {
            "name": "Content",
            "size": Dim2(1, -12, 1, -CHROME_HEIGHT),
            "position": Dim2.offset(6, 30),
            "background_transparency": 1,
        }, parent=frame)
        self.layout = ui.create(LIST_LAYOUT, {
            "name": "Layout",
            "padding": theme.content_padding,
        }, parent=self.content)

        super().__init__(ui, frame)
        self.name = name
        self.elements: List[Control] = []

    # -------------------------------------------------------------------------
    # Widget factories
    # -------------------------------------------------------------------------

    def add_button(self, label: str = "Button", on_click: Callable[[], None] = None) -> Button:
        return self._append(Button(self.ui, self.content, label, on_click))

    def add_toggle(
        self,
        label: str = "Toggle",
        initial: bool = False,
        on_change: Callable[[bool], None] = None,
    ) -> Tuple[Toggle, Callable[[], bool]]:
        toggle = self._append(Toggle(self.ui, self.content, label, initial, on_change))
        return toggle, toggle.get_state

    def add_slider(
        self,
        label: str = "Slider",
        minimum: float = 0,
        maximum: float = 100,
        initial: Optional[float] = None,
        on_change: Callable[[float], None] = None,
    ) -> Slider:
        return self._append(Slider(self.ui, self.content, label, minimum, maximum, initial, on_change))

    def add_textbox(
        self,
        label: str = "Text",
        placeholder: str = "...",
        on_submit: Callable[[str], None] = None,
    ) -> Textbox:
        return self._append(Textbox(self.ui, self.content, label, placeholder, on_submit))

    def add_dropdown(
        self,
        label: str = "Dropdown",
        options: Sequence[str] = (),
        on_select: Callable[[str], None] = None,
    ) -> Dropdown:
        return self._append(Dropdown(self.ui, self.content, label, options, on_select))

    def add_label(self, text: str = "Label") -> Label:
        return self._append(Label(self.ui, self.content, text))

    # -------------------------------------------------------------------------

    def _append(self, control: Control) -> Control:
        self.elements.append(control)
        control.on_resize = self._fit
        self._fit()
        return control

    def _fit(self):
        heights = [c.height for c in self.elements]
        extent = stack_extent(heights, self.ui.theme.content_padding)
        height = max(MIN_HEIGHT, extent + CHROME_HEIGHT)
        self.host.set_property(self.node, "size", Dim2(1, 0, 0, height))

    def dispose(self):
        for element in self.elements:
            element.dispose()
        super().dispose()
