"""
Dropdown Widget

Button showing the current option over a collapsible option panel.

The open flag is the only state: the header button and the option rows
both go through set_open(), and the height tweens are always derived
from the flag, never from the current sizes. The frame grows with the
panel so the options stay inside it and siblings stack below them.
"""

from __future__ import annotations
from typing import Any, Callable, Sequence, Tuple

from simpleui.layout import Dim2
from simpleui.nodes import FRAME, TEXT_LABEL, TEXT_BUTTON, LIST_LAYOUT
from simpleui.signal import SIGNAL_ACTIVATED
from simpleui.widgets.base import Control, UIContext, safe_call

TWEEN_SECONDS = 0.15
HEADER_HEIGHT = 36


class Dropdown(Control):

    def __init__(
        self,
        ui: UIContext,
        parent: Any,
        label: str = "Dropdown",
        options: Sequence[str] = (),
        on_select: Callable[[str], None] = None,
    ):
        options = tuple(options)
        if not options:
            raise ValueError("Dropdown needs at least one option")

        theme = ui.theme
        frame = ui.create(FRAME, {
            "name": "Dropdown",
            "size": Dim2(1, 0, 0, HEADER_HEIGHT),
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
        self.button = ui.create(TEXT_BUTTON, {
            "name": "Selected",
            "size": Dim2(1, 0, 0, 18),
            "position": Dim2.offset(0, 18),
            "text": options[0],
            "background_color": theme.dropdown_button,
            "text_color": theme.text,
            "text_size": theme.font_small,
        }, parent=frame)
        self.panel = ui.create(FRAME, {
            "name": "Options",
            "size": Dim2(1, 0, 0, 0),
            "position": Dim2.offset(0, HEADER_HEIGHT),
            "background_color": theme.dropdown_panel,
            "clips_descendants": True,
        }, parent=frame)
        ui.create(LIST_LAYOUT, {"name": "Layout"}, parent=self.panel)

        super().__init__(ui, frame)
        self.options: Tuple[str, ...] = options
        self._open = False
        self._on_select = on_select

        self.option_buttons = []
        for i, opt in enumerate(options):
            row = ui.create(TEXT_BUTTON, {
                "name": f"Option{i + 1}",
                "size": Dim2(1, 0, 0, theme.option_height),
                "text": opt,
                "layout_order": i,
                "background_transparency": 1,
                "text_color": theme.text,
            }, parent=self.panel)
            self.option_buttons.append(row)
            self._connect(row, SIGNAL_ACTIVATED, lambda opt=opt: self.select(opt))

        self._connect(self.button, SIGNAL_ACTIVATED, self.toggle)

    @property
    def open(self) -> bool:
        return self._open

    @property
    def selected(self) -> str:
        return self.host.get_property(self.button, "text")

    @property
    def panel_height(self) -> float:
        return len(self.options) * self.ui.theme.option_height

    @property
    def height(self) -> float:
        """Height the dropdown settles at for its open flag."""
        return HEADER_HEIGHT + (self.panel_height if self._open else 0)

    def set_open(self, open: bool):
        self._open = open
        panel = self.panel_height if open else 0
        self.host.tween_property(self.panel, "size", Dim2(1, 0, 0, panel), TWEEN_SECONDS)
        self.host.tween_property(self.node, "size", Dim2(1, 0, 0, HEADER_HEIGHT + panel), TWEEN_SECONDS)
        self._resized()

    def toggle(self):
        self.set_open(not self._open)

    def select(self, option: str):
        if option not in self.options:
            raise ValueError(f"Unknown option: {option!r}")
        self.host.set_property(self.button, "text", option)
        self.set_open(False)
        safe_call(self._on_select, option)
