"""
Window

Top-level container with chrome:
- Titlebar with title text, draggable to move the window
- Close button: destroys the window immediately
- Minimize button: collapses to the titlebar and back
- Body: vertical stack of sections
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List
import re
import logging

from simpleui.drag import WindowDrag, bind_drag
from simpleui.host import InputEvent
from simpleui.layout import Dim2, Vec2
from simpleui.nodes import FRAME, TEXT_LABEL, TEXT_BUTTON, LIST_LAYOUT
from simpleui.signal import SIGNAL_ACTIVATED, SIGNAL_DESTROYING
from simpleui.widgets.base import Control, UIContext
from simpleui.widgets.section import Section

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowOptions:
    """Window creation options; defaults give a centered 520x360 window."""
    title: str = "Window"
    size: Dim2 = field(default_factory=lambda: Dim2.offset(520, 360))
    position: Dim2 = field(default_factory=lambda: Dim2(0.5, -260, 0.5, -180))


def window_node_name(title: str) -> str:
    return re.sub(r"\s+", "_", title) + "_Window"


class Window(Control):

    def __init__(
        self,
        ui: UIContext,
        parent: Any,
        options: WindowOptions = None,
        on_closed: Callable[[Window], None] = None,
    ):
        options = options or WindowOptions()
        theme = ui.theme

        container = ui.create(FRAME, {
            "name": window_node_name(options.title),
            "size": options.size,
            "position": options.position,
            "background_color": theme.panel,
            "border_size": 0,
        }, parent=parent)
        ui.round_corners(container, theme.corner_radius)

        # Chrome
        self.titlebar = ui.create(FRAME, {
            "name": "Titlebar",
            "size": Dim2(1, 0, 0, theme.titlebar_height),
            "background_transparency": 1,
        }, parent=container)
        self.title_label = ui.create(TEXT_LABEL, {
            "name": "Title",
            "size": Dim2(1, -96, 1, 0),
            "position": Dim2.offset(12, 0),
            "background_transparency": 1,
            "text": options.title,
            "text_color": theme.text,
            "text_x_alignment": "left",
            "font_weight": "bold",
            "text_size": theme.font_title,
        }, parent=self.titlebar)
        self.close_button = ui.create(TEXT_BUTTON, {
            "name": "Close",
            "size": Dim2.offset(36, 24),
            "position": Dim2(1, -44, 0, 6),
            "background_color": theme.accent,
            "text": "X",
            "text_color": theme.on_accent,
            "font_weight": "bold",
            "text_size": 16,
        }, parent=self.titlebar)
        ui.round_corners(self.close_button)
        self.minimize_button = ui.create(TEXT_BUTTON, {
            "name": "Minimize",
            "size": Dim2.offset(36, 24),
            "position": Dim2(1, -88, 0, 6),
            "background_color": theme.minimize_button,
            "text": "_",
            "text_color": theme.on_accent,
            "font_weight": "bold",
            "text_size": 22,
        }, parent=self.titlebar)
        ui.round_corners(self.minimize_button)

        # Body stack
        self.body = ui.create(FRAME, {
            "name": "Body",
            "size": Dim2(1, -20, 1, -56),
            "position": Dim2.offset(10, 44),
            "background_transparency": 1,
        }, parent=container)
        self.layout = ui.create(LIST_LAYOUT, {
            "name": "Layout",
            "padding": theme.body_padding,
        }, parent=self.body)

        super().__init__(ui, container)
        self.title = options.title
        self.sections: List[Section] = []
        self._on_closed = on_closed
        self._closed = False

        self._minimized = False
        self._restore_size: Dim2 = options.size
        self._saved_visibility: Dict[int, bool] = {}

        self._drag = WindowDrag()
        self._adopt(bind_drag(ui.host, self.titlebar, self._drag, self._on_drag_begin, self._on_drag_move))
        self._connect(self.close_button, SIGNAL_ACTIVATED, self.close)
        self._connect(self.minimize_button, SIGNAL_ACTIVATED, self.toggle_minimize)
        self._connect(container, SIGNAL_DESTROYING, self._on_destroying)

        logger.info(f"Window '{self.title}' created")

    @property
    def container(self) -> Any:
        return self.node

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def minimized(self) -> bool:
        return self._minimized

    @property
    def dragging(self) -> bool:
        return self._drag.dragging

    @property
    def position(self) -> Vec2:
        return self.host.get_property(self.node, "absolute_position")

    @property
    def size(self) -> Dim2:
        return self.host.get_property(self.node, "size")

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def add_section(self, name: str = "Section") -> Section:
        section = Section(self.ui, self.body, name)
        if self._minimized:
            self._saved_visibility[id(section.node)] = True
            self.host.set_property(section.node, "visible", False)
        self.sections.append(section)
        return section

    # -------------------------------------------------------------------------
    # Drag
    # -------------------------------------------------------------------------

    def _on_drag_begin(self, event: InputEvent):
        origin = self.host.get_property(self.node, "absolute_position")
        self._drag.begin(self.host.pointer_position(), origin)

    def _on_drag_move(self, event: InputEvent):
        size = self.host.get_property(self.node, "absolute_size")
        pos = self._drag.move(self.host.pointer_position(), size, self.host.viewport_size())
        if pos is not None:
            self.host.set_property(self.node, "position", Dim2.offset(pos.x, pos.y))

    # -------------------------------------------------------------------------
    # Minimize / close
    # -------------------------------------------------------------------------

    def _body_children(self) -> List[Any]:
        return [
            c for c in self.host.children(self.body)
            if self.host.kind_of(c) != LIST_LAYOUT
        ]

    def toggle_minimize(self):
        self._minimized = not self._minimized
        host = self.host
        if self._minimized:
            self._restore_size = host.get_property(self.node, "size")
            self._saved_visibility = {}
            for child in self._body_children():
                self._saved_visibility[id(child)] = host.get_property(child, "visible")
                host.set_property(child, "visible", False)
            collapsed = self._restore_size.with_height(0, self.ui.theme.collapsed_height)
            host.set_property(self.node, "size", collapsed)
        else:
            for child in self._body_children():
                host.set_property(child, "visible", self._saved_visibility.get(id(child), True))
            self._saved_visibility = {}
            host.set_property(self.node, "size", self._restore_size)

    def close(self):
        """Destroy the window and everything in it."""
        if self._closed:
            return
        # _on_destroying releases subscriptions
        self.host.destroy_node(self.node)

    destroy = close

    def _on_destroying(self):
        # Runs for close() and for a cascade from the library root
        self._closed = True
        self._drag.end()
        for section in self.sections:
            section.dispose()
        self.dispose()
        logger.info(f"Window '{self.title}' closed")
        if self._on_closed is not None:
            self._on_closed(self)
