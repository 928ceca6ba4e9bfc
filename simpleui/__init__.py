"""
SimpleUI

Retained-mode widget toolkit: draggable windows of sections holding
buttons, toggles, sliders, text inputs and dropdowns, plus a static
diagnostics scan of the built tree.

Components:
- host: DisplayHost / Session capability interfaces
- retained: in-memory host (tests, GL demo)
- nodes: node kinds, property schema, NodeFactory
- style / layout: theme, Dim2 geometry, vertical stacks
- drag: window and slider drag controllers
- window / widgets/: chrome and built-in widgets
- diagnostics: tree scanner
- library: SimpleUI facade
- draw / renderer: batched GL drawing

Example usage:

    from simpleui import RetainedHost, SimpleUI

    host = RetainedHost(1280, 720)
    ui = SimpleUI.create("Tools", host)

    win = ui.create_window(title="Settings")
    general = win.add_section("General")
    general.add_button("Apply", on_click=apply)
    toggle, enabled = general.add_toggle("Enabled", initial=True)

    print(ui.scan_diagnostics().as_dict())
"""

from simpleui.style import Theme, DEFAULT_THEME, rgb, hex_to_color
from simpleui.layout import Dim2, Rect, Vec2
from simpleui.signal import SignalBridge, Connection
from simpleui.host import DisplayHost, Session, HostError, InputEvent, InputType
from simpleui.nodes import NodeFactory, PropertyError
from simpleui.retained import RetainedHost
from simpleui.drag import WindowDrag, SliderDrag, DragState, snap_to_integer
from simpleui.widgets import (
    Control, UIContext,
    Section, Button, Toggle, Slider, Textbox, Dropdown, Label,
)
from simpleui.window import Window, WindowOptions
from simpleui.diagnostics import DiagnosticReport, scan
from simpleui.library import SimpleUI, LibraryDestroyedError
from simpleui.draw import DrawContext, DrawBatch, paint, paint_roots
from simpleui.renderer import SimpleUIRenderer

__all__ = [
    # Style
    "Theme",
    "DEFAULT_THEME",
    "rgb",
    "hex_to_color",
    # Layout
    "Dim2",
    "Rect",
    "Vec2",
    # Signals
    "SignalBridge",
    "Connection",
    # Host
    "DisplayHost",
    "Session",
    "HostError",
    "InputEvent",
    "InputType",
    "RetainedHost",
    # Nodes
    "NodeFactory",
    "PropertyError",
    # Drag
    "WindowDrag",
    "SliderDrag",
    "DragState",
    "snap_to_integer",
    # Widgets
    "Control",
    "UIContext",
    "Section",
    "Button",
    "Toggle",
    "Slider",
    "Textbox",
    "Dropdown",
    "Label",
    "Window",
    "WindowOptions",
    # Diagnostics
    "DiagnosticReport",
    "scan",
    # Facade
    "SimpleUI",
    "LibraryDestroyedError",
    # Drawing
    "DrawContext",
    "DrawBatch",
    "paint",
    "paint_roots",
    "SimpleUIRenderer",
]
