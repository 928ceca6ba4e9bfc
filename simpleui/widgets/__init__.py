"""
Built-in Widgets

- Section: titled group exposing the widget factories below
- Button / Toggle: push button and ON/OFF switch
- Slider: draggable numeric range
- Textbox: single-line input submitted on Enter
- Dropdown: option picker with an animated panel
- Label: read-only text
"""

from simpleui.widgets.base import Control, UIContext, safe_call
from simpleui.widgets.button import Button, Toggle
from simpleui.widgets.slider import Slider
from simpleui.widgets.textbox import Textbox
from simpleui.widgets.dropdown import Dropdown
from simpleui.widgets.label import Label
from simpleui.widgets.section import Section

__all__ = [
    "Control",
    "UIContext",
    "safe_call",
    "Button",
    "Toggle",
    "Slider",
    "Textbox",
    "Dropdown",
    "Label",
    "Section",
]
