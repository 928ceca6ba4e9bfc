"""
SimpleUI Demo

Runs the toolkit on a RetainedHost and draws it with moderngl.
Shows:
- A draggable, minimizable window with two sections
- Slider, toggle, dropdown, text input and buttons
- Diagnostics scan of the live tree

The renderer draws quads only. Text commands are collected in the batch
but not drawn until a font atlas exists, so labels and button captions
do not show; callbacks and diagnostics report through the log instead.

Run:
    python -m simpleui.app
"""

from __future__ import annotations
import logging

import moderngl_window as mglw

from simpleui.draw import paint_roots
from simpleui.host import InputType
from simpleui.library import SimpleUI
from simpleui.renderer import SimpleUIRenderer
from simpleui.retained import RetainedHost
from simpleui.style import DEFAULT_THEME

logger = logging.getLogger(__name__)


class SimpleUIDemoApp(mglw.WindowConfig):
    """Demo application for the widget toolkit."""

    gl_version = (3, 3)
    title = "SimpleUI Demo"
    window_size = (1280, 720)
    resource_dir = "."

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        self.ctx.enable(self.ctx.BLEND)
        self.ctx.blend_func = self.ctx.SRC_ALPHA, self.ctx.ONE_MINUS_SRC_ALPHA

        w, h = self.wnd.size
        self.host = RetainedHost(w, h)
        self.renderer = SimpleUIRenderer(self.ctx)
        self._setup_ui()

    def _setup_ui(self):
        self.ui = SimpleUI.create("Demo", self.host)
        window = self.ui.create_window(title="SimpleUI Demo")

        audio = window.add_section("Audio")
        audio.add_slider("Volume", 0, 100, 50, on_change=lambda v: logger.info(f"Volume: {v:.0f}"))
        self.mute, self.is_muted = audio.add_toggle("Mute", on_change=lambda s: logger.info(f"Muted: {s}"))
        audio.add_dropdown(
            "Output",
            ["Speakers", "Headphones", "HDMI"],
            on_select=lambda o: logger.info(f"Output: {o}"),
        )

        actions = window.add_section("Actions")
        self.status = actions.add_label("Ready")
        actions.add_textbox("Name", "type and press Enter", on_submit=self._on_submit)
        actions.add_button("Run diagnostics", on_click=self._on_scan)

    def _on_submit(self, text: str):
        self.status.text = f"Hello, {text}" if text else "Ready"
        logger.info(self.status.text)

    def _on_scan(self):
        report = self.ui.scan_diagnostics()
        for line in report.ok:
            logger.info(f"[ok] {line}")
        for line in report.warn:
            logger.warning(f"[warn] {line}")
        for line in report.error:
            logger.error(f"[error] {line}")
        self.status.text = f"{len(report.warn)} warnings, {len(report.error)} errors"

    def on_render(self, time: float, frame_time: float):
        """Main render loop."""
        self.host.advance(max(0.0, frame_time))

        w, h = self.wnd.size
        self.ctx.screen.use()
        self.ctx.viewport = (0, 0, w, h)
        self.ctx.clear(*DEFAULT_THEME.background[:3], 1.0)

        batch = paint_roots(self.host, self.host.surfaces, w, h)
        self.renderer.render(batch, w, h)

    def on_resize(self, width: int, height: int):
        self.host.set_viewport_size(width, height)

    # -------------------------------------------------------------------------
    # Input Handling
    # -------------------------------------------------------------------------

    @staticmethod
    def _input_type(button: int) -> InputType:
        return InputType.MOUSE_BUTTON1 if button == 1 else InputType.MOUSE_BUTTON2

    def on_mouse_position_event(self, x, y, dx, dy):
        self.host.pointer_move(x, y)

    def on_mouse_drag_event(self, x, y, dx, dy):
        self.host.pointer_move(x, y)

    def on_mouse_press_event(self, x, y, button):
        self.host.pointer_down(x, y, self._input_type(button))

    def on_mouse_release_event(self, x, y, button):
        self.host.pointer_up(x, y, self._input_type(button))

    def on_key_event(self, key, action, modifiers):
        keys = self.wnd.keys
        if action != keys.ACTION_PRESS:
            return
        if key == keys.ENTER:
            self.host.press_key("enter")
        elif key == keys.ESCAPE:
            self.host.press_key("escape")
        elif key == keys.BACKSPACE:
            self.host.press_key("backspace")

    def on_unicode_char_entered(self, char: str):
        self.host.type_text(char)

    def on_close(self):
        self.ui.destroy()
        self.renderer.release()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    mglw.run_window_config(SimpleUIDemoApp)


if __name__ == "__main__":
    main()
