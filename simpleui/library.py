"""
Library Facade

SimpleUI owns one display root and the windows created under it.

Example:

    host = RetainedHost(1280, 720)
    ui = SimpleUI.create("Tools", host)

    win = ui.create_window(title="Settings")
    audio = win.add_section("Audio")
    audio.add_slider("Volume", 0, 100, 50, on_change=set_volume)
    audio.add_dropdown("Output", ["Speakers", "Headphones"], on_select=set_output)

    report = ui.scan_diagnostics()
    ui.destroy()
"""

from __future__ import annotations
from dataclasses import replace
from typing import Any, List, Optional
import logging

from simpleui.diagnostics import DiagnosticReport, scan
from simpleui.host import DisplayHost, Session
from simpleui.layout import Dim2
from simpleui.nodes import NodeFactory, SCREEN_GUI
from simpleui.style import Theme, DEFAULT_THEME
from simpleui.widgets.base import UIContext
from simpleui.window import Window, WindowOptions

logger = logging.getLogger(__name__)


class LibraryDestroyedError(RuntimeError):
    """A SimpleUI instance was used after destroy()."""


class SimpleUI:

    def __init__(
        self,
        name: str,
        host: DisplayHost,
        session: Optional[Session] = None,
        theme: Theme = DEFAULT_THEME,
        lenient: bool = False,
    ):
        if session is None and isinstance(host, Session):
            session = host
        if session is None:
            raise ValueError("SimpleUI needs a Session to find a display surface")

        self.name = name
        self.host = host
        self.session = session
        self.ui = UIContext(host, NodeFactory(host, lenient=lenient), theme)
        self._windows: List[Window] = []
        self._destroyed = False

        # Prefer the live per-user surface, fall back to the shared one
        surface = session.user_surface()
        if surface is None:
            surface = session.shared_surface()
            logger.info(f"No user session, parenting '{name}' to the shared surface")

        self.root = self.ui.create(SCREEN_GUI, {
            "name": name,
            "reset_on_spawn": False,
        }, parent=surface)
        logger.info(f"SimpleUI '{name}' created")

    @classmethod
    def create(
        cls,
        name: str = "SimpleUI",
        host: DisplayHost = None,
        session: Optional[Session] = None,
        theme: Theme = None,
        lenient: bool = False,
    ) -> SimpleUI:
        if host is None:
            raise ValueError("SimpleUI.create needs a display host")
        return cls(name, host, session, theme or DEFAULT_THEME, lenient)

    # -------------------------------------------------------------------------

    def _check_alive(self):
        if self._destroyed:
            raise LibraryDestroyedError(f"SimpleUI '{self.name}' was destroyed")

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def theme(self) -> Theme:
        return self.ui.theme

    @property
    def windows(self) -> List[Window]:
        """Open windows in creation order."""
        self._check_alive()
        return list(self._windows)

    def create_window(
        self,
        options: WindowOptions = None,
        *,
        title: str = None,
        size: Dim2 = None,
        position: Dim2 = None,
    ) -> Window:
        self._check_alive()
        options = options or WindowOptions()
        overrides = {
            k: v for k, v in (("title", title), ("size", size), ("position", position))
            if v is not None
        }
        if overrides:
            options = replace(options, **overrides)

        window = Window(self.ui, self.root, options, on_closed=self._forget)
        self._windows.append(window)
        return window

    def _forget(self, window: Window):
        if window in self._windows:
            self._windows.remove(window)

    def scan_diagnostics(self, root: Any = None) -> DiagnosticReport:
        self._check_alive()
        return scan(self.host, root if root is not None else self.root, self.session)

    def destroy(self):
        if self._destroyed:
            return
        self.host.destroy_node(self.root)
        self._windows.clear()
        self._destroyed = True
        logger.info(f"SimpleUI '{self.name}' destroyed")
