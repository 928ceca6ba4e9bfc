"""
Control Base

Shared plumbing for every widget:
- UIContext: host + node factory + theme handed down from the library
- Control: owns a root node and the subscriptions it made
- safe_call: runs user callbacks so their failures stay contained
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, List, Mapping, Optional
import logging

from simpleui.host import DisplayHost
from simpleui.nodes import NodeFactory, CORNER
from simpleui.signal import Connection
from simpleui.style import Theme, DEFAULT_THEME

logger = logging.getLogger(__name__)


def safe_call(callback: Optional[Callable], *args) -> bool:
    """
    Call a user callback, containing any exception it raises.

    Returns False if the callback raised.
    """
    if callback is None:
        return True
    try:
        callback(*args)
    except Exception:
        logger.debug(f"Callback {callback!r} raised", exc_info=True)
        return False
    return True


@dataclass
class UIContext:
    """Everything a widget constructor needs from its library."""
    host: DisplayHost
    factory: NodeFactory
    theme: Theme = DEFAULT_THEME

    def create(self, kind: str, properties: Mapping[str, Any] = None, parent: Any = None) -> Any:
        return self.factory.create(kind, properties, parent=parent)

    def round_corners(self, node: Any, radius: float = None) -> Any:
        radius = self.theme.control_radius if radius is None else radius
        return self.create(CORNER, {"corner_radius": radius}, parent=node)


class Control:
    """
    A widget: a node sub-tree plus behavior.

    Subclasses build their nodes in __init__ and register handlers through
    _connect() so dispose() can release them.
    """

    def __init__(self, ui: UIContext, node: Any):
        self.ui = ui
        self.node = node
        self._connections: List[Connection] = []
        # Set by the owning container to re-stack after a height change
        self.on_resize: Optional[Callable[[], None]] = None

    @property
    def host(self) -> DisplayHost:
        return self.ui.host

    @property
    def alive(self) -> bool:
        return self.host.is_alive(self.node)

    @property
    def height(self) -> float:
        size = self.host.get_property(self.node, "size")
        return size.y_offset if size is not None else 0.0

    def _connect(self, node: Optional[Any], event: str, handler: Callable):
        self._connections.append(self.host.subscribe(node, event, handler))

    def _adopt(self, connections: List[Connection]):
        self._connections.extend(connections)

    def _resized(self):
        if self.on_resize is not None:
            self.on_resize()

    def dispose(self):
        """Disconnect every subscription this control made."""
        for conn in self._connections:
            conn.disconnect()
        self._connections.clear()

    def destroy(self):
        self.dispose()
        if self.alive:
            self.host.destroy_node(self.node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.host.full_name(self.node)})"
