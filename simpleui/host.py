"""
Display Host Interface

The minimal capability set the toolkit needs from a display engine.

Widget, window and diagnostics code talk to nodes only through these
methods, so any engine that can implement them can host the toolkit:
- create / destroy nodes, get / set properties, parent them
- subscribe to per-node and global input events
- query pointer position and viewport size
- tween a property over time

RetainedHost (simpleui.retained) is the in-memory implementation.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, List, Optional

from simpleui.layout import Vec2
from simpleui.signal import Connection


class HostError(RuntimeError):
    """Raised for operations on destroyed nodes or unknown node kinds."""


# =============================================================================
# Input Events
# =============================================================================

class InputType(Enum):
    MOUSE_BUTTON1 = auto()
    MOUSE_BUTTON2 = auto()
    MOUSE_MOVEMENT = auto()
    KEYBOARD = auto()
    TOUCH = auto()


@dataclass(frozen=True)
class InputEvent:
    """Input delivered by the host, in screen coordinates."""
    input_type: InputType
    x: float = 0.0
    y: float = 0.0
    key: str = ""

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def is_primary_press(self) -> bool:
        return self.input_type in (InputType.MOUSE_BUTTON1, InputType.TOUCH)

    @property
    def is_movement(self) -> bool:
        return self.input_type in (InputType.MOUSE_MOVEMENT, InputType.TOUCH)


EventHandler = Callable[..., None]


# =============================================================================
# Host Capabilities
# =============================================================================

class DisplayHost(ABC):
    """
    Capability set of a display engine.

    Nodes are opaque handles created by the host. Event names are the
    SIGNAL_* constants from simpleui.signal; subscribing with node=None
    listens to global input.
    """

    @abstractmethod
    def create_node(self, kind: str) -> Any:
        """Create an unattached node of the given kind."""

    @abstractmethod
    def set_property(self, node: Any, name: str, value: Any):
        """Set one property. May raise if the host rejects it."""

    @abstractmethod
    def get_property(self, node: Any, name: str, default: Any = None) -> Any:
        """Read a property, including computed ones (absolute_position, ...)."""

    @abstractmethod
    def set_parent(self, node: Any, parent: Optional[Any]):
        """Attach node under parent (None detaches)."""

    @abstractmethod
    def parent_of(self, node: Any) -> Optional[Any]:
        """Current parent, or None."""

    @abstractmethod
    def children(self, node: Any) -> List[Any]:
        """Direct children in insertion order."""

    @abstractmethod
    def destroy_node(self, node: Any):
        """Destroy node and its whole subtree."""

    @abstractmethod
    def is_alive(self, node: Any) -> bool:
        """False once the node (or an ancestor) was destroyed."""

    @abstractmethod
    def kind_of(self, node: Any) -> str:
        """Node kind name."""

    @abstractmethod
    def full_name(self, node: Any) -> str:
        """Dot-joined path of names from the top-most ancestor."""

    @abstractmethod
    def subscribe(self, node: Optional[Any], event: str, handler: EventHandler) -> Connection:
        """Subscribe to a node event (or global event when node is None)."""

    @abstractmethod
    def pointer_position(self) -> Vec2:
        """Current pointer position in screen pixels."""

    @abstractmethod
    def viewport_size(self) -> Vec2:
        """Viewport size in screen pixels."""

    @abstractmethod
    def tween_property(self, node: Any, name: str, target: Any, duration: float):
        """Animate a property to target, replacing any running tween on it."""

    # -------------------------------------------------------------------------
    # Derived helpers
    # -------------------------------------------------------------------------

    def descendants(self, node: Any) -> List[Any]:
        """All descendants, depth first, parents before children."""
        out: List[Any] = []
        stack = list(reversed(self.children(node)))
        while stack:
            n = stack.pop()
            out.append(n)
            stack.extend(reversed(self.children(n)))
        return out

    def find_child_of_kind(self, node: Any, kind: str) -> Optional[Any]:
        for child in self.children(node):
            if self.kind_of(child) == kind:
                return child
        return None


class Session(ABC):
    """Resolves where display roots live for the current user."""

    @abstractmethod
    def user_surface(self) -> Optional[Any]:
        """Live per-user surface, or None outside a user session."""

    @abstractmethod
    def shared_surface(self) -> Any:
        """Global surface that always exists."""
