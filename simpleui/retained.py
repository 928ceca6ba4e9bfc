"""
Retained Host

In-memory DisplayHost: keeps the node tree, computes on-screen geometry,
routes injected pointer/keyboard input and steps tweens.

Used by the demo app as the backing store for GL rendering, and by tests
as a complete host without a window.

Input routing:
- pointer_down hit-tests the top-most visible node, then delivers
  input_began to it and its ancestors until a button or text box sinks it
- pointer_up delivers input_ended to every node that saw input_began from
  the same button, wherever the pointer is
- only primary presses activate buttons or focus text boxes
- pointer_move emits the global input_changed event
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
import itertools
import math
import logging

from simpleui.host import DisplayHost, Session, HostError, InputEvent, InputType
from simpleui.layout import Dim2, Rect, Vec2, stack_offsets
from simpleui.nodes import (
    kind_spec,
    SURFACE, LIST_LAYOUT, TEXT_BOX,
    GUI_OBJECT_KINDS, TEXT_KINDS, SINKING_KINDS,
)
from simpleui.signal import (
    SignalBridge, Connection,
    NODE_SIGNALS, GLOBAL_SIGNALS,
    SIGNAL_INPUT_BEGAN, SIGNAL_INPUT_ENDED, SIGNAL_INPUT_CHANGED,
    SIGNAL_ACTIVATED, SIGNAL_FOCUS_LOST, SIGNAL_DESTROYING,
)

logger = logging.getLogger(__name__)

# Width of one character relative to the font size
CHAR_WIDTH = 0.6

COMPUTED_PROPERTIES = frozenset({"absolute_position", "absolute_size", "text_fits"})


# =============================================================================
# Node
# =============================================================================

class Node:
    """A node in the retained tree. Opaque to widget code."""

    _ids = itertools.count(1)

    def __init__(self, kind: str, props: Dict[str, Any]):
        self.id = next(Node._ids)
        self.kind = kind
        self.props = props
        self.parent: Optional[Node] = None
        self.children: List[Node] = []
        self.alive = True
        self.signals = SignalBridge(kind)

    @property
    def name(self) -> str:
        return self.props.get("name") or self.kind

    def __repr__(self) -> str:
        state = "" if self.alive else ", destroyed"
        return f"Node({self.kind} '{self.name}'{state})"


# =============================================================================
# Tweens
# =============================================================================

def ease_out_quad(t: float) -> float:
    return 1.0 - (1.0 - t) * (1.0 - t)


@dataclass
class Tween:
    node: Node
    name: str
    start: Dim2
    target: Dim2
    duration: float
    elapsed: float = 0.0

    def step(self, dt: float) -> bool:
        """Advance; returns True when finished."""
        self.elapsed += dt
        t = min(1.0, self.elapsed / self.duration)
        value = self.target if t >= 1.0 else self.start.lerp(self.target, ease_out_quad(t))
        self.node.props[self.name] = value
        return t >= 1.0


# =============================================================================
# Retained Host
# =============================================================================

class RetainedHost(DisplayHost, Session):
    """
    In-memory display host.

    Usage:
        host = RetainedHost(1280, 720)
        ui = SimpleUI.create("Demo", host)
        ...
        host.click(100, 20)
        host.advance(1 / 60)
    """

    def __init__(self, width: float = 1280, height: float = 720, has_session: bool = True):
        self._viewport = Vec2(width, height)
        self._pointer = Vec2(0.0, 0.0)
        self._global = SignalBridge("input")
        self._tweens: Dict[Tuple[int, str], Tween] = {}

        # Pointer press state
        self._pressed: Dict[InputType, List[Node]] = {}
        self._press_button: Optional[Node] = None
        self._focused: Optional[Node] = None

        self._shared_surface = self._make_surface("CoreGui")
        self._user_surface = self._make_surface("PlayerGui") if has_session else None

    def _make_surface(self, name: str) -> Node:
        node = self.create_node(SURFACE)
        node.props["name"] = name
        return node

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def user_surface(self) -> Optional[Node]:
        return self._user_surface

    def shared_surface(self) -> Node:
        return self._shared_surface

    @property
    def surfaces(self) -> List[Node]:
        return [s for s in (self._shared_surface, self._user_surface) if s is not None]

    # -------------------------------------------------------------------------
    # Node lifecycle and properties
    # -------------------------------------------------------------------------

    def create_node(self, kind: str) -> Node:
        spec = kind_spec(kind)
        props = spec.defaults()
        props["name"] = kind
        return Node(kind, props)

    def _check_alive(self, node: Node):
        if not node.alive:
            raise HostError(f"{node!r} was destroyed")

    def set_property(self, node: Node, name: str, value: Any):
        self._check_alive(node)
        prop = kind_spec(node.kind).properties.get(name)
        if prop is None:
            raise HostError(f"{node.kind} has no property '{name}'")
        if prop.read_only:
            raise HostError(f"{node.kind}.{name} is read-only")
        node.props[name] = value

    def get_property(self, node: Node, name: str, default: Any = None) -> Any:
        if name in COMPUTED_PROPERTIES and node.kind in GUI_OBJECT_KINDS:
            if name == "absolute_position":
                return self.absolute_rect(node).origin
            if name == "absolute_size":
                return self.absolute_rect(node).size
            if name == "text_fits":
                return self._text_fits(node) if node.kind in TEXT_KINDS else None
        return node.props.get(name, default)

    def set_parent(self, node: Node, parent: Optional[Node]):
        self._check_alive(node)
        if parent is not None:
            self._check_alive(parent)
            p = parent
            while p is not None:
                if p is node:
                    raise HostError(f"Cannot parent {node!r} under its own descendant")
                p = p.parent
        if node.parent is not None:
            node.parent.children.remove(node)
        node.parent = parent
        if parent is not None:
            parent.children.append(node)

    def parent_of(self, node: Node) -> Optional[Node]:
        return node.parent

    def children(self, node: Node) -> List[Node]:
        return list(node.children)

    def destroy_node(self, node: Node):
        if not node.alive:
            return
        subtree = [node]
        subtree.extend(self.descendants(node))
        for n in subtree:
            n.signals.emit(SIGNAL_DESTROYING)

        if node.parent is not None:
            node.parent.children.remove(node)
            node.parent = None

        for n in subtree:
            n.alive = False
            n.signals.disconnect_all()
            for key in [k for k in self._tweens if k[0] == n.id]:
                del self._tweens[key]
            if n is self._focused:
                self._focused = None

    def is_alive(self, node: Node) -> bool:
        return node.alive

    def kind_of(self, node: Node) -> str:
        return node.kind

    def full_name(self, node: Node) -> str:
        names = []
        n = node
        while n is not None:
            names.append(n.name)
            n = n.parent
        return ".".join(reversed(names))

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def subscribe(self, node: Optional[Node], event: str, handler) -> Connection:
        if node is None:
            if event not in GLOBAL_SIGNALS:
                raise HostError(f"Unknown global event: {event}")
            return self._global.connect(event, handler)
        if event not in NODE_SIGNALS:
            raise HostError(f"Unknown node event: {event}")
        self._check_alive(node)
        return node.signals.connect(event, handler)

    def global_connection_count(self) -> int:
        return self._global.connection_count()

    # -------------------------------------------------------------------------
    # Viewport / pointer
    # -------------------------------------------------------------------------

    def pointer_position(self) -> Vec2:
        return self._pointer

    def viewport_size(self) -> Vec2:
        return self._viewport

    def set_viewport_size(self, width: float, height: float):
        self._viewport = Vec2(width, height)

    # -------------------------------------------------------------------------
    # Geometry
    # -------------------------------------------------------------------------

    def absolute_rect(self, node: Node) -> Rect:
        """On-screen rect of a node."""
        parent = node.parent
        if node.kind not in GUI_OBJECT_KINDS or parent is None:
            return Rect(0.0, 0.0, self._viewport.x, self._viewport.y)

        parent_rect = self.absolute_rect(parent)
        w, h = self._resolved_size(node, parent_rect)

        if self._stacks_child(parent, node):
            offset = self._stack_offset(parent, node, parent_rect)
            return Rect(parent_rect.x, parent_rect.y + offset, w, h)

        px, py = node.props["position"].resolve(parent_rect.w, parent_rect.h)
        return Rect(parent_rect.x + px, parent_rect.y + py, w, h)

    def _resolved_size(self, node: Node, parent_rect: Rect) -> Tuple[float, float]:
        size = node.props.get("size")
        if size is None:
            return (0.0, 0.0)
        return size.resolve(parent_rect.w, parent_rect.h)

    def _layout_of(self, parent: Node) -> Optional[Node]:
        for child in parent.children:
            if child.kind == LIST_LAYOUT:
                return child
        return None

    def _stacks_child(self, parent: Node, node: Node) -> bool:
        return node.props.get("visible", True) and self._layout_of(parent) is not None

    def _stack_offset(self, parent: Node, node: Node, parent_rect: Rect) -> float:
        layout = self._layout_of(parent)
        stacked = [
            c for c in parent.children
            if c.kind in GUI_OBJECT_KINDS and c.props.get("visible", True)
        ]
        if layout.props.get("sort_order") == "layout_order":
            # sorted() is stable: ties keep insertion order
            stacked = sorted(stacked, key=lambda c: c.props.get("layout_order", 0))
        heights = [self._resolved_size(c, parent_rect)[1] for c in stacked]
        offsets = stack_offsets(heights, layout.props.get("padding", 0.0))
        return offsets[stacked.index(node)]

    def _text_fits(self, node: Node) -> bool:
        text = node.props.get("text", "")
        if not text:
            return True
        rect = self.absolute_rect(node)
        font_size = node.props.get("text_size", 14.0)
        text_w = len(text) * font_size * CHAR_WIDTH
        if node.props.get("text_wrapped"):
            if rect.w <= 0:
                return False
            lines = math.ceil(text_w / rect.w)
            return lines * font_size <= rect.h
        return text_w <= rect.w and font_size <= rect.h

    def is_visible(self, node: Node) -> bool:
        """Effective visibility: the node and every ancestor shown."""
        n = node
        while n is not None:
            if not n.props.get("visible", True) or not n.props.get("enabled", True):
                return False
            n = n.parent
        return True

    def hit_test(self, x: float, y: float) -> Optional[Node]:
        """Top-most visible GUI node under the point."""
        for surface in reversed(self.surfaces):
            for root in reversed(surface.children):
                hit = self._hit(root, x, y)
                if hit is not None:
                    return hit
        return None

    def _hit(self, node: Node, x: float, y: float) -> Optional[Node]:
        if not node.props.get("visible", True) or not node.props.get("enabled", True):
            return None
        is_gui = node.kind in GUI_OBJECT_KINDS
        rect = self.absolute_rect(node) if is_gui else None
        if is_gui and node.props.get("clips_descendants") and not rect.contains(x, y):
            return None
        for child in reversed(node.children):
            hit = self._hit(child, x, y)
            if hit is not None:
                return hit
        if is_gui and rect.contains(x, y):
            return node
        return None

    def center_of(self, node: Node) -> Vec2:
        rect = self.absolute_rect(node)
        return Vec2(rect.x + rect.w / 2, rect.y + rect.h / 2)

    # -------------------------------------------------------------------------
    # Input injection
    # -------------------------------------------------------------------------

    def pointer_down(self, x: float, y: float, input_type: InputType = InputType.MOUSE_BUTTON1):
        self._pointer = Vec2(x, y)
        event = InputEvent(input_type, x, y)
        target = self.hit_test(x, y)
        primary = event.is_primary_press

        if primary and self._focused is not None and target is not self._focused:
            self._release_focus(enter_pressed=False)

        chain: List[Node] = []
        sink: Optional[Node] = None
        n = target
        while n is not None and n.kind in GUI_OBJECT_KINDS:
            chain.append(n)
            if n.kind in SINKING_KINDS and n.props.get("active", True):
                sink = n
                break
            n = n.parent

        # One chain per button
        self._pressed[input_type] = chain
        if primary:
            self._press_button = sink
        for n in chain:
            if n.alive:
                n.signals.emit(SIGNAL_INPUT_BEGAN, event)

        if primary and target is not None and target is sink and target.kind == TEXT_BOX:
            self.capture_focus(target)

    def pointer_move(self, x: float, y: float):
        self._pointer = Vec2(x, y)
        self._global.emit(SIGNAL_INPUT_CHANGED, InputEvent(InputType.MOUSE_MOVEMENT, x, y))

    def pointer_up(self, x: float, y: float, input_type: InputType = InputType.MOUSE_BUTTON1):
        self._pointer = Vec2(x, y)
        event = InputEvent(input_type, x, y)

        for n in self._pressed.pop(input_type, []):
            if n.alive:
                n.signals.emit(SIGNAL_INPUT_ENDED, event)

        if not event.is_primary_press:
            return
        button, self._press_button = self._press_button, None
        if button is not None and button.alive and self.hit_test(x, y) is button:
            button.signals.emit(SIGNAL_ACTIVATED)

    def click(self, x: float, y: float, input_type: InputType = InputType.MOUSE_BUTTON1):
        self.pointer_down(x, y, input_type)
        self.pointer_up(x, y, input_type)

    def click_node(self, node: Node, input_type: InputType = InputType.MOUSE_BUTTON1):
        """Click the center of a node."""
        c = self.center_of(node)
        self.click(c.x, c.y, input_type)

    # -------------------------------------------------------------------------
    # Focus / keyboard
    # -------------------------------------------------------------------------

    @property
    def focused_node(self) -> Optional[Node]:
        return self._focused

    def capture_focus(self, box: Node):
        self._check_alive(box)
        if box.kind != TEXT_BOX:
            raise HostError(f"{box!r} cannot take keyboard focus")
        if self._focused is box:
            return
        if self._focused is not None:
            self._release_focus(enter_pressed=False)
        self._focused = box
        if box.props.get("clear_text_on_focus"):
            box.props["text"] = ""

    def _release_focus(self, enter_pressed: bool):
        box, self._focused = self._focused, None
        if box is not None and box.alive:
            box.signals.emit(SIGNAL_FOCUS_LOST, enter_pressed)

    def type_text(self, text: str):
        if self._focused is not None:
            self._focused.props["text"] = self._focused.props.get("text", "") + text

    def press_key(self, key: str):
        key = key.lower()
        if self._focused is None:
            return
        if key in ("enter", "return"):
            self._release_focus(enter_pressed=True)
        elif key == "escape":
            self._release_focus(enter_pressed=False)
        elif key == "backspace":
            self._focused.props["text"] = self._focused.props.get("text", "")[:-1]

    # -------------------------------------------------------------------------
    # Tweens
    # -------------------------------------------------------------------------

    def tween_property(self, node: Node, name: str, target: Any, duration: float):
        self._check_alive(node)
        key = (node.id, name)
        self._tweens.pop(key, None)
        start = node.props.get(name)
        if duration <= 0 or not isinstance(target, Dim2) or not isinstance(start, Dim2):
            self.set_property(node, name, target)
            return
        self._tweens[key] = Tween(node, name, start, target, duration)

    def is_tweening(self, node: Node, name: str) -> bool:
        return (node.id, name) in self._tweens

    def advance(self, dt: float):
        """Step all running tweens by dt seconds."""
        for key, tween in list(self._tweens.items()):
            if tween.step(dt):
                del self._tweens[key]
