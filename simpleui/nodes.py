"""
Node Kinds and Factory

Typed property schema per node kind, and the factory that creates nodes
through a DisplayHost.

Strict factories validate every property before the node exists and
raise PropertyError. Lenient factories apply properties one at a time and
skip the ones that fail, for hosts whose kinds do not support every
property.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple
import logging

from simpleui.layout import Dim2
from simpleui.host import DisplayHost, HostError

logger = logging.getLogger(__name__)


class PropertyError(ValueError):
    """Unknown property for a node kind, or a value of the wrong type."""


# =============================================================================
# Kind Names
# =============================================================================

SURFACE = "Surface"
SCREEN_GUI = "ScreenGui"
FRAME = "Frame"
TEXT_LABEL = "TextLabel"
TEXT_BUTTON = "TextButton"
TEXT_BOX = "TextBox"
LIST_LAYOUT = "ListLayout"
CORNER = "Corner"

GUI_OBJECT_KINDS = frozenset({FRAME, TEXT_LABEL, TEXT_BUTTON, TEXT_BOX})
TEXT_KINDS = frozenset({TEXT_LABEL, TEXT_BUTTON, TEXT_BOX})
BUTTON_KINDS = frozenset({TEXT_BUTTON})
# Kinds that swallow pointer presses instead of passing them to ancestors
SINKING_KINDS = frozenset({TEXT_BUTTON, TEXT_BOX})


# =============================================================================
# Schema
# =============================================================================

_NUMBER = (int, float)
_COLOR = (tuple,)
_DIM2 = (Dim2,)


@dataclass(frozen=True)
class PropertySpec:
    types: Tuple[type, ...]
    default: Any = None
    optional: bool = False  # None is an accepted value
    read_only: bool = False


def _common() -> Dict[str, PropertySpec]:
    return {"name": PropertySpec((str,))}


def _gui_object(active: bool = False) -> Dict[str, PropertySpec]:
    props = _common()
    props.update({
        "size": PropertySpec(_DIM2, None, optional=True),
        "position": PropertySpec(_DIM2, Dim2()),
        "visible": PropertySpec((bool,), True),
        "background_color": PropertySpec(_COLOR, (1.0, 1.0, 1.0, 1.0)),
        "background_transparency": PropertySpec(_NUMBER, 0.0),
        "border_size": PropertySpec(_NUMBER, 1),
        "clips_descendants": PropertySpec((bool,), False),
        "layout_order": PropertySpec((int,), 0),
        "active": PropertySpec((bool,), active),
        # computed by the host
        "absolute_position": PropertySpec((), read_only=True),
        "absolute_size": PropertySpec((), read_only=True),
    })
    return props


def _text_object(active: bool = False) -> Dict[str, PropertySpec]:
    props = _gui_object(active)
    props.update({
        "text": PropertySpec((str,), ""),
        "text_color": PropertySpec(_COLOR, (0.0, 0.0, 0.0, 1.0)),
        "text_size": PropertySpec(_NUMBER, 14.0),
        "font": PropertySpec((str,), "default"),
        "font_weight": PropertySpec((str,), "normal"),
        "text_x_alignment": PropertySpec((str,), "center"),
        "text_wrapped": PropertySpec((bool,), False),
        "text_fits": PropertySpec((), read_only=True),
    })
    return props


@dataclass(frozen=True)
class KindSpec:
    name: str
    properties: Mapping[str, PropertySpec] = field(default_factory=dict)

    def defaults(self) -> Dict[str, Any]:
        return {
            k: spec.default
            for k, spec in self.properties.items()
            if not spec.read_only
        }


def _text_box() -> Dict[str, PropertySpec]:
    props = _text_object(active=True)
    props.update({
        "placeholder_text": PropertySpec((str,), ""),
        "clear_text_on_focus": PropertySpec((bool,), False),
    })
    return props


def _list_layout() -> Dict[str, PropertySpec]:
    props = _common()
    props.update({
        "padding": PropertySpec(_NUMBER, 0.0),
        "sort_order": PropertySpec((str,), "layout_order"),
    })
    return props


def _screen_gui() -> Dict[str, PropertySpec]:
    props = _common()
    props.update({
        "enabled": PropertySpec((bool,), True),
        "reset_on_spawn": PropertySpec((bool,), True),
        "display_order": PropertySpec((int,), 0),
    })
    return props


def _corner() -> Dict[str, PropertySpec]:
    props = _common()
    props["corner_radius"] = PropertySpec(_NUMBER, 0.0)
    return props


KINDS: Dict[str, KindSpec] = {
    SURFACE: KindSpec(SURFACE, _common()),
    SCREEN_GUI: KindSpec(SCREEN_GUI, _screen_gui()),
    FRAME: KindSpec(FRAME, _gui_object()),
    TEXT_LABEL: KindSpec(TEXT_LABEL, _text_object()),
    TEXT_BUTTON: KindSpec(TEXT_BUTTON, _text_object(active=True)),
    TEXT_BOX: KindSpec(TEXT_BOX, _text_box()),
    LIST_LAYOUT: KindSpec(LIST_LAYOUT, _list_layout()),
    CORNER: KindSpec(CORNER, _corner()),
}


def kind_spec(kind: str) -> KindSpec:
    spec = KINDS.get(kind)
    if spec is None:
        raise HostError(f"Unknown node kind: {kind}")
    return spec


def validate_property(kind: str, name: str, value: Any):
    """Raise PropertyError unless value is valid for kind.name."""
    spec = kind_spec(kind).properties.get(name)
    if spec is None:
        raise PropertyError(f"{kind} has no property '{name}'")
    if spec.read_only:
        raise PropertyError(f"{kind}.{name} is read-only")
    if value is None:
        if not spec.optional:
            raise PropertyError(f"{kind}.{name} cannot be None")
        return
    if not isinstance(value, spec.types):
        expected = "/".join(t.__name__ for t in spec.types)
        raise PropertyError(
            f"{kind}.{name} expects {expected}, got {type(value).__name__}"
        )


# =============================================================================
# Factory
# =============================================================================

class NodeFactory:
    """
    Creates nodes with an initial property bag.

    Usage:
        factory = NodeFactory(host)
        frame = factory.create("Frame", {"size": Dim2.offset(100, 20)}, parent=body)
    """

    def __init__(self, host: DisplayHost, lenient: bool = False):
        self.host = host
        self.lenient = lenient

    def create(
        self,
        kind: str,
        properties: Optional[Mapping[str, Any]] = None,
        parent: Any = None,
    ) -> Any:
        props = dict(properties or {})
        kind_spec(kind)

        if self.lenient:
            node = self.host.create_node(kind)
            for name, value in props.items():
                try:
                    validate_property(kind, name, value)
                    self.host.set_property(node, name, value)
                except Exception as e:
                    logger.debug(f"Skipped {kind}.{name}={value!r}: {e}")
        else:
            for name, value in props.items():
                validate_property(kind, name, value)
            node = self.host.create_node(kind)
            for name, value in props.items():
                self.host.set_property(node, name, value)

        if parent is not None:
            self.host.set_parent(node, parent)
        return node
