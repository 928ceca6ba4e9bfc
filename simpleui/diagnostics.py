"""
Diagnostics

Static scan of a built tree for common UI defects. Read-only: the tree is
never modified.

Checks (each finding names the node by its full path):
- missing size on a visual node
- background transparency outside [0, 1]
- absolute position off the pixel grid (blur risk)
- stacked content taller than a non-clipping container
- text that does not fit and does not wrap
- U+FFFD in text (font fallback missing glyphs)
- buttons with input disabled
- very large trees (performance)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Tuple

from simpleui.host import DisplayHost, Session
from simpleui.nodes import (
    SCREEN_GUI, LIST_LAYOUT,
    GUI_OBJECT_KINDS, TEXT_KINDS, BUTTON_KINDS,
)

NO_ROOT = "no display root for diagnostics"
NO_ISSUES = "no obvious issues detected"

SUBPIXEL_TOLERANCE = 0.01
STACK_ROW_ESTIMATE = 28
MAX_NODES = 400
REPLACEMENT_CHAR = "\ufffd"


@dataclass(frozen=True)
class DiagnosticReport:
    """Findings by severity, in the order they were found."""
    ok: Tuple[str, ...] = ()
    warn: Tuple[str, ...] = ()
    error: Tuple[str, ...] = ()

    @property
    def clean(self) -> bool:
        return not self.warn and not self.error

    def as_dict(self) -> dict:
        return {"ok": list(self.ok), "warn": list(self.warn), "error": list(self.error)}


@dataclass
class _Findings:
    ok: List[str] = field(default_factory=list)
    warn: List[str] = field(default_factory=list)
    error: List[str] = field(default_factory=list)

    def freeze(self) -> DiagnosticReport:
        return DiagnosticReport(tuple(self.ok), tuple(self.warn), tuple(self.error))


# =============================================================================
# Checks
# =============================================================================

# A check looks at one node and returns zero or more warnings
Check = Callable[[DisplayHost, Any, str], Iterable[str]]


def check_missing_size(host: DisplayHost, node: Any, name: str) -> Iterable[str]:
    if host.kind_of(node) in GUI_OBJECT_KINDS and host.get_property(node, "size") is None:
        yield f"{name} has no size"


def check_transparency(host: DisplayHost, node: Any, name: str) -> Iterable[str]:
    if host.kind_of(node) not in GUI_OBJECT_KINDS:
        return
    t = host.get_property(node, "background_transparency")
    if t is not None and not 0 <= t <= 1:
        yield f"{name} background transparency out of range ({t})"


def _off_grid(v: float) -> bool:
    return abs(v - round(v)) > SUBPIXEL_TOLERANCE


def check_subpixel(host: DisplayHost, node: Any, name: str) -> Iterable[str]:
    if host.kind_of(node) not in GUI_OBJECT_KINDS:
        return
    pos = host.get_property(node, "absolute_position")
    if pos is not None and (_off_grid(pos.x) or _off_grid(pos.y)):
        yield f"{name} at non-integer absolute position ({pos.x}, {pos.y}), may blur"


def check_overflow(host: DisplayHost, node: Any, name: str) -> Iterable[str]:
    if host.kind_of(node) not in GUI_OBJECT_KINDS:
        return
    if host.find_child_of_kind(node, LIST_LAYOUT) is None:
        return
    if host.get_property(node, "clips_descendants"):
        return
    size = host.get_property(node, "absolute_size")
    estimate = len(host.children(node)) * STACK_ROW_ESTIMATE
    if size is not None and size.y < estimate:
        yield f"{name} may need clipping for overflowing content ({size.y} < {estimate})"


def check_text_clipping(host: DisplayHost, node: Any, name: str) -> Iterable[str]:
    if host.kind_of(node) not in TEXT_KINDS:
        return
    if host.get_property(node, "text_fits") is False and not host.get_property(node, "text_wrapped"):
        yield f"{name} text may be clipping (does not fit and does not wrap)"


def check_missing_glyphs(host: DisplayHost, node: Any, name: str) -> Iterable[str]:
    if host.kind_of(node) not in TEXT_KINDS:
        return
    text = host.get_property(node, "text") or ""
    if REPLACEMENT_CHAR in text:
        yield f"{name} contains replacement character (font fallback missing glyphs)"


def check_inert_button(host: DisplayHost, node: Any, name: str) -> Iterable[str]:
    if host.kind_of(node) in BUTTON_KINDS and host.get_property(node, "active") is False:
        yield f"{name} is a button with input disabled (may not receive input)"


NODE_CHECKS: Tuple[Check, ...] = (
    check_missing_size,
    check_transparency,
    check_subpixel,
    check_overflow,
    check_text_clipping,
    check_missing_glyphs,
    check_inert_button,
)


# =============================================================================
# Scan
# =============================================================================

def resolve_root(host: DisplayHost, session: Optional[Session]) -> Optional[Any]:
    """First display root on the current user's surface."""
    if session is None:
        return None
    surface = session.user_surface()
    if surface is None:
        return None
    return host.find_child_of_kind(surface, SCREEN_GUI)


def scan(
    host: DisplayHost,
    root: Any = None,
    session: Optional[Session] = None,
) -> DiagnosticReport:
    """
    Inspect every descendant of root.

    Without a root, the first display root of the user's surface is used;
    when there is none the report holds a single error.
    """
    findings = _Findings()

    if root is None:
        root = resolve_root(host, session)
    if root is None or not host.is_alive(root):
        findings.error.append(NO_ROOT)
        return findings.freeze()

    nodes = host.descendants(root)
    for node in nodes:
        name = host.full_name(node)
        for check in NODE_CHECKS:
            findings.warn.extend(check(host, node, name))

    if len(nodes) > MAX_NODES:
        findings.warn.append(
            f"Scale warning: large number of GUI objects ({len(nodes)}), consider batching or lazy-creating elements"
        )

    if not findings.warn and not findings.error:
        findings.ok.append(NO_ISSUES)
    return findings.freeze()
