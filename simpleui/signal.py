# simpleui/signal.py
"""
SignalBridge - observer hub behind every host subscription.

Each node owns a bridge for its own events; the host owns one more for
global input. Handlers are isolated from each other: one failing handler
is logged and the rest still run.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# Signal Names
# =============================================================================

SIGNAL_INPUT_BEGAN = 'input_began'
SIGNAL_INPUT_ENDED = 'input_ended'
SIGNAL_INPUT_CHANGED = 'input_changed'
SIGNAL_ACTIVATED = 'activated'
SIGNAL_FOCUS_LOST = 'focus_lost'
SIGNAL_DESTROYING = 'destroying'

NODE_SIGNALS = frozenset({
    SIGNAL_INPUT_BEGAN,
    SIGNAL_INPUT_ENDED,
    SIGNAL_ACTIVATED,
    SIGNAL_FOCUS_LOST,
    SIGNAL_DESTROYING,
})
GLOBAL_SIGNALS = frozenset({SIGNAL_INPUT_CHANGED})


# =============================================================================
# Connection Handle
# =============================================================================

@dataclass
class Connection:
    """Handle to a signal connection."""
    signal: str
    callback_id: int
    bridge: Optional[SignalBridge] = None

    @property
    def connected(self) -> bool:
        return self.bridge is not None

    def disconnect(self):
        if self.bridge:
            self.bridge._remove_connection(self.signal, self.callback_id)
            self.bridge = None

    # Connections double as plain unsubscribe callables
    __call__ = disconnect


# =============================================================================
# Signal Bridge
# =============================================================================

class SignalBridge:
    """Central hub for signal routing."""

    def __init__(self, name: str = ""):
        self.name = name
        self._connections: Dict[str, Dict[int, Callable]] = {}
        self._next_id: int = 0
        self._emit_depth: int = 0
        self._pending_removes: List[tuple] = []

    def connect(self, signal: str, handler: Callable) -> Connection:
        if signal not in self._connections:
            self._connections[signal] = {}

        callback_id = self._next_id
        self._next_id += 1

        self._connections[signal][callback_id] = handler

        return Connection(signal=signal, callback_id=callback_id, bridge=self)

    def disconnect_all(self, signal: str = None):
        if signal:
            self._connections.pop(signal, None)
        else:
            self._connections.clear()

    def emit(self, signal: str, *args, **kwargs):
        handlers = self._connections.get(signal, {})
        if not handlers:
            return

        self._emit_depth += 1

        try:
            for callback_id, handler in list(handlers.items()):
                # Disconnected earlier in this same emission
                if (signal, callback_id) in self._pending_removes:
                    continue
                try:
                    handler(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Signal handler error [{self.name}.{signal}]: {e}")
        finally:
            self._emit_depth -= 1

            if self._emit_depth == 0 and self._pending_removes:
                for sig, cid in self._pending_removes:
                    self._do_remove(sig, cid)
                self._pending_removes.clear()

    def is_connected(self, signal: str) -> bool:
        return bool(self._connections.get(signal))

    def connection_count(self, signal: str = None) -> int:
        if signal:
            return len(self._connections.get(signal, {}))
        return sum(len(h) for h in self._connections.values())

    def _remove_connection(self, signal: str, callback_id: int):
        if self._emit_depth > 0:
            self._pending_removes.append((signal, callback_id))
        else:
            self._do_remove(signal, callback_id)

    def _do_remove(self, signal: str, callback_id: int):
        if signal in self._connections:
            self._connections[signal].pop(callback_id, None)
