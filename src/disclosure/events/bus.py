from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep bound methods of controllers alive until they detach explicitly.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def receiver_count(self, name: str) -> int:
        sig = self._signals.get(name)
        if not sig:
            return 0
        return len(sig.receivers)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# RAW INPUT
# ============================================================================
EVENT_MOUSE_MOVE = "mouse_move"                    # payload: x, y (top-down surface coordinates)
EVENT_KEY_PRESS = "key_press"                      # payload: key=str, trigger_entity=int|None


# ============================================================================
# TRIGGER INTERACTION
# ============================================================================
EVENT_POINTER_ENTER = "pointer_enter"              # payload: trigger_entity=int
EVENT_POINTER_LEAVE = "pointer_leave"              # payload: trigger_entity=int
EVENT_FOCUS_GAINED = "focus_gained"                # payload: trigger_entity=int
EVENT_FOCUS_LOST = "focus_lost"                    # payload: trigger_entity=int
EVENT_ESCAPE = "escape"                            # payload: trigger_entity=int


# ============================================================================
# TRIGGER LIFECYCLE
# ============================================================================
EVENT_TRIGGER_MOUNT = "trigger_mount"              # payload: trigger_entity=int
EVENT_TRIGGER_UNMOUNT = "trigger_unmount"          # payload: trigger_entity=int


# ============================================================================
# OVERLAY RENDERING
# ============================================================================
EVENT_OVERLAY_SHOWN = "overlay_shown"              # payload: trigger_entity, coordinate, arrow_side, tooltip_id
EVENT_OVERLAY_HIDDEN = "overlay_hidden"            # payload: trigger_entity, tooltip_id
