from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_MOVE = "mouse_move"                    # payload: x, y, dx, dy
EVENT_MOUSE_EXIT = "mouse_exit"                    # payload: None
EVENT_HOVER_ENTER = "hover_enter"                  # payload: None
EVENT_HOVER_LEAVE = "hover_leave"                  # payload: None
EVENT_HOVER_STATE_CHANGED = "hover_state_changed"  # payload: previous=HoverMode, current=HoverMode


# ============================================================================
# ICON GRID LOOP
# ============================================================================
EVENT_ICONS_ANIMATION_START = "icons_animation_start"  # payload: None
EVENT_ICONS_ANIMATION_STOP = "icons_animation_stop"    # payload: None
EVENT_ICONS_LOOP_STARTED = "icons_loop_started"        # payload: descriptors=dict[int, LoopDescriptor]
EVENT_ICONS_LOOP_STOPPED = "icons_loop_stopped"        # payload: indices=list[int]
EVENT_ICON_FRAME = "icon_frame"                        # payload: index=int, x=float, y=float, scale=float


# ============================================================================
# SPARKLE
# ============================================================================
EVENT_SPARKLE_START = "sparkle_start"    # payload: None
EVENT_SPARKLE_STOP = "sparkle_stop"      # payload: None
