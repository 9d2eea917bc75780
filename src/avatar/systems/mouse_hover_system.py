from __future__ import annotations

from typing import Any

from avatar.components.grid_config import GridConfig
from avatar.events.bus import (
    EVENT_HOVER_ENTER,
    EVENT_HOVER_LEAVE,
    EVENT_MOUSE_EXIT,
    EVENT_MOUSE_MOVE,
    EventBus,
)


class MouseHoverSystem:
    """Bridges raw pointer motion to hover enter/leave events for the avatar container."""

    def __init__(
        self,
        event_bus: EventBus,
        config: GridConfig,
        *,
        origin: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        self.event_bus = event_bus
        self.config = config
        self.origin = origin
        self._inside = False
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self._on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_EXIT, self._on_mouse_exit)

    @property
    def inside(self) -> bool:
        return self._inside

    def contains(self, x: float, y: float) -> bool:
        left, bottom = self.origin
        return (
            left <= x <= left + self.config.container_width
            and bottom <= y <= bottom + self.config.container_height
        )

    def _on_mouse_move(self, sender: Any, **payload: Any) -> None:
        x = payload.get("x")
        y = payload.get("y")
        if x is None or y is None:
            return
        try:
            xf = float(x)
            yf = float(y)
        except (TypeError, ValueError):
            return
        inside = self.contains(xf, yf)
        if inside == self._inside:
            return
        self._inside = inside
        self.event_bus.emit(EVENT_HOVER_ENTER if inside else EVENT_HOVER_LEAVE)

    def _on_mouse_exit(self, sender: Any, **payload: Any) -> None:
        if not self._inside:
            return
        self._inside = False
        self.event_bus.emit(EVENT_HOVER_LEAVE)
