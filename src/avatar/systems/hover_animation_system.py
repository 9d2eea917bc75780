from __future__ import annotations

import logging
from typing import Any

from esper import World

from avatar.components.hover_state import HoverMode, HoverState
from avatar.constants import PROFILE_IMAGE_SCALE_DURATION_MS
from avatar.events.bus import (
    EVENT_HOVER_ENTER,
    EVENT_HOVER_LEAVE,
    EVENT_HOVER_STATE_CHANGED,
    EVENT_ICONS_ANIMATION_START,
    EVENT_ICONS_ANIMATION_STOP,
    EVENT_SPARKLE_START,
    EVENT_SPARKLE_STOP,
    EVENT_TICK,
    EventBus,
)

logger = logging.getLogger(__name__)


class HoverAnimationSystem:
    """Starts and stops the icon loop and sparkle pulse in response to hover.

    Leaving the avatar stops the sparkle at once but keeps the icon loop
    running for ``cooldown`` seconds so the portrait can scale back down.
    Hover enters during that cooldown are ignored; the loop is stopped only
    when the cooldown elapses, so at most one loop transition is in flight.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        cooldown: float = PROFILE_IMAGE_SCALE_DURATION_MS / 1000,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.cooldown = cooldown
        self._state_entity: int | None = None
        self._state = self._ensure_state()
        self._mounted = True
        self.event_bus.subscribe(EVENT_HOVER_ENTER, self.on_hover_enter)
        self.event_bus.subscribe(EVENT_HOVER_LEAVE, self.on_hover_leave)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def _ensure_state(self) -> HoverState:
        entries = list(self.world.get_component(HoverState))
        if entries:
            self._state_entity, state = entries[0]
            return state
        self._state_entity = self.world.create_entity(HoverState())
        return self.world.component_for_entity(self._state_entity, HoverState)

    @property
    def state(self) -> HoverState:
        return self._state

    @property
    def mode(self) -> HoverMode:
        return self._state.mode

    def on_hover_enter(self, sender: Any, **payload: Any) -> None:
        if not self._mounted or self._state.mode is not HoverMode.IDLE:
            return
        self._state.is_hovered = True
        self._transition(HoverMode.ANIMATING)
        self.event_bus.emit(EVENT_ICONS_ANIMATION_START)
        self.event_bus.emit(EVENT_SPARKLE_START)

    def on_hover_leave(self, sender: Any, **payload: Any) -> None:
        if not self._mounted or self._state.mode is not HoverMode.ANIMATING:
            return
        self._state.is_hovered = False
        self.event_bus.emit(EVENT_SPARKLE_STOP)
        self._state.cooldown_remaining = self.cooldown
        self._transition(HoverMode.COOLING)

    def on_tick(self, sender: Any, **payload: Any) -> None:
        if not self._mounted or self._state.mode is not HoverMode.COOLING:
            return
        dt = payload.get("dt", 1 / 60)
        try:
            dt_val = float(dt)
        except (TypeError, ValueError):
            dt_val = 1 / 60
        self._state.cooldown_remaining -= dt_val
        if self._state.cooldown_remaining > 0.0:
            return
        self._state.cooldown_remaining = 0.0
        self.event_bus.emit(EVENT_ICONS_ANIMATION_STOP)
        self._transition(HoverMode.IDLE)

    def unmount(self) -> None:
        """Discard any pending cooldown without side effects and detach from the bus."""
        if not self._mounted:
            return
        self._mounted = False
        self.event_bus.unsubscribe(EVENT_HOVER_ENTER, self.on_hover_enter)
        self.event_bus.unsubscribe(EVENT_HOVER_LEAVE, self.on_hover_leave)
        self.event_bus.unsubscribe(EVENT_TICK, self.on_tick)
        self._state.cooldown_remaining = 0.0
        if self._state_entity is not None:
            self.world.delete_entity(self._state_entity, immediate=True)
            self._state_entity = None

    def _transition(self, new_mode: HoverMode) -> None:
        previous = self._state.mode
        self._state.mode = new_mode
        logger.debug("Hover state %s -> %s", previous.name, new_mode.name)
        self.event_bus.emit(EVENT_HOVER_STATE_CHANGED, previous=previous, current=new_mode)
