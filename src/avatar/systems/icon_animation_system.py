from __future__ import annotations

import logging

from esper import World

from avatar.animation_factory import AnimationFactory
from avatar.components.grid_config import GridConfig
from avatar.components.icon_loop import IconLoop
from avatar.components.icon_slot import IconSlot
from avatar.components.keyframes import LoopDescriptor
from avatar.components.live_state import LiveState
from avatar.components.scale import Scale
from avatar.events.bus import (
    EVENT_ICON_FRAME,
    EVENT_ICONS_ANIMATION_START,
    EVENT_ICONS_ANIMATION_STOP,
    EVENT_ICONS_LOOP_STARTED,
    EVENT_ICONS_LOOP_STOPPED,
    EventBus,
)
from avatar.utils.keyframes import build_icon_loop

logger = logging.getLogger(__name__)


class IconAnimationSystem:
    """Owns the grid loop of every icon and the only write path to their live state."""

    def __init__(self, world: World, event_bus: EventBus, config: GridConfig | None = None):
        self.world = world
        self.event_bus = event_bus
        self.config = config or getattr(world, "grid_config")
        self.factory = AnimationFactory(world)
        self._entities_by_index: dict[int, int] = {
            slot.index: ent for ent, slot in self.world.get_component(IconSlot)
        }
        event_bus.subscribe(EVENT_ICONS_ANIMATION_START, self.on_animation_start)
        event_bus.subscribe(EVENT_ICONS_ANIMATION_STOP, self.on_animation_stop)
        event_bus.subscribe(EVENT_ICON_FRAME, self.on_icon_frame)

    def on_animation_start(self, sender, **kwargs):
        descriptors: dict[int, LoopDescriptor] = {}
        for ent, (slot, live) in list(self.world.get_components(IconSlot, LiveState)):
            descriptor = build_icon_loop(live, self.config)
            self.factory.attach_icon_loop(ent, descriptor)
            descriptors[slot.index] = descriptor
        logger.debug("Icon loop started for %d icons", len(descriptors))
        self.event_bus.emit(EVENT_ICONS_LOOP_STARTED, descriptors=descriptors)

    def on_animation_stop(self, sender, **kwargs):
        stopped: list[int] = []
        for ent, (slot, _loop) in list(self.world.get_components(IconSlot, IconLoop)):
            self.world.remove_component(ent, IconLoop)
            stopped.append(slot.index)
        if not stopped:
            return
        logger.debug("Icon loop stopped for %d icons", len(stopped))
        self.event_bus.emit(EVENT_ICONS_LOOP_STOPPED, indices=sorted(stopped))

    def on_icon_frame(self, sender, **kwargs):
        index = kwargs.get('index'); x = kwargs.get('x'); y = kwargs.get('y'); scale = kwargs.get('scale')
        if index is None or x is None or y is None or scale is None:
            return
        self.on_frame(int(index), float(x), float(y), float(scale))

    def on_frame(self, index: int, x: float, y: float, scale: float) -> None:
        """Overwrite the icon's live state with the latest interpolated frame."""
        ent = self._entities_by_index.get(index)
        if ent is None:
            return
        try:
            live = self.world.component_for_entity(ent, LiveState)
        except KeyError:
            return
        previous = live.scale
        if scale == previous.value:
            is_growing = previous.is_growing
        else:
            is_growing = previous.value < scale
        live.x = x
        live.y = y
        live.scale = Scale(value=scale, is_growing=is_growing)

    def live_state(self, index: int) -> LiveState | None:
        ent = self._entities_by_index.get(index)
        if ent is None:
            return None
        try:
            return self.world.component_for_entity(ent, LiveState)
        except KeyError:
            return None

    def is_running(self) -> bool:
        return bool(self.world.get_component(IconLoop))
