from __future__ import annotations

from typing import Any

from esper import World

from avatar.components.icon_loop import IconLoop
from avatar.components.icon_slot import IconSlot
from avatar.events.bus import EVENT_ICON_FRAME, EVENT_TICK, EventBus
from avatar.utils.interpolation import evaluate_track


class KeyframePlaybackSystem:
    """In-process animation runtime: advances running icon loops each tick.

    The y, x and scale tracks of one icon are sampled at the same elapsed time
    and reported together, so a lane switch always lands on the same frame as
    the vertical wrap it is aligned with.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def on_tick(self, sender: Any, **payload: Any) -> None:
        dt = payload.get("dt", 1 / 60)
        try:
            dt_val = float(dt)
        except (TypeError, ValueError):
            dt_val = 1 / 60
        frames = []
        for _ent, (slot, loop) in self.world.get_components(IconSlot, IconLoop):
            loop.elapsed += dt_val
            descriptor = loop.descriptor
            frames.append(
                (
                    slot.index,
                    evaluate_track(descriptor["x"], loop.elapsed),
                    evaluate_track(descriptor["y"], loop.elapsed),
                    evaluate_track(descriptor["scale"], loop.elapsed),
                )
            )
        for index, x, y, scale in frames:
            self.event_bus.emit(EVENT_ICON_FRAME, index=index, x=x, y=y, scale=scale)
