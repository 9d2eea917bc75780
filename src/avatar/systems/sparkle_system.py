from __future__ import annotations

import logging
from typing import Any

from esper import World

from avatar.components.sparkle_pulse import SparklePulse
from avatar.events.bus import EVENT_SPARKLE_START, EVENT_SPARKLE_STOP, EVENT_TICK, EventBus
from avatar.utils.interpolation import evaluate_track

logger = logging.getLogger(__name__)


class SparkleSystem:
    """Runs the sparkle pulse while hovered; stops on leave without waiting for the cooldown."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SPARKLE_START, self.on_start)
        self.event_bus.subscribe(EVENT_SPARKLE_STOP, self.on_stop)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def _pulse(self) -> SparklePulse | None:
        for _, pulse in self.world.get_component(SparklePulse):
            return pulse
        return None

    def on_start(self, sender: Any, **payload: Any) -> None:
        pulse = self._pulse()
        if pulse is None or pulse.running:
            return
        pulse.running = True
        pulse.elapsed = 0.0
        self._sample(pulse)
        logger.debug("Sparkle started")

    def on_stop(self, sender: Any, **payload: Any) -> None:
        pulse = self._pulse()
        if pulse is None or not pulse.running:
            return
        # Stopped in place; the glyph is hidden while not running.
        pulse.running = False
        logger.debug("Sparkle stopped after %.2fs", pulse.elapsed)

    def on_tick(self, sender: Any, **payload: Any) -> None:
        pulse = self._pulse()
        if pulse is None or not pulse.running:
            return
        dt = payload.get("dt", 1 / 60)
        try:
            pulse.elapsed += float(dt)
        except (TypeError, ValueError):
            pulse.elapsed += 1 / 60
        self._sample(pulse)

    @staticmethod
    def _sample(pulse: SparklePulse) -> None:
        pulse.opacity = evaluate_track(pulse.descriptor["opacity"], pulse.elapsed)
        pulse.scale = evaluate_track(pulse.descriptor["scale"], pulse.elapsed)
