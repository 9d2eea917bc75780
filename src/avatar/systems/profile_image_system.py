from __future__ import annotations

from typing import Any

from esper import World

from avatar.components.hover_state import HoverMode
from avatar.components.profile_image import ProfileImage
from avatar.constants import PROFILE_IMAGE_HOVER_SCALE, PROFILE_IMAGE_SCALE_DURATION_SECONDS
from avatar.events.bus import EVENT_HOVER_STATE_CHANGED, EVENT_TICK, EventBus


class ProfileImageSystem:
    """Scales the portrait up while the avatar animates and back down afterwards."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        hover_scale: float = PROFILE_IMAGE_HOVER_SCALE,
        duration: float = PROFILE_IMAGE_SCALE_DURATION_SECONDS,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.hover_scale = hover_scale
        self.duration = duration
        self.event_bus.subscribe(EVENT_HOVER_STATE_CHANGED, self.on_hover_state_changed)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    def _image(self) -> ProfileImage | None:
        for _, image in self.world.get_component(ProfileImage):
            return image
        return None

    def on_hover_state_changed(self, sender: Any, **payload: Any) -> None:
        image = self._image()
        if image is None:
            return
        current = payload.get("current")
        image.target_scale = self.hover_scale if current is HoverMode.ANIMATING else 1.0

    def on_tick(self, sender: Any, **payload: Any) -> None:
        image = self._image()
        if image is None or image.scale == image.target_scale:
            return
        dt = payload.get("dt", 1 / 60)
        try:
            dt_val = float(dt)
        except (TypeError, ValueError):
            dt_val = 1 / 60
        if self.duration <= 0.0:
            image.scale = image.target_scale
            return
        step = abs(self.hover_scale - 1.0) * dt_val / self.duration
        delta = image.target_scale - image.scale
        if abs(delta) <= step:
            image.scale = image.target_scale
        else:
            image.scale += step if delta > 0 else -step
