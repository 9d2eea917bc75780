"""Placeholder renderer drawing the avatar with arcade primitives."""
import arcade
from esper import World

from avatar.components.grid_config import GridConfig
from avatar.components.icon_slot import IconSlot
from avatar.components.live_state import LiveState
from avatar.components.profile_image import ProfileImage
from avatar.components.sparkle_pulse import SparklePulse
from avatar.constants import PROFILE_IMAGE_EDGES, SPARKLE_ANCHOR_PCT, SPARKLE_SIZE_PCT

ICON_PALETTE = (
    arcade.color.AMBER,
    arcade.color.AQUA,
    arcade.color.BRIGHT_GREEN,
    arcade.color.CORAL,
    arcade.color.ORCHID,
    arcade.color.SKY_BLUE,
)


class AvatarRenderer:
    """Draws icons at their live state; y grows downward in avatar space."""

    def __init__(self, world: World, config: GridConfig, *, origin: tuple[float, float] = (0.0, 0.0)) -> None:
        self.world = world
        self.config = config
        self.origin = origin

    def _to_screen(self, x: float, y: float, size: float) -> tuple[float, float]:
        left, bottom = self.origin
        return left + x, bottom + self.config.container_height - y - size

    def process(self) -> None:
        edge = self.config.icon_edge
        for _, (slot, live) in self.world.get_components(IconSlot, LiveState):
            size = edge * live.scale.value
            # Scale around the icon centre.
            inset = (edge - size) / 2
            left, bottom = self._to_screen(live.x + inset, live.y + inset, size)
            color = ICON_PALETTE[slot.index % len(ICON_PALETTE)]
            arcade.draw_lbwh_rectangle_filled(left, bottom, size, size, color)

        for _, image in self.world.get_component(ProfileImage):
            radius = edge * PROFILE_IMAGE_EDGES / 4 * image.scale
            cx, cy = self._to_screen(self.config.container_width / 2, self.config.container_height / 2, 0)
            arcade.draw_circle_filled(cx, cy, radius, arcade.color.DARK_SLATE_GRAY)

        for _, pulse in self.world.get_component(SparklePulse):
            if not pulse.visible or pulse.opacity <= 0.0:
                continue
            radius = self.config.container_width * SPARKLE_SIZE_PCT / 2 * pulse.scale
            cx, cy = self._to_screen(
                self.config.container_width * SPARKLE_ANCHOR_PCT[0],
                self.config.container_height * SPARKLE_ANCHOR_PCT[1],
                0,
            )
            alpha = int(255 * pulse.opacity)
            arcade.draw_circle_filled(cx, cy, radius, (255, 255, 255, alpha))
