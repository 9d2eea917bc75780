"""Entry point for the animated avatar demo.

Sets up the avatar world, event bus, systems, and Arcade window.
"""
import logging
import sys

from arcade import Window, run, set_background_color, color
from avatar.world import create_world
from avatar.components.grid_config import ProfilePicSize
from avatar.events.bus import EVENT_TICK, EventBus, EVENT_MOUSE_MOVE, EVENT_MOUSE_EXIT
from avatar.rendering.avatar_renderer import AvatarRenderer
from avatar.systems.hover_animation_system import HoverAnimationSystem
from avatar.systems.icon_animation_system import IconAnimationSystem
from avatar.systems.keyframe_playback_system import KeyframePlaybackSystem
from avatar.systems.mouse_hover_system import MouseHoverSystem
from avatar.systems.profile_image_system import ProfileImageSystem
from avatar.systems.sparkle_system import SparkleSystem


class AvatarWindow(Window):
    def __init__(self, size: ProfilePicSize = ProfilePicSize.LARGE):
        world = create_world(size)
        config = world.grid_config
        super().__init__(config.container_width, config.container_height, "Animated avatar")
        self.event_bus = EventBus()
        self.world = world
        self.set_update_rate(1/60)

        # Loop and playback systems
        self.icon_animation_system = IconAnimationSystem(self.world, self.event_bus)
        self.playback_system = KeyframePlaybackSystem(self.world, self.event_bus)
        self.sparkle_system = SparkleSystem(self.world, self.event_bus)
        self.profile_image_system = ProfileImageSystem(self.world, self.event_bus)

        # Hover systems
        self.hover_system = HoverAnimationSystem(self.world, self.event_bus)
        self.mouse_hover_system = MouseHoverSystem(self.event_bus, config)

        self.renderer = AvatarRenderer(self.world, config)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        self.renderer.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_leave(self, x: float, y: float):
        self.event_bus.emit(EVENT_MOUSE_EXIT)

    def on_close(self):
        self.hover_system.unmount()
        super().on_close()


def main():
    logging.basicConfig(level=logging.INFO)
    size = ProfilePicSize[sys.argv[1].upper()] if len(sys.argv) > 1 else ProfilePicSize.LARGE
    window = AvatarWindow(size)
    run()

if __name__ == "__main__":
    main()
