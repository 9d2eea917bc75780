import pytest

from avatar.components.hover_state import HoverMode
from avatar.components.profile_image import ProfileImage
from avatar.components.sparkle_pulse import SparklePulse
from avatar.events.bus import (
    EVENT_ICONS_LOOP_STARTED,
    EVENT_ICONS_LOOP_STOPPED,
    EVENT_MOUSE_MOVE,
    EVENT_TICK,
)
from avatar.systems.hover_animation_system import HoverAnimationSystem
from avatar.systems.icon_animation_system import IconAnimationSystem
from avatar.systems.keyframe_playback_system import KeyframePlaybackSystem
from avatar.systems.mouse_hover_system import MouseHoverSystem
from avatar.systems.profile_image_system import ProfileImageSystem
from avatar.systems.sparkle_system import SparkleSystem
from avatar.world import create_world


class Avatar:
    def __init__(self, bus):
        self.bus = bus
        self.world = create_world()
        self.icons = IconAnimationSystem(self.world, bus)
        KeyframePlaybackSystem(self.world, bus)
        SparkleSystem(self.world, bus)
        ProfileImageSystem(self.world, bus)
        self.hover = HoverAnimationSystem(self.world, bus)
        MouseHoverSystem(bus, self.world.grid_config)

    def move(self, x, y):
        self.bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=0, dy=0)

    def run(self, seconds, dt=0.25):
        for _ in range(int(seconds / dt)):
            self.bus.emit(EVENT_TICK, dt=dt)

    def sparkle(self) -> SparklePulse:
        return self.world.get_component(SparklePulse)[0][1]

    def image(self) -> ProfileImage:
        return self.world.get_component(ProfileImage)[0][1]


@pytest.fixture
def avatar(bus):
    return Avatar(bus)


def test_hover_cycle_end_to_end(avatar, recorder_factory):
    recorder = recorder_factory(EVENT_ICONS_LOOP_STARTED, EVENT_ICONS_LOOP_STOPPED)

    avatar.move(250, 250)
    assert avatar.hover.mode is HoverMode.ANIMATING
    assert avatar.sparkle().visible
    avatar.run(2.0)
    assert avatar.image().scale == pytest.approx(1.1)
    moved = avatar.icons.live_state(10)

    avatar.move(900, 900)
    assert avatar.hover.mode is HoverMode.COOLING
    assert not avatar.sparkle().visible
    # Loop still running during the cooldown.
    y_before = moved.y
    avatar.run(0.5)
    assert avatar.icons.live_state(10).y != y_before

    avatar.run(0.5)
    assert avatar.hover.mode is HoverMode.IDLE
    assert avatar.image().scale == pytest.approx(1.0)
    assert recorder.names() == [EVENT_ICONS_LOOP_STARTED, EVENT_ICONS_LOOP_STOPPED]


def test_rapid_reenter_does_not_restart_loop(avatar, recorder_factory):
    recorder = recorder_factory(EVENT_ICONS_LOOP_STARTED, EVENT_ICONS_LOOP_STOPPED)
    avatar.move(250, 250)
    avatar.run(1.0)
    avatar.move(-10, -10)
    avatar.run(0.25)
    avatar.move(250, 250)
    assert recorder.names() == [EVENT_ICONS_LOOP_STARTED]
    avatar.run(1.0)
    assert recorder.names() == [EVENT_ICONS_LOOP_STARTED, EVENT_ICONS_LOOP_STOPPED]
    # Pointer is still inside, so a fresh enter needs it to leave and return.
    avatar.move(-10, -10)
    avatar.move(250, 250)
    assert recorder.names() == [EVENT_ICONS_LOOP_STARTED, EVENT_ICONS_LOOP_STOPPED, EVENT_ICONS_LOOP_STARTED]


def test_second_loop_starts_where_first_stopped(avatar, recorder_factory):
    recorder = recorder_factory(EVENT_ICONS_LOOP_STARTED)
    avatar.move(250, 250)
    avatar.run(1.5)
    avatar.move(-10, -10)
    avatar.run(1.0)
    stopped = avatar.icons.live_state(20)
    snapshot = (stopped.x, stopped.y, stopped.scale.value)

    avatar.move(250, 250)
    descriptor = recorder.events[-1][1]["descriptors"][20]
    assert (descriptor.x[0], descriptor.y[0], descriptor.scale[0]) == snapshot
