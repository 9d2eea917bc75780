import pytest

from avatar.components.sparkle_pulse import SparklePulse
from avatar.events.bus import EVENT_SPARKLE_START, EVENT_SPARKLE_STOP, EVENT_TICK
from avatar.systems.sparkle_system import SparkleSystem
from avatar.world import create_world


@pytest.fixture
def pulse(bus):
    world = create_world()
    SparkleSystem(world, bus)
    return world.get_component(SparklePulse)[0][1]


def test_pulse_hidden_until_started(bus, pulse):
    bus.emit(EVENT_TICK, dt=1.0)
    assert not pulse.visible
    assert pulse.elapsed == 0.0


def test_pulse_waits_for_delay_then_flashes(bus, pulse):
    bus.emit(EVENT_SPARKLE_START)
    assert pulse.visible
    bus.emit(EVENT_TICK, dt=1.0)
    assert (pulse.opacity, pulse.scale) == (0.0, 0.0)
    bus.emit(EVENT_TICK, dt=1.0)
    assert pulse.opacity == pytest.approx(1.0)
    assert pulse.scale == pytest.approx(1.0)
    bus.emit(EVENT_TICK, dt=0.5)
    assert pulse.opacity == pytest.approx(0.0)
    assert pulse.scale == pytest.approx(1.0)


def test_pulse_repeats_after_repeat_delay(bus, pulse):
    bus.emit(EVENT_SPARKLE_START)
    # delay 1.5 + duration 1 + repeat delay 4 puts the second peak at 7.0s.
    for _ in range(14):
        bus.emit(EVENT_TICK, dt=0.5)
    assert pulse.elapsed == pytest.approx(7.0)
    assert pulse.opacity == pytest.approx(1.0)


def test_stop_hides_pulse_and_freezes_it(bus, pulse):
    bus.emit(EVENT_SPARKLE_START)
    bus.emit(EVENT_TICK, dt=2.0)
    bus.emit(EVENT_SPARKLE_STOP)
    assert not pulse.visible
    elapsed = pulse.elapsed
    bus.emit(EVENT_TICK, dt=1.0)
    assert pulse.elapsed == elapsed


def test_restart_begins_from_delay_again(bus, pulse):
    bus.emit(EVENT_SPARKLE_START)
    bus.emit(EVENT_TICK, dt=2.0)
    bus.emit(EVENT_SPARKLE_STOP)
    bus.emit(EVENT_SPARKLE_START)
    assert pulse.elapsed == 0.0
    assert pulse.opacity == 0.0
