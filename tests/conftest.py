import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from avatar.components.grid_config import GridConfig, ProfilePicSize
from avatar.events.bus import EventBus


class EventRecorder:
    """Collects (event_name, payload) pairs emitted on the bus."""

    def __init__(self, bus: EventBus, *names: str) -> None:
        self.events: list[tuple[str, dict]] = []
        for name in names:
            bus.subscribe(name, self._handler(name))

    def _handler(self, name: str):
        def handler(sender, **payload):
            self.events.append((name, payload))
        return handler

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def count(self, name: str) -> int:
        return sum(1 for event, _ in self.events if event == name)

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def large_config() -> GridConfig:
    return GridConfig.from_size(ProfilePicSize.LARGE)


@pytest.fixture
def recorder_factory(bus):
    def make(*names: str) -> EventRecorder:
        return EventRecorder(bus, *names)
    return make
