"""Hover state resource describing the avatar's animation lifecycle."""
from dataclasses import dataclass
from enum import Enum, auto


class HoverMode(Enum):
    IDLE = auto()
    ANIMATING = auto()
    COOLING = auto()


@dataclass(slots=True)
class HoverState:
    """Singleton component owned by the hover animation system."""

    mode: HoverMode = HoverMode.IDLE
    is_hovered: bool = False
    cooldown_remaining: float = 0.0
