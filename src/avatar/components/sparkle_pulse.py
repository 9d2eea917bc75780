from dataclasses import dataclass

from avatar.components.keyframes import LoopDescriptor


@dataclass(slots=True)
class SparklePulse:
    """Sampled state of the sparkle glyph; visible only while running."""

    descriptor: LoopDescriptor
    running: bool = False
    elapsed: float = 0.0
    opacity: float = 0.0
    scale: float = 0.0

    @property
    def visible(self) -> bool:
        return self.running
