from dataclasses import dataclass

from avatar.components.scale import Scale


@dataclass(frozen=True, slots=True)
class IconPlacement:
    """Layout-assigned origin of one icon; never changes after the fold."""

    index: int
    x: float
    y: float
    scale: Scale
