from dataclasses import dataclass

from avatar.components.scale import Scale


@dataclass(slots=True)
class LiveState:
    """Last observed interpolated state of one icon.

    Written only through the frame-report path of the icon animation system;
    read as the phase input whenever a new loop is generated.
    """

    x: float
    y: float
    scale: Scale
