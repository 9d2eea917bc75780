from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Scale:
    """Icon scale and the direction it is currently travelling in."""

    value: float
    is_growing: bool
