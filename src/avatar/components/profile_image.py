from dataclasses import dataclass


@dataclass(slots=True)
class ProfileImage:
    scale: float = 1.0
    target_scale: float = 1.0
