from dataclasses import dataclass

from avatar.components.keyframes import LoopDescriptor


@dataclass(slots=True)
class IconLoop:
    """Running grid loop attached to an icon while the avatar is animating."""

    descriptor: LoopDescriptor
    elapsed: float = 0.0
