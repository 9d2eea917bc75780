from esper import World
from avatar.components.icon_loop import IconLoop
from avatar.components.icon_placement import IconPlacement
from avatar.components.icon_slot import IconSlot
from avatar.components.keyframes import KeyframeTrack, LoopDescriptor
from avatar.components.live_state import LiveState
from avatar.components.sparkle_pulse import SparklePulse
from avatar.constants import SPARKLE_DELAY, SPARKLE_DURATION, SPARKLE_REPEAT_DELAY


def build_sparkle_pulse(
    *,
    delay: float = SPARKLE_DELAY,
    repeat_delay: float = SPARKLE_REPEAT_DELAY,
    duration: float = SPARKLE_DURATION,
) -> LoopDescriptor:
    # Times left empty: keyframes are spread evenly over the duration.
    return LoopDescriptor(
        tracks={
            "opacity": KeyframeTrack(
                values=(0.0, 1.0, 0.0),
                times=(),
                duration=duration,
                delay=delay,
                repeat_delay=repeat_delay,
            ),
            "scale": KeyframeTrack(
                values=(0.0, 1.0, 1.0),
                times=(),
                duration=duration,
                delay=delay,
                repeat_delay=repeat_delay,
            ),
        }
    )


class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_icon(self, asset: str, placement: IconPlacement) -> int:
        return self.world.create_entity(
            IconSlot(index=placement.index, asset=asset),
            placement,
            LiveState(x=placement.x, y=placement.y, scale=placement.scale),
        )

    def attach_icon_loop(self, ent: int, descriptor: LoopDescriptor) -> IconLoop:
        loop = IconLoop(descriptor=descriptor)
        self.world.add_component(ent, loop)
        return loop

    def create_sparkle(self, descriptor: LoopDescriptor | None = None) -> int:
        return self.world.create_entity(SparklePulse(descriptor=descriptor or build_sparkle_pulse()))
