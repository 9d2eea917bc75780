from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True, slots=True)
class KeyframeTrack:
    """Keyframe values plus normalized times for one infinitely repeating property.

    ``times`` are fractions of ``duration`` in ``[0, 1]``; equal consecutive
    times encode a zero-duration jump. ``delay`` applies before the first
    iteration only, ``repeat_delay`` between iterations.
    """

    values: Tuple[float, ...]
    times: Tuple[float, ...]
    duration: float
    ease: str = "linear"
    delay: float = 0.0
    repeat_delay: float = 0.0


@dataclass(frozen=True, slots=True)
class LoopTiming:
    y_times: Tuple[float, ...]
    x_times: Tuple[float, ...]
    scale_times: Tuple[float, ...]


@dataclass(frozen=True, slots=True)
class LoopDescriptor:
    """Self-contained instructions for one animation cycle, keyed by property name."""

    tracks: Mapping[str, KeyframeTrack] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tracks", MappingProxyType(dict(self.tracks)))

    def __getitem__(self, name: str) -> KeyframeTrack:
        return self.tracks[name]

    def __contains__(self, name: object) -> bool:
        return name in self.tracks

    @property
    def y(self) -> Tuple[float, ...]:
        return self.tracks["y"].values

    @property
    def x(self) -> Tuple[float, ...]:
        return self.tracks["x"].values

    @property
    def scale(self) -> Tuple[float, ...]:
        return self.tracks["scale"].values

    @property
    def timing(self) -> LoopTiming:
        return LoopTiming(
            y_times=self.tracks["y"].times,
            x_times=self.tracks["x"].times,
            scale_times=self.tracks["scale"].times,
        )
