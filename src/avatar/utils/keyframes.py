"""Keyframe generation for the icon grid loop.

Every function here is pure: the same live state and grid config always
produce the same arrays. The y, x and scale tracks are generated from the
icon's *current* state so a loop can be restarted at any phase without a
visible jump.
"""
from __future__ import annotations

from avatar.components.grid_config import GridConfig
from avatar.components.keyframes import KeyframeTrack, LoopDescriptor
from avatar.components.live_state import LiveState
from avatar.components.scale import Scale
from avatar.constants import (
    FULL_VERTICAL_DURATION,
    ICONS_SCALE_DURATION,
    LOWER_SCALE_BOUNDARY,
    SCALE_DELTA,
    SCALE_DELTA_TIME_RATIO,
    UPPER_SCALE_BOUNDARY,
)


def initial_time_to_top_portion(y: float, config: GridConfig) -> float:
    """Share of a vertical cycle needed to move from ``y`` up to the hidden top row."""
    return (y + config.hidden_padding) / config.full_vertical_span


def generate_y_keyframes(y: float, config: GridConfig) -> tuple[list[float], list[float]]:
    # Up to the top, instant jump to the bottom at t0, then back down to y.
    t0 = initial_time_to_top_portion(y, config)
    values = [y, -config.hidden_padding, config.container_height + config.hidden_padding, y]
    times = [0.0, t0, t0, 1.0]
    return values, times


def generate_x_iterations(x: float, config: GridConfig) -> list[float]:
    lane_count = config.lane_count
    iterations: list[float] = []
    for i in range(lane_count):
        offset = (x + i * config.icon_edge) % config.container_width
        iterations.append(offset)
        if i != lane_count - 1:
            iterations.append(offset)
    return iterations


def generate_x_times(initial_time_to_top: float, config: GridConfig) -> list[float]:
    """Lane-switch instants, each aligned with a vertical wrap.

    A lane lasts one vertical cycle, so the k-th switch happens
    ``initial_time_to_top`` into the k-th vertical cycle. Times come in
    identical pairs which makes every switch a zero-duration jump.
    """
    times = [0.0]
    lane_time_portion = 1 / config.lane_count
    for i in range(config.lane_count - 1):
        switch = lane_time_portion * initial_time_to_top + i * lane_time_portion
        times.append(switch)
        times.append(switch)
    return times


def get_initial_time_ratio_to_scale_edge(scale: Scale) -> float:
    """Share of a scale oscillation left before ``scale`` reaches the boundary it heads to."""
    if scale.is_growing:
        if scale.value > 1:
            return SCALE_DELTA_TIME_RATIO * (UPPER_SCALE_BOUNDARY - scale.value) / SCALE_DELTA
        return SCALE_DELTA_TIME_RATIO + SCALE_DELTA_TIME_RATIO * (1 - scale.value) / SCALE_DELTA
    if scale.value < 1:
        return SCALE_DELTA_TIME_RATIO * (scale.value - LOWER_SCALE_BOUNDARY) / SCALE_DELTA
    return SCALE_DELTA_TIME_RATIO + SCALE_DELTA_TIME_RATIO * (scale.value - 1) / SCALE_DELTA


def generate_scale_times(scale: Scale) -> list[float]:
    # Clamped so float error at a boundary cannot push the cycle past 1.
    time_to_edge = min(max(get_initial_time_ratio_to_scale_edge(scale), 0.0), 2 * SCALE_DELTA_TIME_RATIO)
    return [time_to_edge, time_to_edge + 2 * SCALE_DELTA_TIME_RATIO, 1.0]


def generate_scale_keyframes(scale: Scale) -> list[float]:
    next_boundary = UPPER_SCALE_BOUNDARY if scale.is_growing else LOWER_SCALE_BOUNDARY
    opposite_boundary = LOWER_SCALE_BOUNDARY if scale.is_growing else UPPER_SCALE_BOUNDARY
    return [scale.value, next_boundary, opposite_boundary, scale.value]


def build_icon_loop(live: LiveState, config: GridConfig) -> LoopDescriptor:
    """Assemble the three tracks of one icon's infinite loop from its live state."""
    y_values, y_times = generate_y_keyframes(live.y, config)
    t0 = y_times[1]
    x_values = generate_x_iterations(live.x, config)
    x_times = generate_x_times(t0, config)
    # Leading 0 pairs the starting value with its own time.
    scale_times = [0.0, *generate_scale_times(live.scale)]
    return LoopDescriptor(
        tracks={
            "y": KeyframeTrack(
                values=tuple(y_values),
                times=tuple(y_times),
                duration=FULL_VERTICAL_DURATION,
            ),
            "x": KeyframeTrack(
                values=tuple(x_values),
                times=tuple(x_times),
                duration=FULL_VERTICAL_DURATION * config.lane_count,
            ),
            "scale": KeyframeTrack(
                values=tuple(generate_scale_keyframes(live.scale)),
                times=tuple(scale_times),
                duration=ICONS_SCALE_DURATION,
            ),
        }
    )
