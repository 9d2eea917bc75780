from __future__ import annotations

from bisect import bisect_right

from avatar.components.keyframes import KeyframeTrack


def track_progress(track: KeyframeTrack, elapsed: float) -> float | None:
    """Normalized position inside the current iteration, or None before the first delay ends."""
    local = elapsed - track.delay
    if local < 0.0:
        return None
    if track.duration <= 0.0:
        return 1.0
    cycle = track.duration + max(0.0, track.repeat_delay)
    phase = local % cycle
    return min(phase / track.duration, 1.0)


def sample_keyframes(values, times, progress: float) -> float:
    """Linear interpolation of ``values`` at ``progress``.

    Equal consecutive times are a zero-duration jump: at that instant the later
    keyframe wins. Past the last time the last value is held.
    """
    if not values:
        raise ValueError("Cannot sample an empty keyframe track")
    if progress < times[0]:
        return values[0]
    idx = bisect_right(times, progress) - 1
    if idx >= len(values) - 1:
        return values[-1]
    start_t = times[idx]
    end_t = times[idx + 1]
    start_v = values[idx]
    end_v = values[idx + 1]
    if end_t <= start_t:
        return end_v
    ratio = (progress - start_t) / (end_t - start_t)
    return start_v + (end_v - start_v) * ratio


def default_times(count: int) -> tuple[float, ...]:
    if count <= 1:
        return (0.0,) * count
    return tuple(i / (count - 1) for i in range(count))


def evaluate_track(track: KeyframeTrack, elapsed: float) -> float:
    progress = track_progress(track, elapsed)
    if progress is None:
        return track.values[0]
    times = track.times or default_times(len(track.values))
    return sample_keyframes(track.values, times, progress)
