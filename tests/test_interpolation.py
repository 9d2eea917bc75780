import pytest

from avatar.animation_factory import build_sparkle_pulse
from avatar.components.keyframes import KeyframeTrack
from avatar.utils.interpolation import default_times, evaluate_track, sample_keyframes, track_progress


def test_linear_interpolation_between_keyframes():
    assert sample_keyframes((0.0, 10.0), (0.0, 1.0), 0.25) == pytest.approx(2.5)


def test_equal_times_resolve_to_later_keyframe():
    values = (150.0, -50.0, 600.0, 150.0)
    times = (0.0, 0.4, 0.4, 1.0)
    assert sample_keyframes(values, times, 0.4) == 600.0
    assert sample_keyframes(values, times, 0.2) == pytest.approx(50.0)


def test_value_held_after_last_time():
    values = (0.0, 0.0, 100.0)
    times = (0.0, 0.5, 0.5)
    assert sample_keyframes(values, times, 0.9) == 100.0


def test_empty_track_is_rejected():
    with pytest.raises(ValueError):
        sample_keyframes((), (), 0.5)


def test_default_times_spread_evenly():
    assert default_times(3) == (0.0, 0.5, 1.0)
    assert default_times(1) == (0.0,)


def test_track_repeats_forever():
    track = KeyframeTrack(values=(0.0, 10.0), times=(0.0, 1.0), duration=2.0)
    assert evaluate_track(track, 1.0) == pytest.approx(5.0)
    assert evaluate_track(track, 5.0) == pytest.approx(5.0)


def test_delay_holds_first_value_then_repeat_delay_holds_last():
    track = KeyframeTrack(values=(0.0, 1.0, 0.0), times=(), duration=1.0, delay=1.5, repeat_delay=4.0)
    assert track_progress(track, 1.0) is None
    assert evaluate_track(track, 1.0) == 0.0
    assert evaluate_track(track, 2.0) == pytest.approx(1.0)
    # Inside the repeat delay the final keyframe is held.
    assert track_progress(track, 4.0) == 1.0
    # Second iteration starts after duration + repeat_delay.
    assert evaluate_track(track, 1.5 + 5.0 + 0.5) == pytest.approx(1.0)


def test_sparkle_pulse_keyframes():
    pulse = build_sparkle_pulse()
    assert pulse["opacity"].values == (0.0, 1.0, 0.0)
    assert pulse["scale"].values == (0.0, 1.0, 1.0)
    assert pulse["opacity"].delay == 1.5
    assert pulse["opacity"].repeat_delay == 4
    assert pulse["scale"].duration == 1
