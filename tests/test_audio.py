import math

import pytest

from timemarches.audio import (
    Bus,
    InterpolateLowPass,
    InterpolateSampleSpeed,
    InterpolateVolume,
    LowPassNode,
    PlaybackSettings,
    Pool,
    Volume,
    VolumeNode,
    lerp,
    low_pass,
    low_pass_to,
    sample_speed,
    sample_speed_to,
    volume,
    volume_to,
)


@pytest.mark.parametrize("start,end", [(0.0, 10.0), (-48.0, 0.0), (3.5, -2.0)])
def test_lerp_endpoints_and_midpoint(start, end):
    assert lerp(start, end, 0.0) == start
    assert lerp(start, end, 1.0) == end
    assert lerp(start, end, 0.5) == pytest.approx((start + end) / 2)


@pytest.mark.parametrize(
    "pool, bus",
    [(Pool.DEFAULT, Bus.SFX), (Pool.SPATIAL, Bus.SFX), (Pool.MUSIC, Bus.MAIN)],
)
def test_pool_routing(pool, bus):
    assert Pool(pool.value).bus is bus


def test_unity_gain_is_zero_decibels():
    assert Volume.from_decibels(0.0).linear == 1.0
    assert VolumeNode().volume.decibels == 0.0


@pytest.mark.parametrize("amplitude", [0.5, 1.0, 2.0])
def test_volume_round_trip(amplitude):
    db = Volume.from_linear(amplitude).decibels
    assert Volume.from_decibels(db).linear == pytest.approx(amplitude)


def test_silence_is_negative_infinity():
    assert Volume.from_linear(0.0).decibels == float("-inf")


def test_interpolate_volume():
    node = VolumeNode()
    tween = volume(-6.0, -48.0)
    tween.interpolate(node, 0.0)
    assert node.volume.decibels == -6.0
    tween.interpolate(node, 1.0)
    assert node.volume.decibels == -48.0
    assert node.volume.in_decibels


def test_interpolate_low_pass():
    node = LowPassNode(frequency=1000.0)
    low_pass(200.0, 800.0).interpolate(node, 1.0)
    assert node.frequency == 800.0


def test_interpolate_sample_speed():
    settings = PlaybackSettings()
    sample_speed(0.5, 1.0).interpolate(settings, 0.0)
    assert settings.speed == 0.5


def test_defaults_are_zero():
    assert InterpolateVolume() == InterpolateVolume(0.0, 0.0)
    assert InterpolateLowPass().start == 0.0
    assert InterpolateSampleSpeed().end == 0.0


def test_volume_to_updates_state():
    tween, state = volume_to(-48.0)(-6.0)
    assert tween == InterpolateVolume(-6.0, -48.0)
    assert state == -48.0
    follow, _ = volume_to(0.0)(state)
    assert follow.start == -48.0


def test_low_pass_to_and_sample_speed_to():
    tween, state = low_pass_to(500.0)(1000.0)
    assert tween == InterpolateLowPass(1000.0, 500.0)
    assert state == 500.0
    speed, speed_state = sample_speed_to(0.5)(1.0)
    assert speed == InterpolateSampleSpeed(1.0, 0.5)
    assert speed_state == 0.5


def test_decibel_volume_linear_is_positive():
    assert 0.0 < Volume.from_decibels(-48.0).linear < 1.0
    assert math.isfinite(Volume.from_decibels(-48.0).linear)