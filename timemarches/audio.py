"""Audio routing and the interpolators used to tween audio parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

SPATIAL_SCALE = 0.1
"""Default spatial scale, adjusted for the game's pixel scale."""


class Bus(Enum):
    """Mixing buses that sample pools feed into."""

    MAIN = "main"
    SFX = "sfx"


class Pool(Enum):
    """Sampler pools and the bus each one is routed to."""

    DEFAULT = "default"
    SPATIAL = "spatial"
    MUSIC = "music"

    @property
    def bus(self) -> Bus:
        if self is Pool.MUSIC:
            return Bus.MAIN
        return Bus.SFX


@dataclass(frozen=True)
class Volume:
    """A gain expressed either linearly or in decibels."""

    value: float
    in_decibels: bool = False

    @classmethod
    def from_linear(cls, amplitude: float) -> Volume:
        return cls(amplitude, False)

    @classmethod
    def from_decibels(cls, db: float) -> Volume:
        return cls(db, True)

    @property
    def linear(self) -> float:
        if self.in_decibels:
            return 10.0 ** (self.value / 20.0)
        return self.value

    @property
    def decibels(self) -> float:
        if self.in_decibels:
            return self.value
        if self.value <= 0.0:
            return float("-inf")
        return 20.0 * math.log10(self.value)


UNITY_GAIN = Volume.from_linear(1.0)


@dataclass
class VolumeNode:
    """A gain stage."""

    volume: Volume = field(default=UNITY_GAIN)


@dataclass
class LowPassNode:
    """A low-pass filter with a cutoff frequency in hertz."""

    frequency: float


@dataclass
class PlaybackSettings:
    """Per-sample playback parameters."""

    speed: float = 1.0


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation from ``start`` to ``end`` by ``t``."""
    return start + (end - start) * t


@dataclass
class InterpolateVolume:
    """Tweens a :class:`VolumeNode` between two decibel levels."""

    start: float = 0.0
    end: float = 0.0

    def interpolate(self, item: VolumeNode, value: float) -> None:
        item.volume = Volume.from_decibels(lerp(self.start, self.end, value))


@dataclass
class InterpolateLowPass:
    """Tweens a :class:`LowPassNode` cutoff frequency."""

    start: float = 0.0
    end: float = 0.0

    def interpolate(self, item: LowPassNode, value: float) -> None:
        item.frequency = lerp(self.start, self.end, value)


@dataclass
class InterpolateSampleSpeed:
    """Tweens a sample's playback speed."""

    start: float = 0.0
    end: float = 0.0

    def interpolate(self, item: PlaybackSettings, value: float) -> None:
        item.speed = lerp(self.start, self.end, value)


def volume(start: float, end: float) -> InterpolateVolume:
    return InterpolateVolume(start, end)


def low_pass(start: float, end: float) -> InterpolateLowPass:
    return InterpolateLowPass(start, end)


def sample_speed(start: float, end: float) -> InterpolateSampleSpeed:
    return InterpolateSampleSpeed(start, end)


def volume_to(to: float) -> Callable[[float], tuple[InterpolateVolume, float]]:
    """A step from the current state to ``to``; returns the tween and the new state."""

    def step(state: float) -> tuple[InterpolateVolume, float]:
        return volume(state, to), to

    return step


def low_pass_to(to: float) -> Callable[[float], tuple[InterpolateLowPass, float]]:
    """A step from the current cutoff to ``to``; returns the tween and the new state."""

    def step(state: float) -> tuple[InterpolateLowPass, float]:
        return low_pass(state, to), to

    return step


def sample_speed_to(to: float) -> Callable[[float], tuple[InterpolateSampleSpeed, float]]:
    """A step from the current speed to ``to``; returns the tween and the new state."""

    def step(state: float) -> tuple[InterpolateSampleSpeed, float]:
        return sample_speed(state, to), to

    return step