"""Scripted entity movement along eased curves during cutscenes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from timemarches.timer import Timer, TimerMode

Vec3 = tuple[float, float, float]
ZERO: Vec3 = (0.0, 0.0, 0.0)


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _lerp(a: Vec3, b: Vec3, t: float) -> Vec3:
    return (
        a[0] + (b[0] - a[0]) * t,
        a[1] + (b[1] - a[1]) * t,
        a[2] + (b[2] - a[2]) * t,
    )


class EaseFunction(Enum):
    """Easing shapes mapping progress in ``[0, 1]`` to ``[0, 1]``."""

    LINEAR = "linear"
    QUADRATIC_IN = "quadratic_in"
    QUADRATIC_OUT = "quadratic_out"
    QUADRATIC_IN_OUT = "quadratic_in_out"
    CUBIC_IN = "cubic_in"
    CUBIC_OUT = "cubic_out"
    SINE_IN_OUT = "sine_in_out"
    SMOOTH_STEP = "smooth_step"

    def ease(self, t: float) -> float:
        if self is EaseFunction.LINEAR:
            return t
        if self is EaseFunction.QUADRATIC_IN:
            return t * t
        if self is EaseFunction.QUADRATIC_OUT:
            return 1.0 - (1.0 - t) ** 2
        if self is EaseFunction.QUADRATIC_IN_OUT:
            return 2.0 * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0
        if self is EaseFunction.CUBIC_IN:
            return t**3
        if self is EaseFunction.CUBIC_OUT:
            return 1.0 - (1.0 - t) ** 3
        if self is EaseFunction.SINE_IN_OUT:
            return -(math.cos(math.pi * t) - 1.0) / 2.0
        return t * t * (3.0 - 2.0 * t)

    def curve(self, start: Vec3, end: Vec3) -> EasingCurve:
        """An eased curve from ``start`` to ``end``."""
        return EasingCurve(tuple(start), tuple(end), self)


@dataclass(frozen=True)
class EasingCurve:
    """A point moving from ``start`` to ``end`` over the domain ``[0, 1]``."""

    start: Vec3
    end: Vec3
    ease: EaseFunction = EaseFunction.LINEAR

    def sample(self, t: float) -> Optional[Vec3]:
        """The point at ``t``, or ``None`` outside the domain."""
        if not 0.0 <= t <= 1.0:
            return None
        return _lerp(self.start, self.end, self.ease.ease(t))


@dataclass
class MovementClip:
    """A curve played over the span of a one-shot timer."""

    curve: EasingCurve
    timer: Timer

    def position(self) -> Optional[Vec3]:
        return self.curve.sample(self.timer.fraction())

    def tick(self, delta: float) -> None:
        """Advance the clip by ``delta`` seconds."""
        self.timer.tick(delta)

    def complete(self) -> bool:
        return self.timer.finished


@dataclass
class Mover:
    """An entity whose movement a cutscene can take over.

    While :attr:`cutscene_controlled` is set, :attr:`velocity` holds the
    per-frame displacement caused by the cutscene.
    """

    translation: Vec3 = ZERO
    cutscene_controlled: bool = False
    velocity: Optional[Vec3] = None
    clip: Optional[MovementClip] = field(default=None, repr=False)

    def move_to(
        self,
        root: Vec3,
        offset: Vec3,
        duration: float,
        ease: EaseFunction = EaseFunction.LINEAR,
    ) -> MovementClip:
        """Glide to ``root - offset`` over ``duration`` seconds."""
        self.cutscene_controlled = True
        self.velocity = ZERO
        self.clip = MovementClip(
            ease.curve(self.translation, _sub(tuple(root), tuple(offset))),
            Timer.from_seconds(duration, TimerMode.ONCE),
        )
        return self.clip

    def lock(self) -> None:
        """Hold the entity still under cutscene control."""
        self.cutscene_controlled = True
        self.velocity = ZERO

    def unlock(self) -> None:
        """Hand movement back once the cutscene is over."""
        if self.cutscene_controlled:
            self.cutscene_controlled = False
            self.velocity = None

    def apply(self, delta: float) -> Vec3:
        """Advance any running clip by ``delta`` seconds; returns the position."""
        if not self.cutscene_controlled or self.clip is None:
            return self.translation
        self.clip.tick(delta)
        position = self.clip.position()
        if position is not None:
            self.velocity = _sub(position, self.translation)
            self.translation = position
        if self.clip.complete():
            self.velocity = ZERO
            self.clip = None
        return self.translation