"""Frame timers driven by explicit time deltas."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TimerMode(Enum):
    """Whether a timer stops once it finishes or wraps around."""

    ONCE = "once"
    REPEATING = "repeating"


@dataclass
class Timer:
    """A countdown measured in seconds, advanced with :meth:`tick`."""

    duration: float
    mode: TimerMode = TimerMode.ONCE
    elapsed: float = 0.0
    _finished: bool = field(default=False, init=False, repr=False)
    _times_finished_this_tick: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("timer duration must not be negative")

    @classmethod
    def from_seconds(cls, seconds: float, mode: TimerMode) -> Timer:
        """Create a timer lasting ``seconds`` in the given mode."""
        return cls(duration=float(seconds), mode=mode)

    @property
    def finished(self) -> bool:
        """True once the timer has reached its duration.

        A repeating timer is only finished on the tick that wrapped it.
        """
        return self._finished

    @property
    def just_finished(self) -> bool:
        """True if the most recent tick made the timer finish."""
        return self._times_finished_this_tick > 0

    @property
    def times_finished_this_tick(self) -> int:
        """How many times the timer completed during the last tick."""
        return self._times_finished_this_tick

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds and return it."""
        if delta < 0:
            raise ValueError("cannot tick a timer backwards")

        if self.mode is TimerMode.ONCE and self._finished:
            self._times_finished_this_tick = 0
            return self

        self.elapsed += delta
        if self.elapsed < self.duration:
            self._finished = False
            self._times_finished_this_tick = 0
            return self

        self._finished = True
        if self.mode is TimerMode.ONCE:
            self.elapsed = self.duration
            self._times_finished_this_tick = 1
        elif self.duration == 0:
            self.elapsed = 0.0
            self._times_finished_this_tick = 1
        else:
            times = int(self.elapsed // self.duration)
            self.elapsed -= times * self.duration
            self._times_finished_this_tick = times
        return self

    def reset(self) -> None:
        """Rewind the timer to its initial, unfinished state."""
        self.elapsed = 0.0
        self._finished = False
        self._times_finished_this_tick = 0

    def fraction(self) -> float:
        """Elapsed time as a fraction of the duration, in ``[0, 1]``."""
        if self.duration == 0:
            return 1.0
        return self.elapsed / self.duration