"""Sprite-sheet animation sequences and their controllers."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from timemarches.timer import Timer, TimerMode


class AnimationMode(Enum):
    """What happens when a sequence runs out of frames."""

    REPEAT = "repeat"
    ONCE = "once"
    DESPAWN = "despawn"


@dataclass
class AnimationIndices:
    """An ordered, non-empty list of atlas frames with a play cursor."""

    mode: AnimationMode
    seq: list[int]
    index: int = 0

    def __post_init__(self) -> None:
        self.seq = list(self.seq)
        if not self.seq:
            raise ValueError("tried to insert empty sequence into AnimationIndices")

    @classmethod
    def repeating(cls, seq: Iterable[int]) -> AnimationIndices:
        """A sequence that loops forever."""
        return cls(AnimationMode.REPEAT, list(seq))

    @classmethod
    def once_despawn(cls, seq: Iterable[int]) -> AnimationIndices:
        """A sequence that plays once and then asks for its owner to be removed."""
        return cls(AnimationMode.DESPAWN, list(seq))

    def start(self) -> int:
        """The first frame of the sequence."""
        return self.seq[0]

    def advance(self) -> Optional[int]:
        """Return the next frame, or ``None`` when a non-looping sequence ends."""
        if self.index < len(self.seq):
            frame = self.seq[self.index]
            self.index += 1
            return frame
        if self.mode is AnimationMode.REPEAT:
            self.index = 1
            return self.seq[0]
        return None


@dataclass
class AnimationController:
    """Steps through an :class:`AnimationIndices` on a repeating timer."""

    indices: AnimationIndices
    timer: Timer
    frame: int = field(init=False)
    despawned: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.frame = self.indices.start()

    @classmethod
    def from_seconds(cls, indices: AnimationIndices, seconds: float) -> AnimationController:
        """A controller that advances one frame every ``seconds``."""
        return cls(indices, Timer.from_seconds(seconds, TimerMode.REPEATING))

    def update(self, delta: float) -> Optional[int]:
        """Advance time; return the new frame if it changed.

        When a despawning sequence is exhausted, :attr:`despawned` becomes true.
        """
        self.timer.tick(delta)
        if not self.timer.just_finished:
            return None
        frame = self.indices.advance()
        if frame is not None:
            self.frame = frame
            return frame
        if self.indices.mode is AnimationMode.DESPAWN:
            self.despawned = True
        return None


@dataclass
class AnimationSprite:
    """A request to animate the sprite sheet at ``path``."""

    path: str
    indices: AnimationIndices
    interval: float

    @classmethod
    def once(cls, path: str, interval: float, indices: Iterable[int]) -> AnimationSprite:
        """Play the frames once, then despawn."""
        return cls(path, AnimationIndices.once_despawn(indices), interval)

    @classmethod
    def repeating(cls, path: str, interval: float, indices: Iterable[int]) -> AnimationSprite:
        """Loop the frames forever."""
        return cls(path, AnimationIndices.repeating(indices), interval)


@dataclass(frozen=True)
class GridLayout:
    """A sprite sheet cut into equally sized tiles, row by row."""

    tile_width: int
    tile_height: int
    columns: int
    rows: int

    def __post_init__(self) -> None:
        if min(self.tile_width, self.tile_height, self.columns, self.rows) <= 0:
            raise ValueError("grid layout dimensions must be positive")

    @property
    def frame_count(self) -> int:
        return self.columns * self.rows

    def frame_rect(self, index: int) -> tuple[int, int, int, int]:
        """The ``(x, y, width, height)`` of the tile at ``index``."""
        if not 0 <= index < self.frame_count:
            raise IndexError(f"frame {index} outside layout of {self.frame_count} frames")
        row, column = divmod(index, self.columns)
        return (
            column * self.tile_width,
            row * self.tile_height,
            self.tile_width,
            self.tile_height,
        )


class LayoutRegistry:
    """Maps sprite-sheet paths to their grid layouts."""

    def __init__(self) -> None:
        self._layouts: dict[str, GridLayout] = {}

    def register(self, path: str, layout: GridLayout) -> LayoutRegistry:
        """Register ``layout`` for ``path``; returns the registry for chaining."""
        self._layouts[path] = layout
        return self

    def __contains__(self, path: object) -> bool:
        return path in self._layouts

    def __getitem__(self, path: str) -> GridLayout:
        try:
            return self._layouts[path]
        except KeyError:
            raise KeyError(f"layout not registered for path: {path}") from None

    def controller_for(self, sprite: AnimationSprite) -> AnimationController:
        """Build the controller for ``sprite``, showing its first frame."""
        if sprite.path not in self._layouts:
            raise KeyError(f"layout not registered for path: {sprite.path}")
        indices = copy.deepcopy(sprite.indices)
        indices.index = 1
        return AnimationController.from_seconds(indices, sprite.interval)