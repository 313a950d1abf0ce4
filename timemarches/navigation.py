"""Directional focus navigation and input bindings for the pause menu."""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Iterable, Optional

STICK_DEAD_ZONE = 0.15
"""Radial dead zone applied to the left stick when moving through menus."""


class CompassOctant(Enum):
    """The eight directions focus can move in."""

    NORTH = "north"
    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"

    def opposite(self) -> CompassOctant:
        """The direction pointing the other way."""
        members = list(CompassOctant)
        return members[(members.index(self) + 4) % len(members)]


class PlayingState(Enum):
    """Whether the game is running or paused in the inventory."""

    PLAYING = "playing"
    PAUSED = "paused"


class NavigationError(LookupError):
    """Focus could not be moved in the requested direction."""


def _sign(value: float) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


_DIRECTIONS = {
    (0, 1): CompassOctant.NORTH,
    (1, 1): CompassOctant.NORTH_EAST,
    (1, 0): CompassOctant.EAST,
    (1, -1): CompassOctant.SOUTH_EAST,
    (0, -1): CompassOctant.SOUTH,
    (-1, -1): CompassOctant.SOUTH_WEST,
    (-1, 0): CompassOctant.WEST,
    (-1, 1): CompassOctant.NORTH_WEST,
}


def direction_from_vector(x: float, y: float) -> Optional[CompassOctant]:
    """The octant a stick or key vector points to, or ``None`` at rest."""
    return _DIRECTIONS.get((_sign(x), _sign(y)))


_BINDINGS = {
    PlayingState.PLAYING: {
        "pause": ("Escape", "Tab", "KeyI", "GamepadStart", "GamepadNorth"),
    },
    PlayingState.PAUSED: {
        "unpause": ("Escape", "Tab", "KeyI", "GamepadStart"),
        "interact": ("Enter", "Space", "KeyE", "KeyJ", "GamepadSouth"),
        "menu_move": ("WASD", "ArrowKeys", "DPad", "LeftStick"),
    },
}


def bindings(context: PlayingState) -> dict[str, tuple[str, ...]]:
    """The actions available in ``context`` and the inputs that fire them.

    Every action fires on the press of one of its inputs.
    """
    try:
        return {action: inputs for action, inputs in _BINDINGS[context].items()}
    except KeyError:
        raise ValueError(f"no bindings for context {context!r}") from None


class NavigationMap:
    """A graph of focusable elements linked by compass directions."""

    def __init__(self) -> None:
        self._edges: dict[Hashable, dict[CompassOctant, Hashable]] = {}

    def _add_symmetrical(self, a: Hashable, b: Hashable, direction: CompassOctant) -> None:
        self._edges.setdefault(a, {})[direction] = b
        self._edges.setdefault(b, {})[direction.opposite()] = a

    def add_edges(self, entities: Iterable[Hashable], direction: CompassOctant) -> None:
        """Link each element to the next one in ``direction``, and back."""
        items = list(entities)
        for a, b in zip(items, items[1:]):
            self._add_symmetrical(a, b, direction)

    def add_looping_edges(self, entities: Iterable[Hashable], direction: CompassOctant) -> None:
        """Like :meth:`add_edges`, also linking the last element to the first."""
        items = list(entities)
        self.add_edges(items, direction)
        if len(items) > 1:
            self._add_symmetrical(items[-1], items[0], direction)

    def navigate(self, focus: Optional[Hashable], direction: CompassOctant) -> Hashable:
        """The element reached from ``focus`` in ``direction``."""
        if focus is None:
            raise NavigationError("no element is focused")
        try:
            return self._edges[focus][direction]
        except KeyError:
            raise NavigationError(
                f"no neighbor of {focus!r} to the {direction.value}"
            ) from None

    def clear(self) -> None:
        """Forget every link."""
        self._edges.clear()

    def __len__(self) -> int:
        return len(self._edges)