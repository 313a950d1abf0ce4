"""The player's pockets and the paused inventory menu."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from timemarches.audio import Volume
from timemarches.navigation import (
    CompassOctant,
    NavigationError,
    NavigationMap,
    direction_from_vector,
)
from timemarches.props import SoundCue
from timemarches.scroll import VerticalScroll
from timemarches.timer import Timer, TimerMode

logger = logging.getLogger(__name__)

COLUMNS = 3
"""Slots per row in the inventory grid."""

PAGE_SIZE = 200.0
"""Height scrolled by one page of the inventory grid."""

HEADER = "Pockets"
FONT = "fonts/raster-forge.ttf"
PICKUP_SOUND = "audio/sfx/pickup.wav"
NAVIGATE_SOUND = "medium.wav"
PRESS_RESET_SECONDS = 0.3

TEXT_NORMAL = "white"
TEXT_FOCUSED = "black"
NO_COLOR = "none"

Slot = tuple[int, int]


@dataclass(frozen=True)
class InventoryItem:
    """Minimal information about something the player carries."""

    name: str
    description: str


@dataclass
class Inventory:
    """The items the player carries, in the order they were picked up."""

    items: list[InventoryItem] = field(default_factory=list)

    @classmethod
    def starting(cls) -> Inventory:
        """What the player carries when the game begins."""
        return cls(
            [
                InventoryItem("Pencil", "You keep it on you at all times."),
                InventoryItem("Note (1)", "A note."),
            ]
        )

    def pick_up(self, item: InventoryItem) -> SoundCue:
        """Add ``item`` to the inventory; returns the pickup sound to play."""
        self.items.append(item)
        return SoundCue(PICKUP_SOUND, Volume.from_linear(1.0))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass
class InventoryMenu:
    """The grid of inventory slots shown while paused, with keyboard focus."""

    slots: dict[Slot, InventoryItem]
    navigation: NavigationMap
    scroll: VerticalScroll
    focus: Optional[Slot] = None
    focus_visible: bool = True
    header: str = HEADER
    _reset_timers: dict[Slot, Optional[Timer]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        for slot in self.slots:
            self._reset_timers.setdefault(slot, None)

    @classmethod
    def build(cls, inventory: Inventory) -> InventoryMenu:
        """Lay the inventory out row by row and link the slots for navigation.

        Rows loop around east to west; columns stop at their ends.
        """
        items = list(inventory)
        rows = -(-len(items) // COLUMNS)
        slots: dict[Slot, InventoryItem] = {
            divmod(position, COLUMNS): item for position, item in enumerate(items)
        }

        navigation = NavigationMap()
        for row in range(rows):
            in_row = [(row, col) for col in range(COLUMNS) if (row, col) in slots]
            navigation.add_looping_edges(in_row, CompassOctant.EAST)
        for col in range(COLUMNS):
            in_column = [(row, col) for row in range(rows) if (row, col) in slots]
            navigation.add_edges(in_column, CompassOctant.SOUTH)

        focus = (0, 0) if (0, 0) in slots else None
        return cls(slots, navigation, VerticalScroll(rows, PAGE_SIZE), focus)

    @property
    def rows(self) -> int:
        return self.scroll.total_pages

    def _check(self, slot: Slot) -> None:
        if slot not in self.slots:
            raise KeyError(f"no inventory slot at {slot!r}")

    def item_at(self, slot: Slot) -> InventoryItem:
        """The item shown in ``slot``."""
        self._check(slot)
        return self.slots[slot]

    def navigate(self, x: float, y: float) -> Optional[SoundCue]:
        """Move focus in the direction of ``(x, y)``; returns a sound on success."""
        direction = direction_from_vector(x, y)
        if direction is None:
            return None
        try:
            self.focus = self.navigation.navigate(self.focus, direction)
        except NavigationError as error:
            logger.debug("nowhere to navigate: %s", error)
            return None
        return SoundCue(NAVIGATE_SOUND, Volume.from_decibels(-6.0))

    def hover(self, slot: Slot) -> bool:
        """Focus ``slot`` when the pointer moves over it; false for non-slots."""
        if slot not in self.slots:
            return False
        self.focus = slot
        return True

    def click(self, slot: Slot) -> bool:
        """Press ``slot``; returns whether the click was handled."""
        if slot not in self._reset_timers:
            return False
        self._reset_timers[slot] = Timer.from_seconds(PRESS_RESET_SECONDS, TimerMode.ONCE)
        return True

    def interact(self) -> bool:
        """Press the focused slot, as the interact button does."""
        if self.focus is None:
            return False
        return self.click(self.focus)

    def tick(self, delta: float) -> list[Slot]:
        """Advance press timers; returns the slots whose press just ended."""
        reset: list[Slot] = []
        for slot, timer in self._reset_timers.items():
            if timer is not None and timer.tick(delta).just_finished:
                reset.append(slot)
        return reset

    def text_color(self, slot: Slot) -> str:
        """Slot labels invert while their slot has focus."""
        self._check(slot)
        return TEXT_FOCUSED if self.focus == slot else TEXT_NORMAL

    def background_color(self, slot: Slot) -> str:
        """The focused slot is highlighted when focus is visible."""
        self._check(slot)
        if self.focus == slot and self.focus_visible:
            return TEXT_NORMAL
        return NO_COLOR

    def close(self) -> None:
        """Tear the menu down, forgetting its navigation links."""
        self.navigation.clear()
        self.focus = None