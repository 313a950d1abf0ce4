"""Paged vertical scrolling for the inventory grid."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class VerticalScroll:
    """A scrollable area of ``total_pages`` pages, each ``scroll_step`` tall."""

    total_pages: int
    scroll_step: float
    current_page: int = 0

    def __post_init__(self) -> None:
        if self.total_pages < 0:
            raise ValueError("a scroll area cannot have a negative number of pages")

    @property
    def _last_page(self) -> int:
        return max(self.total_pages - 1, 0)

    def scroll_up(self) -> int:
        """Move up a page, stopping at the first; returns the current page."""
        self.current_page = max(self.current_page - 1, 0)
        return self.current_page

    def scroll_down(self) -> int:
        """Move down a page, stopping at the last; returns the current page."""
        self.current_page = min(self.current_page + 1, self._last_page)
        return self.current_page

    def offset(self) -> float:
        """The vertical scroll offset of the current page."""
        return self.current_page * self.scroll_step

    def up_visible(self) -> bool:
        """Whether the "Up" button is shown."""
        return self.current_page != 0

    def down_visible(self) -> bool:
        """Whether the "Down" button is shown."""
        return self.total_pages > 0 and self.current_page != self.total_pages - 1