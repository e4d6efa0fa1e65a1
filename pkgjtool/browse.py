"""List navigation, size and speed formatting for the title browser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["SpeedMeter", "ListCursor", "friendly_size", "format_speed"]

_UINT64 = 0xFFFFFFFFFFFFFFFF
_SPEED_INTERVAL_MS = 1000


def friendly_size(size: int) -> str:
    """Format a byte count for display; non-positive sizes give an empty string."""
    if size <= 0:
        return ""
    if size < 1000:
        return f"{size} B"
    if size < 1000 * 1000:
        return f"{size / 1024:.2f} KB"
    if size < 1000 * 1000 * 1000:
        return f"{size / 1024 / 1024:.2f} MB"
    return f"{size / 1024 / 1024 / 1024:.2f} GB"


def format_speed(speed: int) -> str:
    """Format a transfer rate given in bytes per second."""
    if speed > 1000 * 1024:
        return f"{speed / 1024 / 1024:.3g} MB/s"
    if speed > 1000:
        return f"{speed / 1024:.3g} KB/s"
    return f"{speed} B/s"


@dataclass
class SpeedMeter:
    """Download speed estimate, refreshed at most once per second."""

    last_time: int = 0
    last_offset: int = 0
    last_speed: int = 0

    def speed(self, offset: int, now: int) -> int:
        """Return the speed in bytes per second given the current offset and time in ms."""
        elapsed = (now - self.last_time) & _UINT64
        if elapsed < _SPEED_INTERVAL_MS:
            return self.last_speed
        transferred = (offset - self.last_offset) & _UINT64
        self.last_speed = (transferred * 1000 // elapsed) & _UINT64
        self.last_offset = offset
        self.last_time = now
        return self.last_speed


@dataclass
class ListCursor:
    """Scroll position and selection in a list of ``count`` items.

    ``page`` is the number of rows a page step moves by; ``visible`` is the
    number of rows used when the list shrinks and the view is repositioned
    (defaults to ``page``).
    """

    count: int = 0
    page: int = 1
    visible: Optional[int] = None
    first: int = 0
    selected: int = 0

    def __post_init__(self) -> None:
        if self.visible is None:
            self.visible = self.page

    @classmethod
    def from_layout(cls, count: int, avail_height: int, line_height: int) -> "ListCursor":
        """Build a cursor for a list area ``avail_height`` pixels tall."""
        page = avail_height // line_height - 1
        visible = (avail_height + line_height - 1) // line_height - 1
        return cls(count=count, page=page, visible=visible)

    def move_up(self) -> None:
        """Select the previous item, wrapping to the end of the list."""
        if self.count == 0:
            return
        if self.selected == self.first and self.first > 0:
            self.first -= 1
            self.selected = self.first
        elif self.selected > 0:
            self.selected -= 1
        else:
            self.selected = self.count - 1
            self.first = self.count - self.page - 1 if self.count > self.page else 0

    def move_down(self) -> None:
        """Select the next item, wrapping to the start of the list."""
        if self.count == 0:
            return
        if self.selected == self.count - 1:
            self.selected = self.first = 0
        elif self.selected == self.first + self.page:
            self.first += 1
            self.selected += 1
        else:
            self.selected += 1

    def page_left(self) -> None:
        """Move one page towards the start of the list."""
        self.first = 0 if self.first < self.page else self.first - self.page
        self.selected = 0 if self.selected < self.page else self.selected - self.page

    def page_right(self) -> None:
        """Move one page towards the end of the list."""
        if self.count == 0:
            return
        if self.first + self.page < self.count - 1:
            self.first += self.page
            self.selected = min(self.selected + self.page, self.count - 1)

    def reposition(self, count: int) -> None:
        """Adjust the view after the list changed to ``count`` items."""
        self.count = count
        if self.first + self.selected < count:
            return
        visible = self.visible if self.visible is not None else self.page
        if count > visible:
            delta = self.selected - self.first
            self.first = count - visible
            self.selected = self.first + delta
        else:
            self.first = 0
            self.selected = 0