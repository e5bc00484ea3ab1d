"""Instrument selection menu shown on the screen module."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import NamedTuple, Optional

DEFAULT_INSTRUMENTS = ("Sampler", "JNO")
ITEM_HEIGHT = 50
PADDING = 10


class ItemBounds(NamedTuple):
    x: int
    y: int
    width: int
    height: int


class InstrumentMenu:
    """A vertical list of instruments with one selected entry."""

    def __init__(self, instruments: Sequence[str] = DEFAULT_INSTRUMENTS) -> None:
        self.instruments: list[str] = list(instruments)
        self.selected_index = 0
        self.visible = False
        self.on_instrument_selected: Optional[Callable[[str], None]] = None

    def select(self, index: int) -> None:
        """Select the entry at ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.instruments):
            self.selected_index = index

    def selected_instrument(self) -> str:
        """Name of the selected entry, or an empty string if none is valid."""
        if 0 <= self.selected_index < len(self.instruments):
            return self.instruments[self.selected_index]
        return ""

    def item_bounds(self, width: int) -> list[ItemBounds]:
        """Rectangles of the list entries for a menu ``width`` pixels wide."""
        return [
            ItemBounds(
                PADDING,
                PADDING + index * ITEM_HEIGHT,
                width - PADDING * 2,
                ITEM_HEIGHT - PADDING,
            )
            for index in range(len(self.instruments))
        ]