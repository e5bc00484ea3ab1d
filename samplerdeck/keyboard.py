"""Computer keyboard played as a piano: key mapping and held-note tracking."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Optional, Union

Key = Union[str, int]

# Middle octave from C4 (white and black keys), then a lower octave of white keys.
KEY_NOTES: dict[str, int] = {
    "A": 60, "W": 61, "S": 62, "E": 63, "D": 64, "F": 65, "T": 66,
    "G": 67, "Y": 68, "H": 69, "U": 70, "J": 71, "K": 72,
    "Z": 48, "X": 50, "C": 52, "V": 53, "B": 55, "N": 57, "M": 59,
    ",": 60, ".": 62, "/": 64,
}

NoteSender = Callable[[int, float, bool], None]


def _key_name(key: Key) -> Optional[str]:
    if isinstance(key, int):
        if key < 0 or key > 0x10FFFF:
            return None
        key = chr(key)
    if len(key) != 1:
        return None
    return key.upper()


def key_to_note(key: Key) -> Optional[int]:
    """MIDI note for a key (character or key code), or None if unmapped."""
    name = _key_name(key)
    if name is None:
        return None
    return KEY_NOTES.get(name)


class KeyboardState:
    """Tracks which notes are held and emits note-on / note-off through ``send``.

    ``send`` is called as ``send(note, velocity, note_on)``.
    """

    def __init__(self, send: Optional[NoteSender] = None) -> None:
        self.send = send
        self.pressed = [False] * 128

    def _emit(self, note: int, velocity: float, note_on: bool) -> None:
        if self.send is not None:
            self.send(note, velocity, note_on)

    def press(self, key: Key) -> bool:
        """Start the note for ``key`` unless it is unmapped or already held."""
        note = key_to_note(key)
        if note is None or not 0 <= note < 128 or self.pressed[note]:
            return False
        self.pressed[note] = True
        self._emit(note, 1.0, True)
        return True

    def release_up(self, keys_down: Iterable[Key]) -> list[int]:
        """Stop held notes whose mapped keys are not in ``keys_down``.

        Returns the released notes in key-mapping order.
        """
        down = {name for name in map(_key_name, keys_down) if name is not None}
        released = []
        for name, note in KEY_NOTES.items():
            if name not in down and 0 <= note < 128 and self.pressed[note]:
                self.pressed[note] = False
                self._emit(note, 0.0, False)
                released.append(note)
        return released