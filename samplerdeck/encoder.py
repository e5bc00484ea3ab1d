"""Endless rotary encoder with a push button in its centre."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Optional

SLIDER_MIN = 0.0
SLIDER_MAX = 100.0
SLIDER_INTERVAL = 0.1
SLIDER_CENTRE = 50.0
WRAP_THRESHOLD = 50.0
_TWO_PI = 2.0 * math.pi


def center_hit(x: int, y: int, size: int) -> bool:
    """True if the point lies in the round centre button of a ``size``-wide square."""
    centre = size // 2
    radius = size // 2
    dx = x - centre
    dy = y - centre
    return dx * dx + dy * dy <= radius * radius


def _snap(slider_value: float) -> float:
    clamped = min(max(float(slider_value), SLIDER_MIN), SLIDER_MAX)
    steps = round((clamped - SLIDER_MIN) / SLIDER_INTERVAL)
    return min(SLIDER_MIN + steps * SLIDER_INTERVAL, SLIDER_MAX)


class EndlessEncoder:
    """An encoder backed by a 0-100 slider that recentres at its ends.

    Moving the slider accumulates a continuous rotation angle; jumps larger
    than half the range are taken as wrap-arounds. Value callbacks receive the
    slider position mapped to 0.0-1.0.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._slider = SLIDER_CENTRE
        self._last_slider = SLIDER_CENTRE
        self._rotation = 0.0
        self.on_value_changed: Optional[Callable[[float], None]] = None
        self.on_button_pressed: Optional[Callable[[], None]] = None
        self.on_drag_start: Optional[Callable[[], None]] = None
        self.on_drag_end: Optional[Callable[[], None]] = None

    @property
    def rotation_angle(self) -> float:
        return self._rotation

    def value(self) -> float:
        """Current slider position as 0.0-1.0."""
        return self._slider / SLIDER_MAX

    def set_value(self, value: float) -> None:
        """Move the slider to ``value`` (0.0-1.0) without notifying anyone."""
        self._slider = _snap(value * SLIDER_MAX)

    def move_to(self, slider_value: float) -> float:
        """Move the slider as a user drag would; return the notified value."""
        current = _snap(slider_value)
        self._slider = current
        delta = current - self._last_slider
        if abs(delta) > WRAP_THRESHOLD:
            delta = delta - SLIDER_MAX if delta > 0 else delta + SLIDER_MAX

        self._rotation += delta * 0.01 * _TWO_PI

        if current >= 99.9 or current <= 0.1:
            self._slider = SLIDER_CENTRE
            self._last_slider = SLIDER_CENTRE
        else:
            self._last_slider = current

        if abs(self._rotation) > _TWO_PI * 100.0:
            full_turns = math.floor(self._rotation / _TWO_PI)
            self._rotation -= full_turns * _TWO_PI

        normalized = current / SLIDER_MAX
        if self.on_value_changed is not None:
            self.on_value_changed(normalized)
        return normalized

    def display_angle(self) -> float:
        """Rotation folded into 0 <= angle < 2*pi, for drawing the indicator."""
        angle = math.fmod(self._rotation, _TWO_PI)
        if angle < 0.0:
            angle += _TWO_PI
        return angle

    def press(self) -> bool:
        """Press the centre button; True if a handler ran."""
        if self.on_button_pressed is None:
            return False
        self.on_button_pressed()
        return True

    @contextmanager
    def drag(self) -> Iterator[EndlessEncoder]:
        """Bracket a drag gesture with the drag start and end callbacks."""
        if self.on_drag_start is not None:
            self.on_drag_start()
        try:
            yield self
        finally:
            if self.on_drag_end is not None:
                self.on_drag_end()