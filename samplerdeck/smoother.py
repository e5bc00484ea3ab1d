"""Linear ramp for parameter changes, to avoid zipper noise and clicks."""

from __future__ import annotations


class LinearSmoother:
    """Moves a value towards a target in equal steps, one per sample."""

    def __init__(self) -> None:
        self._current = 0.0
        self._target = 0.0
        self._step = 0.0
        self._remaining = 0

    def set_target(self, target: float, num_samples: int) -> None:
        """Ramp to ``target`` over ``num_samples``; jump at once if that is not positive."""
        self._target = float(target)
        if num_samples > 0:
            self._step = (self._target - self._current) / num_samples
            self._remaining = int(num_samples)
        else:
            self._current = self._target
            self._remaining = 0

    def set_value_immediate(self, value: float) -> None:
        """Set both current and target value, cancelling any ramp."""
        self._current = float(value)
        self._target = float(value)
        self._step = 0.0
        self._remaining = 0

    def next_value(self) -> float:
        """Advance one sample and return the new value."""
        if self._remaining > 0:
            self._current += self._step
            self._remaining -= 1
            if self._remaining == 0:
                self._current = self._target
        else:
            self._current = self._target
        return self._current

    @property
    def current_value(self) -> float:
        return self._current

    @property
    def is_smoothing(self) -> bool:
        return self._remaining > 0