"""Timed fade-out of the on-screen parameter readout."""

from __future__ import annotations

FADE_DELAY_MS = 1000
FADE_STEP = 0.1


class ParameterFade:
    """Holds the readout fully opaque after a change, then fades it out.

    Each :meth:`tick` (nominally every 100 ms) lowers the alpha by one step
    once more than a second has passed since the last :meth:`touch`.
    """

    def __init__(self, alpha: float = 0.0, last_change_ms: int = 0) -> None:
        self.alpha = alpha
        self.last_change_ms = last_change_ms
        self.visible = alpha > 0.0

    def touch(self, now_ms: int) -> None:
        """Record a parameter change: show the readout at full opacity."""
        self.last_change_ms = now_ms
        self.alpha = 1.0
        self.visible = True

    def tick(self, now_ms: int) -> float:
        """Advance the fade and return the current alpha."""
        if self.alpha > 0.0 and now_ms - self.last_change_ms > FADE_DELAY_MS:
            self.alpha -= FADE_STEP
            if self.alpha < 0.0:
                self.alpha = 0.0
                self.visible = False
        return self.alpha