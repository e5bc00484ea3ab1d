"""Sample slots A-E: the audio loaded into each slot and its playback parameters."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

NUM_SLOTS = 5
DEFAULT_SAMPLE_RATE = 44100.0
FADE_IN_SAMPLES = 256
_SILENT_LEAD = 2


def preprocess_sample(data: Sequence[float]) -> list[float]:
    """Return a click-reduced copy of ``data``.

    The mean is subtracted (DC removal), the first two samples are zeroed and
    the following samples (at most 256) are faded in along a quarter sine.
    """
    if not data:
        return []
    mean = math.fsum(data) / len(data)
    out = [x - mean for x in data]
    out[:_SILENT_LEAD] = [0.0] * min(_SILENT_LEAD, len(out))

    fade = min(FADE_IN_SAMPLES, len(out) - _SILENT_LEAD)
    for step in range(max(fade, 0)):
        out[_SILENT_LEAD + step] *= math.sin(step / fade * (math.pi / 2))
    return out


@dataclass
class SlotParameters:
    """Per-slot playback settings applied to notes started from that slot."""

    repitch_semitones: float = 0.0
    start_point: int = 0
    end_point: int = 0
    sample_gain: float = 1.0
    attack_ms: float = 800.0
    decay_ms: float = 0.0
    sustain: float = 1.0
    release_ms: float = 1000.0
    loop_enabled: bool = False
    loop_start_point: int = 0
    loop_end_point: int = 0

    def set_adsr(self, attack_ms: float, decay_ms: float, sustain: float, release_ms: float) -> None:
        self.attack_ms = attack_ms
        self.decay_ms = decay_ms
        self.sustain = sustain
        self.release_ms = release_ms

    def set_loop_points(self, start: int, end: int) -> None:
        self.loop_start_point = start
        self.loop_end_point = end


@dataclass(frozen=True)
class SlotSample:
    """Preprocessed audio of one slot; ``right`` is empty for mono material."""

    left: tuple[float, ...] = ()
    right: tuple[float, ...] = ()
    sample_rate: float = DEFAULT_SAMPLE_RATE

    @property
    def has_sample(self) -> bool:
        return bool(self.left)

    @property
    def is_stereo(self) -> bool:
        return bool(self.right)

    def __len__(self) -> int:
        return len(self.left)


def _extract(channels: Sequence[Sequence[float]]) -> tuple[list[float], list[float]]:
    """Preprocess the first one or two channels, sized to the first channel."""
    if not channels:
        return [], []
    num_samples = len(channels[0])
    if num_samples == 0:
        return [], []
    left = preprocess_sample(channels[0])
    right: list[float] = []
    if len(channels) >= 2:
        raw = list(channels[1][:num_samples])
        raw.extend([0.0] * (num_samples - len(raw)))
        right = preprocess_sample(raw)
    return left, right


class SlotBank:
    """Holds the five sample slots, their parameters, and a fallback sample.

    Out-of-range slot indices are ignored on writes; reads give an empty
    sample, the default sample rate, and default parameters.
    """

    def __init__(self) -> None:
        self._samples = [SlotSample() for _ in range(NUM_SLOTS)]
        self._parameters = [SlotParameters() for _ in range(NUM_SLOTS)]
        self._default = SlotSample()

    @staticmethod
    def _valid(slot: int) -> bool:
        return 0 <= slot < NUM_SLOTS

    def set_sample(self, slot: int, channels: Sequence[Sequence[float]], sample_rate: float) -> None:
        """Load audio (a sequence of channels) into ``slot`` after preprocessing."""
        if not self._valid(slot):
            return
        left, right = _extract(channels)
        self._samples[slot] = SlotSample(tuple(left), tuple(right), float(sample_rate))

    def set_default_sample(self, channels: Sequence[Sequence[float]], sample_rate: float) -> None:
        """Set the fallback sample used when no slot is loaded.

        The sample rate is always taken; empty audio leaves the sample unchanged.
        """
        left, right = _extract(channels)
        if not left:
            self._default = SlotSample(self._default.left, self._default.right, float(sample_rate))
            return
        self._default = SlotSample(tuple(left), tuple(right), float(sample_rate))

    def default_sample(self) -> SlotSample:
        return self._default

    def sample(self, slot: int) -> SlotSample:
        if not self._valid(slot):
            return SlotSample()
        return self._samples[slot]

    def sample_rate(self, slot: int) -> float:
        if not self._valid(slot):
            return DEFAULT_SAMPLE_RATE
        return self._samples[slot].sample_rate

    def parameters(self, slot: int) -> SlotParameters:
        """The live parameters of ``slot``; a detached default for invalid slots."""
        if not self._valid(slot):
            return SlotParameters()
        return self._parameters[slot]

    def loaded_slots(self) -> list[int]:
        """Indices of slots holding audio, in ascending order."""
        return [index for index, sample in enumerate(self._samples) if sample.has_sample]