"""Comb and allpass filters plus the tuning table of the Freeverb-style reverb."""

from __future__ import annotations

NUM_COMBS = 8
NUM_ALLPASSES = 4

MUTED = 0.0
FIXED_GAIN = 0.015
SCALE_WET = 3.0
SCALE_DRY = 2.0
SCALE_DAMP = 0.8
SCALE_ROOM = 0.28
OFFSET_ROOM = 0.7
INITIAL_ROOM = 0.5
INITIAL_DAMP = 0.25
INITIAL_WET = 1.0 / SCALE_WET
INITIAL_DRY = 0.0
INITIAL_WIDTH = 1.0
INITIAL_INPUT_WIDTH = 0.0
INITIAL_MODE = 0.0
FREEZE_MODE = 0.5
STEREO_SPREAD = 23

MAX_SAMPLE_RATE_MULTIPLIER = 4
SILENCE_THRESHOLD = 80.0  # dB (absolute)

ALLPASS_FEEDBACK = 0.5

# Delay lengths in samples at 44.1 kHz; the right channel adds STEREO_SPREAD.
COMB_TUNINGS = (1116, 1188, 1277, 1356, 1422, 1491, 1557, 1617)
ALLPASS_TUNINGS = (556, 441, 341, 225)


def scaled_buffer_size(sample_rate: int, value: int) -> int:
    """Scale a 44.1 kHz delay length to ``sample_rate``, never below one sample."""
    result = value * (sample_rate / 44100.0)
    return int(max(result, 1.0))


def _check_size(size: int) -> int:
    if size < 1:
        raise ValueError(f"filter buffer size must be positive, got {size}")
    return size


class CombFilter:
    """Feedback comb filter with a one-pole low-pass in the feedback path."""

    def __init__(self, size: int) -> None:
        self.buffer = [0.0] * _check_size(size)
        self.feedback = 0.0
        self.filterstore = 0.0
        self.damp1 = 0.0
        self.damp2 = 1.0
        self._index = 0

    @property
    def size(self) -> int:
        return len(self.buffer)

    def set_damp(self, value: float) -> None:
        self.damp1 = value
        self.damp2 = 1.0 - value

    def process(self, value: float) -> float:
        output = self.buffer[self._index]
        self.filterstore = output * self.damp2 + self.filterstore * self.damp1
        self.buffer[self._index] = value + self.filterstore * self.feedback
        self._index = (self._index + 1) % len(self.buffer)
        return output

    def mute(self) -> None:
        self.buffer = [0.0] * len(self.buffer)


class AllpassFilter:
    """Schroeder allpass filter."""

    def __init__(self, size: int) -> None:
        self.buffer = [0.0] * _check_size(size)
        self.feedback = ALLPASS_FEEDBACK
        self._index = 0

    @property
    def size(self) -> int:
        return len(self.buffer)

    def process(self, value: float) -> float:
        bufout = self.buffer[self._index]
        output = -value + bufout
        self.buffer[self._index] = value + bufout * self.feedback
        self._index = (self._index + 1) % len(self.buffer)
        return output

    def mute(self) -> None:
        self.buffer = [0.0] * len(self.buffer)