"""
Shared fixtures for the test suite.

Synthetic signals only — no audio files are decoded.
"""

from collections.abc import Callable

import numpy as np
import pytest

from audio_loader import SampleBuffer

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SAMPLE_RATE: int = 44100
"""CD sample rate used by most tests."""

FRAME_LENGTH: int = 4096
HOP_LENGTH: int = 2048


def make_sine(
    freq: float,
    seconds: float = 2.0,
    sample_rate: int = SAMPLE_RATE,
    amplitude: float = 0.5,
) -> np.ndarray:
    t = np.arange(int(round(seconds * sample_rate))) / sample_rate
    return amplitude * np.sin(2.0 * np.pi * freq * t)


@pytest.fixture
def sine_buffer() -> Callable[..., SampleBuffer]:
    """Factory: sine_buffer(freq, seconds=2.0, sample_rate=44100, amplitude=0.5)."""

    def _make(
        freq: float,
        seconds: float = 2.0,
        sample_rate: int = SAMPLE_RATE,
        amplitude: float = 0.5,
    ) -> SampleBuffer:
        return SampleBuffer(
            samples=make_sine(freq, seconds, sample_rate, amplitude),
            sample_rate=sample_rate,
        )

    return _make


@pytest.fixture
def a4_buffer(sine_buffer) -> SampleBuffer:
    """Two seconds of a 440 Hz sine at 44.1 kHz (88200 samples, 42 frames)."""
    return sine_buffer(440.0)


@pytest.fixture
def silent_buffer() -> SampleBuffer:
    return SampleBuffer(samples=np.zeros(2 * SAMPLE_RATE), sample_rate=SAMPLE_RATE)
