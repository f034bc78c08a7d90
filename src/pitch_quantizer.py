"""Frequency to equal-tempered pitch conversion."""

from __future__ import annotations

import math

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

MIN_PITCH = 0
MAX_PITCH = 127
REFERENCE_FREQUENCY = 440.0
REFERENCE_PITCH = 69


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def frequency_to_pitch(
    freq: float,
    reference_freq: float = REFERENCE_FREQUENCY,
    reference_pitch: int = REFERENCE_PITCH,
) -> int | None:
    """Nearest pitch number for ``freq``, or ``None`` when there is none.

    ``None`` covers non-positive or infinite frequencies and pitches that
    round outside ``[MIN_PITCH, MAX_PITCH]``.
    """
    if not freq > 0 or not math.isfinite(freq):
        return None
    if reference_freq <= 0:
        raise ValueError("reference_freq must be positive")
    pitch = _round_half_away(reference_pitch + 12.0 * math.log2(freq / reference_freq))
    if pitch < MIN_PITCH or pitch > MAX_PITCH:
        return None
    return pitch


def pitch_to_name(pitch: int) -> str:
    # Octave saturates at 0, so pitches 0-11 and 12-23 share octave 0.
    octave = max(pitch // 12 - 1, 0)
    return f"{NOTE_NAMES[pitch % 12]}{octave}"
