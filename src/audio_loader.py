"""Decoding audio files into mono sample buffers."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

import librosa
import numpy as np

logger = logging.getLogger(__name__)


class AudioDecodeError(ValueError):
    """Raised when an audio file exists but cannot be decoded."""


@dataclass(frozen=True)
class SampleBuffer:
    """Mono samples in roughly [-1, 1] plus their sample rate in Hz."""

    samples: np.ndarray
    sample_rate: float

    def __post_init__(self) -> None:
        samples = np.array(self.samples, dtype=np.float64)
        if samples.ndim != 1:
            raise ValueError(f"samples must be 1D (mono), got shape {samples.shape}")
        if not self.sample_rate > 0:
            raise ValueError(f"sample_rate must be positive (got {self.sample_rate})")
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)
        object.__setattr__(self, "sample_rate", float(self.sample_rate))

    @property
    def duration_seconds(self) -> float:
        return self.samples.size / self.sample_rate


def load_audio(path: str | Path, sr: int | None = None) -> SampleBuffer:
    """Decode ``path`` to mono at its native rate (or ``sr`` if given)."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Audio file not found: {path}")
    try:
        y, sr_loaded = librosa.load(path, sr=sr, mono=True)
    except Exception as exc:
        raise AudioDecodeError(f"Could not decode audio file {path}: {exc}") from exc
    if y.size == 0:
        logger.warning("Audio file %s contains no samples", path)
    logger.debug("Loaded %s: %d samples @ %s Hz", path, y.size, sr_loaded)
    return SampleBuffer(samples=y, sample_rate=sr_loaded)
