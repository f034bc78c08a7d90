"""Sliding-window scan of a sample buffer into a pitch histogram."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, fields
import json
import logging
import math
from pathlib import Path

import numpy as np

from audio_loader import SampleBuffer
from histogram import PitchHistogram
from pitch_quantizer import REFERENCE_FREQUENCY, REFERENCE_PITCH, frequency_to_pitch
from spectrum import SpectralTransformer, find_peak

logger = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    frame_length: int = 4096
    overlap: int = 2  # hop = frame_length // overlap
    min_frequency: float = 20.0
    min_magnitude: float = 0.01
    reference_frequency: float = REFERENCE_FREQUENCY
    reference_pitch: int = REFERENCE_PITCH
    top_k: int = 10
    workers: int = 1

    @property
    def hop_length(self) -> int:
        return self.frame_length // self.overlap

    def validate(self) -> None:
        if self.frame_length < 4:
            raise ValueError(f"frame_length must be >= 4 (got {self.frame_length})")
        if self.overlap < 1:
            raise ValueError(f"overlap must be >= 1 (got {self.overlap})")
        if self.hop_length < 1:
            raise ValueError(
                f"overlap ({self.overlap}) leaves no hop for frame_length ({self.frame_length})"
            )
        if self.min_frequency < 0 or self.min_magnitude < 0:
            raise ValueError("min_frequency and min_magnitude must be non-negative")
        if self.reference_frequency <= 0:
            raise ValueError("reference_frequency must be positive")
        if self.top_k < 1:
            raise ValueError(f"top_k must be >= 1 (got {self.top_k})")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1 (got {self.workers})")


def _coerce_field(name: str, value, default):
    # bool is an int subclass; reject it for numeric fields.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Config field {name!r} must be a number (got {value!r})")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Config field {name!r} must be finite (got {value!r})")
    if isinstance(default, int):
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"Config field {name!r} must be an integer (got {value!r})")
        return int(value)
    return float(value)


def load_config(path: str | Path) -> AnalysisConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must hold a JSON object")
    defaults = {f.name: f.default for f in fields(AnalysisConfig)}
    unknown = sorted(set(raw) - set(defaults))
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return AnalysisConfig(**{k: _coerce_field(k, v, defaults[k]) for k, v in raw.items()})


@dataclass
class ScanResult:
    histogram: PitchHistogram
    frames_scanned: int
    frames_accepted: int


def frame_offsets(total_samples: int, frame_length: int, hop_length: int) -> range:
    """Start offsets of every frame that fits entirely inside the buffer."""
    if total_samples < frame_length:
        return range(0)
    return range(0, total_samples - frame_length + 1, hop_length)


class FrameScanner:
    def __init__(self, cfg: AnalysisConfig | None = None) -> None:
        self.cfg = cfg or AnalysisConfig()
        self.cfg.validate()

    def detect_frame_pitch(
        self,
        transformer: SpectralTransformer,
        frame: np.ndarray,
        sample_rate: float,
    ) -> int | None:
        """Quantized pitch of one frame, or ``None`` if the frame is rejected."""
        spectrum = transformer.transform(frame)
        peak_bin, magnitude = find_peak(spectrum)
        freq = transformer.bin_frequency(peak_bin, sample_rate)
        if freq < self.cfg.min_frequency or magnitude < self.cfg.min_magnitude:
            return None
        return frequency_to_pitch(
            freq,
            reference_freq=self.cfg.reference_frequency,
            reference_pitch=self.cfg.reference_pitch,
        )

    def _scan_offsets(self, buffer: SampleBuffer, offsets: range) -> PitchHistogram:
        # One transformer per call so concurrent chunks never share a scratch buffer.
        transformer = SpectralTransformer(self.cfg.frame_length)
        histogram = PitchHistogram()
        samples = buffer.samples
        size = self.cfg.frame_length
        for start in offsets:
            pitch = self.detect_frame_pitch(transformer, samples[start : start + size], buffer.sample_rate)
            if pitch is None:
                continue
            histogram.increment(pitch)
        return histogram

    def _split(self, offsets: range) -> list[range]:
        n_chunks = min(self.cfg.workers, len(offsets))
        bounds = np.linspace(0, len(offsets), num=n_chunks + 1).astype(int)
        return [offsets[lo:hi] for lo, hi in zip(bounds[:-1], bounds[1:]) if hi > lo]

    def scan(self, buffer: SampleBuffer) -> ScanResult:
        offsets = frame_offsets(buffer.samples.size, self.cfg.frame_length, self.cfg.hop_length)
        logger.debug(
            "Scanning %d samples @ %.0f Hz: frame=%d hop=%d frames=%d",
            buffer.samples.size,
            buffer.sample_rate,
            self.cfg.frame_length,
            self.cfg.hop_length,
            len(offsets),
        )

        if self.cfg.workers <= 1 or len(offsets) < 2:
            histogram = self._scan_offsets(buffer, offsets)
        else:
            chunks = self._split(offsets)
            with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
                partials = list(pool.map(lambda chunk: self._scan_offsets(buffer, chunk), chunks))
            # Merge in chunk order so tie order matches the sequential scan.
            histogram = PitchHistogram()
            for partial in partials:
                histogram.merge(partial)

        accepted = histogram.total()
        logger.info(
            "Scanned %d frames, accepted %d, %d distinct pitches",
            len(offsets),
            accepted,
            len(histogram),
        )
        return ScanResult(histogram=histogram, frames_scanned=len(offsets), frames_accepted=accepted)
