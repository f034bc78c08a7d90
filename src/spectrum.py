"""Per-frame spectral transform and dominant-bin picking."""

from __future__ import annotations

import numpy as np

from window import hann_window


class SpectralTransformer:
    """Forward FFT of fixed-length frames.

    The window and the complex scratch buffer depend only on the frame
    length, so they are built once and reused for every frame.
    """

    def __init__(self, frame_length: int) -> None:
        if frame_length < 4:
            raise ValueError(f"frame_length must be >= 4 (got {frame_length})")
        self.frame_length = int(frame_length)
        self.window = hann_window(self.frame_length)
        self._buffer = np.zeros(self.frame_length, dtype=np.complex128)

    def transform(self, frame: np.ndarray) -> np.ndarray:
        """Window ``frame`` and return its spectrum.

        The returned array is the shared scratch buffer and is overwritten
        by the next call.
        """
        frame = np.asarray(frame, dtype=np.float64)
        if frame.shape != (self.frame_length,):
            raise ValueError(
                f"frame must have shape ({self.frame_length},), got {frame.shape}"
            )
        self._buffer[:] = np.fft.fft(frame * self.window)
        return self._buffer

    def bin_frequency(self, bin_index: int, sample_rate: float) -> float:
        return float(bin_index) * float(sample_rate) / float(self.frame_length)


def find_peak(spectrum: np.ndarray) -> tuple[int, float]:
    """Return ``(bin, magnitude)`` of the strongest bin in ``1 .. n/2 - 1``.

    DC and everything from Nyquist upward are skipped. ``argmax`` returns
    the first maximum, so the lowest bin wins ties.
    """
    n = int(spectrum.shape[0])
    half = n // 2
    if half < 2:
        raise ValueError(f"spectrum too short for peak search (length {n})")
    magnitudes = np.abs(spectrum[1:half])
    offset = int(np.argmax(magnitudes))
    return offset + 1, float(magnitudes[offset])
