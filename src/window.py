"""Tapering windows applied to analysis frames before the FFT."""

from __future__ import annotations

import math

import numpy as np


def hann_weight(i: int, n: int) -> float:
    if n <= 0:
        raise ValueError("window length must be positive")
    return math.sin(math.pi * i / n) ** 2


def hann_window(n: int) -> np.ndarray:
    """Periodic Hann window of length ``n``; weight(i) == weight(n - i)."""
    if n <= 0:
        raise ValueError("window length must be positive")
    return np.sin(np.pi * np.arange(n, dtype=np.float64) / n) ** 2
