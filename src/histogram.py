"""Pitch occurrence counting and ranking."""

from __future__ import annotations

from collections import Counter

from pitch_quantizer import pitch_to_name


class PitchHistogram:
    """Counts how many accepted frames landed on each pitch.

    Keys keep first-seen order, and ``rank`` sorts stably on count, so
    equal counts always come out in the order the pitches first appeared.
    """

    def __init__(self) -> None:
        self._counts: Counter[int] = Counter()

    def increment(self, pitch: int) -> None:
        self._counts[pitch] += 1

    def merge(self, other: PitchHistogram) -> None:
        for pitch, count in other._counts.items():
            self._counts[pitch] += count

    def total(self) -> int:
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __bool__(self) -> bool:
        return bool(self._counts)

    def rank(self) -> list[tuple[int, int]]:
        return sorted(self._counts.items(), key=lambda item: item[1], reverse=True)

    def top(self, k: int) -> list[tuple[int, int]]:
        if k < 0:
            raise ValueError("k must be non-negative")
        return self.rank()[:k]

    def top_names(self, k: int) -> list[tuple[str, int]]:
        return [(pitch_to_name(pitch), count) for pitch, count in self.top(k)]
