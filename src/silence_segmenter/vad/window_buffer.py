"""
Paired sample/level buffer for the silence detector.

Raw samples and their per-window levels live in one structure so that they
can only be trimmed together, in whole windows, from the front.
"""

from __future__ import annotations

from collections.abc import Iterable

# Dead prefix sizes below which compaction is skipped
_COMPACT_MIN_SAMPLES = 4096
_COMPACT_MIN_LEVELS = 64


class WindowedSampleBuffer:
    """Rolling buffer of samples with one level per leading full window.

    Front truncation moves a start index instead of copying; the dead
    prefix is released once it outgrows the live part, which keeps
    dropping O(1) amortised.

    Invariant (between detector calls):
        levels()[i] is the level of samples()[i*ws:(i+1)*ws]
    """

    def __init__(self) -> None:
        self._samples: list[int] = []
        self._levels: list[float] = []
        self._sample_start = 0
        self._level_start = 0
        self._offset = 0

    def clear(self) -> None:
        """Drop all samples and levels and restart the absolute offset."""
        self._samples = []
        self._levels = []
        self._sample_start = 0
        self._level_start = 0
        self._offset = 0

    @property
    def sample_count(self) -> int:
        return len(self._samples) - self._sample_start

    @property
    def window_count(self) -> int:
        return len(self._levels) - self._level_start

    @property
    def offset(self) -> int:
        """Absolute index of the first buffered sample since the last clear."""
        return self._offset

    def extend(self, samples: Iterable[int]) -> None:
        self._samples.extend(samples)

    def append_level(self, level: float) -> None:
        self._levels.append(level)

    def level(self, index: int) -> float:
        return self._levels[self._level_start + index]

    def levels(self) -> list[float]:
        return self._levels[self._level_start :]

    def samples(self) -> list[int]:
        return self._samples[self._sample_start :]

    def window(self, index: int, window_size: int) -> list[int]:
        """Samples of window `index` (not necessarily leveled yet)."""
        start = self._sample_start + index * window_size
        return self._samples[start : start + window_size]

    def head(self, stop: int) -> list[int]:
        """Fresh copy of the first `stop` buffered samples."""
        return self._samples[self._sample_start : self._sample_start + stop]

    def drop_windows(self, count: int, window_size: int) -> None:
        """Drop the first `count` windows from both samples and levels."""
        if count <= 0:
            return
        dropped = min(count * window_size, self.sample_count)
        self._level_start += min(count, self.window_count)
        self._sample_start += dropped
        self._offset += dropped
        self._compact()

    def _compact(self) -> None:
        if self._sample_start >= _COMPACT_MIN_SAMPLES and self._sample_start >= self.sample_count:
            del self._samples[: self._sample_start]
            self._sample_start = 0
        if self._level_start >= _COMPACT_MIN_LEVELS and self._level_start >= self.window_count:
            del self._levels[: self._level_start]
            self._level_start = 0
