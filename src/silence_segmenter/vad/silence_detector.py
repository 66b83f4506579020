"""
Streaming silence detector.

Splits an unbounded stream of integer samples, fed in chunks of any size,
into valid audio segments separated by confirmed silences:
- Samples are analysed in fixed windows of step_duration
- A window is silent when its level is below the threshold passed to add()
- Leading silence is pruned down to a single padding window
- A run of silent windows lasting at least silence_min_duration confirms a
  silence; the audio buffered before it is emitted as a segment

Precondition: sample_rate must stay constant between resets. The window
size is derived from it on every call, so changing it while samples are
buffered breaks the sample/level correspondence.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from silence_segmenter.config.segmentation_config import SilenceDetectorConfig
from silence_segmenter.vad.audio_level import LevelFunction, rms_level
from silence_segmenter.vad.window_buffer import WindowedSampleBuffer

logger = logging.getLogger(__name__)


class InvalidWindowSizeError(ValueError):
    """Raised when sample_rate and step duration yield an empty window."""

    def __init__(self, sample_rate: int, step_duration_s: float, window_size: int) -> None:
        self.sample_rate = sample_rate
        self.step_duration_s = step_duration_s
        self.window_size = window_size
        super().__init__(
            f"Invalid window size {window_size} for sample_rate={sample_rate} "
            f"and step_duration={step_duration_s}s"
        )


@dataclass
class DetectedSegment:
    """Valid audio emitted by the detector.

    Attributes:
        samples: Independent copy of the segment samples
        start_sample: Absolute index of the first sample since the last reset
    """

    samples: list[int]
    start_sample: int

    @property
    def sample_count(self) -> int:
        return len(self.samples)

    @property
    def end_sample(self) -> int:
        return self.start_sample + len(self.samples)


class SilenceDetector:
    """Incremental silence segmenter.

    Not thread-safe: calls to add()/reset() on one instance must be
    serialised by the caller.

    Attributes:
        config: Window and minimum silence durations
        level_function: Maps a window of samples to a comparable level
    """

    def __init__(
        self,
        config: SilenceDetectorConfig | None = None,
        level_function: LevelFunction = rms_level,
    ) -> None:
        self.config = config or SilenceDetectorConfig()
        self.level_function = level_function
        self._buffer = WindowedSampleBuffer()

        # Metrics tracking
        self._confirmed_silences = 0
        self._pruned_windows = 0
        self._analyzed_windows = 0
        self._emitted_samples = 0

        self.reset()

    def reset(self) -> None:
        """Clear buffered samples and levels, e.g. after a discontinuity."""
        self._buffer.clear()

    def add(
        self,
        samples: Sequence[int],
        sample_rate: int,
        silence_threshold: float,
    ) -> list[list[int]]:
        """Add samples and return the segments completed by them.

        Args:
            samples: New chunk of integer samples (may be empty)
            sample_rate: Samples per second, constant between resets
            silence_threshold: Levels strictly below it are silent. Applied
                to every buffered window, not only the new ones.

        Returns:
            Segments in chronological order, each an independent list

        Raises:
            InvalidWindowSizeError: If the analysis window would be empty
        """
        return [segment.samples for segment in self.detect(samples, sample_rate, silence_threshold)]

    def detect(
        self,
        samples: Sequence[int],
        sample_rate: int,
        silence_threshold: float,
    ) -> list[DetectedSegment]:
        """Same as add(), but segments carry their absolute start sample."""
        window_size = self.config.window_size(sample_rate)
        if window_size <= 0:
            raise InvalidWindowSizeError(sample_rate, self.config.step_duration_s, window_size)

        buffer = self._buffer
        buffer.extend(samples)

        processed = buffer.window_count * window_size
        processable = buffer.sample_count - processed
        if processable < window_size:
            return []

        first_new = buffer.window_count
        for index in range(first_new, first_new + processable // window_size):
            buffer.append_level(self.level_function(buffer.window(index, window_size)))
            self._analyzed_windows += 1

        self._prune_leading_silence(window_size, silence_threshold)

        if buffer.window_count < 2:
            return []

        return self._split_on_silences(window_size, silence_threshold)

    def _prune_leading_silence(self, window_size: int, silence_threshold: float) -> None:
        """Keep at most one silent window at the start of the buffer."""
        buffer = self._buffer
        silent = 0
        while silent < buffer.window_count and buffer.level(silent) < silence_threshold:
            silent += 1

        if silent > 1:
            buffer.drop_windows(silent - 1, window_size)
            self._pruned_windows += silent - 1
            logger.debug(f"Pruned {silent - 1} leading silent windows")

    def _split_on_silences(self, window_size: int, silence_threshold: float) -> list[DetectedSegment]:
        """Emit the audio preceding every confirmed silence in the buffer.

        Window 0 is the leading padding and never starts a run.
        """
        buffer = self._buffer
        segments: list[DetectedSegment] = []
        run = 0
        index = 1
        while index < buffer.window_count:
            if buffer.level(index) < silence_threshold:
                run += 1
            else:
                index = self._close_run(index, run, window_size, segments)
                run = 0
            index += 1

        self._close_run(index, run, window_size, segments)
        return segments

    def _close_run(
        self,
        index: int,
        run: int,
        window_size: int,
        segments: list[DetectedSegment],
    ) -> int:
        """Evaluate the silent run ending just before window `index`.

        Returns:
            Position of window `index` in the (possibly trimmed) buffer
        """
        if run * self.config.step_duration_ns < self.config.silence_min_duration_ns:
            return index

        run_start = index - run
        buffer = self._buffer
        segment = DetectedSegment(samples=buffer.head(run_start * window_size), start_sample=buffer.offset)
        segments.append(segment)
        buffer.drop_windows(run_start, window_size)

        self._confirmed_silences += 1
        self._emitted_samples += segment.sample_count
        logger.debug(
            f"Confirmed silence of {run} windows, emitting {segment.sample_count} samples "
            f"from sample {segment.start_sample}"
        )
        return run

    # Introspection
    def pending_samples(self) -> list[int]:
        """Copy of the samples still buffered (not emitted nor dropped)."""
        return self._buffer.samples()

    @property
    def levels(self) -> list[float]:
        """Copy of the buffered window levels."""
        return self._buffer.levels()

    @property
    def buffered_samples(self) -> int:
        return self._buffer.sample_count

    @property
    def buffered_windows(self) -> int:
        return self._buffer.window_count

    @property
    def stream_offset(self) -> int:
        """Absolute index of the first buffered sample since the last reset."""
        return self._buffer.offset

    # Metrics accessors
    @property
    def confirmed_silences(self) -> int:
        """Count of confirmed silences (one per emitted segment)."""
        return self._confirmed_silences

    @property
    def pruned_windows(self) -> int:
        """Count of leading silent windows discarded."""
        return self._pruned_windows

    @property
    def analyzed_windows(self) -> int:
        """Count of windows whose level was computed."""
        return self._analyzed_windows

    @property
    def emitted_samples(self) -> int:
        """Count of samples emitted in segments."""
        return self._emitted_samples
