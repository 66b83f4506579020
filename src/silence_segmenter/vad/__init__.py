"""
Silence-based audio segmentation.

Splits a stream of integer samples into valid segments at confirmed
silences, using a per-window amplitude level compared to a threshold.

Exports:
    SilenceDetector: Incremental silence segmenter
    DetectedSegment: Emitted segment with its absolute position
    InvalidWindowSizeError: Raised for an empty analysis window
    WindowedSampleBuffer: Paired sample/level buffer
    rms_level, peak_level, rms_dbfs: Level functions
"""

from silence_segmenter.vad.audio_level import (
    LevelFunction,
    get_level_function,
    peak_level,
    rms_dbfs,
    rms_level,
)
from silence_segmenter.vad.silence_detector import (
    DetectedSegment,
    InvalidWindowSizeError,
    SilenceDetector,
)
from silence_segmenter.vad.window_buffer import WindowedSampleBuffer

__all__ = [
    "DetectedSegment",
    "InvalidWindowSizeError",
    "LevelFunction",
    "SilenceDetector",
    "WindowedSampleBuffer",
    "get_level_function",
    "peak_level",
    "rms_dbfs",
    "rms_level",
]
