"""
Streaming silence segmenter.

Cuts a stream of integer audio samples, fed in chunks of any size, into
valid segments separated by confirmed silences, with bounded memory.

Exports:
    SilenceDetector: Incremental silence segmenter
    SilenceDetectorConfig: Window and minimum silence durations
    InvalidWindowSizeError: Raised for an empty analysis window
"""

from silence_segmenter.config.segmentation_config import SilenceDetectorConfig
from silence_segmenter.vad.silence_detector import (
    DetectedSegment,
    InvalidWindowSizeError,
    SilenceDetector,
)

__version__ = "0.1.0"

__all__ = [
    "DetectedSegment",
    "InvalidWindowSizeError",
    "SilenceDetector",
    "SilenceDetectorConfig",
]
