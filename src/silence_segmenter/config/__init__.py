"""
Configuration module for the silence segmenter.

Pydantic-based configuration models loaded from environment variables.

Exports:
    SilenceDetectorConfig: Analysis window and silence duration (SILENCE_ prefix)
    SplitterConfig: File splitter settings (SPLIT_ prefix)
"""

from silence_segmenter.config.segmentation_config import (
    DEFAULT_SILENCE_MIN_DURATION_S,
    DEFAULT_STEP_DURATION_S,
    SilenceDetectorConfig,
    SplitterConfig,
)

__all__ = [
    "DEFAULT_SILENCE_MIN_DURATION_S",
    "DEFAULT_STEP_DURATION_S",
    "SilenceDetectorConfig",
    "SplitterConfig",
]
