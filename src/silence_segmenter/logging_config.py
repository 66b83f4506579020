"""
Logging configuration for the silence segmenter.

Usage:
  LOG_LEVEL sets the level (default INFO).
  LOG_FOCUS=1 keeps only the detector and the file splitter at LOG_LEVEL;
  other modules log at WARNING to reduce noise.

Example:
  LOG_LEVEL=DEBUG LOG_FOCUS=1 python -m silence_segmenter input.wav -o clips
"""

import logging
import os

FOCUSED_MODULES = [
    "silence_segmenter.vad.silence_detector",
    "silence_segmenter.pipeline.file_splitter",
]


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from LOG_LEVEL / LOG_FOCUS.

    Args:
        level: Overrides LOG_LEVEL when given
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_focus = os.getenv("LOG_FOCUS", "0") == "1"

    # Base format with timestamps for timeline analysis
    log_format = "%(asctime)s.%(msecs)03d | %(name)s | %(levelname)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=log_level if not log_focus else logging.WARNING,
        format=log_format,
        datefmt=date_format,
        force=True,
    )

    if not log_focus:
        return

    for module in FOCUSED_MODULES:
        logging.getLogger(module).setLevel(log_level)

    logging.getLogger().warning(
        f"Focused logging enabled: {', '.join(FOCUSED_MODULES)} at {log_level}"
    )
