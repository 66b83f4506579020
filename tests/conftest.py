"""
Pytest fixtures for silence segmenter tests.

Includes fixtures for:
- Clean SILENCE_/SPLIT_/LOG_ environment
- Detector configuration with 30-sample windows at 1 kHz
- Sample builders from window patterns ("L" loud, "S" silent, "M" medium)
- WAV files on disk
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from silence_segmenter.audio.wav_io import write_wav
from silence_segmenter.config.segmentation_config import SilenceDetectorConfig

SAMPLE_RATE = 1000
WINDOW_SIZE = 30

# Constant amplitudes: the RMS of a window equals its absolute value
WINDOW_LEVELS = {
    "L": 1000,
    "M": 700,
    "S": 10,
}


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables that would leak into settings."""
    for key in list(os.environ):
        if key.startswith(("SILENCE_", "SPLIT_", "LOG_")):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Detector configuration
# =============================================================================


@pytest.fixture
def detector_config() -> SilenceDetectorConfig:
    """30ms windows, 90ms (3 windows) minimum silence."""
    return SilenceDetectorConfig(step_duration_s=0.03, silence_min_duration_s=0.09)


# =============================================================================
# Sample builders
# =============================================================================


def build_samples(pattern: str, window_size: int = WINDOW_SIZE) -> list[int]:
    """Build samples window by window from a pattern such as "LLSSSL".

    Signs alternate inside a window so the RMS stays at the window level
    while consecutive windows remain distinguishable in assertions.
    """
    samples: list[int] = []
    for index, kind in enumerate(pattern):
        level = WINDOW_LEVELS[kind]
        sign = 1 if index % 2 == 0 else -1
        samples.extend(sign * level for _ in range(window_size))
    return samples


@pytest.fixture
def make_samples() -> Callable[..., list[int]]:
    """Factory fixture returning build_samples."""
    return build_samples


# =============================================================================
# WAV files
# =============================================================================


@pytest.fixture
def make_wav(tmp_path: Path) -> Callable[..., Path]:
    """Write a 16-bit mono WAV file from a window pattern."""

    def _make_wav(pattern: str, name: str = "input.wav", sample_rate: int = SAMPLE_RATE) -> Path:
        path = tmp_path / name
        write_wav(path, build_samples(pattern), sample_rate, sample_width=2)
        return path

    return _make_wav
