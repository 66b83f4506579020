"""
Level functions for analysis windows.

A level function maps a non-empty window of integer samples to a scalar
that the detector compares against the caller's silence threshold. All
functions here are pure and deterministic.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

LevelFunction = Callable[[Sequence[int]], float]

# Matches the floor used by the GStreamer level element
MIN_LEVEL_DB = -100.0


def _as_array(window: Sequence[int]) -> np.ndarray:
    samples = np.asarray(window, dtype=np.float64)
    if samples.size == 0:
        raise ValueError("Cannot compute the level of an empty window")
    return samples


def rms_level(window: Sequence[int]) -> float:
    """Root mean square amplitude of the window."""
    samples = _as_array(window)
    return float(np.sqrt(np.mean(np.square(samples))))


def peak_level(window: Sequence[int]) -> float:
    """Maximum absolute amplitude of the window."""
    samples = _as_array(window)
    return float(np.max(np.abs(samples)))


def rms_dbfs(window: Sequence[int], sample_width: int = 2) -> float:
    """RMS level in dB relative to full scale.

    Args:
        window: Integer samples
        sample_width: Sample width in bytes, defines full scale

    Returns:
        Level in dBFS, clamped to [-100, 0]
    """
    full_scale = float(2 ** (8 * sample_width - 1))
    rms = rms_level(window)
    if rms <= 0.0:
        return MIN_LEVEL_DB
    db = 20.0 * float(np.log10(rms / full_scale))
    return min(0.0, max(MIN_LEVEL_DB, db))


LEVEL_FUNCTIONS: dict[str, LevelFunction] = {
    "rms": rms_level,
    "peak": peak_level,
}


def get_level_function(name: str) -> LevelFunction:
    """Look up a level function by name ("rms" or "peak").

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return LEVEL_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown level function: {name!r} (expected one of {sorted(LEVEL_FUNCTIONS)})"
        ) from None
