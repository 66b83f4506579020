"""
PCM WAV input for the file splitter.

Reads mono PCM WAV files in fixed-duration chunks of integer samples.
Supported sample widths: 8-bit unsigned, 16-bit and 32-bit signed.
Multi-channel input is rejected (no downmixing).
"""

from __future__ import annotations

import logging
import wave
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)

_DTYPES = {
    1: np.dtype("u1"),
    2: np.dtype("<i2"),
    4: np.dtype("<i4"),
}


class UnsupportedWavError(ValueError):
    """Raised when a WAV file cannot be segmented as mono integer PCM."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: '{path}'")


@dataclass(frozen=True)
class WavInfo:
    """Format of a WAV file."""

    sample_rate: int
    sample_width: int
    frame_count: int

    @property
    def duration_seconds(self) -> float:
        return self.frame_count / self.sample_rate


def decode_frames(frames: bytes, sample_width: int) -> list[int]:
    """Convert little-endian PCM bytes to signed integer samples."""
    samples = np.frombuffer(frames, dtype=_DTYPES[sample_width]).astype(np.int64)
    if sample_width == 1:
        samples -= 128
    return samples.tolist()


def encode_samples(samples: list[int], sample_width: int) -> bytes:
    """Convert signed integer samples to little-endian PCM bytes."""
    data = np.asarray(samples, dtype=np.int64)
    if sample_width == 1:
        data = data + 128
    return data.astype(_DTYPES[sample_width]).tobytes()


class WavChunkReader:
    """Reads a mono PCM WAV file chunk by chunk.

    Usage:
        with WavChunkReader(path, chunk_duration_s=0.1) as reader:
            for chunk in reader:
                ...
    """

    def __init__(self, path: Path, chunk_duration_s: float = 0.1) -> None:
        self.path = Path(path)
        self.chunk_duration_s = chunk_duration_s
        self._wav: wave.Wave_read | None = None
        self.info: WavInfo | None = None

    def open(self) -> WavInfo:
        """Open the file and validate its format.

        Raises:
            FileNotFoundError: If the file does not exist
            wave.Error: If the file is not a valid WAV file
            UnsupportedWavError: If the file is not mono integer PCM
        """
        wav = wave.open(str(self.path), "rb")
        try:
            if wav.getnchannels() != 1:
                raise UnsupportedWavError(self.path, f"Expected mono audio, got {wav.getnchannels()} channels")
            if wav.getsampwidth() not in _DTYPES:
                raise UnsupportedWavError(self.path, f"Unsupported sample width {wav.getsampwidth()}")
        except UnsupportedWavError:
            wav.close()
            raise

        self._wav = wav
        self.info = WavInfo(
            sample_rate=wav.getframerate(),
            sample_width=wav.getsampwidth(),
            frame_count=wav.getnframes(),
        )
        logger.debug(
            f"Opened {self.path}: {self.info.sample_rate}Hz, "
            f"{self.info.sample_width * 8}-bit, {self.info.duration_seconds:.2f}s"
        )
        return self.info

    def close(self) -> None:
        if self._wav is not None:
            self._wav.close()
            self._wav = None

    def __enter__(self) -> WavChunkReader:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[list[int]]:
        if self._wav is None or self.info is None:
            raise RuntimeError("Reader is not open")

        frames_per_chunk = max(1, int(self.info.sample_rate * self.chunk_duration_s))
        while True:
            frames = self._wav.readframes(frames_per_chunk)
            if not frames:
                return
            yield decode_frames(frames, self.info.sample_width)


def write_wav(path: Path, samples: list[int], sample_rate: int, sample_width: int = 2) -> int:
    """Write samples as a mono PCM WAV file.

    Returns:
        Size of the written file in bytes
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(sample_width)
        wav.setframerate(sample_rate)
        wav.writeframes(encode_samples(samples, sample_width))
    return path.stat().st_size
