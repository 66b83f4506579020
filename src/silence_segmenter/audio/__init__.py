"""
WAV input and clip output.

Exports:
    WavChunkReader: Chunked reader for mono PCM WAV files
    WavInfo: Format of an opened WAV file
    UnsupportedWavError: Raised for non-mono or unsupported sample widths
    ClipWriter: Writes emitted clips as WAV files
    write_wav: Write integer samples as a mono WAV file
"""

from silence_segmenter.audio.segment_writer import ClipWriter
from silence_segmenter.audio.wav_io import (
    UnsupportedWavError,
    WavChunkReader,
    WavInfo,
    decode_frames,
    encode_samples,
    write_wav,
)

__all__ = [
    "ClipWriter",
    "UnsupportedWavError",
    "WavChunkReader",
    "WavInfo",
    "decode_frames",
    "encode_samples",
    "write_wav",
]
