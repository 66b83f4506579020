"""
Unit tests for WAV input/output helpers.
"""

from __future__ import annotations

import wave
from pathlib import Path

import pytest

from silence_segmenter.audio.wav_io import (
    UnsupportedWavError,
    WavChunkReader,
    decode_frames,
    encode_samples,
    write_wav,
)


class TestSampleCodec:
    """Tests for PCM byte conversion."""

    def test_decode_16bit(self):
        assert decode_frames(b"\x01\x00\xff\xff\x00\x80", 2) == [1, -1, -32768]

    def test_decode_8bit_is_centered(self):
        assert decode_frames(bytes([0, 128, 255]), 1) == [-128, 0, 127]

    def test_decode_32bit(self):
        assert decode_frames(b"\xff\xff\xff\x7f", 4) == [2_147_483_647]

    def test_encode_16bit(self):
        assert encode_samples([1, -1], 2) == b"\x01\x00\xff\xff"

    def test_encode_8bit(self):
        assert encode_samples([-128, 0, 127], 1) == bytes([0, 128, 255])


class TestWavChunkReader:
    """Tests for chunked WAV reading."""

    def test_reads_fixed_size_chunks(self, tmp_path: Path):
        path = tmp_path / "tone.wav"
        samples = [(i % 200) - 100 for i in range(1000)]
        write_wav(path, samples, 1000)

        with WavChunkReader(path, chunk_duration_s=0.1) as reader:
            chunks = list(reader)

        assert [len(c) for c in chunks] == [100] * 10
        assert [s for c in chunks for s in c] == samples

    def test_last_chunk_may_be_short(self, tmp_path: Path):
        path = tmp_path / "short.wav"
        write_wav(path, [5] * 250, 1000)

        with WavChunkReader(path, chunk_duration_s=0.1) as reader:
            assert [len(c) for c in reader] == [100, 100, 50]

    def test_info(self, tmp_path: Path):
        path = tmp_path / "info.wav"
        write_wav(path, [0] * 8000, 16000, sample_width=4)

        with WavChunkReader(path) as reader:
            assert reader.info.sample_rate == 16000
            assert reader.info.sample_width == 4
            assert reader.info.frame_count == 8000
            assert reader.info.duration_seconds == 0.5

    def test_stereo_rejected(self, tmp_path: Path):
        path = tmp_path / "stereo.wav"
        with wave.open(str(path), "wb") as wav:
            wav.setnchannels(2)
            wav.setsampwidth(2)
            wav.setframerate(1000)
            wav.writeframes(b"\x00\x00" * 20)

        with pytest.raises(UnsupportedWavError, match="Expected mono"):
            WavChunkReader(path).open()

    def test_24bit_rejected(self, tmp_path: Path):
        path = tmp_path / "24bit.wav"
        with wave.open(str(path), "wb") as wav:
            wav.setnchannels(1)
            wav.setsampwidth(3)
            wav.setframerate(1000)
            wav.writeframes(b"\x00\x00\x00" * 10)

        with pytest.raises(UnsupportedWavError, match="sample width 3"):
            WavChunkReader(path).open()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            WavChunkReader(tmp_path / "missing.wav").open()

    def test_iterating_closed_reader_raises(self, tmp_path: Path):
        path = tmp_path / "closed.wav"
        write_wav(path, [0] * 10, 1000)

        with pytest.raises(RuntimeError):
            list(WavChunkReader(path))


class TestWriteWav:
    """Tests for write_wav."""

    def test_round_trip(self, tmp_path: Path):
        path = tmp_path / "nested" / "out.wav"

        size = write_wav(path, [100, -100, 32767], 8000)

        assert path.exists()
        assert size == path.stat().st_size
        with wave.open(str(path), "rb") as wav:
            assert wav.getnchannels() == 1
            assert wav.getframerate() == 8000
            assert decode_frames(wav.readframes(3), 2) == [100, -100, 32767]
