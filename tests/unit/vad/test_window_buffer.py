"""
Unit tests for WindowedSampleBuffer.

Samples and levels must only be trimmed together, in whole windows.
"""

from __future__ import annotations

import pytest

from silence_segmenter.vad.window_buffer import WindowedSampleBuffer


@pytest.fixture
def buffer() -> WindowedSampleBuffer:
    """Buffer with 10 windows of 100 samples and one level per window."""
    buffer = WindowedSampleBuffer()
    buffer.extend(range(1000))
    for index in range(10):
        buffer.append_level(float(index))
    return buffer


class TestWindowedSampleBufferAccess:
    """Tests for counts and read accessors."""

    def test_counts(self, buffer: WindowedSampleBuffer):
        assert buffer.sample_count == 1000
        assert buffer.window_count == 10
        assert buffer.offset == 0

    def test_window(self, buffer: WindowedSampleBuffer):
        assert buffer.window(2, 100) == list(range(200, 300))

    def test_window_beyond_levels(self):
        buffer = WindowedSampleBuffer()
        buffer.extend(range(50))

        assert buffer.window(1, 20) == list(range(20, 40))

    def test_head_is_a_copy(self, buffer: WindowedSampleBuffer):
        head = buffer.head(5)
        head[0] = -1

        assert buffer.samples()[0] == 0

    def test_level(self, buffer: WindowedSampleBuffer):
        assert buffer.level(3) == 3.0


class TestWindowedSampleBufferDrop:
    """Tests for front truncation."""

    def test_drop_trims_both_buffers(self, buffer: WindowedSampleBuffer):
        buffer.drop_windows(3, 100)

        assert buffer.sample_count == 700
        assert buffer.window_count == 7
        assert buffer.samples()[0] == 300
        assert buffer.level(0) == 3.0
        assert buffer.window(0, 100) == list(range(300, 400))
        assert buffer.offset == 300

    def test_drop_zero_is_noop(self, buffer: WindowedSampleBuffer):
        buffer.drop_windows(0, 100)

        assert buffer.sample_count == 1000
        assert buffer.window_count == 10

    def test_offset_accumulates(self, buffer: WindowedSampleBuffer):
        buffer.drop_windows(2, 100)
        buffer.drop_windows(1, 100)

        assert buffer.offset == 300

    def test_compaction_preserves_contents(self):
        buffer = WindowedSampleBuffer()
        buffer.extend(range(10_000))
        for index in range(100):
            buffer.append_level(float(index))

        buffer.drop_windows(60, 100)

        assert buffer.samples() == list(range(6000, 10_000))
        assert buffer.levels() == [float(i) for i in range(60, 100)]
        assert buffer.window(0, 100) == list(range(6000, 6100))
        assert buffer.offset == 6000

        buffer.extend([-1, -2])
        assert buffer.samples()[-2:] == [-1, -2]

    def test_clear(self, buffer: WindowedSampleBuffer):
        buffer.drop_windows(1, 100)
        buffer.clear()

        assert buffer.sample_count == 0
        assert buffer.window_count == 0
        assert buffer.offset == 0
        assert buffer.samples() == []
        assert buffer.levels() == []
