"""Prometheus metrics for the silence segmenter."""

from silence_segmenter.metrics.prometheus import SegmenterMetrics

__all__ = ["SegmenterMetrics"]
