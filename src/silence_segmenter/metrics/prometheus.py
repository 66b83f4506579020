"""
Prometheus metrics for the silence segmenter.

- Windows analysed and leading windows pruned
- Confirmed silences and emitted segments
- Emitted samples
- Currently buffered samples
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from prometheus_client import Counter, Gauge

if TYPE_CHECKING:
    from silence_segmenter.vad.silence_detector import SilenceDetector

logger = logging.getLogger(__name__)


class SegmenterMetrics:
    """Prometheus metrics for one segmented source.

    All metrics use the 'silence_segmenter_' prefix and a 'source' label.

    Note: Metrics are class-level singletons to avoid Prometheus
    "Duplicated timeseries" errors when creating multiple instances.
    """

    NAMESPACE = "silence_segmenter"
    SUBSYSTEM = "detector"

    _windows_analyzed: ClassVar[Counter | None] = None
    _windows_pruned: ClassVar[Counter | None] = None
    _confirmed_silences: ClassVar[Counter | None] = None
    _segments_emitted: ClassVar[Counter | None] = None
    _samples_emitted: ClassVar[Counter | None] = None
    _buffered_samples: ClassVar[Gauge | None] = None
    _metrics_initialized: ClassVar[bool] = False

    def __init__(self, source: str | None = None) -> None:
        """Initialize segmenter metrics.

        Args:
            source: Source identifier for labels (optional)
        """
        self.source = source or "unknown"
        self._seen: dict[str, int] = {}
        self._ensure_metrics_initialized()

    @classmethod
    def _ensure_metrics_initialized(cls) -> None:
        """Initialize all Prometheus metrics (once per class)."""
        if cls._metrics_initialized:
            return

        prefix = f"{cls.NAMESPACE}_{cls.SUBSYSTEM}"

        cls._windows_analyzed = Counter(
            f"{prefix}_windows_analyzed_total",
            "Total analysis windows whose level was computed",
            ["source"],
        )
        cls._windows_pruned = Counter(
            f"{prefix}_windows_pruned_total",
            "Total leading silent windows discarded",
            ["source"],
        )
        cls._confirmed_silences = Counter(
            f"{prefix}_confirmed_silences_total",
            "Total confirmed silences",
            ["source"],
        )
        cls._segments_emitted = Counter(
            f"{prefix}_segments_emitted_total",
            "Total segments emitted",
            ["source"],
        )
        cls._samples_emitted = Counter(
            f"{prefix}_samples_emitted_total",
            "Total samples emitted in segments",
            ["source"],
        )
        cls._buffered_samples = Gauge(
            f"{prefix}_buffered_samples",
            "Samples currently buffered by the detector",
            ["source"],
        )

        cls._metrics_initialized = True

    @property
    def windows_analyzed(self) -> Counter:
        return self._windows_analyzed

    @property
    def windows_pruned(self) -> Counter:
        return self._windows_pruned

    @property
    def confirmed_silences(self) -> Counter:
        return self._confirmed_silences

    @property
    def segments_emitted(self) -> Counter:
        return self._segments_emitted

    @property
    def samples_emitted(self) -> Counter:
        return self._samples_emitted

    @property
    def buffered_samples(self) -> Gauge:
        return self._buffered_samples

    def record_segment(self, sample_count: int) -> None:
        """Record one emitted segment.

        Args:
            sample_count: Number of samples in the segment
        """
        self.segments_emitted.labels(source=self.source).inc()
        self.samples_emitted.labels(source=self.source).inc(sample_count)

    def observe_detector(self, detector: SilenceDetector) -> None:
        """Publish detector counters accumulated since the last call."""
        self._inc_delta(self.windows_analyzed, "analyzed", detector.analyzed_windows)
        self._inc_delta(self.windows_pruned, "pruned", detector.pruned_windows)
        self._inc_delta(self.confirmed_silences, "confirmed", detector.confirmed_silences)
        self.buffered_samples.labels(source=self.source).set(detector.buffered_samples)

    def _inc_delta(self, counter: Counter, key: str, total: int) -> None:
        delta = total - self._seen.get(key, 0)
        if delta > 0:
            counter.labels(source=self.source).inc(delta)
        self._seen[key] = total
