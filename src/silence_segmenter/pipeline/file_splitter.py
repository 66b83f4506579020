"""
File splitter: cuts a WAV file into clips at confirmed silences.

Feeds the file chunk by chunk through a SilenceDetector, so memory stays
bounded by the longest valid segment, and writes every emitted segment as
a WAV clip. At end of file the residual buffer is written as a final clip
when it still holds non-silent audio (keep_tail).
"""

from __future__ import annotations

import logging
from pathlib import Path

from silence_segmenter.audio.segment_writer import ClipWriter
from silence_segmenter.audio.wav_io import WavChunkReader
from silence_segmenter.config.segmentation_config import SilenceDetectorConfig, SplitterConfig
from silence_segmenter.metrics.prometheus import SegmenterMetrics
from silence_segmenter.models.segments import AudioClip
from silence_segmenter.vad.audio_level import get_level_function
from silence_segmenter.vad.silence_detector import SilenceDetector

logger = logging.getLogger(__name__)


class FileSplitter:
    """Splits WAV files into clips separated by silences.

    Attributes:
        detector: Silence detector, reset before each file
        splitter_config: Threshold, chunk size, level mode and tail policy
        output_dir: Base directory for clips
        metrics: Prometheus metrics (optional)
    """

    def __init__(
        self,
        output_dir: Path,
        detector_config: SilenceDetectorConfig | None = None,
        splitter_config: SplitterConfig | None = None,
        metrics: SegmenterMetrics | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.splitter_config = splitter_config or SplitterConfig()
        self.detector = SilenceDetector(
            config=detector_config,
            level_function=get_level_function(self.splitter_config.level_mode),
        )
        self.metrics = metrics

    def split(self, path: Path) -> list[AudioClip]:
        """Split one WAV file.

        Args:
            path: Mono PCM WAV file

        Returns:
            Written clips in chronological order

        Raises:
            FileNotFoundError: If the file does not exist
            UnsupportedWavError: If the file is not mono integer PCM
            InvalidWindowSizeError: If the sample rate is too low for the step duration
        """
        path = Path(path)
        source = path.stem
        threshold = self.splitter_config.silence_threshold
        clips: list[AudioClip] = []

        self.detector.reset()
        with WavChunkReader(path, self.splitter_config.chunk_duration_s) as reader:
            info = reader.info
            writer = ClipWriter(self.output_dir, sample_width=info.sample_width)
            logger.info(
                f"Splitting {path}: {info.duration_seconds:.2f}s at {info.sample_rate}Hz, "
                f"threshold={threshold}, step={self.detector.config.step_duration_s}s, "
                f"silence_min={self.detector.config.silence_min_duration_s}s"
            )

            for chunk in reader:
                for segment in self.detector.detect(chunk, info.sample_rate, threshold):
                    clips.append(
                        self._write_clip(
                            writer,
                            source,
                            len(clips),
                            segment.start_sample,
                            segment.samples,
                            info.sample_rate,
                        )
                    )
                if self.metrics is not None:
                    self.metrics.observe_detector(self.detector)

            if self.splitter_config.keep_tail and self._tail_has_audio(threshold):
                clips.append(
                    self._write_clip(
                        writer,
                        source,
                        len(clips),
                        self.detector.stream_offset,
                        self.detector.pending_samples(),
                        info.sample_rate,
                    )
                )

        logger.info(f"Split {path} into {len(clips)} clips")
        return clips

    def _tail_has_audio(self, threshold: float) -> bool:
        return any(level >= threshold for level in self.detector.levels)

    def _write_clip(
        self,
        writer: ClipWriter,
        source: str,
        index: int,
        start_sample: int,
        samples: list[int],
        sample_rate: int,
    ) -> AudioClip:
        clip = AudioClip.create(
            source=source,
            index=index,
            start_sample=start_sample,
            sample_count=len(samples),
            sample_rate=sample_rate,
            output_dir=self.output_dir,
        )
        writer.write(clip, samples)
        if self.metrics is not None:
            self.metrics.record_segment(len(samples))
        return clip
