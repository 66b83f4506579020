"""
Clip writer for WAV file output.

Writes segments emitted by the silence detector to disk as mono PCM WAV
files.

- Naming: {source}/{index:06d}_clip.wav
- Sample width follows the source file
"""

from __future__ import annotations

import logging
from pathlib import Path

from silence_segmenter.audio.wav_io import write_wav
from silence_segmenter.models.segments import AudioClip

logger = logging.getLogger(__name__)


class ClipWriter:
    """Writes audio clips to disk as WAV files.

    Attributes:
        output_dir: Base directory for clip storage
        sample_width: Sample width in bytes of the written files
    """

    def __init__(self, output_dir: Path, sample_width: int = 2) -> None:
        """Initialize clip writer.

        Args:
            output_dir: Base directory for clip storage
            sample_width: Sample width in bytes (1, 2 or 4)
        """
        self.output_dir = output_dir
        self.sample_width = sample_width

    def write(self, clip: AudioClip, samples: list[int]) -> AudioClip:
        """Write clip samples to disk.

        Creates the directory structure if needed and updates
        clip.file_size after the write.

        Args:
            clip: AudioClip metadata with file_path
            samples: Integer samples of the clip

        Returns:
            Updated AudioClip with file_size populated
        """
        clip.file_size = write_wav(clip.file_path, samples, clip.sample_rate, self.sample_width)

        logger.info(
            f"Clip written: {clip.file_path}, "
            f"start={clip.start_seconds:.2f}s, "
            f"duration={clip.duration_seconds:.2f}s, "
            f"size={clip.file_size} bytes"
        )
        return clip
