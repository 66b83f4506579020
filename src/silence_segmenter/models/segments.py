"""
Clip data model for segments written to disk.

Each clip is one valid segment emitted by the silence detector, stored as a
mono PCM WAV file named {source}/{index:06d}_clip.wav.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4


@dataclass
class AudioClip:
    """Metadata of a clip cut from a source at confirmed silences.

    Attributes:
        clip_id: Unique identifier for this clip (UUID v4).
        source: Name of the source the clip was cut from.
        index: Sequential number within the source (0-indexed).
        start_sample: Absolute index of the first sample in the source.
        sample_count: Number of samples in the clip.
        sample_rate: Samples per second.
        file_path: Path to the WAV file on disk.
        file_size: Size of the WAV file in bytes (0 until written).
    """

    clip_id: str
    source: str
    index: int
    start_sample: int
    sample_count: int
    sample_rate: int
    file_path: Path
    file_size: int = 0

    @classmethod
    def create(
        cls,
        source: str,
        index: int,
        start_sample: int,
        sample_count: int,
        sample_rate: int,
        output_dir: Path,
    ) -> AudioClip:
        """Factory method to create an AudioClip with auto-generated clip_id.

        Args:
            source: Source name (used as sub-directory).
            index: Sequential clip number (0-indexed).
            start_sample: Absolute index of the first sample.
            sample_count: Number of samples.
            sample_rate: Samples per second.
            output_dir: Base directory for clip storage.

        Returns:
            New AudioClip with generated clip_id and file_path.
        """
        return cls(
            clip_id=str(uuid4()),
            source=source,
            index=index,
            start_sample=start_sample,
            sample_count=sample_count,
            sample_rate=sample_rate,
            file_path=output_dir / source / f"{index:06d}_clip.wav",
        )

    @property
    def start_seconds(self) -> float:
        """Position of the clip in the source, in seconds."""
        return self.start_sample / self.sample_rate

    @property
    def duration_seconds(self) -> float:
        """Duration in seconds."""
        return self.sample_count / self.sample_rate

    @property
    def duration_ms(self) -> int:
        """Duration in milliseconds."""
        return self.sample_count * 1000 // self.sample_rate

    @property
    def exists(self) -> bool:
        """Check if clip file exists on disk."""
        return self.file_path.exists()
