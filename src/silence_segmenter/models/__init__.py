"""
Data models for the silence segmenter.

Exports:
    AudioClip: Metadata of a clip written to disk
"""

from silence_segmenter.models.segments import AudioClip

__all__ = [
    "AudioClip",
]
