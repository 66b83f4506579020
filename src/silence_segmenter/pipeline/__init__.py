"""
Pipelines driving the silence detector.

Exports:
    FileSplitter: Cuts WAV files into clips at confirmed silences
"""

from silence_segmenter.pipeline.file_splitter import FileSplitter

__all__ = [
    "FileSplitter",
]
