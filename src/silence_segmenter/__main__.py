"""Command line entrypoint: split a WAV file into clips at silences.

Usage:
    python -m silence_segmenter input.wav -o clips
    python -m silence_segmenter input.wav -o clips --threshold 300 --silence-min-ms 500
    silence-segmenter input.wav -o clips --level peak --no-tail

Unset options fall back to SILENCE_* / SPLIT_* environment variables.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import wave
from pathlib import Path

from pydantic import ValidationError

from silence_segmenter.config.segmentation_config import SilenceDetectorConfig, SplitterConfig
from silence_segmenter.logging_config import configure_logging
from silence_segmenter.metrics.prometheus import SegmenterMetrics
from silence_segmenter.pipeline.file_splitter import FileSplitter

logger = logging.getLogger("silence_segmenter")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="silence-segmenter",
        description="Split a mono PCM WAV file into clips separated by silences",
    )
    parser.add_argument("input", type=Path, help="Mono PCM WAV file")
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=Path("clips"),
        help="Directory for clips (default: clips)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        help="Level below which a window is silent (default: 500)",
    )
    parser.add_argument(
        "--step-ms",
        type=float,
        help="Analysis window duration in milliseconds (default: 30)",
    )
    parser.add_argument(
        "--silence-min-ms",
        type=float,
        help="Minimum silence duration that splits clips, in milliseconds (default: 1000)",
    )
    parser.add_argument(
        "--chunk-ms",
        type=float,
        help="Duration of audio fed per call, in milliseconds (default: 100)",
    )
    parser.add_argument(
        "--level",
        choices=["rms", "peak"],
        help="Level function (default: rms)",
    )
    parser.add_argument(
        "--no-tail",
        action="store_true",
        help="Do not write trailing audio that is not followed by a silence",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def build_configs(args: argparse.Namespace) -> tuple[SilenceDetectorConfig, SplitterConfig]:
    """Build configuration from arguments, leaving unset ones to the environment."""
    detector_overrides: dict[str, float] = {}
    if args.step_ms is not None:
        detector_overrides["step_duration_s"] = args.step_ms / 1000
    if args.silence_min_ms is not None:
        detector_overrides["silence_min_duration_s"] = args.silence_min_ms / 1000

    splitter_overrides: dict[str, object] = {}
    if args.threshold is not None:
        splitter_overrides["silence_threshold"] = args.threshold
    if args.chunk_ms is not None:
        splitter_overrides["chunk_duration_s"] = args.chunk_ms / 1000
    if args.level is not None:
        splitter_overrides["level_mode"] = args.level
    if args.no_tail:
        splitter_overrides["keep_tail"] = False

    return SilenceDetectorConfig(**detector_overrides), SplitterConfig(**splitter_overrides)


def main(argv: list[str] | None = None) -> int:
    """Main entrypoint for the splitter."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        detector_config, splitter_config = build_configs(args)
        splitter = FileSplitter(
            output_dir=args.output_dir,
            detector_config=detector_config,
            splitter_config=splitter_config,
            metrics=SegmenterMetrics(source=args.input.stem),
        )
        clips = splitter.split(args.input)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except (OSError, ValueError, wave.Error) as e:
        logger.error(f"Cannot split {args.input}: {e}")
        return 1

    for clip in clips:
        print(f"{clip.file_path}\t{clip.start_seconds:.3f}\t{clip.duration_seconds:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
