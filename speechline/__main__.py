"""
speechline command-line interface

This module serves as the entry point for the speechline tool. It reads a
diarized transcript JSON file produced by a speech-to-text provider, builds
the session timeline of utterances and silence slots, prints it, and
optionally exports it.

Usage:
    speechline --file session.json [--provider elevenlabs] [--duration 600]
        [--silence-threshold 3.0] [--save_timeline] [--json-output out.json]
        [--text] [--log-level DEBUG]
"""

import argparse
import logging
import sys
import time

from dotenv import load_dotenv

from speechline.config import ConfigError, reload_settings
from speechline.segmentation import SegmentationConfig, build_timeline
from speechline.transcript import PARSERS, load_transcript
from speechline.utils.logger import configure_logging, get_logger
from speechline.utils.timeline_utils import (
    format_timeline_as_text,
    print_timeline,
    save_timeline_to_csv,
    save_timeline_to_json,
)

logger: logging.Logger = get_logger("speechline")


def _build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="Build speech/silence timelines from diarized transcripts"
    )
    parser.add_argument(
        "--file",
        type=str,
        help="Path to the provider transcript JSON file",
    )
    parser.add_argument(
        "--provider",
        choices=tuple(PARSERS.keys()),
        help="Transcript payload format (defaults to SPEECHLINE_PROVIDER)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        help=(
            "Session duration in seconds. If omitted, the payload's audio "
            "duration or the last word end is used."
        ),
    )
    parser.add_argument(
        "--silence-threshold",
        type=float,
        help="Minimum gap in seconds reported as a silence slot",
    )
    parser.add_argument(
        "--save_timeline",
        action="store_true",
        help="Save the timeline to a CSV file in the timeline folder",
    )
    parser.add_argument(
        "--json-output",
        type=str,
        help="Write the numbered timeline records to this JSON file",
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Print plain numbered lines instead of the colored table",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level for this run (overrides LOG_LEVEL)",
    )
    return parser


def main() -> None:
    """
    Main function to handle the command line interface logic.
    """
    args: argparse.Namespace = _build_parser().parse_args()
    load_dotenv()
    configure_logging(args.log_level)

    try:
        settings = reload_settings()
    except ConfigError as err:
        logger.error(msg=f"Invalid configuration: {err}")
        sys.exit(1)

    if not args.file:
        logger.error(msg="No transcript file provided.")
        sys.exit(1)

    provider: str = args.provider or settings.default_provider
    threshold: float = (
        args.silence_threshold
        if args.silence_threshold is not None
        else settings.silence.threshold_seconds
    )
    segmentation_config = SegmentationConfig(
        boundary_punctuation=settings.segmentation.boundary_punctuation,
        join_cjk_characters=provider == "assemblyai",
    )

    logger.info(msg="Starting timeline build...")
    start_time: float = time.time()
    try:
        document = load_transcript(args.file, provider)
        duration: float = (
            args.duration if args.duration is not None else document.duration_seconds
        )
        timeline = build_timeline(
            document.tokens,
            duration,
            silence_threshold_seconds=threshold,
            config=segmentation_config,
        )
    except (OSError, ValueError) as err:
        logger.error(msg=f"Failed to build timeline: {err}")
        sys.exit(1)

    if args.text:
        print(format_timeline_as_text(timeline))
    else:
        print_timeline(timeline)

    if args.save_timeline:
        csv_file_name: str = save_timeline_to_csv(
            timeline, args.file, settings.timeline.folder
        )
        logger.info(msg=f"Timeline saved to {csv_file_name}")

    if args.json_output:
        save_timeline_to_json(timeline, args.json_output)

    logger.info(
        msg=f"Timeline build completed in {time.time() - start_time:.2f} seconds"
    )


if __name__ == "__main__":
    main()
