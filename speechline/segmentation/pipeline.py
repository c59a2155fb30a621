"""End-to-end word-token to timeline pipeline."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from speechline.domain import (
    DEFAULT_SILENCE_THRESHOLD_SECONDS,
    Timeline,
    TimelineEntry,
    WordToken,
)
from speechline.segmentation.normalizer import normalize_word_stream
from speechline.segmentation.segmenter import SegmentationConfig, segment_utterances
from speechline.segmentation.silence import insert_silence_slots
from speechline.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def build_timeline(
    tokens: Iterable[WordToken],
    total_duration_seconds: float,
    *,
    silence_threshold_seconds: float = DEFAULT_SILENCE_THRESHOLD_SECONDS,
    config: SegmentationConfig | None = None,
) -> Timeline:
    """Builds the session timeline from raw diarized word tokens.

    Args:
        tokens: Time-ordered tokens as emitted by the provider.
        total_duration_seconds: Session length in seconds.
        silence_threshold_seconds: Minimum gap length flagged as silence.
        config: Segmentation controls.

    Returns:
        Utterances and silence slots ordered by start.

    Raises:
        TranscriptIntegrityError: If a word token is malformed.
        ValueError: If the duration is negative or not finite.
    """
    words = normalize_word_stream(tokens)
    utterances = segment_utterances(words, config=config)
    timeline = insert_silence_slots(
        utterances,
        total_duration_seconds,
        threshold_seconds=silence_threshold_seconds,
    )
    logger.info(
        "Timeline built with %d entries (%d utterances, %d silence slots).",
        len(timeline),
        len(utterances),
        len(timeline) - len(utterances),
    )
    return timeline


def timeline_entry_to_dict(entry: TimelineEntry, order: int) -> dict[str, Any]:
    """Converts one timeline entry into a plain, serializable record."""
    return {
        "order": order,
        "kind": entry.kind,
        "speaker_id": entry.speaker_id,
        "text": entry.text,
        "start": entry.start,
        "end": entry.end,
        "duration": entry.duration,
    }


def number_timeline(timeline: Sequence[TimelineEntry]) -> list[dict[str, Any]]:
    """Returns timeline records carrying a zero-based ``order`` ordinal."""
    return [timeline_entry_to_dict(entry, order) for order, entry in enumerate(timeline)]
