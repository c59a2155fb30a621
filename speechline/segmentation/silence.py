"""Silence-slot extraction over a speech-only utterance list."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from speechline.domain import (
    DEFAULT_SILENCE_THRESHOLD_SECONDS,
    SilenceSlot,
    Timeline,
    Utterance,
    gap_meets_threshold,
    round_duration,
)
from speechline.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def _validate_inputs(total_duration_seconds: float, threshold_seconds: float) -> None:
    """Validates session duration and threshold before extraction."""
    if not math.isfinite(total_duration_seconds):
        raise ValueError("total_duration_seconds must be finite.")
    if total_duration_seconds < 0.0:
        raise ValueError("total_duration_seconds cannot be negative.")
    if not math.isfinite(threshold_seconds):
        raise ValueError("threshold_seconds must be finite.")


def _slot(start: float, end: float, after_utterance_index: int) -> SilenceSlot:
    return SilenceSlot(
        start=start,
        end=end,
        duration=round_duration(start, end),
        after_utterance_index=after_utterance_index,
    )


def _reconcile(
    utterances: Sequence[Utterance],
    total_duration_seconds: float,
    threshold_seconds: float,
) -> tuple[list[SilenceSlot], Timeline]:
    """Walks utterances once, returning the slots and the interleaved timeline."""
    _validate_inputs(total_duration_seconds, threshold_seconds)
    slots: list[SilenceSlot] = []
    timeline: Timeline = []
    last_covered_end = 0.0

    for index, utterance in enumerate(utterances):
        gap = utterance.start - last_covered_end
        if gap_meets_threshold(gap, threshold_seconds):
            slot = _slot(last_covered_end, utterance.start, index - 1)
            slots.append(slot)
            timeline.append(slot)
        timeline.append(utterance)
        last_covered_end = max(last_covered_end, utterance.end)

    trailing_gap = total_duration_seconds - last_covered_end
    if gap_meets_threshold(trailing_gap, threshold_seconds):
        slot = _slot(last_covered_end, total_duration_seconds, len(utterances) - 1)
        slots.append(slot)
        timeline.append(slot)

    logger.debug(
        "Found %d silence slots across %d utterances (threshold: %ss).",
        len(slots),
        len(utterances),
        threshold_seconds,
    )
    return slots, timeline


def extract_silence_slots(
    utterances: Sequence[Utterance],
    total_duration_seconds: float,
    *,
    threshold_seconds: float = DEFAULT_SILENCE_THRESHOLD_SECONDS,
) -> list[SilenceSlot]:
    """Returns a silence slot for every speech gap meeting the threshold.

    Leading gaps start at ``0`` and the trailing gap ends at
    ``total_duration_seconds``; with no utterances the whole session becomes
    one slot. Gaps shorter than the threshold stay uncovered. A threshold of
    zero or less flags every gap, including zero-length ones.

    The input must be the speech-only output of the segmenter; passing a
    timeline that already holds silence slots is not supported.
    """
    slots, _ = _reconcile(utterances, total_duration_seconds, threshold_seconds)
    return slots


def insert_silence_slots(
    utterances: Sequence[Utterance],
    total_duration_seconds: float,
    *,
    threshold_seconds: float = DEFAULT_SILENCE_THRESHOLD_SECONDS,
) -> Timeline:
    """Interleaves utterances with their silence slots, ordered by start."""
    _, timeline = _reconcile(utterances, total_duration_seconds, threshold_seconds)
    return timeline
