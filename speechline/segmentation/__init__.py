"""Word-stream normalization, utterance segmentation, and silence extraction."""

from .normalizer import normalize_word_stream
from .pipeline import build_timeline, number_timeline, timeline_entry_to_dict
from .segmenter import SegmentationConfig, segment_utterances
from .silence import extract_silence_slots, insert_silence_slots
from .validation import (
    TimelineValidationError,
    assert_valid_timeline,
    find_timeline_violations,
)

__all__ = [
    "SegmentationConfig",
    "TimelineValidationError",
    "assert_valid_timeline",
    "build_timeline",
    "extract_silence_slots",
    "find_timeline_violations",
    "insert_silence_slots",
    "normalize_word_stream",
    "number_timeline",
    "segment_utterances",
    "timeline_entry_to_dict",
]
