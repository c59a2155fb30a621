from .domain import (
    DEFAULT_BOUNDARY_PUNCTUATION,
    DEFAULT_SILENCE_THRESHOLD_SECONDS,
    SILENT_SPEAKER_ID,
    SilenceSlot,
    Timeline,
    TimelineEntry,
    TokenKind,
    TranscriptIntegrityError,
    Utterance,
    WordToken,
)
from .segmentation import (
    SegmentationConfig,
    TimelineValidationError,
    assert_valid_timeline,
    build_timeline,
    extract_silence_slots,
    find_timeline_violations,
    insert_silence_slots,
    normalize_word_stream,
    number_timeline,
    segment_utterances,
)
