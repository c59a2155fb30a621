"""Domain data structures for word tokens, utterances, and silence slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Literal, TypeAlias

SILENT_SPEAKER_ID = "__SILENT__"
DEFAULT_SILENCE_THRESHOLD_SECONDS = 3.0
DEFAULT_BOUNDARY_PUNCTUATION: frozenset[str] = frozenset(
    {".", "?", "!", "。", "？", "！", "．"}
)


class TranscriptIntegrityError(ValueError):
    """Raised when a word token carries missing or inconsistent timestamps."""


class TokenKind(StrEnum):
    """Token category emitted by the speech-to-text provider."""

    WORD = "word"
    SPACING = "spacing"


@dataclass(frozen=True)
class WordToken:
    """One diarized word token with start/end timing in seconds."""

    text: str
    start: float | None
    end: float | None
    speaker_id: str | None = None
    kind: TokenKind = TokenKind.WORD


@dataclass(frozen=True)
class Utterance:
    """A closed run of words attributed to one speaker."""

    speaker_id: str | None
    text: str
    start: float
    end: float
    duration: float

    @property
    def kind(self) -> Literal["utterance"]:
        return "utterance"


@dataclass(frozen=True)
class SilenceSlot:
    """A synthetic gap in speech coverage at least as long as the threshold."""

    start: float
    end: float
    duration: float
    after_utterance_index: int = -1
    speaker_id: str = field(default=SILENT_SPEAKER_ID, init=False)

    @property
    def kind(self) -> Literal["silence"]:
        return "silence"

    @property
    def text(self) -> str:
        return ""


TimelineEntry: TypeAlias = Utterance | SilenceSlot
Timeline: TypeAlias = list[TimelineEntry]


def round_duration(start: float, end: float) -> float:
    """Returns an interval length rounded to centiseconds."""
    return round(end - start, 2)


def gap_meets_threshold(gap: float, threshold: float) -> bool:
    """Returns whether a non-negative gap is long enough to be a silence slot.

    Gaps are compared at microsecond precision so that float noise such as
    ``4.1 - 1.1 == 2.9999999999999996`` does not hide a 3.0s gap. The sign is
    checked before rounding so an overlap of float noise never becomes a slot.
    """
    return gap >= 0.0 and round(gap, 6) >= threshold
