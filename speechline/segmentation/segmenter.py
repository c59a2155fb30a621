"""Single-pass utterance segmentation over a normalized word stream.

The segmenter holds at most one open utterance. A word either opens it,
extends it, or closes it and opens the next one:

- a change between two resolved speakers closes the open utterance;
- a word ending with a boundary code point closes it even when the next
  word belongs to the same speaker;
- an unresolved (``None``) speaker never forces a break, and an open
  utterance without a speaker adopts the first resolved one it meets.

Closed utterances are immutable ``Utterance`` values.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

from speechline.domain import (
    DEFAULT_BOUNDARY_PUNCTUATION,
    TranscriptIntegrityError,
    Utterance,
    WordToken,
    round_duration,
)
from speechline.segmentation.text import clean_utterance_text, ends_sentence
from speechline.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


@dataclass(frozen=True)
class SegmentationConfig:
    """Controls sentence boundaries and utterance text cleanup."""

    boundary_punctuation: Collection[str] = DEFAULT_BOUNDARY_PUNCTUATION
    join_cjk_characters: bool = False


@dataclass
class _UtteranceBuilder:
    """Open utterance accumulating words until it is finalized."""

    speaker_id: str | None
    start: float
    end: float
    parts: list[str] = field(default_factory=list)

    @classmethod
    def open(cls, token: WordToken, start: float, end: float) -> _UtteranceBuilder:
        return cls(speaker_id=token.speaker_id, start=start, end=end, parts=[token.text])

    def has_text(self) -> bool:
        return any(part.strip() for part in self.parts)

    def append(self, text: str, end: float) -> None:
        self.parts.append(text)
        self.end = max(self.end, end)

    def finalize(self, *, join_cjk: bool) -> Utterance | None:
        """Builds the immutable utterance, or ``None`` when no speech remains."""
        text = clean_utterance_text(" ".join(self.parts), join_cjk=join_cjk)
        if not text:
            return None
        return Utterance(
            speaker_id=self.speaker_id,
            text=text,
            start=self.start,
            end=self.end,
            duration=round_duration(self.start, self.end),
        )


def _validated_bounds(index: int, token: WordToken) -> tuple[float, float]:
    """Returns token timestamps, raising on missing or inconsistent values."""
    if token.start is None or token.end is None:
        raise TranscriptIntegrityError(
            f"Word token {index} ({token.text!r}) is missing timestamps."
        )
    try:
        start = float(token.start)
        end = float(token.end)
    except (TypeError, ValueError) as err:
        raise TranscriptIntegrityError(
            f"Word token {index} ({token.text!r}) has non-numeric timestamps."
        ) from err
    if not (math.isfinite(start) and math.isfinite(end)):
        raise TranscriptIntegrityError(
            f"Word token {index} ({token.text!r}) has non-finite timestamps."
        )
    if start < 0.0:
        raise TranscriptIntegrityError(
            f"Word token {index} ({token.text!r}) starts before zero: {start}."
        )
    if end < start:
        raise TranscriptIntegrityError(
            f"Word token {index} ({token.text!r}) ends before it starts: "
            f"start={start}, end={end}."
        )
    return start, end


def _is_speaker_change(active: str | None, incoming: str | None) -> bool:
    return active is not None and incoming is not None and active != incoming


def segment_utterances(
    words: Iterable[WordToken],
    *,
    config: SegmentationConfig | None = None,
) -> list[Utterance]:
    """Groups normalized words into speaker- and sentence-bounded utterances.

    Args:
        words: Time-ordered word tokens without spacing tokens.
        config: Boundary punctuation and cleanup controls.

    Returns:
        Closed utterances in stream order.

    Raises:
        TranscriptIntegrityError: If a token has missing timestamps or ends
            before it starts.
    """
    active_config = config if config is not None else SegmentationConfig()
    utterances: list[Utterance] = []
    builder: _UtteranceBuilder | None = None
    discarded = 0

    def close(closing: _UtteranceBuilder) -> None:
        nonlocal discarded
        utterance = closing.finalize(join_cjk=active_config.join_cjk_characters)
        if utterance is None:
            discarded += 1
            return
        utterances.append(utterance)

    for index, token in enumerate(words):
        start, end = _validated_bounds(index, token)
        if builder is None:
            builder = _UtteranceBuilder.open(token, start, end)
        elif _is_speaker_change(builder.speaker_id, token.speaker_id):
            if builder.has_text():
                close(builder)
                builder = _UtteranceBuilder.open(token, start, end)
            else:
                builder.speaker_id = token.speaker_id
                builder.append(token.text, end)
        else:
            if builder.speaker_id is None:
                builder.speaker_id = token.speaker_id
            builder.append(token.text, end)

        if ends_sentence(token.text, active_config.boundary_punctuation):
            close(builder)
            builder = None

    if builder is not None and builder.has_text():
        close(builder)

    logger.debug(
        "Segmented %d utterances (%d empty after cleanup).",
        len(utterances),
        discarded,
    )
    return utterances
