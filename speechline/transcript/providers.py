"""
Provider payload adapters for diarized speech-to-text output.

This module converts provider JSON responses into ``WordToken`` streams that
the segmentation pipeline consumes. It includes adapters for ElevenLabs,
AssemblyAI, and the package's own flat token records.

Functions:
    - tokens_from_elevenlabs: Reads ElevenLabs ``words`` (seconds, typed tokens).
    - tokens_from_assemblyai: Reads AssemblyAI ``words`` (milliseconds, letter speakers).
    - tokens_from_records: Reads flat ``text/start/end/speaker_id/kind`` records.
    - load_transcript: Loads a JSON file and dispatches to the provider adapter.
"""

from __future__ import annotations

import json
import logging
import string
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from speechline.domain import TokenKind, WordToken
from speechline.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


class TranscriptPayloadError(ValueError):
    """Raised when a provider payload cannot be read as word tokens."""


@dataclass(frozen=True)
class TranscriptDocument:
    """Word tokens and session length read from one provider payload."""

    provider: str
    tokens: list[WordToken]
    duration_seconds: float


def convert_speaker_label(label: str | None) -> str | None:
    """Maps letter speaker labels to ``speaker_N`` ids (``A`` -> ``speaker_0``).

    Labels that are not a single ASCII letter are returned unchanged.
    """
    if label is None:
        return None
    normalized = str(label).strip()
    if len(normalized) == 1 and normalized in string.ascii_letters:
        return f"speaker_{string.ascii_uppercase.index(normalized.upper())}"
    return normalized or None


def _word_list(payload: Any, provider: str) -> list[Any]:
    if not isinstance(payload, Mapping):
        raise TranscriptPayloadError(f"{provider} payload must be a JSON object.")
    words = payload.get("words")
    if words is None:
        logger.warning("No words found in %s response.", provider)
        return []
    if not isinstance(words, list):
        raise TranscriptPayloadError(f"{provider} 'words' must be a list.")
    return words


def _word_mapping(word: Any, index: int) -> Mapping[str, Any]:
    if not isinstance(word, Mapping):
        raise TranscriptPayloadError(f"Word {index} must be a JSON object.")
    return word


def _seconds(value: Any, index: int, *, scale: float = 1.0) -> float | None:
    """Reads an optional timestamp, dividing by ``scale`` to get seconds."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise TranscriptPayloadError(f"Word {index} has a non-numeric timestamp.")
    try:
        return float(value) / scale
    except (TypeError, ValueError) as err:
        raise TranscriptPayloadError(
            f"Word {index} has a non-numeric timestamp: {value!r}"
        ) from err


def _speaker(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def tokens_from_elevenlabs(payload: Any) -> list[WordToken]:
    """Reads ElevenLabs word tokens.

    ``spacing`` tokens are kept as ``TokenKind.SPACING`` so the normalizer can
    drop them; ``word`` and ``audio_event`` tokens become ``TokenKind.WORD``.
    """
    tokens: list[WordToken] = []
    for index, raw_word in enumerate(_word_list(payload, "ElevenLabs")):
        word = _word_mapping(raw_word, index)
        kind = TokenKind.SPACING if word.get("type") == "spacing" else TokenKind.WORD
        tokens.append(
            WordToken(
                text=str(word.get("text", "")),
                start=_seconds(word.get("start"), index),
                end=_seconds(word.get("end"), index),
                speaker_id=_speaker(word.get("speaker_id")),
                kind=kind,
            )
        )
    return tokens


def tokens_from_assemblyai(payload: Any) -> list[WordToken]:
    """Reads AssemblyAI word tokens, converting milliseconds to seconds."""
    tokens: list[WordToken] = []
    for index, raw_word in enumerate(_word_list(payload, "AssemblyAI")):
        word = _word_mapping(raw_word, index)
        tokens.append(
            WordToken(
                text=str(word.get("text", "")),
                start=_seconds(word.get("start"), index, scale=1000.0),
                end=_seconds(word.get("end"), index, scale=1000.0),
                speaker_id=convert_speaker_label(word.get("speaker")),
            )
        )
    return tokens


def tokens_from_records(payload: Any) -> list[WordToken]:
    """Reads flat token records, either a list or ``{"words": [...]}``."""
    records = payload if isinstance(payload, list) else _word_list(payload, "Token")
    tokens: list[WordToken] = []
    for index, raw_record in enumerate(records):
        record = _word_mapping(raw_record, index)
        try:
            kind = TokenKind(record.get("kind", TokenKind.WORD))
        except ValueError as err:
            raise TranscriptPayloadError(
                f"Word {index} has an unknown kind: {record.get('kind')!r}"
            ) from err
        tokens.append(
            WordToken(
                text=str(record.get("text", "")),
                start=_seconds(record.get("start"), index),
                end=_seconds(record.get("end"), index),
                speaker_id=_speaker(record.get("speaker_id")),
                kind=kind,
            )
        )
    return tokens


PARSERS: dict[str, Callable[[Any], list[WordToken]]] = {
    "elevenlabs": tokens_from_elevenlabs,
    "assemblyai": tokens_from_assemblyai,
    "tokens": tokens_from_records,
}


def session_duration(payload: Any, tokens: Sequence[WordToken]) -> float:
    """Returns the payload's audio duration, else the latest token end."""
    if isinstance(payload, Mapping):
        for key in ("audio_duration", "duration"):
            value = payload.get(key)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return float(value)
    ends = [float(token.end) for token in tokens if token.end is not None]
    return max(ends, default=0.0)


def load_transcript(path: str | Path, provider: str) -> TranscriptDocument:
    """Loads a provider JSON file into word tokens and a session duration.

    Raises:
        TranscriptPayloadError: If the provider is unknown or the file is not
            valid JSON in the provider's shape.
        OSError: If the file cannot be read.
    """
    parser = PARSERS.get(provider)
    if parser is None:
        raise TranscriptPayloadError(
            f"Unknown provider '{provider}'. Must be one of: {', '.join(PARSERS)}"
        )
    transcript_path = Path(path)
    logger.info("Loading %s transcript from %s", provider, transcript_path)
    with open(transcript_path, "r", encoding="utf-8") as file:
        try:
            payload = json.load(file)
        except json.JSONDecodeError as err:
            raise TranscriptPayloadError(
                f"{transcript_path} is not valid JSON: {err}"
            ) from err

    tokens = parser(payload)
    duration = session_duration(payload, tokens)
    logger.info("Loaded %d tokens spanning %.2fs", len(tokens), duration)
    return TranscriptDocument(provider=provider, tokens=tokens, duration_seconds=duration)
