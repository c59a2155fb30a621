from .providers import (
    PARSERS,
    TranscriptDocument,
    TranscriptPayloadError,
    convert_speaker_label,
    load_transcript,
    session_duration,
    tokens_from_assemblyai,
    tokens_from_elevenlabs,
    tokens_from_records,
)

__all__ = [
    "PARSERS",
    "TranscriptDocument",
    "TranscriptPayloadError",
    "convert_speaker_label",
    "load_transcript",
    "session_duration",
    "tokens_from_assemblyai",
    "tokens_from_elevenlabs",
    "tokens_from_records",
]
