"""Word-stream normalization ahead of utterance segmentation."""

from __future__ import annotations

from collections.abc import Iterable

from speechline.domain import TokenKind, WordToken


def normalize_word_stream(tokens: Iterable[WordToken]) -> list[WordToken]:
    """Drops non-lexical spacing tokens and keeps everything else in order."""
    return [token for token in tokens if token.kind != TokenKind.SPACING]
