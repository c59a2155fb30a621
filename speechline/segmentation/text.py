"""Text helpers for sentence boundaries and utterance cleanup."""

from __future__ import annotations

import re
from collections.abc import Collection

_ANNOTATION_PATTERN = re.compile(r"[(（][^)）]*[)）]")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_CJK_GAP_PATTERN = re.compile(
    r"([㐀-䶿一-鿿])\s+(?=[㐀-䶿一-鿿])"
)


def ends_sentence(text: str, boundary_punctuation: Collection[str]) -> bool:
    """Returns whether ``text`` ends with one of the boundary code points."""
    stripped = text.rstrip()
    return bool(stripped) and stripped[-1] in boundary_punctuation


def strip_annotations(text: str) -> str:
    """Removes parenthesized non-speech annotations such as ``(laughs)``."""
    return _ANNOTATION_PATTERN.sub("", text)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def join_cjk_characters(text: str) -> str:
    """Removes the spaces some providers insert between CJK ideographs.

    ``"你 先 玩 ok"`` becomes ``"你先玩 ok"``; spacing around Latin words is kept.
    """
    return collapse_whitespace(_CJK_GAP_PATTERN.sub(r"\1", text))


def clean_utterance_text(text: str, *, join_cjk: bool = False) -> str:
    """Strips annotations, collapses whitespace, and trims utterance text."""
    cleaned = collapse_whitespace(strip_annotations(text))
    if join_cjk:
        cleaned = join_cjk_characters(cleaned)
    return cleaned
