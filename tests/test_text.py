"""Tests for sentence-boundary detection and utterance text cleanup."""

from speechline.domain import DEFAULT_BOUNDARY_PUNCTUATION
from speechline.segmentation.text import (
    clean_utterance_text,
    ends_sentence,
    join_cjk_characters,
)


def test_ends_sentence_recognizes_ascii_and_full_width_marks() -> None:
    for text in ("there.", "really?", "wow!", "你好。", "真的？", "好！", "end．", "done. "):
        assert ends_sentence(text, DEFAULT_BOUNDARY_PUNCTUATION), text


def test_ends_sentence_rejects_inner_or_missing_marks() -> None:
    for text in ("e.g", "well,", "", "   ", "3.5kg"):
        assert not ends_sentence(text, DEFAULT_BOUNDARY_PUNCTUATION), text


def test_ends_sentence_uses_the_given_boundary_set() -> None:
    assert not ends_sentence("really?", {"."})
    assert ends_sentence("over;", {";"})


def test_clean_utterance_text_strips_annotations_and_whitespace() -> None:
    assert clean_utterance_text("(laughs) okay.") == "okay."
    assert clean_utterance_text("Hello  (wind)   there") == "Hello there"
    assert clean_utterance_text("（笑）好的") == "好的"
    assert clean_utterance_text("(background noise)") == ""


def test_join_cjk_characters_keeps_latin_spacing() -> None:
    assert join_cjk_characters("你 先 玩") == "你先玩"
    assert join_cjk_characters("我 要 play now 好 吗") == "我要 play now 好吗"


def test_clean_utterance_text_joins_cjk_only_when_requested() -> None:
    assert clean_utterance_text("你 好") == "你 好"
    assert clean_utterance_text("你 好", join_cjk=True) == "你好"
