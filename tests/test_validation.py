"""Tests for timeline ordering and coverage invariant checks."""

import pytest

from speechline.domain import SilenceSlot, Utterance
from speechline.segmentation.validation import (
    TimelineValidationError,
    assert_valid_timeline,
    find_timeline_violations,
)


def _utt(start: float, end: float, speaker: str = "A") -> Utterance:
    return Utterance(speaker, "words", start, end, round(end - start, 2))


def test_reconciled_timeline_has_no_violations() -> None:
    timeline = [_utt(0.0, 1.0), SilenceSlot(1.0, 4.2, 3.2, 0), _utt(4.2, 4.5, "B")]

    assert find_timeline_violations(timeline, 6.0, threshold_seconds=3.0) == []
    assert_valid_timeline(timeline, 6.0, threshold_seconds=3.0)


def test_unsorted_entries_are_reported() -> None:
    timeline = [_utt(2.0, 2.5), _utt(0.0, 1.0)]

    violations = find_timeline_violations(timeline, 2.5)

    assert "entry 1 starts before entry 0" in violations


def test_overlapping_entries_are_reported() -> None:
    timeline = [_utt(0.0, 1.5), _utt(1.0, 2.0, "B")]

    assert find_timeline_violations(timeline, 2.0) == ["entry 1 overlaps entry 0"]


def test_uncovered_gap_meeting_threshold_is_reported() -> None:
    timeline = [_utt(0.0, 1.0), _utt(4.2, 4.5, "B")]

    assert find_timeline_violations(timeline, 4.5, threshold_seconds=3.0) == [
        "uncovered gap of 3.20s before entry 1"
    ]


def test_uncovered_trailing_gap_is_reported() -> None:
    violations = find_timeline_violations([_utt(0.0, 1.0)], 10.0, threshold_seconds=3.0)

    assert violations == ["uncovered trailing gap of 9.00s"]


def test_short_uncovered_gaps_are_allowed() -> None:
    timeline = [_utt(1.0, 2.0), _utt(4.5, 5.0, "B")]

    assert find_timeline_violations(timeline, 7.0, threshold_seconds=3.0) == []


def test_silence_slot_shorter_than_threshold_is_reported() -> None:
    timeline = [_utt(0.0, 1.0), SilenceSlot(1.0, 2.0, 1.0, 0), _utt(2.0, 3.0)]

    assert find_timeline_violations(timeline, 3.0, threshold_seconds=3.0) == [
        "silence slot 1 is shorter than the threshold"
    ]


def test_assert_valid_timeline_raises_with_all_violations() -> None:
    timeline = [_utt(0.0, 1.5), _utt(1.0, 2.0, "B")]

    with pytest.raises(TimelineValidationError) as excinfo:
        assert_valid_timeline(timeline, 10.0, threshold_seconds=3.0)

    assert excinfo.value.violations == [
        "entry 1 overlaps entry 0",
        "uncovered trailing gap of 8.00s",
    ]
