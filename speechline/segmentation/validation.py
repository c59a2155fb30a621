"""Timeline invariant checks."""

from __future__ import annotations

from collections.abc import Sequence

from speechline.domain import (
    DEFAULT_SILENCE_THRESHOLD_SECONDS,
    SilenceSlot,
    TimelineEntry,
    gap_meets_threshold,
)


class TimelineValidationError(ValueError):
    """Raised when a timeline breaks ordering or coverage invariants."""

    def __init__(self, violations: Sequence[str]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))


def find_timeline_violations(
    timeline: Sequence[TimelineEntry],
    total_duration_seconds: float,
    *,
    threshold_seconds: float = DEFAULT_SILENCE_THRESHOLD_SECONDS,
) -> list[str]:
    """Lists every ordering, overlap, and coverage violation in ``timeline``.

    A valid timeline is sorted by start, has no overlapping entries, leaves
    only gaps strictly shorter than the threshold uncovered within
    ``[0, total_duration_seconds]``, and holds no silence slot shorter than
    the threshold.
    """
    violations: list[str] = []
    covered_end = 0.0
    previous: TimelineEntry | None = None

    for index, entry in enumerate(timeline):
        if entry.end < entry.start:
            violations.append(f"entry {index} ends before it starts")
        if previous is not None:
            if entry.start < previous.start:
                violations.append(f"entry {index} starts before entry {index - 1}")
            if previous.end > entry.start:
                violations.append(f"entry {index} overlaps entry {index - 1}")
        if isinstance(entry, SilenceSlot) and not gap_meets_threshold(
            entry.end - entry.start, threshold_seconds
        ):
            violations.append(f"silence slot {index} is shorter than the threshold")

        gap = entry.start - covered_end
        if gap > 0.0 and gap_meets_threshold(gap, threshold_seconds):
            violations.append(
                f"uncovered gap of {gap:.2f}s before entry {index}"
            )
        covered_end = max(covered_end, entry.end)
        previous = entry

    trailing_gap = total_duration_seconds - covered_end
    if trailing_gap > 0.0 and gap_meets_threshold(trailing_gap, threshold_seconds):
        violations.append(f"uncovered trailing gap of {trailing_gap:.2f}s")
    return violations


def assert_valid_timeline(
    timeline: Sequence[TimelineEntry],
    total_duration_seconds: float,
    *,
    threshold_seconds: float = DEFAULT_SILENCE_THRESHOLD_SECONDS,
) -> None:
    """Raises ``TimelineValidationError`` when ``timeline`` is not valid."""
    violations = find_timeline_violations(
        timeline,
        total_duration_seconds,
        threshold_seconds=threshold_seconds,
    )
    if violations:
        raise TimelineValidationError(violations)
