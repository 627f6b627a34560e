"""
Turn a flattened canvas into a day-by-day commit plan.

The walk starts on a Sunday and moves one calendar day per pixel, so a
column of the canvas lands on one week of the contribution graph. Each day
in range is given a target (max_commits for filled pixels, min_commits for
empty ones) and only the part of that target not already covered by
existing contributions is planned.
"""

from collections.abc import Iterator
from datetime import date, datetime, timedelta
from typing import NamedTuple

from commit_art.dates import format_date


class PlanEntry(NamedTuple):
    date: datetime
    count: int


class PlanStep(NamedTuple):
    """One pixel of the walk; `entry` is None when nothing is created that day."""

    index: int
    date: datetime
    entry: PlanEntry | None


def _day(value) -> date:
    return value.date() if isinstance(value, datetime) else value


def iter_plan(
    pixels: list[bool],
    start: datetime,
    end: datetime,
    min_commits: int,
    max_commits: int,
    existing: dict[str, int] | None = None,
) -> Iterator[PlanStep]:
    """
    Yield one step per pixel, in calendar order. Days after `end` are still
    walked but never produce an entry. Range checks compare calendar days,
    so the time of day in `start` and `end` does not matter, except that an
    entry on the last day is never dated later than `end`.
    """
    existing = existing or {}
    last_day = _day(end)
    current = start
    for idx, filled in enumerate(pixels):
        entry = None
        if _day(current) <= last_day:
            # Taken literally even when min_commits > max_commits.
            target = max_commits if filled else min_commits
            already = existing.get(format_date(current), 0)
            deficit = target - already
            if deficit > 0:
                entry = PlanEntry(min(current, end), deficit)
        yield PlanStep(idx, current, entry)
        current = current + timedelta(days=1)


def plan_commits(
    pixels: list[bool],
    start: datetime,
    end: datetime,
    min_commits: int,
    max_commits: int,
    existing: dict[str, int] | None = None,
) -> list[PlanEntry]:
    """Entries with a positive count, strictly increasing by date."""
    return [
        step.entry
        for step in iter_plan(pixels, start, end, min_commits, max_commits, existing)
        if step.entry is not None
    ]
