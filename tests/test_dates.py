from datetime import date, datetime

from commit_art.dates import (
    end_of_year,
    first_sunday_days_ago,
    first_sunday_of_year,
    format_date,
    sunday_on_or_before,
)


def test_first_sunday_days_ago_ignores_time_of_day() -> None:
    """Any time on the same calendar day gives the same Sunday at noon."""

    early = first_sunday_days_ago(365, now=datetime(2026, 10, 17, 0, 1))
    late = first_sunday_days_ago(365, now=datetime(2026, 10, 17, 23, 59))

    assert early == late == datetime(2025, 10, 12, 12, 0, 0)


def test_first_sunday_days_ago_keeps_a_sunday_target() -> None:
    """A target day that is already a Sunday is returned as is."""

    assert first_sunday_days_ago(365, now=datetime(2026, 10, 12, 9, 0)) == datetime(
        2025, 10, 12, 12, 0, 0
    )


def test_first_sunday_of_year() -> None:
    """First Sunday on or after January 1, at noon."""

    assert first_sunday_of_year(2024) == datetime(2024, 1, 7, 12, 0, 0)
    assert first_sunday_of_year(2023) == datetime(2023, 1, 1, 12, 0, 0)
    assert first_sunday_of_year(2026) == datetime(2026, 1, 4, 12, 0, 0)
    assert first_sunday_of_year(2024).weekday() == 6


def test_end_of_year_is_december_31_noon() -> None:
    """Year mode ends on the last day of the year."""

    assert end_of_year(2024) == datetime(2024, 12, 31, 12, 0, 0)


def test_sunday_on_or_before() -> None:
    """Saturdays go back six days, Sundays stay."""

    assert sunday_on_or_before(date(2024, 1, 13)) == date(2024, 1, 7)
    assert sunday_on_or_before(date(2024, 1, 7)) == date(2024, 1, 7)


def test_format_date_is_stable_across_time_of_day() -> None:
    """Two values on the same calendar day share one key."""

    assert format_date(datetime(2024, 1, 7, 0, 0, 0)) == "2024-01-07"
    assert format_date(datetime(2024, 1, 7, 23, 59, 59)) == "2024-01-07"
    assert format_date(date(2024, 1, 7)) == "2024-01-07"
