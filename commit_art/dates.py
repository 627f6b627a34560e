from datetime import date, datetime, timedelta

# Noon keeps day arithmetic clear of DST and UTC-offset edges.
NOON = 12


def at_noon(d: date) -> datetime:
    return datetime(d.year, d.month, d.day, NOON, 0, 0)


def sunday_on_or_before(d: date) -> date:
    # Python weekday: Mon=0..Sun=6.
    return d - timedelta(days=(d.weekday() + 1) % 7)


def first_sunday_days_ago(days: int, now: datetime = None) -> datetime:
    """
    Most recent Sunday on or before `days` days ago, at noon.
    Only the calendar day of `now` matters, so the result is the same
    for any time of day.
    """
    if now is None:
        now = datetime.now()
    target = now.date() - timedelta(days=days)
    return at_noon(sunday_on_or_before(target))


def first_sunday_of_year(year: int) -> datetime:
    """First Sunday on or after January 1 of `year`, at noon."""
    jan1 = date(year, 1, 1)
    return at_noon(jan1 + timedelta(days=(6 - jan1.weekday()) % 7))


def end_of_year(year: int) -> datetime:
    return at_noon(date(year, 12, 31))


def format_date(value: date) -> str:
    """YYYY-MM-DD key shared with the contribution calendar."""
    return value.strftime("%Y-%m-%d")
