"""Existing contribution counts from the GitHub GraphQL API."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from commit_art.errors import SourceUnavailableError

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

QUERY = """
query($login: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $login) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        weeks {
          contributionDays {
            date
            contributionCount
          }
        }
      }
    }
  }
}
"""


def parse_contribution_calendar(payload: Any) -> dict[str, int]:
    """Pull `{YYYY-MM-DD: count}` out of a GraphQL response body."""

    if not isinstance(payload, Mapping):
        raise ValueError("GitHub GraphQL response is invalid")

    if payload.get("errors"):
        raise ValueError("GitHub GraphQL returned errors")

    data = payload.get("data")
    if not isinstance(data, Mapping):
        raise ValueError("GitHub GraphQL data is missing")

    user = data.get("user")
    if not isinstance(user, Mapping):
        raise ValueError("GitHub user not found")

    collection = user.get("contributionsCollection")
    if not isinstance(collection, Mapping):
        raise ValueError("GitHub contributionsCollection is missing")

    calendar = collection.get("contributionCalendar")
    if not isinstance(calendar, Mapping):
        raise ValueError("GitHub contributionCalendar is missing")

    weeks = calendar.get("weeks")
    if not isinstance(weeks, list):
        raise ValueError("GitHub contribution weeks are missing")

    counts: dict[str, int] = {}
    for week in weeks:
        if not isinstance(week, Mapping):
            continue
        contribution_days = week.get("contributionDays")
        if not isinstance(contribution_days, list):
            continue
        for item in contribution_days:
            if not isinstance(item, Mapping):
                continue
            raw_date = item.get("date")
            raw_count = item.get("contributionCount")
            if isinstance(raw_date, str) and isinstance(raw_count, int):
                counts[raw_date] = raw_count

    return counts


def fetch_contributions(
    user: str,
    year: int,
    token: str | None,
    graphql_url: str = GITHUB_GRAPHQL_URL,
) -> dict[str, int]:
    """Fetch per-day contribution counts of `user` for calendar year `year`."""

    if not token:
        raise SourceUnavailableError(
            "GITHUB_TOKEN is required to read existing contributions"
        )

    variables = {
        "login": user,
        "from": f"{year}-01-01T00:00:00Z",
        "to": f"{year}-12-31T23:59:59Z",
    }
    headers = {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "User-Agent": "commit-art",
    }

    try:
        response = httpx.post(
            graphql_url,
            json={"query": QUERY, "variables": variables},
            headers=headers,
            timeout=20.0,
        )
        response.raise_for_status()
        counts = parse_contribution_calendar(response.json())
    except (httpx.HTTPError, ValueError) as exc:
        raise SourceUnavailableError(
            f"cannot fetch contributions of {user} for {year}: {exc}"
        ) from exc

    logger.info("Fetched %d contribution days of %s for %d", len(counts), user, year)
    return counts


def fetch_contribution_range(
    user: str,
    first_year: int,
    last_year: int,
    token: str | None,
    graphql_url: str = GITHUB_GRAPHQL_URL,
) -> dict[str, int]:
    """
    Merge the contribution calendars of every year in the range. A date
    returned by more than one fetch keeps the value of the later year.
    """

    merged: dict[str, int] = {}
    for year in range(first_year, last_year + 1):
        merged.update(fetch_contributions(user, year, token, graphql_url))
    return merged
