#!/usr/bin/env python3
"""
Paint text or a small image on your GitHub contribution graph via empty commits.

What it does:
- Renders the text (built-in 7-row font) or a 7-pixel-high image into a grid
  of weeks x weekdays.
- Walks the grid one calendar day per cell, starting on a Sunday.
- Creates empty commits on those dates: --max-commits for drawn cells,
  --min-commits for the background, minus what the contribution graph
  already shows when --user is given.

Usage (inside a fresh repo):
  commit-art --text "HELLO" --dry-run
  commit-art --text "HELLO" --year 2024
  GITHUB_TOKEN=... commit-art --image-path logo.png --user octocat

Safety notes:
- It commits a lot. Use --dry-run (or DRY_RUN=1) first to preview.
- Commits are created in calendar order and the run refuses to start if the
  repository already has commits after the first drawn day.
"""

import argparse
import logging
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, datetime

from commit_art import canvas, git
from commit_art.contributions import GITHUB_GRAPHQL_URL, fetch_contribution_range
from commit_art.dates import end_of_year, first_sunday_days_ago, first_sunday_of_year, format_date
from commit_art.errors import CommitArtError, HistoryConflictError, InputError
from commit_art.scheduler import iter_plan, plan_commits

logger = logging.getLogger(__name__)

PROGRESS_WIDTH = canvas.MAX_WEEKS

PUSH_HINT = """
Now you can push this to GitHub. Assuming your project is empty you can do:
  git branch -M main
  git remote add origin git@github.com:<user_name>/<project_name>.git
  git push -u origin main
"""


@dataclass(frozen=True)
class Options:
    """Everything a run needs, read once from argv and the environment."""

    text: str = ""
    image_path: str = ""
    min_commits: int = 1
    max_commits: int = 30
    space_between_letters: int = 1
    year: int | None = None
    user: str | None = None
    dry_run: bool = False
    github_token: str | None = field(default=None, repr=False)
    graphql_url: str = GITHUB_GRAPHQL_URL

    def validate(self) -> None:
        if bool(self.text) == bool(self.image_path):
            raise InputError("exactly one of --text or --image-path is required")
        if self.min_commits < 0 or self.max_commits < 0:
            raise InputError("--min-commits and --max-commits must not be negative")
        # The walk may run past Dec 31, so the last representable year is excluded.
        if self.year is not None and not MINYEAR <= self.year <= MAXYEAR - 1:
            raise InputError(f"year must be between {MINYEAR} and {MAXYEAR - 1}, got {self.year}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="commit-art",
        description="Render text or a 7-pixel-high image on a contribution graph.",
    )
    ap.add_argument("--text", "-t", default="",
                    help="Text to render (text or image-path is required).")
    ap.add_argument("--image-path", "-i", default="",
                    help="Image 7 pixels high, up to 53 wide (text or image-path is required).")
    ap.add_argument("--min-commits", "--mc", type=int, default=1,
                    help="Commits on background days (default: 1).")
    ap.add_argument("--max-commits", "--xc", type=int, default=30,
                    help="Commits on drawn days (default: 30).")
    ap.add_argument("--year", "-y", type=int, default=None,
                    help="Calendar year to draw on (default: the last 365 days).")
    ap.add_argument("--space-between-letters", "-s", type=int, default=1,
                    help="Empty columns between letters (default: 1, valid: 0-7).")
    ap.add_argument("--user", "-u", default=None,
                    help="GitHub user whose existing contributions are subtracted "
                         "(beta, needs GITHUB_TOKEN).")
    ap.add_argument("--dry-run", action="store_true",
                    help="Preview the canvas and plan without committing.")
    return ap


def parse_options(argv=None, environ=None) -> Options:
    environ = os.environ if environ is None else environ
    args = build_parser().parse_args(argv)
    options = Options(
        text=args.text,
        image_path=args.image_path,
        min_commits=args.min_commits,
        max_commits=args.max_commits,
        space_between_letters=args.space_between_letters,
        year=args.year,
        user=args.user,
        dry_run=args.dry_run or environ.get("DRY_RUN") is not None,
        github_token=environ.get("GITHUB_TOKEN"),
        graphql_url=environ.get("GITHUB_GRAPHQL_URL", GITHUB_GRAPHQL_URL),
    )
    options.validate()
    return options


def calendar_window(year=None, now=None):
    """(first Sunday, last day) drawn on: a calendar year or the last 365 days."""
    if year:
        return first_sunday_of_year(year), end_of_year(year)
    now = now or datetime.now()
    return first_sunday_days_ago(365, now), now


def load_canvas(options: Options) -> list:
    if options.text:
        return canvas.from_text(options.text, options.space_between_letters)
    return canvas.from_image(options.image_path)


def fetch_existing(options: Options, start: datetime, end: datetime) -> dict[str, int]:
    if not options.user:
        return {}
    logger.warning(
        "Parameter --user is set: contributions in other repositories count towards "
        "the graph and are subtracted from the commits to create. This is in BETA; "
        "GitHub may bucket days in a different timezone."
    )
    return fetch_contribution_range(
        options.user, start.year, end.year, options.github_token, options.graphql_url
    )


def print_progress(done: int, total: int) -> None:
    filled = PROGRESS_WIDTH * done // total if total else PROGRESS_WIDTH
    pct = 100 * done // total if total else 100
    bar = "=" * filled + " " * (PROGRESS_WIDTH - filled)
    print(f"\r[{bar}] {pct}%", end="", flush=True)


def paint(
    options: Options,
    now=None,
    sink: Callable[[datetime, int], None] = git.create_empty_commits,
) -> int:
    grid = load_canvas(options)
    print(canvas.render_canvas(grid))
    pixels = canvas.flatten_by_columns(grid)
    start, end = calendar_window(options.year, now)
    if len(pixels) > (datetime.max - start).days:
        raise InputError(
            f"the canvas is {len(pixels) // canvas.HEIGHT} columns wide and runs past "
            f"the last representable date when started on {format_date(start)}"
        )

    if options.dry_run:
        existing = fetch_existing(options, start, end)
        plan = plan_commits(pixels, start, end, options.min_commits, options.max_commits, existing)
        total = sum(entry.count for entry in plan)
        print(f"[DRY-RUN] {format_date(start)} .. {format_date(end)}: "
              f"{len(plan)} days, {total} commits")
        return 0

    git.ensure_work_tree()
    if git.has_commit_after(start):
        raise HistoryConflictError(
            f"The repository has commits after {format_date(start)}. Remove them "
            f"(or start from a fresh repository) before drawing."
        )

    existing = fetch_existing(options, start, end)
    created = 0
    try:
        for step in iter_plan(pixels, start, end, options.min_commits, options.max_commits, existing):
            if step.entry is not None:
                sink(step.entry.date, step.entry.count)
                created += step.entry.count
            print_progress(step.index + 1, len(pixels))
    finally:
        # End the progress line even when the sink aborts the run.
        print()
    logger.info("Created %d commits", created)

    print(PUSH_HINT)
    print("HAVE FUN! BE KIND!")
    return 0


def main(argv=None) -> int:
    logging.basicConfig(level=os.environ.get("COMMIT_ART_LOG_LEVEL", "WARNING").upper())
    try:
        options = parse_options(argv)
        return paint(options)
    except CommitArtError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
