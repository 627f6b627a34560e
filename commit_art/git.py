"""Inspect and extend the history of the git repository in the working directory."""

import os
import subprocess
from datetime import datetime

from commit_art.dates import format_date
from commit_art.errors import InputError, SinkError

GIT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def run(cmd, env=None) -> str:
    res = subprocess.run(cmd, env=env, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True)
    if res.returncode != 0:
        raise SinkError(f"{' '.join(cmd)} failed with exit code {res.returncode}:\n{res.stdout}")
    return res.stdout


def ensure_work_tree() -> None:
    try:
        run(["git", "rev-parse", "--is-inside-work-tree"])
    except SinkError as exc:
        raise InputError(
            "Not a git repository. Initialize one (git init) and run again from inside it."
        ) from exc


def latest_commit_date():
    """Newest author or committer date over all refs, or None for an empty repository."""
    if not run(["git", "for-each-ref", "--count=1", "--format=%(refname)"]).strip():
        return None
    stamps = [int(v) for v in run(["git", "log", "--all", "--format=%at %ct"]).split()]
    if not stamps:
        return None
    return datetime.fromtimestamp(max(stamps))


def has_commit_after(when: datetime) -> bool:
    latest = latest_commit_date()
    return latest is not None and latest > when


def create_empty_commits(when: datetime, count: int) -> None:
    """Create `count` empty commits authored and committed at `when`."""
    if count <= 0:
        raise ValueError(f"commit count must be positive, got {count}")
    stamp = when.strftime(GIT_DATE_FORMAT)
    env = os.environ.copy()
    env["GIT_AUTHOR_DATE"] = stamp
    env["GIT_COMMITTER_DATE"] = stamp
    day = format_date(when)
    for nth in range(1, count + 1):
        msg = f"commit-art {day} {nth}/{count}"
        run(["git", "commit", "--allow-empty", "--no-verify", "-m", msg, "--quiet"], env=env)
