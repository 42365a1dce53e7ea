"""Parsing of branch, log, remote, commit and push output from Git."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from xxmlstudio.git_types import GitBranch, GitCommit

_AHEAD = re.compile(r"ahead (\d+)")
_BEHIND = re.compile(r"behind (\d+)")
_COMMIT_HASH = re.compile(r"\[\w+\s+([a-f0-9]+)\]")

_REMOTE_PREFIX = "remotes/"

_NO_UPSTREAM_MARKERS = (
    "has no upstream branch",
    "no upstream configured",
)

_NO_REMOTE_MARKERS = (
    "does not appear to be a git repository",
    "No configured push destination",
    "Could not read from remote repository",
    "fatal: 'origin'",
)


def _lines(output: str) -> list[str]:
    return [line for line in output.split("\n") if line]


def _bracket_contents(text: str, start: int, end: int) -> str:
    length = end - start - 1
    if length < 0:
        return text[start + 1:]
    return text[start + 1:start + 1 + length]


def _apply_upstream(branch: GitBranch, info: str) -> None:
    upstream, colon, ahead_behind = info.partition(":")
    if not colon:
        branch.upstream = info.strip()
        return
    branch.upstream = upstream.strip()
    ahead = _AHEAD.search(ahead_behind)
    if ahead:
        branch.ahead_count = int(ahead.group(1))
    behind = _BEHIND.search(ahead_behind)
    if behind:
        branch.behind_count = int(behind.group(1))


def _parse_branch_line(line: str) -> GitBranch | None:
    is_current = line.startswith("* ")
    text = line[2:].strip()
    parts = text.split()
    if not parts:
        return None

    branch = GitBranch(name=parts[0], is_current=is_current)
    if branch.name.startswith(_REMOTE_PREFIX):
        branch.is_remote = True
        branch.name = branch.name[len(_REMOTE_PREFIX):]

    if branch.name == "HEAD" or "->" in branch.name:
        return None

    if len(parts) >= 2:
        branch.last_commit_hash = parts[1]

    bracket_start = text.find("[")
    bracket_end = text.find("]")
    if bracket_start != -1 and bracket_end != -1:
        _apply_upstream(branch, _bracket_contents(text, bracket_start, bracket_end))

    if bracket_end != -1:
        subject_start = bracket_end + 2
    elif len(parts) >= 2:
        subject_start = text.find(parts[1]) + len(parts[1]) + 1
    else:
        subject_start = -1
    if 0 < subject_start < len(text):
        branch.last_commit_subject = text[subject_start:].strip()

    return branch


def parse_branches(output: str) -> list[GitBranch]:
    """Parse ``git branch -a -vv`` output into branches, skipping HEAD pointers."""
    branches = []
    for line in _lines(output):
        branch = _parse_branch_line(line)
        if branch is not None:
            branches.append(branch)
    return branches


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def parse_log(output: str) -> list[GitCommit]:
    """Parse log lines in the ``%H|%h|%an|%ae|%at|%s|%P`` format."""
    commits = []
    for line in _lines(output):
        parts = line.split("|")
        if len(parts) < 6:
            continue
        commit = GitCommit(
            hash=parts[0],
            short_hash=parts[1],
            author=parts[2],
            author_email=parts[3],
            author_date=datetime.fromtimestamp(_to_int(parts[4]), tz=timezone.utc),
            subject=parts[5],
        )
        if len(parts) >= 7:
            commit.parent_hashes = [p for p in parts[6].split(" ") if p]
        commits.append(commit)
    return commits


def parse_remotes(output: str) -> list[str]:
    """Parse ``git remote`` output into remote names."""
    return _lines(output)


def extract_commit_hash(output: str) -> str | None:
    """Pull the abbreviated hash from ``git commit`` output such as ``[main 1a2b3c4]``."""
    match = _COMMIT_HASH.search(output)
    return match.group(1) if match else None


def needs_upstream(error_output: str) -> bool:
    """True if a failed push reports a missing upstream branch or remote."""
    if any(marker in error_output for marker in _NO_UPSTREAM_MARKERS):
        return True
    if "The current branch" in error_output and "has no upstream" in error_output:
        return True
    return any(marker in error_output for marker in _NO_REMOTE_MARKERS)