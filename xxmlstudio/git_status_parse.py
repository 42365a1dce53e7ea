"""Parsing of ``git status --porcelain=v2 --branch`` output and repository detection."""

from __future__ import annotations

import os
import re
from pathlib import Path

from xxmlstudio.git_types import GitFileStatus, GitRepositoryStatus, GitStatusEntry

_STATUS_CODES = {
    "M": GitFileStatus.MODIFIED,
    "T": GitFileStatus.TYPE_CHANGED,
    "A": GitFileStatus.ADDED,
    "D": GitFileStatus.DELETED,
    "R": GitFileStatus.RENAMED,
    "C": GitFileStatus.COPIED,
    "U": GitFileStatus.CONFLICTED,
    "?": GitFileStatus.UNTRACKED,
    "!": GitFileStatus.IGNORED,
}

_AHEAD_BEHIND = re.compile(r"\+(-?\d+)\s+(-?\d+)")

_HEAD_PREFIX = "# branch.head "
_UPSTREAM_PREFIX = "# branch.upstream "
_AB_PREFIX = "# branch.ab "


def parse_status_char(c: str) -> GitFileStatus:
    """Map a porcelain status letter to a status; anything unknown is unmodified."""
    return _STATUS_CODES.get(c, GitFileStatus.UNMODIFIED)


def _changed_entry(line: str) -> GitStatusEntry | None:
    parts = line.split(" ")
    if len(parts) < 9:
        return None
    xy = parts[1]
    entry = GitStatusEntry(
        index_status=parse_status_char(xy[0:1]),
        work_tree_status=parse_status_char(xy[1:2]),
    )
    path_part = " ".join(parts[8:])
    if line.startswith("2 "):
        path, tab, old_path = path_part.partition("\t")
        entry.path = path
        if tab:
            entry.old_path = old_path
    else:
        entry.path = path_part
    return entry


def _unmerged_entry(line: str) -> GitStatusEntry | None:
    parts = line.split(" ")
    if len(parts) < 11:
        return None
    return GitStatusEntry(
        path=" ".join(parts[10:]),
        index_status=GitFileStatus.CONFLICTED,
        work_tree_status=GitFileStatus.CONFLICTED,
    )


def parse_status(output: str) -> GitRepositoryStatus:
    """Build a repository status from porcelain v2 output with branch headers."""
    status = GitRepositoryStatus()
    for line in filter(None, output.split("\n")):
        if line.startswith(_HEAD_PREFIX):
            status.branch = line[len(_HEAD_PREFIX):]
            if status.branch == "(detached)":
                status.detached_head = True
        elif line.startswith(_UPSTREAM_PREFIX):
            status.upstream = line[len(_UPSTREAM_PREFIX):]
        elif line.startswith(_AB_PREFIX):
            match = _AHEAD_BEHIND.search(line)
            if match:
                status.ahead_count = int(match.group(1))
                status.behind_count = -int(match.group(2))
        elif line.startswith(("1 ", "2 ")):
            entry = _changed_entry(line)
            if entry is not None:
                status.entries.append(entry)
        elif line.startswith("u "):
            entry = _unmerged_entry(line)
            if entry is not None:
                status.entries.append(entry)
        elif line.startswith("? "):
            status.entries.append(GitStatusEntry(
                path=line[2:],
                index_status=GitFileStatus.UNTRACKED,
                work_tree_status=GitFileStatus.UNTRACKED,
            ))
        elif line.startswith("! "):
            status.entries.append(GitStatusEntry(
                path=line[2:],
                index_status=GitFileStatus.IGNORED,
                work_tree_status=GitFileStatus.IGNORED,
            ))
    return status


def detect_git_repository(path: str | os.PathLike[str]) -> bool:
    """True if ``path`` or one of its ancestors holds a ``.git`` entry."""
    start = Path(os.path.abspath(path))
    if not start.is_dir():
        return False
    return any((directory / ".git").exists() for directory in (start, *start.parents))