"""Value types describing Git repository state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class GitFileStatus(Enum):
    """Status of a file in the index or in the working tree."""

    UNMODIFIED = 0
    MODIFIED = 1
    ADDED = 2
    DELETED = 3
    RENAMED = 4
    COPIED = 5
    UNTRACKED = 6
    IGNORED = 7
    CONFLICTED = 8
    TYPE_CHANGED = 9


_STATUS_CHARS = {
    GitFileStatus.MODIFIED: "M",
    GitFileStatus.ADDED: "A",
    GitFileStatus.DELETED: "D",
    GitFileStatus.RENAMED: "R",
    GitFileStatus.COPIED: "C",
    GitFileStatus.UNTRACKED: "?",
    GitFileStatus.IGNORED: "!",
    GitFileStatus.CONFLICTED: "U",
    GitFileStatus.TYPE_CHANGED: "T",
}

_STATUS_STRINGS = {
    GitFileStatus.MODIFIED: "Modified",
    GitFileStatus.ADDED: "Added",
    GitFileStatus.DELETED: "Deleted",
    GitFileStatus.RENAMED: "Renamed",
    GitFileStatus.COPIED: "Copied",
    GitFileStatus.UNTRACKED: "Untracked",
    GitFileStatus.IGNORED: "Ignored",
    GitFileStatus.CONFLICTED: "Conflicted",
    GitFileStatus.TYPE_CHANGED: "Type Changed",
}


def status_char(status: GitFileStatus) -> str:
    """Return the one-character display code for a status."""
    return _STATUS_CHARS.get(status, " ")


def status_string(status: GitFileStatus) -> str:
    """Return a human-readable name for a status."""
    return _STATUS_STRINGS.get(status, "Unmodified")


@dataclass
class GitStatusEntry:
    """Git status of a single file, relative to the repository root."""

    path: str = ""
    old_path: str = ""
    index_status: GitFileStatus = GitFileStatus.UNMODIFIED
    work_tree_status: GitFileStatus = GitFileStatus.UNMODIFIED

    def is_staged(self) -> bool:
        return self.index_status not in (
            GitFileStatus.UNMODIFIED,
            GitFileStatus.UNTRACKED,
        )

    def is_unstaged(self) -> bool:
        return self.work_tree_status is not GitFileStatus.UNMODIFIED

    def is_untracked(self) -> bool:
        return GitFileStatus.UNTRACKED in (self.index_status, self.work_tree_status)

    def is_conflicted(self) -> bool:
        return GitFileStatus.CONFLICTED in (self.index_status, self.work_tree_status)


@dataclass
class GitRepositoryStatus:
    """Repository-wide status: branch tracking information and file entries."""

    branch: str = ""
    upstream: str = ""
    ahead_count: int = 0
    behind_count: int = 0
    detached_head: bool = False
    merge_in_progress: bool = False
    rebase_in_progress: bool = False
    cherry_pick_in_progress: bool = False
    entries: list[GitStatusEntry] = field(default_factory=list)

    def staged_files(self) -> list[GitStatusEntry]:
        return [e for e in self.entries if e.is_staged()]

    def unstaged_files(self) -> list[GitStatusEntry]:
        return [e for e in self.entries if e.is_unstaged() and not e.is_untracked()]

    def untracked_files(self) -> list[GitStatusEntry]:
        return [e for e in self.entries if e.is_untracked()]

    def conflicted_files(self) -> list[GitStatusEntry]:
        return [e for e in self.entries if e.is_conflicted()]

    def has_changes(self) -> bool:
        return bool(self.entries)

    def has_staged_changes(self) -> bool:
        return any(e.is_staged() for e in self.entries)


@dataclass
class GitCommit:
    """A single commit as reported by the log."""

    hash: str = ""
    short_hash: str = ""
    author: str = ""
    author_email: str = ""
    author_date: datetime | None = None
    committer: str = ""
    committer_email: str = ""
    commit_date: datetime | None = None
    subject: str = ""
    body: str = ""
    parent_hashes: list[str] = field(default_factory=list)

    def is_merge_commit(self) -> bool:
        return len(self.parent_hashes) > 1


@dataclass
class GitBranch:
    """A local or remote-tracking branch."""

    name: str = ""
    full_ref: str = ""
    is_remote: bool = False
    is_current: bool = False
    upstream: str = ""
    last_commit_hash: str = ""
    last_commit_subject: str = ""
    ahead_count: int = 0
    behind_count: int = 0


@dataclass
class GitRemote:
    """A configured remote."""

    name: str = ""
    fetch_url: str = ""
    push_url: str = ""


@dataclass
class GitOperationResult:
    """Outcome of a Git command."""

    success: bool = False
    output: str = ""
    error_output: str = ""
    exit_code: int = -1