"""Sectioned view of repository status: staged, unstaged and untracked files."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from xxmlstudio.git_types import (
    GitFileStatus,
    GitRepositoryStatus,
    GitStatusEntry,
    status_char,
    status_string,
)


class Section(Enum):
    """Top-level groups shown in the changes view."""

    STAGED = 0
    UNSTAGED = 1
    UNTRACKED = 2


_STATUS_COLORS = {
    GitFileStatus.MODIFIED: "#e2c08d",
    GitFileStatus.ADDED: "#73c991",
    GitFileStatus.DELETED: "#f14c4c",
    GitFileStatus.RENAMED: "#4fc1ff",
    GitFileStatus.UNTRACKED: "#888888",
    GitFileStatus.CONFLICTED: "#f14c4c",
}

_DEFAULT_COLOR = "#cccccc"

_SECTION_TITLES = {
    Section.STAGED: "Staged Changes ({})",
    Section.UNSTAGED: "Changes ({})",
    Section.UNTRACKED: "Untracked Files ({})",
}


def status_color(status: GitFileStatus) -> str:
    """Hex colour used to draw a file with the given status."""
    return _STATUS_COLORS.get(status, _DEFAULT_COLOR)


class GitStatusModel:
    """Splits a repository status into staged, unstaged and untracked sections."""

    def __init__(self) -> None:
        self._sections: dict[Section, list[GitStatusEntry]] = {
            section: [] for section in Section
        }

    def set_status(self, status: GitRepositoryStatus) -> None:
        """Replace the model contents with the entries of ``status``."""
        self.clear()
        for entry in status.entries:
            if entry.is_untracked():
                self._sections[Section.UNTRACKED].append(entry)
                continue
            if entry.is_staged():
                self._sections[Section.STAGED].append(entry)
            if entry.is_unstaged():
                self._sections[Section.UNSTAGED].append(entry)

    def clear(self) -> None:
        for entries in self._sections.values():
            entries.clear()

    def entries(self, section: Section) -> list[GitStatusEntry]:
        """A copy of the entries in ``section``."""
        return list(self._sections[section])

    def row_count(self, section: Section) -> int:
        return len(self._sections[section])

    def entry_at(self, section: Section, row: int) -> GitStatusEntry:
        """The entry at ``row`` of ``section``; raises IndexError if out of range."""
        entries = self._sections[section]
        if not 0 <= row < len(entries):
            raise IndexError(f"row {row} out of range for {section.name.lower()} section")
        return entries[row]

    def _display_status(self, section: Section, entry: GitStatusEntry) -> GitFileStatus:
        if section is Section.STAGED:
            return entry.index_status
        if section is Section.UNSTAGED:
            return entry.work_tree_status
        return GitFileStatus.UNTRACKED

    def display_status(self, section: Section, row: int) -> GitFileStatus:
        """The status that applies to the entry as shown in its section."""
        return self._display_status(section, self.entry_at(section, row))

    def section_title(self, section: Section) -> str:
        return _SECTION_TITLES[section].format(self.row_count(section))

    def display_text(self, section: Section, row: int) -> str:
        """Status letter followed by the path, as shown in the list."""
        entry = self.entry_at(section, row)
        return f"{status_char(self._display_status(section, entry))}  {entry.path}"

    def tool_tip(self, section: Section, row: int) -> str:
        entry = self.entry_at(section, row)
        return f"{entry.path} - {status_string(self._display_status(section, entry))}"

    def color(self, section: Section, row: int) -> str:
        """Foreground colour for the entry at ``row`` of ``section``."""
        return status_color(self.display_status(section, row))

    def paths_for(self, selection: Iterable[tuple[Section, int]]) -> list[str]:
        """Paths of the selected ``(section, row)`` pairs, skipping invalid rows."""
        paths = []
        for section, row in selection:
            entries = self._sections[section]
            if 0 <= row < len(entries) and entries[row].path:
                paths.append(entries[row].path)
        return paths