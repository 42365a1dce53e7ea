"""Per-file line bookmarks with navigation and change notifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


@dataclass
class Bookmark:
    """A bookmarked line (1-based) in a file."""

    file_path: str
    line: int
    line_text: str = ""


class BookmarkEvent(Enum):
    """Kinds of notification sent to subscribers."""

    ADDED = "added"
    REMOVED = "removed"
    CLEARED = "cleared"
    ALL_CLEARED = "all_cleared"
    CHANGED = "changed"


Listener = Callable[[BookmarkEvent, Optional[str], Optional[int]], None]


def _order(bookmark: Bookmark) -> tuple[str, int]:
    return bookmark.file_path, bookmark.line


class BookmarkManager:
    """Keeps bookmarks for many files, each file's list sorted by line."""

    def __init__(self) -> None:
        self._bookmarks: dict[str, list[Bookmark]] = {}
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener(event, file_path, line)``; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: BookmarkEvent, file_path: str | None = None,
              line: int | None = None) -> None:
        for listener in list(self._listeners):
            listener(event, file_path, line)

    # Editing

    def toggle(self, file_path: str, line: int, line_text: str = "") -> None:
        if self.has_bookmark(file_path, line):
            self.remove(file_path, line)
        else:
            self.add(file_path, line, line_text)

    def add(self, file_path: str, line: int, line_text: str = "") -> None:
        if self.has_bookmark(file_path, line):
            return
        entries = self._bookmarks.setdefault(file_path, [])
        entries.append(Bookmark(file_path, line, line_text))
        entries.sort(key=lambda b: b.line)
        self._emit(BookmarkEvent.ADDED, file_path, line)
        self._emit(BookmarkEvent.CHANGED)

    def remove(self, file_path: str, line: int) -> None:
        entries = self._bookmarks.get(file_path)
        if not entries:
            return
        for bookmark in entries:
            if bookmark.line == line:
                entries.remove(bookmark)
                if not entries:
                    del self._bookmarks[file_path]
                self._emit(BookmarkEvent.REMOVED, file_path, line)
                self._emit(BookmarkEvent.CHANGED)
                return

    def remove_all(self, file_path: str) -> None:
        if self._bookmarks.pop(file_path, None) is not None:
            self._emit(BookmarkEvent.CLEARED, file_path)
            self._emit(BookmarkEvent.CHANGED)

    def clear(self) -> None:
        self._bookmarks.clear()
        self._emit(BookmarkEvent.ALL_CLEARED)
        self._emit(BookmarkEvent.CHANGED)

    # Queries

    def has_bookmark(self, file_path: str, line: int) -> bool:
        return any(b.line == line for b in self._bookmarks.get(file_path, ()))

    def lines_for_file(self, file_path: str) -> list[int]:
        return [b.line for b in self._bookmarks.get(file_path, ())]

    def all_bookmarks(self) -> list[Bookmark]:
        """All bookmarks, grouped by file in path order."""
        return [b for path in sorted(self._bookmarks) for b in self._bookmarks[path]]

    def count(self) -> int:
        return sum(len(entries) for entries in self._bookmarks.values())

    # Navigation

    def next_bookmark(self, current_file: str, current_line: int) -> Bookmark | None:
        """Next bookmark after the position across all files, wrapping to the first."""
        ordered = sorted(self.all_bookmarks(), key=_order)
        if not ordered:
            return None
        at_current = False
        for bookmark in ordered:
            if bookmark.file_path == current_file:
                if bookmark.line > current_line:
                    return bookmark
                if bookmark.line == current_line:
                    at_current = True
            if bookmark.file_path > current_file and not at_current:
                return bookmark
        return ordered[0]

    def previous_bookmark(self, current_file: str, current_line: int) -> Bookmark | None:
        """Previous bookmark before the position across all files, wrapping to the last."""
        ordered = sorted(self.all_bookmarks(), key=_order)
        if not ordered:
            return None
        for bookmark in reversed(ordered):
            if bookmark.file_path == current_file and bookmark.line < current_line:
                return bookmark
            if bookmark.file_path < current_file:
                return bookmark
        return ordered[-1]

    def next_in_file(self, file_path: str, current_line: int) -> Bookmark | None:
        entries = self._bookmarks.get(file_path)
        if not entries:
            return None
        return next((b for b in entries if b.line > current_line), entries[0])

    def previous_in_file(self, file_path: str, current_line: int) -> Bookmark | None:
        entries = self._bookmarks.get(file_path)
        if not entries:
            return None
        return next((b for b in reversed(entries) if b.line < current_line), entries[-1])

    # Line adjustment

    def adjust(self, file_path: str, from_line: int, delta: int) -> None:
        """Shift bookmarks at or after ``from_line`` by ``delta``; drop those moved below line 1."""
        entries = self._bookmarks.get(file_path)
        if entries is None or delta == 0:
            return
        changed = False
        kept: list[Bookmark] = []
        for bookmark in entries:
            if bookmark.line >= from_line:
                changed = True
                new_line = bookmark.line + delta
                if new_line < 1:
                    continue
                bookmark.line = new_line
            kept.append(bookmark)
        if not changed:
            return
        if kept:
            self._bookmarks[file_path] = kept
        else:
            del self._bookmarks[file_path]
        self._emit(BookmarkEvent.CHANGED)