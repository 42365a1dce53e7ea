"""Bookmarks, XXML syntax highlighting, and Git output parsing and grouping for an XXML editor."""

__version__ = "0.1.0"
__all__ = [
    "bookmarks",
    "git_refs_parse",
    "git_status_model",
    "git_status_parse",
    "git_types",
    "highlighter",
    "syntax_themes",
]