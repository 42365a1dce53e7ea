import pytest

from xxmlstudio.git_status_parse import (
    detect_git_repository,
    parse_status,
    parse_status_char,
)
from xxmlstudio.git_types import GitFileStatus


@pytest.mark.parametrize(
    "code, expected",
    [
        ("M", GitFileStatus.MODIFIED),
        ("T", GitFileStatus.TYPE_CHANGED),
        ("A", GitFileStatus.ADDED),
        ("D", GitFileStatus.DELETED),
        ("R", GitFileStatus.RENAMED),
        ("C", GitFileStatus.COPIED),
        ("U", GitFileStatus.CONFLICTED),
        ("?", GitFileStatus.UNTRACKED),
        ("!", GitFileStatus.IGNORED),
        (".", GitFileStatus.UNMODIFIED),
        ("x", GitFileStatus.UNMODIFIED),
    ],
)
def test_parse_status_char(code, expected):
    assert parse_status_char(code) is expected


def test_branch_headers():
    output = (
        "# branch.oid 0123abcd\n"
        "# branch.head main\n"
        "# branch.upstream origin/main\n"
        "# branch.ab +1 -2\n"
    )
    status = parse_status(output)
    assert status.branch == "main"
    assert status.upstream == "origin/main"
    assert status.ahead_count == 1
    assert status.behind_count == 2
    assert status.detached_head is False
    assert status.entries == []


def test_detached_head():
    status = parse_status("# branch.head (detached)\n")
    assert status.detached_head is True
    assert status.branch == "(detached)"


def test_ordinary_entry():
    line = "1 MA N... 100644 100644 100644 aaaa bbbb src/main file.xxml"
    status = parse_status(line + "\n")
    assert len(status.entries) == 1
    entry = status.entries[0]
    assert entry.path == "src/main file.xxml"
    assert entry.index_status is GitFileStatus.MODIFIED
    assert entry.work_tree_status is GitFileStatus.ADDED
    assert entry.old_path == ""


def test_renamed_entry_keeps_original_path():
    line = "2 R. N... 100644 100644 100644 aaaa bbbb R100 new.xxml\told.xxml"
    entry = parse_status(line).entries[0]
    assert entry.old_path == "old.xxml"
    assert entry.path.endswith("new.xxml")
    assert entry.index_status is GitFileStatus.RENAMED
    assert entry.work_tree_status is GitFileStatus.UNMODIFIED


def test_short_entry_line_is_ignored():
    assert parse_status("1 M. N... 100644\n").entries == []


def test_unmerged_entry():
    line = "u UU N... 100644 100644 100644 100644 h1 h2 h3 conflict.xxml"
    entry = parse_status(line).entries[0]
    assert entry.path == "conflict.xxml"
    assert entry.is_conflicted()
    assert entry.index_status is GitFileStatus.CONFLICTED


def test_untracked_and_ignored():
    status = parse_status("? notes.txt\n! build/out.o\n")
    untracked, ignored = status.entries
    assert untracked.path == "notes.txt"
    assert untracked.is_untracked()
    assert ignored.path == "build/out.o"
    assert ignored.work_tree_status is GitFileStatus.IGNORED


def test_mixed_output_preserves_order():
    output = (
        "# branch.head dev\n"
        "\n"
        "1 .M N... 100644 100644 100644 aaaa bbbb a.xxml\n"
        "? b.xxml\n"
    )
    status = parse_status(output)
    assert [e.path for e in status.entries] == ["a.xxml", "b.xxml"]
    assert status.has_changes()
    assert not status.has_staged_changes()


def test_empty_output():
    status = parse_status("")
    assert status.branch == ""
    assert status.entries == []


def test_detect_repository_in_root(tmp_path):
    (tmp_path / ".git").mkdir()
    assert detect_git_repository(str(tmp_path)) is True


def test_detect_repository_from_subdirectory(tmp_path):
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert detect_git_repository(nested) is True


def test_detect_repository_with_git_file(tmp_path):
    (tmp_path / ".git").write_text("gitdir: elsewhere\n")
    assert detect_git_repository(tmp_path) is True


def test_missing_directory_is_not_repository(tmp_path):
    assert detect_git_repository(tmp_path / "missing") is False