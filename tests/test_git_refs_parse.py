import pytest

from xxmlstudio.git_refs_parse import (
    extract_commit_hash,
    needs_upstream,
    parse_branches,
    parse_log,
    parse_remotes,
)


def test_current_branch_with_upstream_info():
    out = "* main abc1234 [origin/main: ahead 2, behind 3] Fix the bug\n"
    [branch] = parse_branches(out)
    assert branch.name == "main"
    assert branch.is_current is True
    assert branch.is_remote is False
    assert branch.last_commit_hash == "abc1234"
    assert branch.upstream == "origin/main"
    assert branch.ahead_count == 2
    assert branch.behind_count == 3
    assert branch.last_commit_subject == "Fix the bug"


def test_upstream_without_counts():
    [branch] = parse_branches("  dev def5678 [origin/dev] Add feature\n")
    assert branch.is_current is False
    assert branch.upstream == "origin/dev"
    assert branch.ahead_count == 0
    assert branch.behind_count == 0
    assert branch.last_commit_subject == "Add feature"


def test_branch_without_brackets_uses_text_after_hash():
    [branch] = parse_branches("  topic 9abcdef Some subject here\n")
    assert branch.upstream == ""
    assert branch.last_commit_hash == "9abcdef"
    assert branch.last_commit_subject == "Some subject here"


def test_remote_branch_prefix_is_stripped():
    [branch] = parse_branches("  remotes/origin/feature 1234abc Remote work\n")
    assert branch.is_remote is True
    assert branch.name == "origin/feature"
    assert branch.last_commit_subject == "Remote work"


def test_head_entries_are_skipped():
    out = "  HEAD 1111111 detached\n  a->b 2222222 odd\n* main 3333333 ok\n"
    branches = parse_branches(out)
    assert [b.name for b in branches] == ["main"]


def test_blank_and_empty_lines_ignored():
    assert parse_branches("\n\n  \n") == []


def test_multiple_branches_keep_order():
    out = "* main aaa one\n  dev bbb two\n  remotes/origin/main ccc three\n"
    names = [b.name for b in parse_branches(out)]
    assert names == ["main", "dev", "origin/main"]


def test_parse_log_full_line():
    out = "0123456789abcdef|0123456|Alice|alice@example.com|1700000000|Initial commit|p1 p2\n"
    [commit] = parse_log(out)
    assert commit.hash == "0123456789abcdef"
    assert commit.short_hash == "0123456"
    assert commit.author == "Alice"
    assert commit.author_email == "alice@example.com"
    assert commit.author_date.timestamp() == 1700000000
    assert commit.subject == "Initial commit"
    assert commit.parent_hashes == ["p1", "p2"]
    assert commit.is_merge_commit() is True


def test_parse_log_root_commit_has_no_parents():
    [commit] = parse_log("h|s|Bob|bob@example.com|0|Root|\n")
    assert commit.parent_hashes == []
    assert commit.is_merge_commit() is False


def test_parse_log_skips_short_lines_and_bad_timestamp():
    out = "too|few|fields\nh|s|Bob|bob@example.com|notanumber|Subject\n"
    commits = parse_log(out)
    assert len(commits) == 1
    assert commits[0].author_date.timestamp() == 0
    assert commits[0].parent_hashes == []


def test_parse_remotes():
    assert parse_remotes("origin\nupstream\n\n") == ["origin", "upstream"]
    assert parse_remotes("") == []


def test_extract_commit_hash():
    assert extract_commit_hash("[main 1a2b3c4] Add readme\n 1 file changed") == "1a2b3c4"


def test_extract_commit_hash_missing():
    assert extract_commit_hash("nothing to commit") is None


@pytest.mark.parametrize(
    "error",
    [
        "fatal: The current branch dev has no upstream branch.",
        "error: no upstream configured for branch 'x'",
        "fatal: 'origin' does not appear to be a git repository",
        "fatal: No configured push destination.",
        "fatal: Could not read from remote repository.",
    ],
)
def test_needs_upstream_detected(error):
    assert needs_upstream(error) is True


@pytest.mark.parametrize(
    "error",
    [
        "",
        "error: failed to push some refs",
        "! [rejected] main -> main (non-fast-forward)",
    ],
)
def test_needs_upstream_other_errors(error):
    assert needs_upstream(error) is False