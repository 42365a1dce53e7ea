import pytest

from xxmlstudio.git_status_model import GitStatusModel, Section, status_color
from xxmlstudio.git_types import GitFileStatus, GitRepositoryStatus, GitStatusEntry


def _status():
    return GitRepositoryStatus(entries=[
        GitStatusEntry(path="both.xxml", index_status=GitFileStatus.MODIFIED,
                       work_tree_status=GitFileStatus.MODIFIED),
        GitStatusEntry(path="added.xxml", index_status=GitFileStatus.ADDED),
        GitStatusEntry(path="edited.xxml", work_tree_status=GitFileStatus.DELETED),
        GitStatusEntry(path="new.txt", index_status=GitFileStatus.UNTRACKED,
                       work_tree_status=GitFileStatus.UNTRACKED),
    ])


@pytest.fixture
def model():
    m = GitStatusModel()
    m.set_status(_status())
    return m


def test_sections_split(model):
    assert [e.path for e in model.entries(Section.STAGED)] == ["both.xxml", "added.xxml"]
    assert [e.path for e in model.entries(Section.UNSTAGED)] == ["both.xxml", "edited.xxml"]
    assert [e.path for e in model.entries(Section.UNTRACKED)] == ["new.txt"]


def test_row_counts_match_entries(model):
    for section in Section:
        assert model.row_count(section) == len(model.entries(section))


def test_section_titles(model):
    assert model.section_title(Section.STAGED) == "Staged Changes (2)"
    assert model.section_title(Section.UNSTAGED) == "Changes (2)"
    assert model.section_title(Section.UNTRACKED) == "Untracked Files (1)"


def test_display_text_uses_section_status(model):
    assert model.display_text(Section.STAGED, 1) == "A  added.xxml"
    assert model.display_text(Section.UNSTAGED, 1) == "D  edited.xxml"
    assert model.display_text(Section.UNTRACKED, 0) == "?  new.txt"


def test_tool_tip(model):
    assert model.tool_tip(Section.STAGED, 0) == "both.xxml - Modified"
    assert model.tool_tip(Section.UNTRACKED, 0) == "new.txt - Untracked"


def test_entry_at_out_of_range(model):
    with pytest.raises(IndexError):
        model.entry_at(Section.UNTRACKED, 1)
    with pytest.raises(IndexError):
        model.entry_at(Section.STAGED, -1)


def test_paths_for_skips_invalid(model):
    selection = [(Section.STAGED, 1), (Section.UNTRACKED, 5), (Section.UNSTAGED, 0)]
    assert model.paths_for(selection) == ["added.xxml", "both.xxml"]


def test_clear_empties_all_sections(model):
    model.clear()
    assert all(model.row_count(s) == 0 for s in Section)
    assert model.section_title(Section.STAGED) == "Staged Changes (0)"


def test_set_status_replaces_previous(model):
    model.set_status(GitRepositoryStatus())
    assert model.paths_for([(Section.STAGED, 0)]) == []


def test_entries_returns_copy(model):
    model.entries(Section.STAGED).clear()
    assert model.row_count(Section.STAGED) == 2


@pytest.mark.parametrize("status, color", [
    (GitFileStatus.MODIFIED, "#e2c08d"),
    (GitFileStatus.ADDED, "#73c991"),
    (GitFileStatus.DELETED, "#f14c4c"),
    (GitFileStatus.RENAMED, "#4fc1ff"),
    (GitFileStatus.UNTRACKED, "#888888"),
    (GitFileStatus.CONFLICTED, "#f14c4c"),
    (GitFileStatus.COPIED, "#cccccc"),
    (GitFileStatus.UNMODIFIED, "#cccccc"),
])
def test_status_color(status, color):
    assert status_color(status) == color


def test_entry_color(model):
    assert model.color(Section.UNSTAGED, 1) == status_color(GitFileStatus.DELETED)
    assert model.display_status(Section.STAGED, 1) is GitFileStatus.ADDED