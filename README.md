# xxmlstudio

Building blocks for an XXML editor that do not depend on any GUI toolkit.

## What is in the package

- **`xxmlstudio.bookmarks`**: `BookmarkManager` stores bookmarks for each
  file. Each file's list stays sorted by line number. The manager can:
  - add, remove and toggle bookmarks, and clear them for one file or for all
    files (`add`, `remove`, `toggle`, `remove_all`, `clear`);
  - answer queries (`has_bookmark`, `lines_for_file`, `all_bookmarks`,
    `count`);
  - move to the next or previous bookmark, across files or within one file
    (`next_bookmark`, `previous_bookmark`, `next_in_file`,
    `previous_in_file`). All four wrap around, and each returns `None` when
    there is nothing to go to;
  - shift bookmarks when lines are inserted or deleted (`adjust`). A bookmark
    that would move below line 1 is dropped.

  Listeners registered with `subscribe` are called as
  `listener(event, file_path, line)` with a `BookmarkEvent`. `subscribe`
  returns a function that unsubscribes the listener.
- **`xxmlstudio.syntax_themes`**: the `SyntaxTheme` values are `DARCULA`,
  `QT_CREATOR` and `VSCODE_DARK`. `FormatType` holds the categories of text.
  `theme_formats(theme)` returns a `TextFormat` (foreground colour, italic,
  bold) for every format type. Comments are italic and nothing is bold.
- **`xxmlstudio.highlighter`**: `SyntaxHighlighter` applies the XXML
  highlighting rules in order, so later matches override earlier ones.
  - `highlight_block(text, previous_state)` returns a list with one
    `FormatType` (or `None`) per character, plus the state for the next line.
    The state is `1` inside an open `/* ... */` comment and `0` otherwise.
  - `highlight(text)` does this for every line, carrying the state from line
    to line.
  - `set_theme` and `format_for` select the colours.
- **`xxmlstudio.git_types`**: dataclasses `GitStatusEntry`,
  `GitRepositoryStatus`, `GitCommit`, `GitBranch`, `GitRemote` and
  `GitOperationResult`. It also has the `GitFileStatus` enum and the helpers
  `status_char` and `status_string`.
- **`xxmlstudio.git_status_parse`**:
  - `parse_status` reads `git status --porcelain=v2 --branch` output into a
    `GitRepositoryStatus`. It covers the branch, upstream, ahead/behind,
    ordinary, renamed, unmerged, untracked and ignored entries.
  - `parse_status_char` maps a status letter.
  - `detect_git_repository(path)` looks for a `.git` entry in the directory
    or any of its parents.
- **`xxmlstudio.git_refs_parse`**:
  - `parse_branches` reads `git branch -a -vv` output and skips HEAD
    pointers.
  - `parse_log` reads log lines in the `%H|%h|%an|%ae|%at|%s|%P` format.
    Author dates are in UTC.
  - `parse_remotes` reads `git remote` output.
  - `extract_commit_hash` finds the hash in `git commit` output.
  - `needs_upstream` recognises push failures caused by a missing upstream
    branch or remote.
- **`xxmlstudio.git_status_model`**: `GitStatusModel` groups status entries
  into the `Section` values `STAGED`, `UNSTAGED` and `UNTRACKED`. It offers
  `section_title`, `display_text`, `tool_tip`, `color`, `entry_at` (which
  raises `IndexError` outside the section) and `paths_for`.
  `status_color(status)` gives the colour for a status.

## Installation

```
pip install .
```

## Examples

```python
from xxmlstudio.bookmarks import BookmarkManager

manager = BookmarkManager()
manager.add("main.xxml", 10, "Run Console::printLine(...)")
manager.add("main.xxml", 3)
manager.lines_for_file("main.xxml")          # [3, 10]
manager.next_bookmark("main.xxml", 5).line   # 10
manager.adjust("main.xxml", 4, 2)            # two lines inserted at line 4
manager.lines_for_file("main.xxml")          # [3, 12]
```

```python
from xxmlstudio.git_status_parse import parse_status
from xxmlstudio.git_status_model import GitStatusModel, Section

status = parse_status("# branch.head main\n? notes.txt\n")
model = GitStatusModel()
model.set_status(status)
model.section_title(Section.UNTRACKED)   # "Untracked Files (1)"
model.display_text(Section.UNTRACKED, 0) # "?  notes.txt"
```

```python
from xxmlstudio.highlighter import SyntaxHighlighter
from xxmlstudio.syntax_themes import FormatType, SyntaxTheme

highlighter = SyntaxHighlighter(SyntaxTheme.DARCULA)
lines = highlighter.highlight('Instantiate String^ As <name> = String::Constructor("hi");')
highlighter.format_for(FormatType.KEYWORD).foreground   # "#CC7832"
```

## What the package does not do

- It never runs `git` itself. It only parses output that you obtain and pass
  in.
- It has no editor window, no file tabs, no completion popup and no
  language-server client.
- It provides no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```