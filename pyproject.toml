[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xxmlstudio"
version = "0.1.0"
description = "Toolkit-free building blocks for an XXML editor: bookmarks, syntax highlighting, and Git output parsing and grouping"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["xxml", "ide", "editor", "syntax-highlighting", "git", "bookmarks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
    "Topic :: Software Development :: Version Control :: Git",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xxmlstudio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
