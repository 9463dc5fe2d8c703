"""Diff text processing.

Three independent, line-oriented transformations over diff or patch text:
normalization for output, ANSI colorization for the terminal, and summary
statistics. None of them fail; malformed input degrades to fewer matches.
"""

from __future__ import annotations

import re

from ghdiff.domain.diff_stats import DiffStatistics

# ANSI escape sequences
RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
CYAN = "\x1b[36m"
GRAY = "\x1b[90m"

HEADER_COLOR = CYAN
META_COLOR = GRAY
FILE_MARKER_COLOR = YELLOW
ADDITION_COLOR = GREEN
DELETION_COLOR = RED

# Prefixes of lines that carry file content; their trailing whitespace is data
_CONTENT_PREFIXES = ("+", "-", " ")

_FILE_HEADER_PATTERN = re.compile(r"diff --git a/(.+) b/(.+)")


def normalize_diff(diff: str | None) -> str:
    """Normalize diff text for output.

    - Converts CRLF and lone CR line endings to LF
    - Guarantees a trailing newline
    - Strips trailing whitespace from header, hunk and separator lines while
      leaving ``+``, ``-`` and context lines untouched

    Args:
        diff: Raw diff or patch text; None or non-string input is treated
            as an empty diff

    Returns:
        Normalized text, or "" for empty input
    """
    if not diff or not isinstance(diff, str):
        return ""

    normalized = diff.replace("\r\n", "\n").replace("\r", "\n")
    if not normalized.endswith("\n"):
        normalized += "\n"

    lines = [
        line if line.startswith(_CONTENT_PREFIXES) else line.rstrip()
        for line in normalized.split("\n")
    ]
    return "\n".join(lines)


def colorize_diff(diff: str) -> str:
    """Wrap each diff line in an ANSI color by line kind.

    Line content is never changed. ``+++``/``---`` file markers are matched
    before single ``+``/``-`` so they are not shown as additions or deletions.
    """
    return "\n".join(_colorize_line(line) for line in diff.split("\n"))


def compute_diff_stats(diff: str | None) -> DiffStatistics:
    """Count changed files, insertions and deletions in a diff.

    Files are counted by the distinct ``b/`` path of each ``diff --git``
    header, so several hunks of one file count once.
    """
    if not diff or not isinstance(diff, str):
        return DiffStatistics()

    files: set[str] = set()
    insertions = 0
    deletions = 0

    for line in diff.split("\n"):
        if line.startswith("diff --git"):
            match = _FILE_HEADER_PATTERN.match(line)
            if match:
                files.add(match.group(2))
        elif line.startswith("+") and not line.startswith("+++"):
            insertions += 1
        elif line.startswith("-") and not line.startswith("---"):
            deletions += 1

    return DiffStatistics(
        files_changed=len(files),
        insertions=insertions,
        deletions=deletions,
    )


def _colorize_line(line: str) -> str:
    if line.startswith("diff --git"):
        color = HEADER_COLOR
    elif line.startswith(("index ", "@@")):
        color = META_COLOR
    elif line.startswith(("+++", "---")):
        color = FILE_MARKER_COLOR
    elif line.startswith("+"):
        color = ADDITION_COLOR
    elif line.startswith("-"):
        color = DELETION_COLOR
    else:
        return line
    return f"{color}{line}{RESET}"
