"""Summary statistics computed from diff text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffStatistics:
    """Counts derived from a diff. Recomputed on demand, never stored.

    Attributes:
        files_changed: Number of distinct files with a ``diff --git`` header
        insertions: Number of added content lines
        deletions: Number of removed content lines
    """

    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0

    def summary(self) -> str:
        return (
            f"Files changed: {self.files_changed}, "
            f"Insertions: {self.insertions}, "
            f"Deletions: {self.deletions}"
        )

    def to_dict(self) -> dict:
        return {
            "files_changed": self.files_changed,
            "insertions": self.insertions,
            "deletions": self.deletions,
        }
