"""Domain models for pull request lookups.

PullRequestIdentifier is the parse-once result of a pull request URL; it is
only created by the URL resolver and flows unchanged into the GitHub client.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PullRequestIdentifier:
    """Identifies a single pull request on GitHub.

    Attributes:
        owner: User or organization that owns the repository
        repository: Repository name
        number: Pull request number (always > 0)
    """

    owner: str
    repository: str
    number: int

    @property
    def slug(self) -> str:
        """Short human-readable form, e.g. ``owner/repo#123``."""
        return f"{self.owner}/{self.repository}#{self.number}"


class DiffFormat(Enum):
    """Representation requested from the pull request endpoint.

    Attributes:
        DIFF: Unified diff of the whole pull request
        PATCH: Mailbox-style patch series, one entry per commit
    """

    DIFF = "diff"
    PATCH = "patch"

    @property
    def media_type(self) -> str:
        """GitHub media type selecting this format via the Accept header."""
        return f"application/vnd.github.v3.{self.value}"

    @classmethod
    def from_string(cls, value: str) -> DiffFormat:
        """Parse DiffFormat from string value.

        Args:
            value: String value ("diff" or "patch"), case-insensitive

        Returns:
            Corresponding DiffFormat enum value

        Raises:
            ValueError: If value is not a valid DiffFormat
        """
        value_lower = value.lower()
        for member in cls:
            if member.value == value_lower:
                return member
        valid_values = [m.value for m in cls]
        raise ValueError(
            f"Invalid diff format: {value}. Must be one of: {', '.join(valid_values)}"
        )
