"""Domain models for gh-diff-extractor."""

from ghdiff.domain.config import Config
from ghdiff.domain.diff_stats import DiffStatistics
from ghdiff.domain.pull_request import DiffFormat, PullRequestIdentifier

__all__ = [
    "Config",
    "DiffFormat",
    "DiffStatistics",
    "PullRequestIdentifier",
]
