"""gh-diff-extractor: fetch GitHub pull request diffs from the command line.

Usage:
    python -m ghdiff <url> [options]
    gh-diff-extractor <command> [options]

Structure:
    ghdiff/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Value types (PullRequestIdentifier, DiffStatistics, ...)
    ├── services/            # URL resolver, diff formatter, credential lookup
    ├── infrastructure/      # GitHub REST client, config file
    └── commands/            # Thin command orchestrators
        ├── fetch.py
        ├── config.py
        └── validate.py

The URL resolver and diff formatter functions are re-exported here for use as
a library.
"""

__version__ = "1.0.0"

from ghdiff.domain import DiffFormat, DiffStatistics, PullRequestIdentifier  # noqa: E402
from ghdiff.services.diff_formatter import (  # noqa: E402
    colorize_diff,
    compute_diff_stats,
    normalize_diff,
)
from ghdiff.services.url_resolver import (  # noqa: E402
    PullRequestUrlError,
    build_endpoint,
    parse_pr_url,
)

__all__ = [
    "DiffFormat",
    "DiffStatistics",
    "PullRequestIdentifier",
    "PullRequestUrlError",
    "__version__",
    "build_endpoint",
    "colorize_diff",
    "compute_diff_stats",
    "normalize_diff",
    "parse_pr_url",
]
