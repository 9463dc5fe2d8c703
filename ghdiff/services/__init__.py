"""Services for gh-diff-extractor.

url_resolver and diff_formatter are pure functions with no I/O. The
credential service receives its config store via constructor injection.
"""

from ghdiff.services.credentials import (
    CredentialService,
    MissingTokenError,
    validate_token,
)
from ghdiff.services.diff_formatter import (
    colorize_diff,
    compute_diff_stats,
    normalize_diff,
)
from ghdiff.services.url_resolver import (
    InvalidInputError,
    InvalidNameError,
    InvalidNumberError,
    MalformedPathError,
    MalformedUrlError,
    NotAPullRequestUrlError,
    PullRequestUrlError,
    WrongHostError,
    build_endpoint,
    parse_pr_url,
)

__all__ = [
    "CredentialService",
    "InvalidInputError",
    "InvalidNameError",
    "InvalidNumberError",
    "MalformedPathError",
    "MalformedUrlError",
    "MissingTokenError",
    "NotAPullRequestUrlError",
    "PullRequestUrlError",
    "WrongHostError",
    "build_endpoint",
    "colorize_diff",
    "compute_diff_stats",
    "normalize_diff",
    "parse_pr_url",
    "validate_token",
]
