#!/usr/bin/env python3
"""CLI entry point for gh-diff-extractor.

Usage:
    gh-diff-extractor <url> [options]
    gh-diff-extractor <command> [options]

Commands:
    fetch       Fetch a pull request diff (default when given a URL)
    config      Save the GitHub token to the config file
    validate    Check that the GitHub token is accepted
"""

from __future__ import annotations

import argparse
import sys

from ghdiff import __version__
from ghdiff.commands.config import cmd_config
from ghdiff.commands.fetch import cmd_fetch
from ghdiff.commands.validate import cmd_validate

COMMANDS = ("fetch", "config", "validate")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gh-diff-extractor",
        description="Extract git diffs from GitHub pull request pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  fetch       Fetch a pull request diff (default when given a URL)
  config      Save the GitHub token to the config file
  validate    Check that the GitHub token is accepted

Examples:
  gh-diff-extractor https://github.com/owner/repo/pull/123/files
  gh-diff-extractor fetch github.com/owner/repo/pull/123 --stats --no-color
  gh-diff-extractor fetch https://github.com/owner/repo/pull/123 --patch -o pr.patch
  gh-diff-extractor config --token YOUR_TOKEN
  gh-diff-extractor validate
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # fetch command
    parser_fetch = subparsers.add_parser(
        "fetch",
        help="Fetch a pull request diff",
    )
    parser_fetch.add_argument(
        "url",
        help="GitHub pull request URL (e.g., https://github.com/owner/repo/pull/123/files)",
    )
    parser_fetch.add_argument(
        "-t", "--token",
        help="GitHub personal access token",
    )
    parser_fetch.add_argument(
        "-o", "--output",
        help="Output file path (if not specified, prints to stdout)",
    )
    parser_fetch.add_argument(
        "-p", "--patch",
        action="store_true",
        help="Get patch format instead of diff format",
    )
    parser_fetch.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show verbose output",
    )
    parser_fetch.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        help="Disable colored output",
    )
    parser_fetch.add_argument(
        "--stats",
        action="store_true",
        help="Show diff statistics",
    )

    # config command
    parser_config = subparsers.add_parser(
        "config",
        help="Configure GitHub token",
    )
    parser_config.add_argument(
        "--token",
        help="Set GitHub personal access token",
    )

    # validate command
    parser_validate = subparsers.add_parser(
        "validate",
        help="Validate GitHub token",
    )
    parser_validate.add_argument(
        "-t", "--token",
        help="GitHub personal access token to validate",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    # A bare URL as the first argument means "fetch <url>"
    if argv and argv[0] not in COMMANDS and not argv[0].startswith("-"):
        argv.insert(0, "fetch")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Route to command implementations with explicit parameters
    if args.command == "fetch":
        return cmd_fetch(
            url=args.url,
            token=args.token,
            output=args.output,
            patch=args.patch,
            verbose=args.verbose,
            color=args.color,
            stats=args.stats,
        )

    elif args.command == "config":
        return cmd_config(token=args.token)

    elif args.command == "validate":
        return cmd_validate(token=args.token)

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
