"""Tests for the CLI entry point.

Tests cover:
- Routing of each subcommand with explicit parameters
- Bare URL treated as the fetch command
- Default option values
- Help when no command is given
"""

import io
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from ghdiff import __version__
from ghdiff.__main__ import main

URL = "https://github.com/owner/repo/pull/123"


class TestMain(unittest.TestCase):
    """Tests for main()."""

    @patch("ghdiff.__main__.cmd_fetch", return_value=0)
    def test_fetch_command_defaults(self, mock_fetch):
        code = main(["fetch", URL])

        self.assertEqual(code, 0)
        mock_fetch.assert_called_once_with(
            url=URL,
            token=None,
            output=None,
            patch=False,
            verbose=False,
            color=True,
            stats=False,
        )

    @patch("ghdiff.__main__.cmd_fetch", return_value=0)
    def test_bare_url_runs_fetch(self, mock_fetch):
        main([URL, "--stats"])

        kwargs = mock_fetch.call_args.kwargs
        self.assertEqual(kwargs["url"], URL)
        self.assertTrue(kwargs["stats"])

    @patch("ghdiff.__main__.cmd_fetch", return_value=1)
    def test_fetch_all_options(self, mock_fetch):
        code = main([
            "fetch", URL,
            "-t", "tok",
            "-o", "out.diff",
            "-p",
            "-v",
            "--no-color",
            "--stats",
        ])

        self.assertEqual(code, 1)
        mock_fetch.assert_called_once_with(
            url=URL,
            token="tok",
            output="out.diff",
            patch=True,
            verbose=True,
            color=False,
            stats=True,
        )

    @patch("ghdiff.__main__.cmd_config", return_value=0)
    def test_config_command(self, mock_config):
        main(["config", "--token", "tok"])
        mock_config.assert_called_once_with(token="tok")

    @patch("ghdiff.__main__.cmd_validate", return_value=0)
    def test_validate_command(self, mock_validate):
        main(["validate", "-t", "tok"])
        mock_validate.assert_called_once_with(token="tok")

    def test_no_command_prints_help(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main([])

        self.assertEqual(code, 1)
        self.assertIn("usage: gh-diff-extractor", stdout.getvalue())

    def test_version(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit) as ctx:
            main(["--version"])

        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
