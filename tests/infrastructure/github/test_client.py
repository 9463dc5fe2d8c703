"""Tests for GitHubClient.

Tests cover:
- Request URL, headers and timeout for diff and patch formats
- HTTP status to exception mapping (401, 403, 404, 422, other)
- Network failures and other request errors
- Token validation against /user
"""

import json
import unittest
from unittest.mock import patch

import requests

from ghdiff import __version__
from ghdiff.domain.pull_request import DiffFormat, PullRequestIdentifier
from ghdiff.infrastructure.github.client import (
    DEFAULT_TIMEOUT,
    VALIDATE_TIMEOUT,
    GitHubApiError,
    GitHubAuthenticationError,
    GitHubClient,
    GitHubForbiddenError,
    GitHubNetworkError,
    GitHubValidationError,
    PullRequestNotFoundError,
)

ENDPOINT = "https://api.github.com/repos/owner/repo/pulls/123"


def make_response(status_code: int = 200, text: str = "", json_body=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.url = ENDPOINT
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json; charset=utf-8"
    else:
        response._content = text.encode("utf-8")
    return response


class TestFetch(unittest.TestCase):
    """Tests for GitHubClient.fetch and its shorthands."""

    def setUp(self):
        self.client = GitHubClient("mock-token")
        self.identifier = PullRequestIdentifier("owner", "repo", 123)

    def _fetch_with(self, response=None, side_effect=None, diff_format=DiffFormat.DIFF):
        with patch("ghdiff.infrastructure.github.client.requests.get") as mock_get:
            if side_effect is not None:
                mock_get.side_effect = side_effect
            else:
                mock_get.return_value = response
            return self.client.fetch(self.identifier, diff_format)

    def test_fetches_diff_with_correct_headers(self):
        with patch(
            "ghdiff.infrastructure.github.client.requests.get",
            return_value=make_response(text="mock diff content"),
        ) as mock_get:
            result = self.client.fetch_diff(self.identifier)

        self.assertEqual(result, "mock diff content")
        mock_get.assert_called_once_with(
            ENDPOINT,
            headers={
                "Authorization": "token mock-token",
                "User-Agent": f"gh-diff-extractor/{__version__}",
                "Accept": "application/vnd.github.v3.diff",
            },
            timeout=DEFAULT_TIMEOUT,
        )

    def test_fetches_patch_with_patch_media_type(self):
        with patch(
            "ghdiff.infrastructure.github.client.requests.get",
            return_value=make_response(text="mock patch content"),
        ) as mock_get:
            result = self.client.fetch_patch(self.identifier)

        self.assertEqual(result, "mock patch content")
        headers = mock_get.call_args.kwargs["headers"]
        self.assertEqual(headers["Accept"], "application/vnd.github.v3.patch")
        self.assertEqual(headers["Authorization"], "token mock-token")

    def test_decodes_undeclared_charset_as_utf8(self):
        result = self._fetch_with(make_response(text="+naïve ✓\n"))
        self.assertEqual(result, "+naïve ✓\n")

    def test_custom_timeout(self):
        client = GitHubClient("mock-token", timeout=5)
        with patch(
            "ghdiff.infrastructure.github.client.requests.get",
            return_value=make_response(text=""),
        ) as mock_get:
            client.fetch(self.identifier)

        self.assertEqual(mock_get.call_args.kwargs["timeout"], 5)

    def test_401_raises_authentication_error(self):
        with self.assertRaises(GitHubAuthenticationError) as ctx:
            self._fetch_with(make_response(401, json_body={"message": "Bad credentials"}))

        self.assertIn("Authentication failed", str(ctx.exception))
        self.assertEqual(ctx.exception.status_code, 401)

    def test_403_raises_forbidden_error(self):
        with self.assertRaises(GitHubForbiddenError) as ctx:
            self._fetch_with(make_response(403, json_body={"message": "rate limited"}))

        self.assertIn("Access forbidden", str(ctx.exception))
        self.assertIn("Rate limiting", str(ctx.exception))

    def test_404_raises_not_found_error(self):
        with self.assertRaises(PullRequestNotFoundError) as ctx:
            self._fetch_with(make_response(404, json_body={"message": "Not Found"}))

        self.assertIn("Pull request not found: owner/repo#123", str(ctx.exception))

    def test_422_includes_api_message(self):
        with self.assertRaises(GitHubValidationError) as ctx:
            self._fetch_with(make_response(422, json_body={"message": "Diff too large"}))

        self.assertEqual(str(ctx.exception), "Invalid request: Diff too large")

    def test_422_without_message(self):
        with self.assertRaises(GitHubValidationError) as ctx:
            self._fetch_with(make_response(422, json_body={}))

        self.assertEqual(str(ctx.exception), "Invalid request: Unknown validation error")

    def test_other_status_includes_code_and_message(self):
        with self.assertRaises(GitHubApiError) as ctx:
            self._fetch_with(make_response(502, json_body={"message": "Bad gateway"}))

        self.assertEqual(str(ctx.exception), "GitHub API error (502): Bad gateway")
        self.assertEqual(ctx.exception.status_code, 502)

    def test_other_status_with_non_json_body(self):
        with self.assertRaises(GitHubApiError) as ctx:
            self._fetch_with(make_response(500, text="<html>oops</html>"))

        self.assertEqual(str(ctx.exception), "GitHub API error (500): Unknown error")

    def test_connection_error_raises_network_error(self):
        with self.assertRaises(GitHubNetworkError) as ctx:
            self._fetch_with(side_effect=requests.ConnectionError("Network Error"))

        self.assertIn("Network error", str(ctx.exception))
        self.assertIsNone(ctx.exception.status_code)

    def test_timeout_raises_network_error(self):
        with self.assertRaises(GitHubNetworkError):
            self._fetch_with(side_effect=requests.Timeout("timed out"))

    def test_other_request_error(self):
        with self.assertRaises(GitHubApiError) as ctx:
            self._fetch_with(side_effect=requests.exceptions.InvalidHeader("bad header"))

        self.assertIn("Request error: bad header", str(ctx.exception))

    def test_errors_chain_original_exception(self):
        original = requests.ConnectionError("Network Error")
        with self.assertRaises(GitHubNetworkError) as ctx:
            self._fetch_with(side_effect=original)

        self.assertIs(ctx.exception.__cause__, original)


class TestValidateToken(unittest.TestCase):
    """Tests for GitHubClient.validate_token."""

    def setUp(self):
        self.client = GitHubClient("mock-token")

    def test_returns_true_for_valid_token(self):
        with patch(
            "ghdiff.infrastructure.github.client.requests.get",
            return_value=make_response(json_body={"login": "user"}),
        ) as mock_get:
            self.assertTrue(self.client.validate_token())

        args, kwargs = mock_get.call_args
        self.assertEqual(args[0], "https://api.github.com/user")
        self.assertEqual(kwargs["headers"]["Authorization"], "token mock-token")
        self.assertEqual(kwargs["timeout"], VALIDATE_TIMEOUT)

    def test_returns_false_for_rejected_token(self):
        with patch(
            "ghdiff.infrastructure.github.client.requests.get",
            return_value=make_response(401, json_body={"message": "Bad credentials"}),
        ):
            self.assertFalse(self.client.validate_token())

    def test_returns_false_on_network_error(self):
        with patch(
            "ghdiff.infrastructure.github.client.requests.get",
            side_effect=requests.ConnectionError("down"),
        ):
            self.assertFalse(self.client.validate_token())


if __name__ == "__main__":
    unittest.main()
