"""E2E tests against the real GitHub API.

No mocks. Unauthenticated, so kept to a couple of calls.
Skip unless MARKUP_SCANNER_E2E is set.
"""

import os
import subprocess
import sys

import pytest

from github_markup_scanner import scan_repository

pytestmark = pytest.mark.skipif(
    not os.environ.get("MARKUP_SCANNER_E2E"),
    reason="MARKUP_SCANNER_E2E required for E2E tests",
)


def test_finds_substring_in_public_repo():
    report = scan_repository("https://github.com/github/gitignore", "gitignore", timeout=30)
    assert report.has_markup_files
    assert report.found
    assert any(f.file_name == "README.md" for f in report.findings)


def test_not_found_in_public_repo():
    report = scan_repository("https://github.com/github/gitignore", "thisstringdoesnotexist")
    assert report.has_markup_files
    assert not report.found


def test_cli_exit_code():
    result = subprocess.run(
        [sys.executable, "-m", "github_markup_scanner.cli", "https://github.com/github/gitignore", "gitignore"],
        capture_output=True,
        text=True,
        timeout=120,
    )
    assert result.returncode == 0, result.stderr
    assert "occurrence(s) of gitignore found in markup files" in result.stderr
