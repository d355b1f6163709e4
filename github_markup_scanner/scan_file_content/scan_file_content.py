"""Scan raw file content for a substring."""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from ..client import MarkupScannerClient
from ..errors import FileFetchError
from ..models import FileEntry, Finding

logger = logging.getLogger(__name__)


def find_matches(file_name: str, lines: Iterable[str], substring: str) -> list[Finding]:
    """Return a Finding for every line containing substring (case-sensitive).

    Line numbers are 1-based; line text is stripped of surrounding whitespace.
    """
    return [
        Finding(file_name=file_name, line_number=n, line_text=line.strip())
        for n, line in enumerate(lines, start=1)
        if substring in line
    ]


def scan_file(entry: FileEntry, substring: str, client: MarkupScannerClient) -> list[Finding]:
    """Download one file and return the lines containing substring."""
    logger.info("Scanning: %s", entry.name)
    with client.stream_lines(entry.download_url) as lines:
        findings = find_matches(entry.name, lines, substring)
    if not findings:
        logger.info(" No occurrences of %s found in %s\n", substring, entry.name)
    return findings


def scan_files(
    entries: list[FileEntry],
    substring: str,
    client: MarkupScannerClient,
    max_workers: int = 1,
    skip_failed: bool = False,
) -> tuple[list[Finding], list[tuple[str, str]]]:
    """Scan entries and return (findings, failures).

    Findings follow listing order even when files are fetched concurrently.
    A FileFetchError aborts the scan unless skip_failed is set, in which case
    the file is recorded as a failure and the scan continues.
    """

    def process_one(entry: FileEntry):
        try:
            return scan_file(entry, substring, client), None
        except FileFetchError as e:
            if not skip_failed:
                raise
            logger.warning("Skipping %s: %s", entry.name, e)
            return [], (entry.name, str(e))

    if max_workers > 1 and len(entries) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            # map() yields in submission order and re-raises the first error met in that order
            results = list(executor.map(process_one, entries))
    else:
        results = [process_one(entry) for entry in entries]

    findings: list[Finding] = []
    failures: list[tuple[str, str]] = []
    for file_findings, failure in results:
        findings.extend(file_findings)
        if failure:
            failures.append(failure)
    return findings, failures
