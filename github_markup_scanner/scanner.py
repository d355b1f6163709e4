"""Scan a repository's root markup files for a substring."""

import logging

from .client import MarkupScannerClient, get_client
from .list_markup_files import list_markup_files
from .models import ScanReport
from .scan_file_content import scan_files
from .utils import format_findings, parse_repository_url

logger = logging.getLogger(__name__)


def scan_repository(
    repo_url: str,
    substring: str,
    client: MarkupScannerClient | None = None,
    max_workers: int = 1,
    skip_failed: bool = False,
    timeout: float | None = None,
) -> ScanReport:
    """Resolve the URL, list the root markup files and scan each of them.

    The URL is validated before any network call. If no client is given one
    is created from settings (with ``timeout`` overriding the configured
    value) and closed before returning.
    """
    ref = parse_repository_url(repo_url)

    owns_client = client is None
    if owns_client:
        client = get_client(timeout=timeout)

    try:
        api_url = client.url_for(ref.contents_endpoint)
        report = ScanReport(repository=ref, api_url=api_url, search=substring)
        report.files = list_markup_files(ref, client)

        if not report.has_markup_files:
            logger.info("No markup files found in the root directory.\n")
            return report

        logger.info(
            "Scanning %d markup files in %s for '%s':", len(report.files), api_url, substring
        )
        report.findings, report.failures = scan_files(
            report.files, substring, client, max_workers=max_workers, skip_failed=skip_failed
        )
    finally:
        if owns_client:
            client.close()

    log_report(report)
    return report


def log_report(report: ScanReport):
    """Log the summary line and one line per finding."""
    if report.failures:
        logger.warning("%d file(s) could not be scanned:", len(report.failures))
        for name, error in report.failures:
            logger.warning("  %s: %s", name, error)

    if not report.found:
        logger.info("\n No occurrences of '%s' found in markup files.", report.search)
        return

    logger.info(
        "\n%d occurrence(s) of %s found in markup files:\n", report.occurrences, report.search
    )
    for line in format_findings(report.findings):
        logger.info(line)
