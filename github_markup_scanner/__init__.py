"""Search the markup files in a GitHub repository's root directory.

Lists the root directory through the REST contents endpoint, keeps files
with a markup extension and reports every line containing a substring.
"""

from .cli import main
from .client import MarkupScannerClient, get_client
from .errors import (
    FileFetchError,
    InvalidUrlError,
    ListingFetchError,
    ListingParseError,
    MarkupScannerError,
)
from .models import MARKUP_EXTENSIONS, FileEntry, Finding, RepositoryRef, ScanReport
from .scanner import scan_repository
from .utils import parse_repository_url

__all__ = [
    "main",
    "MarkupScannerClient",
    "get_client",
    "FileFetchError",
    "InvalidUrlError",
    "ListingFetchError",
    "ListingParseError",
    "MarkupScannerError",
    "MARKUP_EXTENSIONS",
    "FileEntry",
    "Finding",
    "RepositoryRef",
    "ScanReport",
    "scan_repository",
    "parse_repository_url",
]
