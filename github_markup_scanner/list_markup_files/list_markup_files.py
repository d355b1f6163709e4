"""List the markup files in a repository's root directory."""

import logging

from ..client import MarkupScannerClient
from ..errors import ListingParseError
from ..models import MARKUP_EXTENSIONS, FileEntry, RepositoryRef

logger = logging.getLogger(__name__)


def fetch_listing(ref: RepositoryRef, client: MarkupScannerClient) -> list[FileEntry]:
    """Fetch the root listing and return its file entries in API order."""
    resp = client.get_json(ref.contents_endpoint)
    entries = parse_listing(resp.body)
    logger.debug("Listed %d files in %s", len(entries), ref.full_name)
    return entries


def parse_listing(body) -> list[FileEntry]:
    """Convert a contents-endpoint body to FileEntry objects.

    Directories, submodules and symlinks are dropped.
    """
    if not isinstance(body, list):
        raise ListingParseError(f"Expected a JSON array of entries, got {type(body).__name__}")

    files = []
    for i, item in enumerate(body):
        if not isinstance(item, dict):
            raise ListingParseError(f"Entry {i} is not an object")
        entry_type = item.get("type")
        name = item.get("name")
        if not isinstance(entry_type, str) or not isinstance(name, str):
            raise ListingParseError(f"Entry {i} is missing 'type' or 'name'")
        if entry_type != "file":
            continue
        download_url = item.get("download_url")
        if not isinstance(download_url, str):
            raise ListingParseError(f"File entry {name!r} is missing 'download_url'")
        files.append(FileEntry(name=name, download_url=download_url))
    return files


def is_markup_file(name: str) -> bool:
    return name.lower().endswith(MARKUP_EXTENSIONS)


def filter_markup_files(entries: list[FileEntry]) -> list[FileEntry]:
    """Keep entries with a markup extension, preserving order."""
    return [e for e in entries if is_markup_file(e.name)]


def list_markup_files(ref: RepositoryRef, client: MarkupScannerClient) -> list[FileEntry]:
    """Fetch the root listing of a repository and keep only markup files.

    An empty list means the root holds no markup files; it is not an error.
    """
    return filter_markup_files(fetch_listing(ref, client))
