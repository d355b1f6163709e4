"""Exceptions raised while scanning a repository."""


class MarkupScannerError(Exception):
    """Base exception for all scanner errors."""


class InvalidUrlError(MarkupScannerError, ValueError):
    """Raised when a repository URL is not https://github.com/<owner>/<repo>."""

    def __init__(self, url: str):
        super().__init__(
            f"Invalid GitHub repository URL format: {url!r}. Expected: https://github.com/owner/repo"
        )
        self.url = url


class _FetchError(MarkupScannerError):
    def __init__(self, message: str, url: str, status: int | None = None):
        super().__init__(message)
        self.url = url
        self.status = status


class ListingFetchError(_FetchError):
    """Raised when the root directory listing cannot be retrieved."""


class ListingParseError(MarkupScannerError):
    """Raised when the directory listing is not the expected JSON array."""


class FileFetchError(_FetchError):
    """Raised when a file's raw content cannot be retrieved."""
