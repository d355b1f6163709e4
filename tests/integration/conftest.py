"""Integration fixtures: a real MarkupScannerClient over an in-memory GitHub."""

import httpx
import pytest

from github_markup_scanner.client import MarkupScannerClient

API = "https://api.github.com"
RAW = "https://raw.githubusercontent.com"


class FakeGitHub:
    """Serves contents listings and raw files from dicts, recording requests."""

    def __init__(self):
        self.listings: dict[str, list | str] = {}
        self.files: dict[str, str] = {}
        self.status: dict[str, int] = {}
        self.errors: dict[str, Exception] = {}
        self.requests: list[httpx.Request] = []

    def add_repo(self, owner, repo, entries):
        """Register a listing; entries are (type, name, content-or-None)."""
        listing = []
        for entry_type, name, content in entries:
            download_url = f"{RAW}/{owner}/{repo}/main/{name}" if entry_type == "file" else None
            listing.append(
                {
                    "type": entry_type,
                    "name": name,
                    "path": name,
                    "download_url": download_url,
                }
            )
            if download_url and content is not None:
                self.files[download_url] = content
        self.listings[f"{API}/repos/{owner}/{repo}/contents"] = listing

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url in self.errors:
            raise self.errors[url]
        if url in self.status:
            return httpx.Response(self.status[url], text="error")
        if url in self.listings:
            listing = self.listings[url]
            if isinstance(listing, str):
                return httpx.Response(200, text=listing)
            return httpx.Response(200, json=listing)
        if url in self.files:
            return httpx.Response(200, text=self.files[url])
        return httpx.Response(404, json={"message": "Not Found"})

    def urls(self):
        return [str(r.url) for r in self.requests]


@pytest.fixture
def github():
    return FakeGitHub()


@pytest.fixture
def client(github):
    c = MarkupScannerClient(transport=httpx.MockTransport(github.handler))
    yield c
    c.close()
