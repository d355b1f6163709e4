"""GitHub REST API client using httpx."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx

from .errors import FileFetchError, ListingFetchError, ListingParseError
from .models import ApiResponse
from .settings import get_settings

ACCEPT_V3 = "application/vnd.github.v3+json"


class MarkupScannerClient:
    """Thin client for the contents endpoint and raw file downloads.

    No caching and no retries: every call is a single request bounded by
    the configured timeout.
    """

    def __init__(
        self,
        api_base: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        settings = get_settings()
        self.api_base = (api_base or settings.api_base).rstrip("/")
        self.timeout = settings.timeout if timeout is None else timeout
        self._client = httpx.Client(
            headers={"User-Agent": user_agent or settings.user_agent},
            timeout=self.timeout,
            transport=transport,
        )

    def url_for(self, endpoint: str) -> str:
        ep = endpoint if endpoint.startswith("/") else f"/{endpoint}"
        return f"{self.api_base}{ep}"

    def get_json(self, endpoint: str) -> ApiResponse:
        """GET an API endpoint and decode the JSON body.

        Raises ListingFetchError for transport failures and non-200 statuses,
        ListingParseError when the body is not JSON.
        """
        url = self.url_for(endpoint)
        try:
            resp = self._client.get(url, headers={"Accept": ACCEPT_V3})
        except httpx.HTTPError as e:
            raise ListingFetchError(f"Failed to fetch repository contents from {url}: {e}", url) from e

        if resp.status_code != 200:
            raise ListingFetchError(
                f"Failed to fetch repository contents. HTTP {resp.status_code}. "
                "Check if the repository exists and is public.",
                url,
                status=resp.status_code,
            )

        try:
            body = resp.json()
        except ValueError as e:
            raise ListingParseError(f"Repository contents from {url} are not valid JSON") from e

        return ApiResponse(status=resp.status_code, body=body, url=url)

    @contextmanager
    def stream_lines(self, url: str) -> Iterator[Iterator[str]]:
        """Stream a raw file and yield an iterator over its lines.

        Raises FileFetchError for transport failures and non-200 statuses,
        including failures while the body is being read.
        """
        try:
            with self._client.stream("GET", url) as resp:
                if resp.status_code != 200:
                    raise FileFetchError(
                        f"Failed to fetch {url}. HTTP {resp.status_code}", url, status=resp.status_code
                    )
                yield resp.iter_lines()
        except httpx.HTTPError as e:
            raise FileFetchError(f"Failed to fetch {url}: {e}", url) from e

    def close(self):
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def get_client(timeout: float | None = None) -> MarkupScannerClient:
    """Create a client configured from settings."""
    return MarkupScannerClient(timeout=timeout)
