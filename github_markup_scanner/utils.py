"""URL and formatting helpers."""

import re

from .errors import InvalidUrlError
from .models import RepositoryRef

_REPO_URL_RE = re.compile(r"https://github\.com/([^/]+)/([^/]+)/?")


def parse_repository_url(url: str) -> RepositoryRef:
    """Extract owner and repository name from a GitHub repository URL.

    Only https://github.com/<owner>/<repo> (optionally with a trailing slash)
    is accepted. A trailing ".git" is kept as part of the repository name.
    """
    match = _REPO_URL_RE.fullmatch(url)
    if not match:
        raise InvalidUrlError(url)
    return RepositoryRef(owner=match.group(1), name=match.group(2))


def format_findings(findings) -> list[str]:
    """Render findings as report lines, one per finding."""
    return [str(f) for f in findings]
