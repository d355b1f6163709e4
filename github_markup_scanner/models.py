"""Data models and constants for markup scanning."""

from dataclasses import dataclass, field

# Checked in order against the lower-cased file name
MARKUP_EXTENSIONS = (
    ".md",
    ".markdown",
    ".mdown",
    ".mkdn",
    ".mkd",
    ".mdwn",
    ".mdtxt",
    ".mdtext",
    ".rst",
    ".txt",
    ".asciidoc",
    ".adoc",
    ".asc",
    ".textile",
    ".rdoc",
    ".org",
    ".creole",
    ".mediawiki",
    ".wiki",
    ".pod",
)


@dataclass
class ApiResponse:
    """Response from the GitHub REST API client."""

    status: int
    body: dict | list
    url: str


@dataclass(frozen=True)
class RepositoryRef:
    """Owner and name of a GitHub repository."""

    owner: str
    name: str

    def __post_init__(self):
        if not self.owner or not self.name:
            raise ValueError("owner and name must be non-empty")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def contents_endpoint(self) -> str:
        return f"repos/{self.owner}/{self.name}/contents"


@dataclass(frozen=True)
class FileEntry:
    """A file in the repository root that is a scan candidate."""

    name: str
    download_url: str


@dataclass(frozen=True)
class Finding:
    """One line containing the search substring."""

    file_name: str
    line_number: int
    line_text: str

    def __str__(self) -> str:
        return f"File: {self.file_name}, Line {self.line_number}: {self.line_text}"


@dataclass
class ScanReport:
    """Result of scanning one repository for one substring."""

    repository: RepositoryRef
    api_url: str
    search: str
    files: list[FileEntry] = field(default_factory=list)
    findings: list[Finding] = field(default_factory=list)
    failures: list[tuple[str, str]] = field(default_factory=list)  # (file name, error message)

    @property
    def has_markup_files(self) -> bool:
        return bool(self.files)

    @property
    def found(self) -> bool:
        return bool(self.findings)

    @property
    def occurrences(self) -> int:
        return len(self.findings)
