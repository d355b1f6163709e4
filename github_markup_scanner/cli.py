"""CLI for scanning a repository's markup files."""

import argparse
import logging
import sys

from .errors import MarkupScannerError
from .settings import get_settings

logger = logging.getLogger("github_markup_scanner")


def _configure_logging(verbose: bool):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markup-scan",
        description="Search the markup files in a GitHub repository's root directory for a substring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Example: markup-scan https://github.com/github/gitignore gitignore",
    )
    parser.add_argument(
        "repo_url",
        nargs="?",
        help="Repository URL (https://github.com/owner/repo)",
    )
    parser.add_argument(
        "substring",
        nargs="?",
        help="Substring to search for (case-sensitive)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait on each HTTP request (default: 30)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Files to fetch concurrently (default: 1)",
    )
    parser.add_argument(
        "--skip-failed",
        action="store_true",
        default=None,
        help="Skip files that cannot be downloaded instead of aborting",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    _configure_logging(args.verbose)

    if args.repo_url is None or args.substring is None:
        if not settings.use_default_args:
            parser.error("the GitHub repository URL and the search substring are required")
        args.repo_url = settings.default_repo_url
        args.substring = settings.default_search
        logger.warning(
            "Invalid arguments. Please provide the GitHub repository URL and the search substring."
        )
        logger.warning("Using default values: %s and %s\n", args.repo_url, args.substring)

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    from .scanner import scan_repository

    try:
        scan_repository(
            args.repo_url,
            args.substring,
            max_workers=args.workers or settings.max_workers,
            skip_failed=settings.skip_failed if args.skip_failed is None else args.skip_failed,
            timeout=args.timeout,
        )
    except MarkupScannerError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
