from .list_markup_files import (
    fetch_listing,
    filter_markup_files,
    is_markup_file,
    list_markup_files,
    parse_listing,
)

__all__ = [
    "fetch_listing",
    "filter_markup_files",
    "is_markup_file",
    "list_markup_files",
    "parse_listing",
]
