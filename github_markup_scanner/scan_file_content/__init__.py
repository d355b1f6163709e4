from .scan_file_content import find_matches, scan_file, scan_files

__all__ = ["find_matches", "scan_file", "scan_files"]
