"""
Exceptions raised by the asset consolidator.
"""

from __future__ import annotations


class ConsolidationError(Exception):
    """
    Base exception for all consolidation errors
    """


class FolderNotFoundError(ConsolidationError, FileNotFoundError):
    """
    Raised when the source folder does not exist
    """

    def __init__(self, folder_name: str, resolved_path: str):
        super().__init__(f"The folder '{folder_name}' was not found.")
        self.folder_name = folder_name
        self.resolved_path = resolved_path


class FileParseError(ConsolidationError, ValueError):
    """
    Raised when a single JSON file cannot be read or parsed
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not process file {path}: {reason}")
        self.path = path
        self.reason = reason


class CsvWriteError(ConsolidationError, OSError):
    """
    Raised when the output CSV cannot be written
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not write CSV file '{path}': {reason}")
        self.path = path
        self.reason = reason
