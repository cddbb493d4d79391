"""
Custom exceptions for diary parsing and querying.
"""

from pathlib import Path


class MdpError(Exception):
    """Base exception for all mdp errors."""

    pass


class InvalidQueryError(MdpError):
    """Raised when a tag search query is malformed."""

    def __init__(self, message: str, terms: list[str] | None = None):
        self.terms = terms or []
        super().__init__(message)


class DiaryReadError(MdpError):
    """Raised when a diary file cannot be read."""

    def __init__(self, path: Path, details: str):
        self.path = path
        self.details = details
        super().__init__(f"An error occurred while reading the file {path}: {details}")
