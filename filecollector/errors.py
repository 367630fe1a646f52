# filecollector/errors.py

"""
Exception taxonomy for file collection.

Directory listing failures are not wrapped: they surface as the built-in
``OSError`` subclasses raised by the filesystem capability.
"""


from __future__ import annotations

from pathlib import Path


class FileCollectorError(Exception):
    """Base class for errors raised by :mod:`filecollector`."""


class NoSelectionError(FileCollectorError):
    """Raised when a document is requested while no file is checked."""

    def __init__(self, message: str = "No files selected!") -> None:
        super().__init__(message)


class FileReadError(FileCollectorError):
    """
    Raised when a checked file cannot be read while generating a document.

    Attributes
    ----------
    path : pathlib.Path
        The file that failed to read.
    cause : Exception
        The underlying ``OSError`` or ``UnicodeDecodeError``.
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class InvalidFileNameError(FileCollectorError, ValueError):
    """Raised when an output file name is empty or carries an extension."""
