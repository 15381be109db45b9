# src/pdf_prescan/errors.py
"""
Failure taxonomy for a single scan. None of these are retried; the CLI reports
each once and exits with the attached status.

Exit statuses:
    0: scan completed, with or without matches
    1: extraction failed or the terms file could not be read
    2: missing file, non-file path, non-PDF, or no usable text layer
"""

from __future__ import annotations

from typing import Final

EXIT_OK: Final = 0
EXIT_FAILURE: Final = 1
EXIT_INVALID_INPUT: Final = 2


class PrescanError(Exception):
    exit_code: int = EXIT_FAILURE


class InputNotFoundError(PrescanError, FileNotFoundError):
    exit_code = EXIT_INVALID_INPUT

    def __init__(self, path: object) -> None:
        super().__init__(f"file not found: {path}")
        self.path = path


class UnsupportedInputError(PrescanError):
    """Path exists but is not a regular file, or is not a PDF."""
    exit_code = EXIT_INVALID_INPUT

    def __init__(self, message: str, path: object) -> None:
        super().__init__(message)
        self.path = path


class ExtractionError(PrescanError):
    """The PDF could not be parsed; the original error is the __cause__."""


class TermsFileError(PrescanError):
    """The requested terms file could not be read."""
