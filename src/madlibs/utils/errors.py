"""
Error handling utilities for the Mad Libs CLI.

Provides the exception hierarchy raised by the loader, the genre selector
and the console presenter, plus the helper the CLI uses to report them.
"""

import logging
from typing import Optional, Dict, Any

import click

logger = logging.getLogger(__name__)


class MadLibsError(Exception):
    """Base exception for every fatal Mad Libs failure."""

    def __init__(
        self,
        message: str,
        error_code: str = "MADLIBS_ERROR",
        exit_code: int = 1,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the error.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            exit_code: Process exit status used by the CLI
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.exit_code = exit_code
        self.details = details or {}


class DataUnavailableError(MadLibsError):
    """Raised when the story catalog file cannot be read."""

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Story catalog '{path}' could not be read."
        if reason:
            message += f" {reason}"
        super().__init__(
            message=message,
            error_code="DATA_UNAVAILABLE",
            details={"path": path}
        )


class MalformedCatalogError(MadLibsError):
    """Raised when the catalog content does not have the expected shape."""

    def __init__(self, path: str, reason: str, details: Optional[Dict[str, Any]] = None):
        merged = {"path": path}
        merged.update(details or {})
        super().__init__(
            message=f"Story catalog '{path}' is malformed: {reason}",
            error_code="MALFORMED_CATALOG",
            details=merged
        )


class InvalidGenreError(MadLibsError):
    """Raised when user text does not name a known genre."""

    def __init__(self, text: str, choices: str):
        super().__init__(
            message=f"Please enter a valid story genre: {choices}",
            error_code="INVALID_GENRE",
            details={"input": text}
        )


class IoFailureError(MadLibsError):
    """Raised when reading from the console fails."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message=message or "Could not read a line from standard input.",
            error_code="IO_FAILURE"
        )


def report_error(error: MadLibsError) -> int:
    """
    Log an error and print its diagnostic to stderr.

    Args:
        error: The error that ended the run

    Returns:
        The exit status the process should terminate with
    """
    logger.debug(
        f"{error.error_code}: {error.message}",
        extra={"details": error.details}
    )
    click.echo(f"Error: {error.message}", err=True)
    return error.exit_code
