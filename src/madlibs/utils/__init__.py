"""
Utility modules for the Mad Libs CLI.

Modules:
- errors: Exception hierarchy and error reporting
- storage: Story catalog loading from disk (import from .storage directly)
"""

from .errors import (
    MadLibsError,
    DataUnavailableError,
    MalformedCatalogError,
    InvalidGenreError,
    IoFailureError,
    report_error,
)

__all__ = [
    "MadLibsError",
    "DataUnavailableError",
    "MalformedCatalogError",
    "InvalidGenreError",
    "IoFailureError",
    "report_error",
]
