"""Installer-specific exceptions.

Every error carries the offending registry path or filesystem path in
``context`` so callers can report which file failed.
"""


class InstallerError(Exception):
    """Base exception for registry file installation."""

    def __init__(self, message: str, context: dict | None = None):
        """Initialize with message and optional context.

        Args:
            message: Human-readable error message
            context: Optional dict with additional context (file paths, etc.)
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class TransformError(InstallerError):
    """Transform pipeline failed for a registry file."""


class FileWriteError(InstallerError):
    """Reading, creating directories for, or writing a target file failed."""


class PromptCancelledError(InstallerError):
    """Overwrite confirmation was cancelled before an answer was given."""
