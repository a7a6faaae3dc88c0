"""
Custom exceptions for project scaffolding.

These exceptions separate user-input problems, missing tooling and
failed external commands so the CLI can report each one plainly.
"""

from typing import Optional, Sequence


class ScaffoldError(Exception):
    """Base exception for scaffolding operations."""

    pass


class ValidationError(ScaffoldError):
    """Validation check failed."""

    pass


class FileOperationError(ScaffoldError):
    """File operation failed."""

    pass


class PackageManagerError(ScaffoldError):
    """Package manager is missing and could not be installed."""

    pass


class OperationCancelled(ScaffoldError):
    """User cancelled the interactive prompts."""

    pass


class CommandError(ScaffoldError):
    """External command could not be started or exited non-zero."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
    ):
        super().__init__(message)
        self.command = tuple(command)
        self.returncode = returncode
