from __future__ import annotations

from typing import Optional


class BlobUtilsError(Exception):
    """Base error for the blob utilities."""


class ValidationError(BlobUtilsError):
    """Raised when user input is invalid."""


class CommandError(BlobUtilsError):
    """Raised when an `az` invocation fails.

    `returncode` and `stderr` are set when a process actually ran; both are
    None when the executable could not be started.
    """

    def __init__(self, message: str, *, returncode: Optional[int] = None, stderr: Optional[str] = None) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class TransferError(CommandError):
    """Raised when a download or upload fails."""


class ListError(CommandError):
    """Raised when listing a container fails."""
