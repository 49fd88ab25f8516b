"""Core protocol definitions.

Defines the CommandRunner protocol so the client can be driven by a real
subprocess runner or by a fake in tests.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from core.models import CommandResult


class CommandRunner(Protocol):
    """Contract for anything that runs an argument vector to completion."""
    def __call__(self, args: Sequence[str]) -> CommandResult:
        ...
