"""Immutable dataclasses passed between the runner, the parser and the client.

CommandResult captures one finished `az` process; BlobEntry is one element
of a `az storage blob list` response.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a finished subprocess."""

    args: Tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def stdout_lines(self) -> List[str]:
        # "\n" only: splitlines() also breaks on \x85, \u2028, \u2029 inside blob names
        lines = self.stdout.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines


@dataclass(frozen=True)
class BlobEntry:
    """A listed blob.

    Only `name` is used; every other provider field is kept in `properties`.
    """

    name: str
    properties: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class StorageTarget:
    """Account, container and SAS token addressed by one tool call."""

    account: str
    container: str
    token: str
