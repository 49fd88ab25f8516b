"""Subprocess execution for `az` commands.

Runs an argument vector without a shell, waits for it and captures both
streams as text. `subprocess.run` reaps the child on every exit path.
"""

from __future__ import annotations

import subprocess
from typing import Sequence

from core.models import CommandResult


def run_command(args: Sequence[str]) -> CommandResult:
    # Non-zero exit is reported in the result, not raised here;
    # OSError (e.g. missing executable) propagates to the caller.
    completed = subprocess.run(
        list(args),
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )
    return CommandResult(
        args=tuple(args),
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
