"""Synchronous runner for the external git and package-manager commands."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from frames_quickstart.errors import CommandError

# Lines of captured stderr kept in CommandError messages.
_STDERR_TAIL_LINES = 20


def _tail(text: str, lines: int = _STDERR_TAIL_LINES) -> str:
    return "\n".join(text.strip().splitlines()[-lines:])


class CommandRunner:
    """Run argv-style commands to completion, raising CommandError on failure.

    Commands are never passed through a shell. There is no timeout: a hung
    command blocks the run.
    """

    def run(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        *,
        stream: bool = False,
    ) -> None:
        """Run a command.

        Args:
            args: Program and arguments.
            cwd: Working directory, defaults to the current one.
            stream: If True, the command's stdout/stderr go straight to the
                user's terminal. Otherwise output is captured and only
                surfaced (stderr tail) on failure.

        Raises:
            CommandError: On non-zero exit or when the program is missing.
        """
        cmd_str = shlex.join(args)
        try:
            result = subprocess.run(
                list(args),
                cwd=str(cwd) if cwd else None,
                capture_output=not stream,
                text=True,
            )
        except OSError:
            raise CommandError(cmd_str) from None

        if result.returncode != 0:
            stderr = "" if stream else _tail(result.stderr or "")
            raise CommandError(cmd_str, result.returncode, stderr)
