"""Exception hierarchy for project generation.

Every fatal failure raised by the generator derives from QuickstartError
so the CLI can report it with a single handler. Messages never include
the seed phrase.
"""

from __future__ import annotations

from pathlib import Path


class QuickstartError(Exception):
    """Base class for fatal generation errors."""


class DestinationExistsError(QuickstartError):
    """Raised when the target project directory is already present."""

    def __init__(self, destination: Path) -> None:
        self.destination = destination
        super().__init__(f"Destination already exists: {destination}")


class TemplateFetchError(QuickstartError):
    """Raised when the template repository cannot be cloned."""


class CommandError(QuickstartError):
    """Raised when an external command exits non-zero or cannot start."""

    def __init__(
        self,
        command: str,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Command could not be started: {command}"
        else:
            message = f"Command failed with exit code {returncode}: {command}"
        if stderr:
            message += f"\n{stderr}"
        super().__init__(message)


class ManifestError(QuickstartError):
    """Raised when the signed manifest cannot be produced."""


class DescriptorError(QuickstartError):
    """Raised when package.json is missing or not a JSON object."""
