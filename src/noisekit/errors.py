"""Exception taxonomy for the noisekit wizard.

Name validation failures are recovered by re-prompting, cancellation
exits cleanly with code 0, and command failures abort the run with
code 1 after the failing command and its output are shown.
"""

from __future__ import annotations


class NoisekitError(Exception):
    """Base class for all noisekit errors."""


class ProjectNameError(NoisekitError, ValueError):
    """Raised when a project name fails validation.

    Attributes:
        value: The rejected project name.
    """

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(reason)


class WizardCancelled(NoisekitError):
    """Raised when the user aborts the wizard before any task has run."""

    def __init__(self, message: str = "Operation cancelled.") -> None:
        super().__init__(message)


class CommandFailedError(NoisekitError):
    """Raised when a scaffolding command exits with a non-zero status.

    Attributes:
        command: Display form of the failing command.
        returncode: Exit status of the child process.
        output: Captured stdout/stderr (empty for interactive commands).
    """

    def __init__(self, command: str, returncode: int, output: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.output = output
        super().__init__(f"Command failed (exit {returncode}): {command}")
