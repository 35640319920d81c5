"""Child process execution in silent or interactive mode.

Commands are passed as argument vectors, never through a shell. There
is no timeout: a command that hangs keeps the wizard waiting.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from pathlib import Path

from noisekit.errors import CommandFailedError
from noisekit.models.task import ExecutionMode

logger = logging.getLogger(__name__)

# Exit status reported when the executable cannot be found, as a POSIX shell would.
COMMAND_NOT_FOUND = 127


def _resolve_executable(argv: list[str]) -> list[str]:
    """Resolve argv[0] on PATH so npm/npx .cmd shims work on Windows."""
    resolved = shutil.which(argv[0])
    if resolved is None:
        return list(argv)
    return [resolved, *argv[1:]]


def run_command(
    argv: list[str],
    cwd: Path,
    mode: ExecutionMode = ExecutionMode.silent,
) -> str:
    """Run a command to completion.

    Args:
        argv: Program and arguments.
        cwd: Working directory for the child.
        mode: ``silent`` captures stdout and stderr; ``interactive``
            connects the child to this terminal.

    Returns:
        Captured output in silent mode, an empty string in interactive mode.

    Raises:
        CommandFailedError: If the program is missing or exits non-zero.
    """
    command = shlex.join(argv)
    logger.debug("Running %s (cwd=%s, mode=%s)", command, cwd, mode.value)

    capture = mode is ExecutionMode.silent
    try:
        completed = subprocess.run(
            _resolve_executable(argv),
            cwd=cwd,
            stdout=subprocess.PIPE if capture else None,
            stderr=subprocess.STDOUT if capture else None,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except FileNotFoundError as exc:
        raise CommandFailedError(command, COMMAND_NOT_FOUND, str(exc)) from exc

    output = (completed.stdout or "") if capture else ""
    if completed.returncode != 0:
        logger.debug("%s exited with %d", command, completed.returncode)
        raise CommandFailedError(command, completed.returncode, output)
    return output
