"""Task models consumed by the task runner."""

from __future__ import annotations

import shlex
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class ExecutionMode(str, Enum):
    """How a task's child process is attached to the terminal.

    ``silent`` captures output and only surfaces it on failure.
    ``interactive`` inherits stdin/stdout/stderr so the child can prompt.
    """

    silent = "silent"
    interactive = "interactive"


class TaskSpec(BaseModel):
    """One named unit of work: a command plus where and how to run it."""

    model_config = {"extra": "forbid", "frozen": True}

    key: str
    title: str
    argv: list[str] = Field(min_length=1)
    cwd: Path
    mode: ExecutionMode = ExecutionMode.silent
    success_message: str = "Done"

    @property
    def command(self) -> str:
        """Shell-quoted form of argv, for display only."""
        return shlex.join(self.argv)
