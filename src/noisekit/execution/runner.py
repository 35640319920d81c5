"""TaskRunner: execute scaffolding tasks one after another.

Silent tasks run under a spinner; interactive tasks run without one
so the child process owns the terminal. The first failing task stops
the run and nothing after it is started.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.console import Console

from noisekit.execution.process import run_command
from noisekit.models.task import ExecutionMode, TaskSpec

logger = logging.getLogger(__name__)

Executor = Callable[[list[str], Path, ExecutionMode], str]


class TaskRunner:
    """Runs TaskSpecs sequentially, surfacing progress on a console.

    Args:
        console: Rich Console used for spinners and status lines.
        executor: Callable that runs one command. Defaults to run_command.
    """

    def __init__(self, console: Console, executor: Executor | None = None) -> None:
        self.console = console
        self.executor = executor or run_command

    def run_task(self, task: TaskSpec) -> str:
        """Run a single task and return its status string.

        Raises:
            CommandFailedError: If the task's command fails.
        """
        logger.debug("Starting task %s: %s", task.key, task.command)
        if task.mode is ExecutionMode.interactive:
            self.console.print(f"[bold blue]◆[/bold blue] {task.title}")
            self.executor(list(task.argv), task.cwd, task.mode)
        else:
            with self.console.status(f"[bold blue]{task.title}...", spinner="dots"):
                self.executor(list(task.argv), task.cwd, task.mode)
        self.console.print(f"  [green]✓[/green] {task.success_message}")
        return task.success_message

    def run(self, tasks: Sequence[TaskSpec]) -> list[str]:
        """Run every task in order, stopping at the first failure.

        Returns:
            Status strings of the completed tasks, in order.

        Raises:
            CommandFailedError: From the first task that fails.
        """
        results: list[str] = []
        for task in tasks:
            try:
                results.append(self.run_task(task))
            except Exception:
                self.console.print(f"  [red]✗[/red] {task.title} failed")
                raise
        return results
