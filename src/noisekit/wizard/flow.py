"""The end-to-end wizard: prompts, plan, confirmation, tasks, rewrites.

Data only flows forward. Cancellation is possible until the
confirmation gate; after it, the first failing task aborts the run and
earlier filesystem changes are left in place.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from noisekit.cli.output import render_banner, render_outro, render_summary_panel
from noisekit.execution.runner import TaskRunner
from noisekit.models.config import ScaffoldContext, ToolchainConfig
from noisekit.plan.assembler import build_plan, render_summary
from noisekit.scaffold.postprocess import post_process
from noisekit.wizard.prompts import Prompter, collect_request, confirm_plan

logger = logging.getLogger(__name__)


def run_wizard(
    console: Console,
    prompter: Prompter,
    runner: TaskRunner | None = None,
    working_dir: Path | None = None,
    toolchain: ToolchainConfig | None = None,
) -> ScaffoldContext:
    """Run one wizard session.

    Args:
        console: Console for banner, summary and progress output.
        prompter: Source of answers.
        runner: Task runner. Defaults to a TaskRunner on ``console``.
        working_dir: Directory the project is created in. Defaults to cwd.
        toolchain: Generator pins. Defaults to ToolchainConfig().

    Returns:
        The context of the created project.

    Raises:
        WizardCancelled: If the user cancels before confirming.
        CommandFailedError: If any task fails.
        OSError: If a post-processing read or write fails.
    """
    render_banner(console)

    request = collect_request(prompter)
    ctx = ScaffoldContext(
        project_name=request.name,
        working_dir=working_dir or Path.cwd(),
    )
    tasks = build_plan(request, ctx, toolchain)
    logger.debug("Planned %d tasks: %s", len(tasks), [t.key for t in tasks])

    render_summary_panel(render_summary(request), console)
    confirm_plan(prompter)

    runner = runner or TaskRunner(console)
    runner.run(tasks)

    for path in post_process(ctx, request):
        console.print(f"  [green]✓[/green] Wrote {path}")

    render_outro(request.name, console)
    return ctx
