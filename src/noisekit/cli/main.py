"""noisekit CLI entry point."""

import logging

import typer
from rich.console import Console

from noisekit import __version__
from noisekit.cli.output import render_cancelled, render_failure
from noisekit.errors import CommandFailedError, WizardCancelled
from noisekit.log import setup_logging
from noisekit.wizard.flow import run_wizard
from noisekit.wizard.prompts import RichPrompter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="noisekit",
    help="Interactive SvelteKit starter scaffolding",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"noisekit {__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log each command as it runs."),
) -> None:
    """Create a new SvelteKit project interactively."""
    setup_logging(verbose)
    console = Console()

    try:
        run_wizard(console, RichPrompter(console))
    except WizardCancelled as exc:
        render_cancelled(str(exc), console)
        raise typer.Exit(code=0)
    except CommandFailedError as exc:
        render_failure(exc, Console(stderr=True))
        raise typer.Exit(code=1)
    except Exception as exc:
        logger.exception("An unexpected error occurred: %s", exc)
        raise typer.Exit(code=1)
