"""Rich terminal output for the wizard.

Banner, plan summary, failure report and closing instructions. All
functions take the Console explicitly so tests can capture output.
"""

from __future__ import annotations

from rich.color import Color
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from noisekit.errors import CommandFailedError

BANNER = r"""
     _   _  ___  ___ ____  _____ _  _____ _____
    | \ | |/ _ \|_ _/ ___|| ____| |/ /_ _|_   _|
    |  \| | | | || |\___ \|  _| | ' / | |  | |
    | |\  | |_| || | ___) | |___| . \ | |  | |
    |_| \_|\___/|___|____/|_____|_|\_\___| |_|
"""

# Gradient endpoints: amber -> red
GRADIENT_START = (0xF5, 0x9E, 0x0B)
GRADIENT_END = (0xB9, 0x1C, 0x1C)

# Captured output longer than this is cut to its tail
MAX_OUTPUT_LINES = 40


def _blend(start: tuple[int, int, int], end: tuple[int, int, int], t: float) -> Color:
    r, g, b = (round(s + (e - s) * t) for s, e in zip(start, end))
    return Color.from_rgb(r, g, b)


def gradient_text(block: str) -> Text:
    """Color a multi-line block with a horizontal gradient.

    Every line shares the same column scale so the columns line up.
    """
    lines = block.strip("\n").splitlines()
    width = max((len(line) for line in lines), default=1)
    text = Text()
    for row, line in enumerate(lines):
        for col, ch in enumerate(line):
            t = col / (width - 1) if width > 1 else 0.0
            text.append(ch, style=Style(color=_blend(GRADIENT_START, GRADIENT_END, t)))
        if row < len(lines) - 1:
            text.append("\n")
    return text


def render_banner(console: Console) -> None:
    console.print(gradient_text(BANNER))
    console.print()
    console.print("[magenta]noiseKit[/magenta] - Modern SvelteKit Starter")
    console.print()


def render_summary_panel(summary: str, console: Console) -> None:
    """Show the plan summary in a panel before confirmation."""
    console.print(
        Panel(
            Text(summary),
            title="[magenta]Project setup summary[/magenta]",
            subtitle="Creating your noiseKit project",
            expand=False,
        )
    )


def render_cancelled(message: str, console: Console) -> None:
    console.print(f"[yellow]■[/yellow] {message}")


def render_failure(error: CommandFailedError, console: Console) -> None:
    """Print the failing command and the tail of its captured output."""
    console.print(f"[bold red]Command failed[/bold red] (exit {error.returncode}):")
    console.print(f"  {error.command}", markup=False, highlight=False)
    output = error.output.rstrip()
    if output:
        lines = output.splitlines()
        if len(lines) > MAX_OUTPUT_LINES:
            skipped = len(lines) - MAX_OUTPUT_LINES
            lines = [f"... ({skipped} earlier lines omitted)"] + lines[-MAX_OUTPUT_LINES:]
        console.print(
            Panel(Text("\n".join(lines)), title="output", border_style="red", expand=False)
        )


def render_outro(project_name: str, console: Console) -> None:
    console.print()
    console.print("[green]✓[/green] [bold]Project created successfully![/bold]")
    console.print()
    console.print("To get started:")
    console.print(f"  [cyan]cd {project_name}[/cyan]")
    console.print("  [cyan]npm run dev[/cyan]")
    console.print()
    console.print("Happy coding!")
