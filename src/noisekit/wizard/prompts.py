"""Prompt collection for the project wizard.

The wizard talks to the user only through a Prompter, which offers
text, single-select, multi-select and confirm questions. RichPrompter
implements it on top of rich.prompt. Ctrl-C or end-of-input at any
question raises WizardCancelled.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt

from noisekit.errors import ProjectNameError, WizardCancelled
from noisekit.models.request import (
    CLIENTS_BY_DATABASE,
    Adapter,
    Database,
    OrmConfig,
    Package,
    ProjectRequest,
    validate_project_name,
)

T = TypeVar("T")

# (value, label, hint)
Option = tuple[Any, str, str]


class Prompter(Protocol):
    """The four question shapes the wizard asks."""

    def text(
        self,
        message: str,
        default: str | None = None,
        validate: Callable[[str], Any] | None = None,
    ) -> str: ...

    def select(self, message: str, options: Sequence[Option], default_index: int = 0) -> Any: ...

    def multiselect(
        self,
        message: str,
        options: Sequence[Option],
        initial: Sequence[Any] = (),
    ) -> list[Any]: ...

    def confirm(self, message: str, default: bool = True) -> bool: ...


class RichPrompter:
    """Prompter backed by rich.prompt on a Console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _ask(self, ask: Callable[[], T]) -> T:
        try:
            return ask()
        except (KeyboardInterrupt, EOFError) as exc:
            self.console.print()
            raise WizardCancelled() from exc

    def _print_options(self, options: Sequence[Option], marked: Sequence[int] = ()) -> None:
        for i, (_, label, hint) in enumerate(options, 1):
            mark = "[green]●[/green]" if i - 1 in marked else " "
            hint_text = f" [dim]({hint})[/dim]" if hint else ""
            self.console.print(f"  {mark} [cyan]{i}[/cyan]. {label}{hint_text}")

    def text(
        self,
        message: str,
        default: str | None = None,
        validate: Callable[[str], Any] | None = None,
    ) -> str:
        while True:
            if default is None:
                value = self._ask(lambda: Prompt.ask(message, console=self.console))
            else:
                value = self._ask(
                    lambda: Prompt.ask(message, console=self.console, default=default)
                )
            value = (value or "").strip("\r\n")
            if validate is None:
                return value
            try:
                validate(value)
            except ProjectNameError as exc:
                self.console.print(f"[red]{exc}[/red]")
                continue
            return value

    def select(self, message: str, options: Sequence[Option], default_index: int = 0) -> Any:
        self.console.print(f"[bold]{message}[/bold]")
        self._print_options(options)
        choices = [str(i) for i in range(1, len(options) + 1)]
        answer = self._ask(
            lambda: Prompt.ask(
                "Choose",
                console=self.console,
                choices=choices,
                default=choices[default_index],
            )
        )
        return options[int(answer) - 1][0]

    def multiselect(
        self,
        message: str,
        options: Sequence[Option],
        initial: Sequence[Any] = (),
    ) -> list[Any]:
        marked = [i for i, option in enumerate(options) if option[0] in initial]
        self.console.print(f"[bold]{message}[/bold]")
        self._print_options(options, marked)
        default = ",".join(str(i + 1) for i in marked)
        while True:
            answer = self._ask(
                lambda: Prompt.ask(
                    "Numbers separated by commas ('none' to skip)",
                    console=self.console,
                    default=default,
                    show_default=bool(default),
                )
            )
            try:
                indices = parse_selection(answer, len(options))
            except ValueError as exc:
                self.console.print(f"[red]{exc}[/red]")
                continue
            return [options[i][0] for i in indices]

    def confirm(self, message: str, default: bool = True) -> bool:
        return self._ask(lambda: Confirm.ask(message, console=self.console, default=default))


def parse_selection(answer: str, count: int) -> list[int]:
    """Parse "1, 3" into sorted zero-based indices.

    An empty answer or "none" selects nothing.

    Raises:
        ValueError: On a non-number or an out-of-range entry.
    """
    answer = answer.strip()
    if not answer or answer.lower() == "none":
        return []
    indices: set[int] = set()
    for part in answer.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit() or not 1 <= int(part) <= count:
            raise ValueError(f"'{part}' is not a number between 1 and {count}.")
        indices.add(int(part) - 1)
    return sorted(indices)


ADAPTER_OPTIONS: list[Option] = [
    (None, "Default", "adapter-auto"),
    (Adapter.node, Adapter.node.label, "adapter-node"),
    (Adapter.static, Adapter.static.label, "adapter-static, prerendered"),
]

PACKAGE_OPTIONS: list[Option] = [(pkg, pkg.label, pkg.value) for pkg in Package]


def collect_orm(prompter: Prompter) -> OrmConfig | None:
    """Ask the nested Drizzle questions if the user opts in."""
    if not prompter.confirm("Would you like to set up Drizzle ORM?", default=False):
        return None
    database: Database = prompter.select(
        "Which database would you like to use?",
        [(db, db.value, "") for db in Database],
    )
    client = prompter.select(
        "Which client library?",
        [(c, c.value, "") for c in CLIENTS_BY_DATABASE[database]],
    )
    docker = False
    if database.supports_docker:
        docker = prompter.confirm("Add a Docker Compose file for the database?", default=False)
    return OrmConfig(database=database, client=client, docker=docker)


def collect_request(prompter: Prompter) -> ProjectRequest:
    """Ask every wizard question and build the resulting request.

    Raises:
        WizardCancelled: If the user cancels any question.
    """
    name = prompter.text(
        "What would you like to name your project?",
        validate=validate_project_name,
    )
    adapter = prompter.select("Which adapter would you like to use?", ADAPTER_OPTIONS)
    orm = collect_orm(prompter)
    shadcn = prompter.confirm("Initialize shadcn-svelte UI components?", default=False)
    packages = prompter.multiselect(
        "Would you like to install additional packages?",
        PACKAGE_OPTIONS,
        initial=[Package.svelte_seo],
    )
    return ProjectRequest(
        name=name,
        adapter=adapter,
        orm=orm,
        shadcn=shadcn,
        packages=set(packages),
    )


def confirm_plan(prompter: Prompter) -> None:
    """Final gate before anything touches the filesystem.

    Raises:
        WizardCancelled: If the user declines or cancels.
    """
    if not prompter.confirm("Ready to create your project?", default=True):
        raise WizardCancelled()
