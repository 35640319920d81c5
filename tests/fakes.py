"""Test doubles for the wizard's prompt and command boundaries.

Kept in their own module so test files can import them directly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from noisekit.errors import CommandFailedError, WizardCancelled
from noisekit.models.task import ExecutionMode

CANCEL = object()


class ScriptedPrompter:
    """Prompter that replays canned answers in order.

    Each answer is consumed by the next question regardless of its kind.
    The CANCEL sentinel raises WizardCancelled at that question.
    Text answers are run through the question's validator, and invalid
    ones are recorded in ``rejected`` and skipped, like a re-ask.
    """

    def __init__(self, answers: list[Any]) -> None:
        self._answers = list(answers)
        self.questions: list[tuple[str, str]] = []
        self.rejected: list[str] = []

    def _next(self, kind: str, message: str) -> Any:
        self.questions.append((kind, message))
        if not self._answers:
            raise AssertionError(f"No scripted answer for {kind}: {message}")
        answer = self._answers.pop(0)
        if answer is CANCEL:
            raise WizardCancelled()
        return answer

    def text(self, message, default=None, validate=None):
        while True:
            answer = self._next("text", message)
            if validate is None:
                return answer
            try:
                validate(answer)
            except ValueError:
                self.rejected.append(answer)
                continue
            return answer

    def select(self, message, options, default_index=0):
        answer = self._next("select", message)
        values = [option[0] for option in options]
        assert answer in values, f"{answer!r} not offered for {message}: {values}"
        return answer

    def multiselect(self, message, options, initial=()):
        answer = self._next("multiselect", message)
        values = [option[0] for option in options]
        for value in answer:
            assert value in values, f"{value!r} not offered for {message}"
        return list(answer)

    def confirm(self, message, default=True):
        return self._next("confirm", message)


class FakeExecutor:
    """Records commands instead of running them.

    ``fail_on`` maps an argv substring to the exit status to fail with.
    ``create_project`` makes ``sv create <name>`` create the directory.
    """

    def __init__(
        self,
        fail_on: dict[str, int] | None = None,
        create_project: bool = True,
    ) -> None:
        self.fail_on = fail_on or {}
        self.create_project = create_project
        self.calls: list[tuple[list[str], Path, ExecutionMode]] = []

    def __call__(self, argv: list[str], cwd: Path, mode: ExecutionMode) -> str:
        self.calls.append((argv, cwd, mode))
        command = " ".join(argv)
        for needle, status in self.fail_on.items():
            if needle in command:
                raise CommandFailedError(command, status, f"{needle} blew up")
        if self.create_project and "create" in argv:
            name = argv[argv.index("create") + 1]
            (cwd / name / "src" / "routes").mkdir(parents=True, exist_ok=True)
        return "ok"
