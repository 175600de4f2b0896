"""Interactive question engine.

The workflow never talks to the terminal directly.  It declares an ordered
list of :class:`Question` objects and hands them to a :class:`Prompter`,
which returns a name-keyed answer dict.  Two prompters ship with the package:

- :class:`ConsolePrompter` -- asks on the terminal via ``rich.prompt``.
- :class:`ScriptedPrompter` -- replays pre-recorded answers (tests and the
  ``--no-interactive`` CLI mode).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Literal, Protocol

from pydantic import BaseModel, Field
from rich.console import Console
from rich.prompt import Confirm, Prompt

from .utils import console as default_console


# ---------------------------------------------------------------------------
# Question model
# ---------------------------------------------------------------------------

class QuestionKind(str, Enum):
    """How a question is answered."""
    LIST = "list"
    INPUT = "input"
    CONFIRM = "confirm"


class Question(BaseModel):
    """A single question put to the operator."""

    name: str
    kind: QuestionKind
    describe: str
    choices: list[str] = Field(default_factory=list)
    default: Any = None
    prompt: Literal["always"] = "always"


def build_questions(
    namespaces: Sequence[str],
    defaults: Mapping[str, Any] | None = None,
) -> list[Question]:
    """Build the ordered component question list.

    The ``namespace`` question is only included when there is more than one
    namespace to choose from.  *defaults* overrides the built-in default of
    any question by name (values passed on the command line).
    """
    defaults = {k: v for k, v in (defaults or {}).items() if v is not None}
    questions: list[Question] = []

    if len(namespaces) > 1:
        questions.append(
            Question(
                name="namespace",
                kind=QuestionKind.LIST,
                describe="Component Namespace",
                choices=list(namespaces),
                default=defaults.get("namespace", namespaces[0]),
            )
        )

    questions.extend([
        Question(
            name="component",
            kind=QuestionKind.INPUT,
            describe="Component Name",
            default=defaults.get("component"),
        ),
        Question(
            name="css",
            kind=QuestionKind.CONFIRM,
            describe="CSS File",
            default=defaults.get("css", True),
        ),
        Question(
            name="unit",
            kind=QuestionKind.CONFIRM,
            describe="Unit Test",
            default=defaults.get("unit", False),
        ),
        Question(
            name="wdio",
            kind=QuestionKind.CONFIRM,
            describe="WDIO Test",
            default=defaults.get("wdio", False),
        ),
    ])
    return questions


def confirmation_question() -> Question:
    """The final yes/no asked after the preview."""
    return Question(
        name="yn",
        kind=QuestionKind.CONFIRM,
        describe="Create Component",
        default=True,
    )


# ---------------------------------------------------------------------------
# Prompters
# ---------------------------------------------------------------------------

class Prompter(Protocol):
    """Anything that can answer a batch of questions, one at a time, in order."""

    def ask(self, questions: Sequence[Question]) -> dict[str, Any]:
        ...


class ConsolePrompter:
    """Asks questions on the terminal using ``rich.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = default_console if console is None else console

    def ask(self, questions: Sequence[Question]) -> dict[str, Any]:
        answers: dict[str, Any] = {}
        for question in questions:
            answers[question.name] = self._ask_one(question)
        return answers

    def _ask_one(self, question: Question) -> Any:
        if question.kind is QuestionKind.CONFIRM:
            return Confirm.ask(
                question.describe,
                default=bool(question.default),
                console=self.console,
            )
        if question.kind is QuestionKind.LIST:
            return Prompt.ask(
                question.describe,
                choices=question.choices,
                default=question.default,
                console=self.console,
            )
        if question.default is None:
            return Prompt.ask(question.describe, console=self.console)
        return Prompt.ask(question.describe, default=question.default, console=self.console)


class ScriptedPrompter:
    """Answers questions from a fixed mapping, falling back to defaults.

    Every question it is asked is recorded in ``asked`` (by name) so callers
    can check which questions were shown.  An input question with neither a
    scripted answer nor a default is answered with ``""``.
    """

    def __init__(self, answers: Mapping[str, Any] | None = None) -> None:
        self.answers = dict(answers or {})
        self.asked: list[str] = []

    def ask(self, questions: Sequence[Question]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for question in questions:
            self.asked.append(question.name)
            value = self.answers.get(question.name, question.default)
            if value is None and question.kind is QuestionKind.INPUT:
                value = ""
            result[question.name] = value
        return result
