"""Pluggable operator input for the onboarding workflow.

Every blocking question the tool asks goes through an ``InputProvider`` so
the workflow never reads the terminal directly. The CLI uses
``ClickInputProvider``; tests and non-terminal callers use
``ScriptedInputProvider`` with a queue of prepared answers.

Key Exports:
    InputProvider: Protocol implemented by all providers.
    ClickInputProvider: Terminal prompts backed by click.
    ScriptedInputProvider: Replays queued answers, records the questions asked.

Example:
    >>> from actions_bootstrap.utils.prompts import ScriptedInputProvider
    >>> prompter = ScriptedInputProvider([True, "example.com"])
    >>> prompter.confirm("Configure DEPLOY_HOST now?")
    True
    >>> prompter.prompt_secret("Value for DEPLOY_HOST")
    'example.com'
"""

from collections import deque
from collections.abc import Iterable
from typing import Protocol

import click


class InputProvider(Protocol):
    """Source of operator answers. Each call blocks until answered."""

    def confirm(self, text: str, default: bool = False) -> bool: ...

    def prompt(self, text: str) -> str: ...

    def prompt_secret(self, text: str) -> str: ...


class ClickInputProvider:
    """Interactive terminal prompts.

    Ctrl-C at any prompt raises ``click.Abort``, which the CLI turns into an
    immediate exit without emitting artifacts.
    """

    def confirm(self, text: str, default: bool = False) -> bool:
        return click.confirm(text, default=default)

    def prompt(self, text: str) -> str:
        return click.prompt(text, type=str).strip()

    def prompt_secret(self, text: str) -> str:
        # Echo is disabled; an empty value is allowed and rejected by the caller.
        return click.prompt(text, hide_input=True, default="", show_default=False, type=str)


class ScriptedInputProvider:
    """Answers prompts from a prepared queue.

    Answers are consumed in order regardless of prompt type. ``confirm``
    expects a bool, the other prompts expect a string. Running out of
    answers behaves like an operator interrupt.

    Attributes:
        asked: Every prompt text shown, in order.
    """

    def __init__(self, answers: Iterable[bool | str] = ()) -> None:
        self._answers: deque[bool | str] = deque(answers)
        self.asked: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def _next(self, text: str, expected: type) -> bool | str:
        self.asked.append(text)
        if not self._answers:
            raise click.Abort()
        answer = self._answers.popleft()
        if not isinstance(answer, expected):
            raise TypeError(f"Scripted answer {answer!r} for {text!r} is not a {expected.__name__}")
        return answer

    def confirm(self, text: str, default: bool = False) -> bool:
        return bool(self._next(text, bool))

    def prompt(self, text: str) -> str:
        return str(self._next(text, str)).strip()

    def prompt_secret(self, text: str) -> str:
        return str(self._next(text, str))
