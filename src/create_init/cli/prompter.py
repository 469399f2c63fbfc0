"""questionary-backed implementation of :class:`create_init.contracts.Prompter`."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from create_init.contracts import Choice, Validator


class QuestionaryPrompter:
    """Ask questions on the terminal with questionary.

    questionary's ``ask()`` returns ``None`` when the user hits Ctrl-C, which
    is exactly the abort signal the flow expects.
    """

    def text(self, message: str, *, default: str, validate: Validator | None = None) -> str | None:
        import questionary

        if validate is None:
            return questionary.text(message, default=default).ask()
        return questionary.text(message, default=default, validate=validate).ask()

    def select(self, message: str, *, choices: Sequence[Choice], default: Any) -> Any | None:
        import questionary

        options = [questionary.Choice(_title(choice), value=choice.value) for choice in choices]
        return questionary.select(message, choices=options, default=default).ask()


def _title(choice: Choice) -> Any:
    if choice.style is None:
        return choice.title
    return [(f"fg:ansi{choice.style}", choice.title)]


__all__ = ["QuestionaryPrompter"]
