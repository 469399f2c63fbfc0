"""In-memory prompter and filesystem helpers for tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from create_init.contracts import Choice, Validator

USE_DEFAULT = object()
"""Answer value meaning "accept whatever default the prompt offers"."""


class FakePrompter:
    """Answers prompts from a mapping of message-substring -> answer.

    Every question is recorded in ``asked`` so tests can check which steps ran.
    An answer of ``None`` simulates the user aborting the prompt.
    """

    def __init__(self, answers: dict[str, Any] | None = None) -> None:
        self.answers = answers or {}
        self.asked: list[dict[str, Any]] = []

    def text(self, message: str, *, default: str, validate: Validator | None = None) -> str | None:
        self.asked.append({"kind": "text", "message": message, "default": default, "validate": validate})
        return self._answer(message, default)

    def select(self, message: str, *, choices: Sequence[Choice], default: Any) -> Any | None:
        self.asked.append({"kind": "select", "message": message, "default": default, "choices": list(choices)})
        return self._answer(message, default)

    def messages(self) -> list[str]:
        return [entry["message"] for entry in self.asked]

    def _answer(self, message: str, default: Any) -> Any:
        for key, value in self.answers.items():
            if key.lower() in message.lower():
                return default if value is USE_DEFAULT else value
        raise KeyError(f"no answer configured for prompt: {message!r}")


def listing(root: Path) -> list[str]:
    """Sorted relative paths of everything under *root*."""
    return sorted(str(path.relative_to(root)) for path in root.rglob("*"))
