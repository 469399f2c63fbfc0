"""Contracts between the prompt flow and the terminal."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, NamedTuple, Protocol

Validator = Callable[[str], bool | str]


class Choice(NamedTuple):
    """One selectable option. ``style`` is a rendering hint such as ``"yellow"``."""

    title: str
    value: Any
    style: str | None = None


class Prompter(Protocol):
    """Asks one question at a time. ``None`` means the user aborted the prompt."""

    def text(self, message: str, *, default: str, validate: Validator | None = None) -> str | None: ...

    def select(self, message: str, *, choices: Sequence[Choice], default: Any) -> Any | None: ...
