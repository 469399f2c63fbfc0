"""Data models shared by the prompt flow, materializer, and CLI."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator


class OverwriteChoice(StrEnum):
    """Answers to the "target directory is not empty" question."""

    YES = "yes"
    NO = "no"
    IGNORE = "ignore"
    UPDATE = "update"


class Mode(StrEnum):
    """What the materializer does with the target directory."""

    CREATE = "create"
    OVERWRITE = "overwrite"
    UPDATE = "update"
    CANCELLED = "cancelled"


class CancelReason(StrEnum):
    USER = "user"
    INTERRUPTED = "interrupted"
    MISSING_UPDATE_TARGET = "missing_update_target"


class CliInvocation(BaseModel):
    """Parsed command-line arguments.

    Attributes:
        target_dir: Normalized positional directory, ``None`` when omitted.
        template: Raw ``--template`` value; it may not name a registered template.
        help: ``-h/--help`` was given.
        update: ``-u/--update`` was given.
        config: Optional settings file.
        verbose: Enable debug logging.
    """

    target_dir: str | None = None
    template: str | None = None
    help: bool = False
    update: bool = False
    config: Path | None = None
    verbose: bool = False

    model_config = {"frozen": True}


class PromptAnswers(BaseModel):
    """Answers collected by the prompt flow, each recorded at most once."""

    values: dict[str, Any] = Field(default_factory=dict)

    def record(self, name: str, value: Any) -> None:
        if name in self.values:
            raise RuntimeError(f"answer {name!r} already recorded")
        self.values[name] = value

    def get(self, name: str) -> Any:
        return self.values.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.values


class DecisionRecord(BaseModel):
    """Fully resolved choices handed to the materializer."""

    target_dir: str
    root: Path
    package_name: str
    template: str | None = None
    mode: Mode

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_template_matches_mode(self) -> DecisionRecord:
        if self.mode in (Mode.UPDATE, Mode.CANCELLED):
            if self.template is not None:
                raise ValueError(f"{self.mode} decisions do not carry a template")
        elif self.template is None:
            raise ValueError(f"{self.mode} decisions require a template")
        return self


class Completed(BaseModel):
    """The flow resolved every step."""

    record: DecisionRecord

    model_config = {"frozen": True}


class Cancelled(BaseModel):
    """The flow stopped before any file was touched.

    ``message`` is ``None`` when the stop is meant to be silent.
    """

    reason: CancelReason
    message: str | None
    record: DecisionRecord

    model_config = {"frozen": True}


FlowResult = Completed | Cancelled
