"""Step descriptors for the prompt flow.

Each :class:`PromptStep` carries a predicate over the accumulated
:class:`FlowState`. The engine visits steps in order and only asks the ones
whose predicate does not say "skip", so the whole transition table can be
inspected and tested without a terminal.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from create_init import fs
from create_init.config import ScaffoldSettings
from create_init.contracts import Choice, Validator
from create_init.models import CliInvocation, OverwriteChoice, PromptAnswers
from create_init.naming import is_valid_package_name, normalize_target_dir, project_name_for, to_valid_package_name
from create_init.templates import TEMPLATES, get_template

INVALID_PACKAGE_NAME = "Invalid package.json name"

StyleLookup = Callable[[str], str | None]


class StepKind(StrEnum):
    TEXT = "text"
    SELECT = "select"
    GATE = "gate"


@dataclass
class FlowState:
    """Working state threaded through the steps.

    ``target_dir`` is re-derived whenever the project name is answered; every
    other answer lands in ``answers`` exactly once.
    """

    invocation: CliInvocation
    settings: ScaffoldSettings
    cwd: Path
    target_dir: str
    answers: PromptAnswers = field(default_factory=PromptAnswers)

    @property
    def target_path(self) -> Path:
        return self.cwd / self.target_dir

    @property
    def project_name(self) -> str:
        return project_name_for(self.target_dir, self.cwd)

    @property
    def overwrite(self) -> OverwriteChoice | None:
        return self.answers.get("overwrite")


def _never(_state: FlowState) -> bool:
    return False


def _no_message(_state: FlowState) -> str:
    return ""


def _no_default(_state: FlowState) -> Any:
    return None


@dataclass(frozen=True)
class PromptStep:
    """One question in the flow.

    Attributes:
        name: Answer key the step records.
        kind: Prompt widget, or ``GATE`` for a step that never asks anything.
        skip: Returns ``True`` when the answer is already implied by the state.
        message: Question text.
        default: Initial value (text) or pre-selected value (select).
        choices: Options for select steps.
        validate: Text validator returning ``True`` or an error message.
        on_answer: Hook run after the answer is recorded.
        answered_by: Answer implied by the command line, used instead of asking
            once the step is known not to be skipped.
        cancels: For gates, returns ``True`` when the flow must stop.
    """

    name: str
    kind: StepKind
    skip: Callable[[FlowState], bool] = _never
    message: Callable[[FlowState], str] = _no_message
    default: Callable[[FlowState], Any] = _no_default
    choices: Callable[[FlowState], list[Choice]] | None = None
    validate: Validator | None = None
    on_answer: Callable[[FlowState, Any], None] | None = None
    answered_by: Callable[[FlowState], Any] = _no_default
    cancels: Callable[[FlowState], bool] = _never


# ------------------------------------------------------------------
# project_name
# ------------------------------------------------------------------


def _skip_project_name(state: FlowState) -> bool:
    return state.invocation.target_dir is not None or _update_requested(state)


def _apply_project_name(state: FlowState, answer: str) -> None:
    state.target_dir = normalize_target_dir(answer) or state.settings.default_target_dir


# ------------------------------------------------------------------
# overwrite
# ------------------------------------------------------------------


def _skip_overwrite(state: FlowState) -> bool:
    target = state.target_path
    return not fs.exists(target) or fs.is_effectively_empty(target)


def _overwrite_message(state: FlowState) -> str:
    where = "Current directory" if state.target_dir == "." else f'Target directory "{state.target_dir}"'
    return f"{where} is not empty. Please choose how to proceed:"


def _overwrite_choices(state: FlowState) -> list[Choice]:
    choices = [
        Choice("Remove existing files and continue", OverwriteChoice.YES),
        Choice("Cancel operation", OverwriteChoice.NO),
    ]
    if state.settings.update_capable:
        choices.append(Choice("Update files", OverwriteChoice.UPDATE))
    else:
        choices.append(Choice("Ignore files and continue", OverwriteChoice.IGNORE))
    return choices


def _overwrite_from_update_flag(state: FlowState) -> OverwriteChoice | None:
    return OverwriteChoice.UPDATE if _update_requested(state) else None


def _overwrite_cancels(state: FlowState) -> bool:
    return state.overwrite == OverwriteChoice.NO


# ------------------------------------------------------------------
# package_name
# ------------------------------------------------------------------


def _skip_package_name(state: FlowState) -> bool:
    return is_valid_package_name(state.project_name) or state.overwrite == OverwriteChoice.UPDATE


def _validate_package_name(value: str) -> bool | str:
    return is_valid_package_name(value) or INVALID_PACKAGE_NAME


# ------------------------------------------------------------------
# template
# ------------------------------------------------------------------


def _skip_template(state: FlowState) -> bool:
    return get_template(state.invocation.template) is not None or state.overwrite == OverwriteChoice.UPDATE


def _template_message(state: FlowState) -> str:
    requested = state.invocation.template
    if requested is not None and get_template(requested) is None:
        return f'"{requested}" isn\'t a valid template. Please choose from below: '
    return "Select a template:"


def _update_requested(state: FlowState) -> bool:
    return state.settings.update_capable and state.invocation.update


def build_steps(style_for: StyleLookup | None = None) -> list[PromptStep]:
    """Return the flow's steps in the order they are visited.

    *style_for* maps a template name to a rendering hint for its choice.
    """

    def _template_choices(_state: FlowState) -> list[Choice]:
        return [
            Choice(template.display or template.name, template.name, style_for(template.name) if style_for else None)
            for template in TEMPLATES
        ]

    return [
        PromptStep(
            name="project_name",
            kind=StepKind.TEXT,
            skip=_skip_project_name,
            message=lambda _state: "Project name:",
            default=lambda state: state.settings.default_target_dir,
            on_answer=_apply_project_name,
        ),
        PromptStep(
            name="overwrite",
            kind=StepKind.SELECT,
            skip=_skip_overwrite,
            message=_overwrite_message,
            default=lambda _state: OverwriteChoice.YES,
            choices=_overwrite_choices,
            answered_by=_overwrite_from_update_flag,
        ),
        PromptStep(name="overwrite_gate", kind=StepKind.GATE, cancels=_overwrite_cancels),
        PromptStep(
            name="package_name",
            kind=StepKind.TEXT,
            skip=_skip_package_name,
            message=lambda _state: "Package name:",
            default=lambda state: to_valid_package_name(state.project_name),
            validate=_validate_package_name,
        ),
        PromptStep(
            name="template",
            kind=StepKind.SELECT,
            skip=_skip_template,
            message=_template_message,
            default=lambda _state: TEMPLATES[0].name,
            choices=_template_choices,
        ),
    ]
