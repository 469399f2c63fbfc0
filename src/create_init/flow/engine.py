"""Prompt flow engine.

Walks the steps from :func:`create_init.flow.steps.build_steps` in order and
assembles a :class:`DecisionRecord`. Cancellation is returned as a
:class:`Cancelled` result instead of being raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from create_init import fs
from create_init.config import ScaffoldSettings
from create_init.contracts import Prompter
from create_init.flow.steps import FlowState, PromptStep, StepKind, StyleLookup, build_steps
from create_init.models import (
    CancelReason,
    Cancelled,
    CliInvocation,
    Completed,
    DecisionRecord,
    FlowResult,
    Mode,
    OverwriteChoice,
)
from create_init.templates import get_template

logger = logging.getLogger(__name__)

CANCELLED_MESSAGE = "✖ Operation cancelled"


def run_flow(
    invocation: CliInvocation,
    prompter: Prompter,
    *,
    settings: ScaffoldSettings | None = None,
    cwd: Path | None = None,
    style_for: StyleLookup | None = None,
) -> FlowResult:
    """Ask whatever the invocation leaves open and resolve a decision.

    Returns :class:`Completed` with the decision record, or :class:`Cancelled`
    when the user backs out, aborts a prompt, or asks to update a directory
    that does not exist.
    """
    settings = settings or ScaffoldSettings()
    cwd = cwd or Path.cwd()
    state = FlowState(
        invocation=invocation,
        settings=settings,
        cwd=cwd,
        target_dir=invocation.target_dir or settings.default_target_dir,
    )

    if settings.update_capable and invocation.update:
        if state.target_dir != "." and not fs.exists(state.target_path):
            logger.debug("Nothing to update at %s", state.target_path)
            return _cancelled(state, CancelReason.MISSING_UPDATE_TARGET, None)

    for step in build_steps(style_for):
        if step.kind is StepKind.GATE:
            if step.cancels(state):
                logger.debug("Step %s cancelled the flow", step.name)
                return _cancelled(state, CancelReason.USER, CANCELLED_MESSAGE)
            continue
        if step.skip(state):
            logger.debug("Step %s skipped", step.name)
            continue

        supplied = step.answered_by(state)
        if supplied is not None:
            logger.debug("Step %s answered from arguments: %s", step.name, supplied)
            state.answers.record(step.name, supplied)
            continue

        answer = _ask(prompter, step, state)
        if answer is None:
            logger.debug("Step %s aborted", step.name)
            return _cancelled(state, CancelReason.INTERRUPTED, CANCELLED_MESSAGE)
        logger.debug("Step %s answered: %s", step.name, answer)
        state.answers.record(step.name, answer)
        if step.on_answer is not None:
            step.on_answer(state, answer)

    return Completed(record=_decide(state))


def _ask(prompter: Prompter, step: PromptStep, state: FlowState) -> Any | None:
    message = step.message(state)
    default = step.default(state)
    if step.kind is StepKind.TEXT:
        return prompter.text(message, default=default, validate=step.validate)
    assert step.choices is not None
    return prompter.select(message, choices=step.choices(state), default=default)


def _decide(state: FlowState) -> DecisionRecord:
    overwrite = state.overwrite
    if overwrite == OverwriteChoice.UPDATE:
        mode = Mode.UPDATE
    elif overwrite == OverwriteChoice.YES:
        mode = Mode.OVERWRITE
    else:
        mode = Mode.CREATE

    template: str | None = None
    if mode is not Mode.UPDATE:
        template = state.answers.get("template")
        if template is None and get_template(state.invocation.template) is not None:
            template = state.invocation.template

    return DecisionRecord(
        target_dir=state.target_dir,
        root=state.target_path,
        package_name=state.answers.get("package_name") or state.project_name,
        template=template,
        mode=mode,
    )


def _cancelled(state: FlowState, reason: CancelReason, message: str | None) -> Cancelled:
    record = DecisionRecord(
        target_dir=state.target_dir,
        root=state.target_path,
        package_name=state.project_name,
        mode=Mode.CANCELLED,
    )
    return Cancelled(reason=reason, message=message, record=record)
