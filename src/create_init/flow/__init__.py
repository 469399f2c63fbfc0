"""Prompt flow: ordered, conditionally skipped questions that yield a decision record."""

from create_init.flow.engine import CANCELLED_MESSAGE, run_flow
from create_init.flow.steps import FlowState, PromptStep, StepKind, build_steps

__all__ = ["CANCELLED_MESSAGE", "FlowState", "PromptStep", "StepKind", "build_steps", "run_flow"]
