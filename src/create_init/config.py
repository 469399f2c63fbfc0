"""Settings for a scaffolding run.

:class:`ScaffoldSettings` carries the values the prompt flow and the
materializer share. Defaults match the bundled templates; a JSON file passed
with ``--config`` can override any of them.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from create_init.exceptions import ConfigError
from create_init.templates import bundled_templates_root


class ScaffoldSettings(BaseModel):
    """Top-level configuration for a ``create-init`` run.

    Attributes:
        default_target_dir: Directory used when the user gives no project name.
        forced_dependencies: Dependency pins written into every manifest.
        initial_version: ``version`` of a manifest synthesized without a template.
        templates_root: Directory holding ``<template>/`` trees and the base
            ``package.json``. ``None`` disables template trees entirely.
        update_capable: Offer "Update files" instead of "Ignore files" and accept ``--update``.
        cancel_exit_code: Process exit status when the user cancels.
    """

    default_target_dir: str = "my-project"
    forced_dependencies: dict[str, str] = Field(default_factory=lambda: {"postcss": "8.4.x"})
    initial_version: str = "0.0.0"
    templates_root: Path | None = Field(default_factory=bundled_templates_root)
    update_capable: bool = True
    cancel_exit_code: int = 0

    model_config = {"extra": "forbid"}


def load_config(path: Path) -> ScaffoldSettings:
    """Load settings from a JSON file.

    Relative ``templates_root`` values resolve against the file's directory.
    Raises :class:`ConfigError` when the file is unreadable or invalid.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"config {path} must contain a JSON object")

    root = raw.get("templates_root")
    if isinstance(root, str) and not Path(root).is_absolute():
        raw["templates_root"] = str(path.parent / root)

    try:
        return ScaffoldSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
