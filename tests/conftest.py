"""Shared test fixtures for create-init tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from create_init.config import ScaffoldSettings
from tests.fakes.prompter import FakePrompter


@pytest.fixture
def prompter() -> FakePrompter:
    return FakePrompter()


@pytest.fixture
def settings() -> ScaffoldSettings:
    return ScaffoldSettings()


@pytest.fixture
def console() -> Console:
    """A wide console writing to memory, so output can be inspected."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def non_empty_dir(tmp_path: Path) -> Path:
    """A ``tmp_path/existing`` directory holding one file and a ``.git`` directory."""
    target = tmp_path / "existing"
    target.mkdir()
    (target / ".git").mkdir()
    (target / "README.md").write_text("keep me\n", encoding="utf-8")
    return target
